from typing import Callable
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.services.profile_completeness import ProfileCompleteness, ProfileCompletenessChecker
from src.adapter.repositories.account_repository import SqlAlchemyAccountRepository


def _blank(value) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


class SqlAlchemyProfileCompletenessChecker(ProfileCompletenessChecker):
    """
    An applicant needs a name, bio, intro, at least one skill and at least
    one education entry. Labels are reported in that order.
    """

    def __init__(self, session_factory: Callable[[], AsyncSession]):
        self.session_factory = session_factory

    async def check(self, account_id: str) -> ProfileCompleteness:
        async with self.session_factory() as session:
            accounts = SqlAlchemyAccountRepository(session)
            account = await accounts.get_by_id(account_id)
            educations = await accounts.count_educations(account_id) if account else 0

        if account is None:
            return ProfileCompleteness(
                ok=False,
                missing=["First name", "Last name", "Bio", "Intro", "Skills", "Education"],
            )

        missing = []
        if _blank(account.first_name):
            missing.append("First name")
        if _blank(account.last_name):
            missing.append("Last name")
        if _blank(account.bio):
            missing.append("Bio")
        if _blank(account.intro):
            missing.append("Intro")
        if not [skill for skill in (account.skills or []) if not _blank(skill)]:
            missing.append("Skills")
        if educations == 0:
            missing.append("Education")

        return ProfileCompleteness(ok=not missing, missing=missing)
