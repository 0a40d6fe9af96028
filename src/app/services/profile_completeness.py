"""Profile Completeness Check

Contract for deciding whether an account may apply to projects.
"""
from abc import ABC, abstractmethod
from typing import List
from pydantic import BaseModel


class ProfileCompleteness(BaseModel):
    ok: bool
    missing: List[str] = []


class ProfileCompletenessChecker(ABC):

    @abstractmethod
    async def check(self, account_id: str) -> ProfileCompleteness:
        """
        Check an account's profile.

        Returns:
            ProfileCompleteness: ok=False with the human-readable labels of
            the missing fields (e.g. ["Bio", "Education"])
        """
        pass
