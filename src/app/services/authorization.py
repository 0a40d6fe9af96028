"""Authorization Guard

Single source of truth for who may do what. Role checks go through the
capability table; ownership checks go through the helpers below. Every
mutating use case calls require() before reading any state.
"""
from enum import Enum
from typing import Dict, FrozenSet, Optional
from libs.result import Error
from src.domain import Actor, Application, Project, UserRole
from src.domain.enums import value_of


class Capability(str, Enum):
    CREATE_PROJECT = "CREATE_PROJECT"
    MANAGE_PROJECT = "MANAGE_PROJECT"
    REVIEW_APPLICATIONS = "REVIEW_APPLICATIONS"
    SUBMIT_APPLICATION = "SUBMIT_APPLICATION"
    ADVANCE_PROJECT = "ADVANCE_PROJECT"
    VIEW_OWN_APPLICATIONS = "VIEW_OWN_APPLICATIONS"
    REPLAY_DEAD_LETTERS = "REPLAY_DEAD_LETTERS"


ROLE_CAPABILITIES: Dict[UserRole, FrozenSet[Capability]] = {
    UserRole.BUSINESS_OWNER: frozenset(
        {
            Capability.CREATE_PROJECT,
            Capability.MANAGE_PROJECT,
            Capability.REVIEW_APPLICATIONS,
            Capability.ADVANCE_PROJECT,
        }
    ),
    UserRole.USER: frozenset(
        {
            Capability.SUBMIT_APPLICATION,
            Capability.ADVANCE_PROJECT,
            Capability.VIEW_OWN_APPLICATIONS,
        }
    ),
    UserRole.ADMIN: frozenset({Capability.REPLAY_DEAD_LETTERS}),
}

# Returned for missing entities too, so callers cannot tell whether an id exists
ACCESS_DENIED_MESSAGE = "You do not have access to this resource"


def unauthenticated() -> Error:
    return Error(code="UNAUTHENTICATED", message="Not authenticated")


def access_denied(message: str = ACCESS_DENIED_MESSAGE) -> Error:
    return Error(code="FORBIDDEN", message=message)


def has_capability(actor: Actor, capability: Capability) -> bool:
    role = UserRole(value_of(actor.role))
    return capability in ROLE_CAPABILITIES.get(role, frozenset())


def require(actor: Optional[Actor], capability: Capability) -> Optional[Error]:
    """Check the actor is resolved and its role grants capability"""
    if actor is None:
        return unauthenticated()
    if not has_capability(actor, capability):
        return access_denied(
            f"Role {value_of(actor.role)} is not allowed to perform {capability.value}"
        )
    return None


def require_owner(actor: Actor, project: Optional[Project]) -> Optional[Error]:
    if project is None or not project.is_owned_by(actor.account_id):
        return access_denied()
    return None


def require_participant(actor: Actor, project: Optional[Project]) -> Optional[Error]:
    """Owner or assigned student"""
    if project is None or not (
        project.is_owned_by(actor.account_id) or project.is_assigned_to(actor.account_id)
    ):
        return access_denied()
    return None


def require_applicant(actor: Actor, application: Optional[Application]) -> Optional[Error]:
    if application is None or application.applicant_id != actor.account_id:
        return access_denied()
    return None
