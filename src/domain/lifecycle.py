"""Project Lifecycle Engine

Pure decision logic for project and application status changes. Functions
here read entity state and return either the transition to apply or the
error explaining which precondition failed. They never touch storage;
use cases persist the outcome with a compare-and-swap on the source status.
"""
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional
from libs.result import Result, Error, Return
from src.domain.actor import Actor
from src.domain.application import Application
from src.domain.enums import (
    ApplicationStatus,
    ProjectStatus,
    EDITABLE_STATUSES,
    value_of,
)
from src.domain.project import Project


@dataclass(frozen=True)
class Transition:
    """A legal project status change and what it writes"""

    source: ProjectStatus
    target: ProjectStatus
    timestamp_field: Optional[str] = None
    owner_only: bool = False
    fires_completion: bool = False


# Forward-only work progression, keyed by target status
ADVANCE_TRANSITIONS: Dict[ProjectStatus, Transition] = {
    ProjectStatus.IN_PROGRESS: Transition(
        ProjectStatus.ASSIGNED, ProjectStatus.IN_PROGRESS, "in_progress_at"
    ),
    ProjectStatus.IN_REVIEW: Transition(
        ProjectStatus.IN_PROGRESS, ProjectStatus.IN_REVIEW, "in_review_at"
    ),
    ProjectStatus.COMPLETED: Transition(
        ProjectStatus.IN_REVIEW,
        ProjectStatus.COMPLETED,
        "completed_at",
        owner_only=True,
        fires_completion=True,
    ),
}

ASSIGN = Transition(ProjectStatus.OPEN, ProjectStatus.ASSIGNED, "assigned_at")
PUBLISH = Transition(ProjectStatus.DRAFT, ProjectStatus.OPEN)
UNARCHIVE = Transition(ProjectStatus.ARCHIVED, ProjectStatus.OPEN)
CANCEL = Transition(ProjectStatus.OPEN, ProjectStatus.CANCELLED)


def invalid_transition(message: str, current=None, target=None) -> Error:
    details = None
    if current is not None:
        details = {"current_status": value_of(current)}
        if target is not None:
            details["target_status"] = value_of(target)
    return Error(code="INVALID_TRANSITION", message=message, details=details)


def forbidden(message: str) -> Error:
    return Error(code="FORBIDDEN", message=message)


def decide_advance(project: Project, actor: Actor, target: ProjectStatus) -> Result[Transition]:
    """
    Decide whether actor may move project to target.

    The caller must already have checked that actor is the owner or the
    assigned student. Completion additionally requires the owner.
    """
    transition = ADVANCE_TRANSITIONS.get(target)
    if transition is None:
        return Return.err(
            invalid_transition(
                f"Cannot move a project to {value_of(target)} through a status update",
                project.status,
                target,
            )
        )

    if transition.owner_only and not project.is_owned_by(actor.account_id):
        return Return.err(forbidden("Only the business owner can mark a project as completed"))

    if project.status != transition.source:
        return Return.err(
            invalid_transition(
                f"Project must be {value_of(transition.source)} to move to "
                f"{value_of(target)}, but it is {value_of(project.status)}",
                project.status,
                target,
            )
        )

    if project.assigned_student_id is None:
        return Return.err(
            invalid_transition("Project has no assigned student", project.status, target)
        )

    return Return.ok(transition)


def decide_publish(project: Project) -> Result[Transition]:
    if project.status != PUBLISH.source:
        return Return.err(
            invalid_transition("Only draft projects can be published", project.status, PUBLISH.target)
        )
    return Return.ok(PUBLISH)


def decide_archive(project: Project) -> Result[Transition]:
    if project.status not in EDITABLE_STATUSES:
        return Return.err(
            invalid_transition(
                "Only draft or open projects can be archived",
                project.status,
                ProjectStatus.ARCHIVED,
            )
        )
    return Return.ok(Transition(ProjectStatus(value_of(project.status)), ProjectStatus.ARCHIVED))


def decide_unarchive(project: Project) -> Result[Transition]:
    if project.status != UNARCHIVE.source:
        return Return.err(
            invalid_transition(
                "Can only unarchive projects that are archived", project.status, UNARCHIVE.target
            )
        )
    return Return.ok(UNARCHIVE)


def decide_cancel(project: Project) -> Result[Transition]:
    if project.status != CANCEL.source:
        return Return.err(
            invalid_transition("Only open projects can be cancelled", project.status, CANCEL.target)
        )
    return Return.ok(CANCEL)


def check_editable(project: Project) -> Optional[Error]:
    """Terms may change only before work has been assigned"""
    if project.status not in EDITABLE_STATUSES:
        return forbidden(
            f"Only draft or open projects can be edited, this project is {value_of(project.status)}"
        )
    return None


def check_deletable(project: Project) -> Optional[Error]:
    if project.status not in EDITABLE_STATUSES:
        return forbidden(
            f"Only draft or open projects can be deleted, this project is {value_of(project.status)}"
        )
    return None


def decide_approve(project: Project, application: Application) -> Result[Transition]:
    """Approving an application assigns the project to the applicant"""
    if project.status != ASSIGN.source:
        return Return.err(
            invalid_transition(
                f"Applications can only be approved while the project is OPEN, "
                f"it is {value_of(project.status)}",
                project.status,
                ASSIGN.target,
            )
        )
    if application.status != ApplicationStatus.PENDING:
        return Return.err(
            Error(
                code="INVALID_TRANSITION",
                message="Only pending applications can be approved",
                details={"application_status": value_of(application.status)},
            )
        )
    return Return.ok(ASSIGN)


def check_rejectable(application: Application) -> Optional[Error]:
    if application.status != ApplicationStatus.PENDING:
        return Error(
            code="INVALID_TRANSITION",
            message="Only pending applications can be rejected",
            details={"application_status": value_of(application.status)},
        )
    return None


def check_withdrawable(application: Application) -> Optional[Error]:
    if application.status != ApplicationStatus.PENDING:
        return Error(
            code="INVALID_TRANSITION",
            message="Only pending applications can be withdrawn",
            details={"application_status": value_of(application.status)},
        )
    return None


def apply_transition(
    project: Project,
    transition: Transition,
    now: datetime,
    assigned_student_id: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Apply transition to the in-memory project.

    Returns the column values that changed, for the conditional update.
    Lifecycle timestamps are only written when still unset.
    """
    changes: Dict[str, Any] = {"status": transition.target, "updated_at": now}

    if transition.target == ProjectStatus.ASSIGNED:
        changes["assigned_student_id"] = assigned_student_id
    if transition.target == ProjectStatus.OPEN:
        changes["is_public"] = True

    if transition.timestamp_field and getattr(project, transition.timestamp_field) is None:
        changes[transition.timestamp_field] = now

    for field, value in changes.items():
        setattr(project, field, value)
    return changes
