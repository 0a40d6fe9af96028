"""Unit tests for the project lifecycle engine"""
from datetime import datetime
import pytest
from src.domain import Actor, ApplicationStatus, ProjectStatus, UserRole
from src.domain.lifecycle import (
    ADVANCE_TRANSITIONS,
    ASSIGN,
    CANCEL,
    apply_transition,
    check_deletable,
    check_editable,
    check_rejectable,
    check_withdrawable,
    decide_advance,
    decide_approve,
    decide_archive,
    decide_cancel,
    decide_publish,
    decide_unarchive,
)
from tests.fixtures.lifecycle_checks import invariant_violations, is_forward_path, next_status
from tests.fixtures.factories import OWNER_ID, STUDENT_ID, make_application, make_project

OWNER = Actor(account_id=OWNER_ID, role=UserRole.BUSINESS_OWNER)
STUDENT = Actor(account_id=STUDENT_ID, role=UserRole.USER)


class TestDecideAdvance:

    @pytest.mark.parametrize(
        "current,target",
        [
            (ProjectStatus.ASSIGNED, ProjectStatus.IN_PROGRESS),
            (ProjectStatus.IN_PROGRESS, ProjectStatus.IN_REVIEW),
        ],
    )
    def test_student_and_owner_can_advance_work(self, current, target):
        project = make_project(current)

        for actor in (OWNER, STUDENT):
            result = decide_advance(project, actor, target)
            assert result.is_ok()
            assert result.value.target == target

    def test_only_owner_can_complete(self):
        project = make_project(ProjectStatus.IN_REVIEW)

        result = decide_advance(project, STUDENT, ProjectStatus.COMPLETED)

        assert result.is_err()
        assert result.error.code == "FORBIDDEN"
        assert decide_advance(project, OWNER, ProjectStatus.COMPLETED).is_ok()

    def test_skipping_a_status_is_rejected(self):
        project = make_project(ProjectStatus.ASSIGNED)

        result = decide_advance(project, OWNER, ProjectStatus.COMPLETED)

        assert result.is_err()
        assert result.error.code == "INVALID_TRANSITION"
        assert result.error.details == {
            "current_status": "ASSIGNED",
            "target_status": "COMPLETED",
        }

    def test_repeating_current_status_is_rejected(self):
        project = make_project(ProjectStatus.IN_PROGRESS)

        result = decide_advance(project, STUDENT, ProjectStatus.IN_PROGRESS)

        assert result.error.code == "INVALID_TRANSITION"

    def test_moving_backwards_is_rejected(self):
        project = make_project(ProjectStatus.IN_REVIEW)

        result = decide_advance(project, OWNER, ProjectStatus.IN_PROGRESS)

        assert result.error.code == "INVALID_TRANSITION"

    @pytest.mark.parametrize(
        "target", [ProjectStatus.OPEN, ProjectStatus.ASSIGNED, ProjectStatus.ARCHIVED, ProjectStatus.DRAFT]
    )
    def test_targets_outside_work_path_are_rejected(self, target):
        project = make_project(ProjectStatus.ASSIGNED)

        result = decide_advance(project, OWNER, target)

        assert result.error.code == "INVALID_TRANSITION"

    def test_project_without_student_cannot_advance(self):
        project = make_project(ProjectStatus.ASSIGNED, assigned_student_id=None)

        result = decide_advance(project, OWNER, ProjectStatus.IN_PROGRESS)

        assert result.error.code == "INVALID_TRANSITION"
        assert "assigned student" in result.error.message

    def test_next_status_is_unique_successor(self):
        assert next_status(ProjectStatus.ASSIGNED) == ProjectStatus.IN_PROGRESS
        assert next_status(ProjectStatus.IN_PROGRESS) == ProjectStatus.IN_REVIEW
        assert next_status(ProjectStatus.IN_REVIEW) == ProjectStatus.COMPLETED
        assert next_status(ProjectStatus.COMPLETED) is None
        assert next_status(ProjectStatus.OPEN) is None


class TestOwnerDecisions:

    def test_publish_requires_draft(self):
        assert decide_publish(make_project(ProjectStatus.DRAFT)).is_ok()
        assert decide_publish(make_project(ProjectStatus.OPEN)).error.code == "INVALID_TRANSITION"

    @pytest.mark.parametrize("status", [ProjectStatus.DRAFT, ProjectStatus.OPEN])
    def test_archive_from_draft_or_open(self, status):
        result = decide_archive(make_project(status))

        assert result.is_ok()
        assert result.value.source == status
        assert result.value.target == ProjectStatus.ARCHIVED

    def test_archive_after_assignment_is_rejected(self):
        result = decide_archive(make_project(ProjectStatus.ASSIGNED))

        assert result.error.code == "INVALID_TRANSITION"

    def test_unarchive_returns_to_open(self):
        result = decide_unarchive(make_project(ProjectStatus.ARCHIVED))

        assert result.value.target == ProjectStatus.OPEN
        assert decide_unarchive(make_project(ProjectStatus.OPEN)).is_err()

    def test_cancel_only_open(self):
        assert decide_cancel(make_project(ProjectStatus.OPEN)).value == CANCEL
        assert decide_cancel(make_project(ProjectStatus.DRAFT)).is_err()
        assert decide_cancel(make_project(ProjectStatus.IN_PROGRESS)).is_err()

    @pytest.mark.parametrize(
        "status,allowed",
        [
            (ProjectStatus.DRAFT, True),
            (ProjectStatus.OPEN, True),
            (ProjectStatus.ASSIGNED, False),
            (ProjectStatus.COMPLETED, False),
            (ProjectStatus.ARCHIVED, False),
        ],
    )
    def test_edit_and_delete_only_before_assignment(self, status, allowed):
        project = make_project(status)

        for check in (check_editable, check_deletable):
            error = check(project)
            if allowed:
                assert error is None
            else:
                assert error.code == "FORBIDDEN"


class TestApplicationDecisions:

    def test_approve_needs_open_project_and_pending_application(self):
        project = make_project(ProjectStatus.OPEN)

        assert decide_approve(project, make_application()).value == ASSIGN

        accepted = make_application(ApplicationStatus.ACCEPTED)
        assert decide_approve(project, accepted).error.code == "INVALID_TRANSITION"

        assigned = make_project(ProjectStatus.ASSIGNED)
        assert decide_approve(assigned, make_application()).error.code == "INVALID_TRANSITION"

    @pytest.mark.parametrize(
        "status", [ApplicationStatus.ACCEPTED, ApplicationStatus.REJECTED, ApplicationStatus.WITHDRAWN]
    )
    def test_only_pending_applications_change(self, status):
        application = make_application(status)

        assert check_rejectable(application).code == "INVALID_TRANSITION"
        error = check_withdrawable(application)
        assert error.code == "INVALID_TRANSITION"
        assert error.message == "Only pending applications can be withdrawn"

    def test_pending_application_can_be_rejected_or_withdrawn(self):
        assert check_rejectable(make_application()) is None
        assert check_withdrawable(make_application()) is None


class TestApplyTransition:

    def test_assign_sets_student_and_timestamp(self):
        project = make_project(ProjectStatus.OPEN)
        now = datetime(2026, 2, 1, 12, 0, 0)

        changes = apply_transition(project, ASSIGN, now, assigned_student_id=STUDENT_ID)

        assert changes["status"] == ProjectStatus.ASSIGNED
        assert changes["assigned_student_id"] == STUDENT_ID
        assert changes["assigned_at"] == now
        assert project.assigned_student_id == STUDENT_ID
        assert invariant_violations(project) == []

    def test_timestamp_written_once(self):
        earlier = datetime(2026, 1, 10)
        project = make_project(ProjectStatus.ASSIGNED, in_progress_at=earlier)

        changes = apply_transition(
            project, ADVANCE_TRANSITIONS[ProjectStatus.IN_PROGRESS], datetime(2026, 3, 1)
        )

        assert "in_progress_at" not in changes
        assert project.in_progress_at == earlier

    def test_walk_full_path_keeps_invariants(self):
        project = make_project(ProjectStatus.OPEN)
        statuses = [ProjectStatus.OPEN]
        now = datetime(2026, 2, 1)

        apply_transition(project, ASSIGN, now, assigned_student_id=STUDENT_ID)
        statuses.append(project.status)
        for day, target in enumerate(
            [ProjectStatus.IN_PROGRESS, ProjectStatus.IN_REVIEW, ProjectStatus.COMPLETED], start=2
        ):
            transition = decide_advance(project, OWNER, target).value
            apply_transition(project, transition, datetime(2026, 2, day))
            statuses.append(project.status)
            assert invariant_violations(project) == []

        assert is_forward_path(statuses)
        assert project.assigned_at < project.in_progress_at < project.in_review_at < project.completed_at


class TestInvariants:

    def test_open_project_with_student_is_flagged(self):
        project = make_project(ProjectStatus.OPEN, assigned_student_id=STUDENT_ID)

        assert invariant_violations(project)

    def test_two_accepted_applications_are_flagged(self):
        project = make_project(ProjectStatus.ASSIGNED)
        applications = [
            make_application(ApplicationStatus.ACCEPTED),
            make_application(ApplicationStatus.ACCEPTED, id="application-2", applicant_id="student-2"),
        ]

        assert "more than one accepted application" in invariant_violations(project, applications)

    def test_forward_path_detects_skips_and_reversals(self):
        assert is_forward_path([ProjectStatus.DRAFT, ProjectStatus.OPEN, ProjectStatus.ASSIGNED])
        assert not is_forward_path([ProjectStatus.OPEN, ProjectStatus.IN_PROGRESS])
        assert not is_forward_path([ProjectStatus.IN_REVIEW, ProjectStatus.IN_PROGRESS])
        assert not is_forward_path([ProjectStatus.OPEN, ProjectStatus.ARCHIVED])
