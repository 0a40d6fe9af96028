import logging
from abc import ABC, abstractmethod
from typing import Dict, Any, Optional

logger = logging.getLogger(__name__)


class AuditService(ABC):
    """Service interface for audit event logging"""

    @abstractmethod
    async def log_event(
        self,
        event_type: str,
        actor_id: Optional[str],
        resource_type: str,
        resource_id: str,
        metadata: Dict[str, Any] = None,
    ) -> None:
        """
        Log an audit event

        Args:
            event_type: Type of event (e.g. "project_published", "application_approved")
            actor_id: Account that triggered the event
            resource_type: Type of resource ("project" or "application")
            resource_id: ID of the affected resource
            metadata: Additional event metadata
        """
        pass


async def record_event(
    audit_service: AuditService,
    event_type: str,
    actor_id: Optional[str],
    resource_type: str,
    resource_id: str,
    metadata: Dict[str, Any] = None,
) -> None:
    """
    Emit an audit event for a change that is already committed.

    A failing audit store is logged and never fails the change itself.
    """
    try:
        await audit_service.log_event(
            event_type=event_type,
            actor_id=actor_id,
            resource_type=resource_type,
            resource_id=resource_id,
            metadata=metadata,
        )
    except Exception as e:
        logger.error(f"Failed to record audit event {event_type} for {resource_type} {resource_id}: {e}")
