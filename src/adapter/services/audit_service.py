import logging
from typing import Dict, Any, Optional
from datetime import datetime
from motor.motor_asyncio import AsyncIOMotorClient
from src.app.services.audit_service import AuditService

logger = logging.getLogger(__name__)


class MongoAuditService(AuditService):
    """MongoDB implementation of AuditService"""

    def __init__(self, mongo_client: AsyncIOMotorClient, db_name: str):
        self.client = mongo_client
        self.db = self.client[db_name]
        self.collection = self.db["audit_events"]

    async def log_event(
        self,
        event_type: str,
        actor_id: Optional[str],
        resource_type: str,
        resource_id: str,
        metadata: Dict[str, Any] = None,
    ) -> None:
        """Log an audit event to MongoDB"""
        event = {
            "event_type": event_type,
            "actor_id": actor_id,
            "resource_type": resource_type,
            "resource_id": resource_id,
            "metadata": metadata or {},
            "timestamp": datetime.utcnow(),
        }
        await self.collection.insert_one(event)
        logger.debug(f"Audit event {event_type} recorded for {resource_type} {resource_id}")
