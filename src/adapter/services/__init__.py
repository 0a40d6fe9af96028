from src.adapter.services.audit_service import MongoAuditService
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.adapter.services.identity_resolver import SqlAlchemyIdentityResolver
from src.adapter.services.profile_completeness import SqlAlchemyProfileCompletenessChecker
from src.adapter.services.http_stats_notifier import HttpStatsNotifier
from src.adapter.services.in_memory_event_bus import InMemoryEventBus

__all__ = [
    "MongoAuditService",
    "SqlAlchemyUnitOfWork",
    "SqlAlchemyIdentityResolver",
    "SqlAlchemyProfileCompletenessChecker",
    "HttpStatsNotifier",
    "InMemoryEventBus",
]
