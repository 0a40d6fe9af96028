import logging
from typing import Optional
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession
from motor.motor_asyncio import AsyncIOMotorClient
from config import ApplicationConfig
from libs.result import Error
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.adapter.services.audit_service import MongoAuditService
from src.adapter.services.identity_resolver import SqlAlchemyIdentityResolver
from src.adapter.services.profile_completeness import SqlAlchemyProfileCompletenessChecker
from src.adapter.services.http_stats_notifier import HttpStatsNotifier
from src.adapter.services.in_memory_event_bus import InMemoryEventBus
from src.api.error import ClientError
from src.api.utils.jwt import verify_jwt, external_id_of
from src.app.services.event_publisher import EventPublisher
from src.app.services.identity_resolver import IdentityResolver
from src.app.services.profile_completeness import ProfileCompletenessChecker
from src.app.services.stats_notifier import StatsNotifier
from src.domain import Actor
from src.worker.completion_worker import CompletionWorker

logger = logging.getLogger(__name__)

# PostgreSQL engine
engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)

# MongoDB client
mongo_client = AsyncIOMotorClient(ApplicationConfig.MONGODB_URI)

# Completion events flow from request handlers to the worker through this bus
event_bus = InMemoryEventBus(maxsize=ApplicationConfig.COMPLETION_QUEUE_SIZE)

stats_notifier = HttpStatsNotifier(
    base_url=ApplicationConfig.STATS_SERVICE_URL,
    timeout=ApplicationConfig.STATS_SERVICE_TIMEOUT,
)


async def get_unit_of_work():
    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(session)


async def get_audit_service() -> MongoAuditService:
    return MongoAuditService(mongo_client, ApplicationConfig.MONGODB_DB_NAME)


def get_event_publisher() -> EventPublisher:
    return event_bus


def get_stats_notifier() -> StatsNotifier:
    return stats_notifier


def get_identity_resolver() -> IdentityResolver:
    return SqlAlchemyIdentityResolver(AsyncSessionLocal)


def get_profile_checker() -> ProfileCompletenessChecker:
    return SqlAlchemyProfileCompletenessChecker(AsyncSessionLocal)


def get_completion_worker() -> CompletionWorker:
    return CompletionWorker(
        event_bus=event_bus,
        stats_notifier=stats_notifier,
        session_factory=AsyncSessionLocal,
    )


# Security; a missing token yields no actor so public reads stay anonymous
security = HTTPBearer(auto_error=False)

DEV_EXTERNAL_ID = "test-user-id"


async def get_current_actor(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    identity_resolver: IdentityResolver = Depends(get_identity_resolver),
) -> Optional[Actor]:
    """
    Dependency resolving the caller from the JWT in the Authorization header

    Returns:
        Optional[Actor]: None when no token was sent or no account is linked
        to the token's subject; use cases turn that into UNAUTHENTICATED

    Raises:
        ClientError: 401 if a token was sent but is invalid or expired
    """
    if ApplicationConfig.AUTH_DISABLED:
        # For testing/development - act as a fixed external user
        return await identity_resolver.resolve_actor(DEV_EXTERNAL_ID)

    if credentials is None:
        return None

    payload = verify_jwt(credentials.credentials)
    if payload is None:
        raise ClientError(Error(code="UNAUTHENTICATED", message="Invalid or expired token"))

    external_id = external_id_of(payload)
    actor = await identity_resolver.resolve_actor(external_id)
    if actor is None:
        logger.warning(f"No account linked to external id {external_id}")
    return actor
