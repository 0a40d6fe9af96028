"""Stats/Badge Notifier Interface

Downstream service that keeps per-account completion statistics and badges.
Both calls must be safe to repeat with the same idempotency key.
"""
from abc import ABC, abstractmethod
from typing import Optional


class StatsNotifierError(Exception):
    """Base exception for stats/badge service failures"""
    def __init__(self, message: str, status_code: Optional[int] = None):
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class StatsServiceUnavailable(StatsNotifierError):
    """Raised when the stats service is unreachable or returns 5xx"""
    def __init__(self, message: str = "Stats service is currently unavailable"):
        super().__init__(message, status_code=503)


class StatsNotifier(ABC):

    @abstractmethod
    async def increment_stats(
        self,
        account_id: str,
        projects_completed: int,
        hours_contributed: int,
        idempotency_key: str,
    ) -> None:
        """
        Add to an account's completion statistics.

        Raises:
            StatsNotifierError: the service rejected the request
            StatsServiceUnavailable: the service could not be reached
        """
        pass

    @abstractmethod
    async def recalculate_badges(self, account_id: str, idempotency_key: str) -> None:
        """
        Ask the service to re-evaluate badges for an account.

        Raises:
            StatsNotifierError: the service rejected the request
            StatsServiceUnavailable: the service could not be reached
        """
        pass
