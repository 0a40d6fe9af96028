"""Worker module - Background event processing for the marketplace service.

Contains background workers for:
- CompletionWorker: Delivers project completion events to the stats/badge service
"""
from .completion_worker import CompletionWorker

__all__ = ["CompletionWorker"]
