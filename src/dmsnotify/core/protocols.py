"""Protocol interfaces for the collaborators of the notification resolver.

Structural typing, no inheritance required: any object with matching methods
(DynamoDB, Step Functions, in-memory fakes) can be injected.
"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from dmsnotify.models.task_record import TaskKey, TaskRecord


# ---------------------------------------------------------------------------
# Persistence: Token Store
# ---------------------------------------------------------------------------

@runtime_checkable
class ITokenStore(Protocol):
    """Key-value store of pending callback tokens, keyed by task identifier."""

    def save(self, table: str, key: TaskKey, record: TaskRecord) -> None: ...

    def lookup(self, table: str, key: TaskKey) -> TaskRecord | None: ...

    def delete(self, table: str, key: TaskKey) -> None: ...


# ---------------------------------------------------------------------------
# Workflow Callback
# ---------------------------------------------------------------------------

@runtime_checkable
class IWorkflowCallback(Protocol):
    """Workflow engine API resuming a step suspended on a callback token."""

    def notify_success(self, token: str) -> None: ...

    def notify_failure(self, token: str, error_message: str) -> None: ...


# ---------------------------------------------------------------------------
# Clock
# ---------------------------------------------------------------------------

@runtime_checkable
class IClock(Protocol):
    """Source of the current instant, always timezone-aware UTC."""

    def now(self) -> datetime: ...
