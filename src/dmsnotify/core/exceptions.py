"""dmsnotify exception hierarchy."""

from __future__ import annotations


class DMSNotifyError(Exception):
    """Base exception for all dmsnotify errors."""


class MissingTokenError(DMSNotifyError):
    """No task record found for a task identifier during resolution."""

    def __init__(self, table: str, task_arn: str) -> None:
        self.table = table
        self.task_arn = task_arn
        super().__init__(f"No Task details found in table {table!r} for {task_arn}")


class MalformedEventError(DMSNotifyError):
    """Inbound event is missing a required field or carries an invalid one."""
