"""NotificationResolver: owns the callback token lifecycle for DMS tasks.

A step function starts a DMS load, then parks on a task token. The token is
registered here, keyed by the replication task ARN. When DMS later reports that
the task stopped or failed, the token is read back, the step function is told
the outcome, and the token is deleted.
"""

from __future__ import annotations

import logging
from datetime import timedelta, timezone
from typing import Callable

from dmsnotify.core.exceptions import MalformedEventError, MissingTokenError
from dmsnotify.core.protocols import IClock, ITokenStore, IWorkflowCallback
from dmsnotify.models.task_record import REPLICATION_TASK_ARN_KEY, TaskKey, TaskRecord

logger = logging.getLogger(__name__)

DMS_TASK_STOPPAGE_ERROR_EVENT_ID = "DMS-EVENT-0078"
DMS_TASK_SUCCESS_EVENT_ID = "DMS-EVENT-0079"


class NotificationResolver:
    """Registers callback tokens and resolves them on terminal DMS events.

    Collaborators are injected at construction time: the token store, the
    workflow callback API, and the clock used to stamp registrations.
    """

    def __init__(
        self,
        *,
        token_store: ITokenStore,
        workflow_callback: IWorkflowCallback,
        clock: IClock,
    ) -> None:
        self._store = token_store
        self._callback = workflow_callback
        self._clock = clock

    # ---- registration ----

    def register_task_details(
        self,
        token: str,
        task_arn: str,
        ignore_failure: bool,
        table: str,
        expiry_days: int,
        key_attribute: str = REPLICATION_TASK_ARN_KEY,
    ) -> TaskRecord:
        """Save ``token`` for ``task_arn``, overwriting any pending record."""
        if not token:
            raise MalformedEventError(f"Cannot register an empty token for DMS task [{task_arn}]")
        if expiry_days < 0:
            raise MalformedEventError(f"Token expiry days must not be negative, got {expiry_days}")

        now = self._clock.now().astimezone(timezone.utc)
        record = TaskRecord(
            token=token,
            ignore_failure=ignore_failure,
            created_at=now.isoformat().replace("+00:00", "Z"),
            expire_at=int((now + timedelta(days=expiry_days)).timestamp()),
        )

        logger.info("Saving token %s to Dynamo table %s", token, table)
        self._store.save(table, TaskKey(key_attribute, task_arn), record)
        return record

    # ---- resolution ----

    def process_stop_event(self, table: str, task_key: str, task_arn: str, event_id: str) -> None:
        """Resolve the callback for a DMS stoppage event.

        Only the stoppage-error event id fails the step function, and only when
        the registration did not ask to ignore failures. Every other event id,
        recognised or not, counts as a successful stop.
        """

        def notify(record: TaskRecord) -> None:
            if event_id.upper() != DMS_TASK_STOPPAGE_ERROR_EVENT_ID:
                self._notify_success(record)
            elif record.ignore_failure:
                logger.info(
                    "Ignoring failure [%s] for DMS task [%s]",
                    DMS_TASK_STOPPAGE_ERROR_EVENT_ID, task_arn,
                )
                self._notify_success(record)
            else:
                error_message = (
                    f"Failing function due to stoppage error "
                    f"[{DMS_TASK_STOPPAGE_ERROR_EVENT_ID}] for DMS task [{task_arn}]"
                )
                logger.error(error_message)
                self._notify_failure(record, error_message)

        self._resolve(table, TaskKey(task_key, task_arn), notify)

    def process_failure_event(
        self, table: str, task_key: str, task_arn: str, failure_message: str
    ) -> None:
        """Fail the step function for a DMS task failure, whatever the policy."""

        def notify(record: TaskRecord) -> None:
            error_message = (
                f"Failing function due to failure [{failure_message}] for DMS task [{task_arn}]"
            )
            logger.error(error_message)
            self._notify_failure(record, error_message)

        self._resolve(table, TaskKey(task_key, task_arn), notify)

    # ---- internals ----

    def _resolve(self, table: str, key: TaskKey, notify: Callable[[TaskRecord], None]) -> None:
        logger.info("Getting token from Dynamo table %s", table)
        record = self._store.lookup(table, key)
        if record is None:
            raise MissingTokenError(table, key.value)

        # The token is spent once notify has been attempted, so it is deleted
        # even when notify raises. The notify error wins over a delete error.
        try:
            notify(record)
        except Exception:
            try:
                self._delete(table, key)
            except Exception:
                logger.exception("Failed to delete token for %s from Dynamo table %s", key.value, table)
            raise
        self._delete(table, key)

    def _delete(self, table: str, key: TaskKey) -> None:
        logger.info("Deleting retrieved token from Dynamo table %s", table)
        self._store.delete(table, key)

    def _notify_success(self, record: TaskRecord) -> None:
        logger.info("Notifying step functions of success using token [%s]", record.token)
        self._callback.notify_success(record.token)

    def _notify_failure(self, record: TaskRecord, error_message: str) -> None:
        logger.info("Notifying step functions of failure using token [%s]", record.token)
        self._callback.notify_failure(record.token, error_message)
