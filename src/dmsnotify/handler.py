"""Lambda entrypoint notifying Step Functions of DMS load completion.

The function runs in one of three modes depending on the event received.

RegisterTaskToken, invoked by the step function once the DMS load is started::

    {
        "token": "some-step-function-task-token",
        "ignoreDmsTaskFailure": false,
        "replicationTaskArn": "DMS replication task ARN",
        "tokenExpiryDays": "5"
    }

The token and the ignore flag are saved to DynamoDB, keyed by the task ARN.

ProcessDMSStoppage, invoked by the EventBridge rule once the load stops::

    {
        "resources": ["DMS replication task ARN"],
        "detail": {"eventId": "DMS-EVENT-0079"}
    }

The token is read back, the step function notified, and the token deleted.
``DMS-EVENT-0078`` (stopped with errors) fails the step function unless the
registration set ``ignoreDmsTaskFailure``.

ProcessDMSFailure, invoked by the EventBridge rule when the load fails::

    {
        "resources": ["DMS replication task ARN"],
        "detail": {"eventType": "REPLICATION_TASK_FAILED", "detailMessage": "..."}
    }

The step function is always failed and the token deleted.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Any

from dmsnotify.callbacks import create_workflow_callback
from dmsnotify.core.clock import SystemClock
from dmsnotify.core.config import AppSettings
from dmsnotify.core.log import configure_logging
from dmsnotify.events import parse_event
from dmsnotify.models.events import (
    InboundSignal,
    RegisterTaskSignal,
    TaskFailureSignal,
    TaskStoppageSignal,
)
from dmsnotify.persistence import create_token_store
from dmsnotify.services.notification_resolver import NotificationResolver

logger = logging.getLogger(__name__)


class NotificationHandler:
    """Decodes one event and dispatches it to the resolver."""

    def __init__(self, resolver: NotificationResolver, settings: AppSettings | None = None) -> None:
        self._resolver = resolver
        self._settings = settings or AppSettings()

    @property
    def table(self) -> str:
        return self._settings.dynamodb.full_table_name

    def handle(self, event: dict[str, Any], context: Any = None) -> InboundSignal:
        logger.debug("Event received: %s", event)
        signal = parse_event(event, default_expiry_days=self._settings.token.default_expiry_days)
        key_attribute = self._settings.dynamodb.key_attribute

        if isinstance(signal, RegisterTaskSignal):
            self._resolver.register_task_details(
                signal.token,
                signal.task_arn,
                signal.ignore_failure,
                self.table,
                signal.expiry_days,
                key_attribute=key_attribute,
            )
        elif isinstance(signal, TaskFailureSignal):
            self._resolver.process_failure_event(
                self.table, key_attribute, signal.task_arn, signal.failure_message,
            )
        elif isinstance(signal, TaskStoppageSignal):
            self._resolver.process_stop_event(
                self.table, key_attribute, signal.task_arn, signal.event_id,
            )

        logger.info("Done")
        return signal


def create_handler(settings: AppSettings | None = None) -> NotificationHandler:
    """Wire the production handler: DynamoDB, Step Functions, wall clock."""
    if settings is None:
        settings = AppSettings()

    resolver = NotificationResolver(
        token_store=create_token_store(settings),
        workflow_callback=create_workflow_callback(settings),
        clock=SystemClock(),
    )
    return NotificationHandler(resolver, settings)


@lru_cache(maxsize=1)
def _default_handler() -> NotificationHandler:
    settings = AppSettings()
    configure_logging(settings.log_level)
    return create_handler(settings)


def lambda_handler(event: dict[str, Any], context: Any) -> None:
    """AWS Lambda entrypoint."""
    _default_handler().handle(event, context)
