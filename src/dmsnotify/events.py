"""Decode raw Lambda events into typed inbound signals.

Three shapes arrive on the same function:

* a registration from the step function, carrying ``token``;
* an EventBridge DMS event whose ``detail.eventType`` is
  ``REPLICATION_TASK_FAILED``;
* any other EventBridge DMS event, resolved on ``detail.eventId``.

The shape is inferred from which fields are present, not from a tag.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from dmsnotify.core.exceptions import MalformedEventError
from dmsnotify.models.events import (
    InboundSignal,
    RegisterTaskSignal,
    TaskFailureSignal,
    TaskStoppageSignal,
)
from dmsnotify.models.task_record import REPLICATION_TASK_ARN_KEY, TASK_TOKEN_KEY

IGNORE_DMS_TASK_FAILURE_KEY = "ignoreDmsTaskFailure"
TOKEN_EXPIRY_DAYS_KEY = "tokenExpiryDays"
DEFAULT_TOKEN_EXPIRY_DAYS = 5

CLOUDWATCH_EVENT_RESOURCES_KEY = "resources"
CLOUDWATCH_EVENT_DETAIL_KEY = "detail"
CLOUDWATCH_EVENT_ID_KEY = "eventId"
CLOUDWATCH_EVENT_TYPE_KEY = "eventType"
CLOUDWATCH_EVENT_DETAIL_MESSAGE_KEY = "detailMessage"

DMS_TASK_FAILURE_EVENT_TYPE = "REPLICATION_TASK_FAILED"
MISSING_FAILURE_MESSAGE = "N/A"


def _optional_string(data: Mapping[str, Any], key: str) -> str | None:
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise MalformedEventError(f"Field {key!r} must be a string, got {type(value).__name__}")
    return value


def _boolean(data: Mapping[str, Any], key: str) -> bool:
    value = data.get(key)
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    if isinstance(value, str) and value.strip().lower() in ("true", "false"):
        return value.strip().lower() == "true"
    raise MalformedEventError(f"Field {key!r} must be a boolean, got {value!r}")


def _expiry_days(data: Mapping[str, Any], default: int) -> int:
    value = data.get(TOKEN_EXPIRY_DAYS_KEY)
    if value is None:
        return default
    if isinstance(value, bool) or (isinstance(value, float) and not value.is_integer()):
        raise MalformedEventError(f"Field {TOKEN_EXPIRY_DAYS_KEY!r} must be an integer, got {value!r}")
    try:
        return int(value)
    except (TypeError, ValueError) as exc:
        raise MalformedEventError(
            f"Field {TOKEN_EXPIRY_DAYS_KEY!r} must be an integer, got {value!r}"
        ) from exc


def _detail(event: Mapping[str, Any]) -> Mapping[str, Any]:
    detail = event.get(CLOUDWATCH_EVENT_DETAIL_KEY)
    if not isinstance(detail, Mapping):
        raise MalformedEventError(f"Event has no {CLOUDWATCH_EVENT_DETAIL_KEY!r} object")
    return detail


def resolve_task_arn(event: Mapping[str, Any]) -> str:
    """Return the explicit task ARN, else the first entry of ``resources``."""
    explicit = _optional_string(event, REPLICATION_TASK_ARN_KEY)
    if explicit:
        return explicit

    resources = event.get(CLOUDWATCH_EVENT_RESOURCES_KEY)
    if not isinstance(resources, (list, tuple)):
        raise MalformedEventError(
            f"Could not find DMS task ARN. Event has no {CLOUDWATCH_EVENT_RESOURCES_KEY!r} list"
        )
    if not resources:
        raise MalformedEventError("Could not find DMS task ARN. List of resources is empty")
    first = resources[0]
    if not isinstance(first, str) or not first:
        raise MalformedEventError(f"Could not find DMS task ARN. Invalid resource {first!r}")
    return first


def parse_event(
    event: Mapping[str, Any], default_expiry_days: int = DEFAULT_TOKEN_EXPIRY_DAYS
) -> InboundSignal:
    """Classify ``event`` and return the matching signal model.

    Raises:
        MalformedEventError: a field required by the inferred shape is absent
            or has the wrong type.
    """
    if not isinstance(event, Mapping):
        raise MalformedEventError(f"Event must be an object, got {type(event).__name__}")

    task_arn = resolve_task_arn(event)
    token = _optional_string(event, TASK_TOKEN_KEY)

    try:
        if token is not None:
            return RegisterTaskSignal(
                token=token,
                task_arn=task_arn,
                ignore_failure=_boolean(event, IGNORE_DMS_TASK_FAILURE_KEY),
                expiry_days=_expiry_days(event, default_expiry_days),
            )

        detail = _detail(event)
        event_type = _optional_string(detail, CLOUDWATCH_EVENT_TYPE_KEY) or ""
        if event_type.upper() == DMS_TASK_FAILURE_EVENT_TYPE:
            message = _optional_string(detail, CLOUDWATCH_EVENT_DETAIL_MESSAGE_KEY)
            return TaskFailureSignal(
                task_arn=task_arn,
                failure_message=MISSING_FAILURE_MESSAGE if message is None else message,
            )

        event_id = _optional_string(detail, CLOUDWATCH_EVENT_ID_KEY)
        if event_id is None:
            raise MalformedEventError(f"Stoppage event has no {CLOUDWATCH_EVENT_ID_KEY!r}")
        return TaskStoppageSignal(task_arn=task_arn, event_id=event_id)
    except ValidationError as exc:
        raise MalformedEventError(f"Invalid event: {exc}") from exc
