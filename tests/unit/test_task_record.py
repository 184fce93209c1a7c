"""Tests for TaskRecord and the clocks that stamp it."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest
from pydantic import ValidationError

from dmsnotify.core.clock import FixedClock, SystemClock
from dmsnotify.models.task_record import TaskRecord


def test_token_must_not_be_empty():
    with pytest.raises(ValidationError):
        TaskRecord(token="")


def test_record_is_immutable():
    record = TaskRecord(token="tok")
    with pytest.raises(ValidationError):
        record.token = "other"


def test_fixed_clock_reads_naive_as_utc():
    clock = FixedClock(datetime(2024, 1, 1))
    assert clock.now() == datetime(2024, 1, 1, tzinfo=timezone.utc)


def test_fixed_clock_normalises_offsets():
    plus_one = timezone(timedelta(hours=1))
    clock = FixedClock(datetime(2024, 1, 1, 1, tzinfo=plus_one))
    assert clock.now().tzinfo == timezone.utc
    assert clock.now().hour == 0


def test_system_clock_is_utc():
    assert SystemClock().now().tzinfo == timezone.utc


def test_attribute_names_shared_by_decoder_and_store():
    from dmsnotify import events
    from dmsnotify.models import task_record
    from dmsnotify.persistence import dynamodb_backend
    from dmsnotify.services import notification_resolver

    assert events.TASK_TOKEN_KEY is task_record.TASK_TOKEN_KEY
    assert dynamodb_backend.TASK_TOKEN_KEY is task_record.TASK_TOKEN_KEY
    assert notification_resolver.REPLICATION_TASK_ARN_KEY is task_record.REPLICATION_TASK_ARN_KEY
