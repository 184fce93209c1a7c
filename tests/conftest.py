"""Shared fixtures: fake AWS credentials, fixed clock, memory collaborators."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from dmsnotify.core.clock import FixedClock
from dmsnotify.services.notification_resolver import NotificationResolver
from tests.fakes import MemoryTokenStore, MemoryWorkflowCallback

REGION = "eu-west-2"
FIXED_INSTANT = datetime(2024, 1, 1, tzinfo=timezone.utc)


@pytest.fixture(autouse=True)
def aws_credentials(monkeypatch):
    """Keep boto3 away from real credentials and regions."""
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
    monkeypatch.setenv("AWS_SECURITY_TOKEN", "testing")
    monkeypatch.setenv("AWS_SESSION_TOKEN", "testing")
    monkeypatch.setenv("AWS_DEFAULT_REGION", REGION)


@pytest.fixture
def fixed_clock():
    return FixedClock(FIXED_INSTANT)


@pytest.fixture
def token_store():
    return MemoryTokenStore()


@pytest.fixture
def workflow_callback():
    return MemoryWorkflowCallback()


@pytest.fixture
def resolver(token_store, workflow_callback, fixed_clock):
    return NotificationResolver(
        token_store=token_store,
        workflow_callback=workflow_callback,
        clock=fixed_clock,
    )
