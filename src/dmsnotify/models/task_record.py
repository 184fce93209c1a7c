"""Pending callback state stored per task identifier."""

from __future__ import annotations

from typing import NamedTuple, Optional

from pydantic import BaseModel, Field


TASK_TOKEN_KEY = "token"
REPLICATION_TASK_ARN_KEY = "replicationTaskArn"


class TaskKey(NamedTuple):
    """Key of a task record: the key attribute name and the task identifier."""

    attribute: str
    value: str


class TaskRecord(BaseModel):
    """A registered callback token awaiting its terminal DMS event."""

    model_config = {"frozen": True}

    token: str = Field(min_length=1)
    ignore_failure: bool = False
    created_at: Optional[str] = None  # ISO-8601 UTC
    expire_at: Optional[int] = None  # epoch seconds, store TTL
