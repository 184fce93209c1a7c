"""Decoded inbound signals, one model per event shape."""

from __future__ import annotations

from typing import Literal, Union

from pydantic import BaseModel, Field


class RegisterTaskSignal(BaseModel):
    """Step function asking to park its task token until the DMS task stops."""

    model_config = {"frozen": True}

    kind: Literal["register"] = "register"
    token: str = Field(min_length=1)
    task_arn: str = Field(min_length=1)
    ignore_failure: bool = False
    expiry_days: int = Field(ge=0)


class TaskFailureSignal(BaseModel):
    """DMS reported REPLICATION_TASK_FAILED for the task."""

    model_config = {"frozen": True}

    kind: Literal["failure"] = "failure"
    task_arn: str = Field(min_length=1)
    failure_message: str = "N/A"


class TaskStoppageSignal(BaseModel):
    """DMS reported the task stopped; the event id says how."""

    model_config = {"frozen": True}

    kind: Literal["stoppage"] = "stoppage"
    task_arn: str = Field(min_length=1)
    event_id: str


InboundSignal = Union[RegisterTaskSignal, TaskFailureSignal, TaskStoppageSignal]
