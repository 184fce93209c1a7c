"""Step Functions backend implementing IWorkflowCallback."""

from __future__ import annotations

import boto3
from botocore.config import Config

# SendTaskFailure rejects an ``error`` longer than this; ``cause`` keeps the full text.
MAX_ERROR_LENGTH = 256


class StepFunctionsCallback:
    """Production IWorkflowCallback resuming steps parked on a task token."""

    def __init__(self, region: str = "eu-west-2", endpoint_url: str | None = None,
                 success_output: str = "{}", client_config: Config | None = None) -> None:
        self._success_output = success_output
        kwargs: dict = {"region_name": region}
        if endpoint_url:
            kwargs["endpoint_url"] = endpoint_url
        if client_config is not None:
            kwargs["config"] = client_config
        self._client = boto3.client("stepfunctions", **kwargs)

    def notify_success(self, token: str) -> None:
        self._client.send_task_success(taskToken=token, output=self._success_output)

    def notify_failure(self, token: str, error_message: str) -> None:
        self._client.send_task_failure(
            taskToken=token,
            error=error_message[:MAX_ERROR_LENGTH],
            cause=error_message,
        )
