"""Workflow engine callback backends behind the IWorkflowCallback protocol."""

from __future__ import annotations

from botocore.config import Config

from dmsnotify.callbacks.stepfunctions_backend import StepFunctionsCallback
from dmsnotify.core.config import AppSettings


def create_workflow_callback(settings: AppSettings | None = None) -> StepFunctionsCallback:
    """Create the Step Functions callback client from application settings."""
    if settings is None:
        settings = AppSettings()

    return StepFunctionsCallback(
        region=settings.stepfunctions.region,
        endpoint_url=settings.stepfunctions.endpoint_url,
        success_output=settings.stepfunctions.success_output,
        client_config=Config(retries={"mode": "standard"}),
    )
