"""Unit tests for StepFunctionsCallback using botocore's Stubber."""

from __future__ import annotations

import pytest
from botocore.exceptions import ClientError
from botocore.stub import Stubber

from dmsnotify.callbacks.stepfunctions_backend import MAX_ERROR_LENGTH, StepFunctionsCallback


@pytest.fixture
def callback():
    return StepFunctionsCallback(region="eu-west-2")


@pytest.fixture
def stubber(callback):
    with Stubber(callback._client) as stub:
        yield stub
        stub.assert_no_pending_responses()


class TestNotifySuccess:
    def test_sends_task_success_with_empty_output(self, callback, stubber):
        stubber.add_response("send_task_success", {}, {"taskToken": "tok", "output": "{}"})
        callback.notify_success("tok")

    def test_uses_configured_output(self):
        callback = StepFunctionsCallback(region="eu-west-2", success_output='{"loaded": true}')
        with Stubber(callback._client) as stub:
            stub.add_response("send_task_success", {}, {"taskToken": "tok", "output": '{"loaded": true}'})
            callback.notify_success("tok")
            stub.assert_no_pending_responses()


class TestNotifyFailure:
    def test_sends_task_failure(self, callback, stubber):
        message = "Failing function due to failure [N/A] for DMS task [arn]"
        stubber.add_response(
            "send_task_failure", {}, {"taskToken": "tok", "error": message, "cause": message},
        )
        callback.notify_failure("tok", message)

    def test_truncates_error_but_keeps_full_cause(self, callback, stubber):
        message = "x" * (MAX_ERROR_LENGTH + 50)
        stubber.add_response(
            "send_task_failure", {},
            {"taskToken": "tok", "error": "x" * MAX_ERROR_LENGTH, "cause": message},
        )
        callback.notify_failure("tok", message)

    def test_propagates_client_errors(self, callback, stubber):
        stubber.add_client_error("send_task_failure", service_error_code="TaskTimedOut")
        with pytest.raises(ClientError):
            callback.notify_failure("tok", "boom")
