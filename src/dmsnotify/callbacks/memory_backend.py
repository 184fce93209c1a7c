"""In-memory workflow callback for unit tests and local runs."""

from __future__ import annotations


class MemoryWorkflowCallback:
    """IWorkflowCallback that records notifications instead of sending them."""

    def __init__(self, fail_with: Exception | None = None) -> None:
        self._fail_with = fail_with
        self.successes: list[str] = []
        self.failures: list[tuple[str, str]] = []

    def notify_success(self, token: str) -> None:
        self.successes.append(token)
        if self._fail_with is not None:
            raise self._fail_with

    def notify_failure(self, token: str, error_message: str) -> None:
        self.failures.append((token, error_message))
        if self._fail_with is not None:
            raise self._fail_with

    @property
    def call_count(self) -> int:
        return len(self.successes) + len(self.failures)
