"""In-memory backends for unit tests and local runs, dict-backed fakes."""

from __future__ import annotations

from dmsnotify.models.task_record import TaskKey, TaskRecord


class MemoryTokenStore:
    """Dict-backed ITokenStore. Records calls so tests can assert on them."""

    def __init__(self) -> None:
        self._records: dict[tuple[str, str, str], TaskRecord] = {}
        self.calls: list[tuple[str, str, TaskKey]] = []

    def save(self, table: str, key: TaskKey, record: TaskRecord) -> None:
        self.calls.append(("save", table, key))
        self._records[(table, key.attribute, key.value)] = record

    def lookup(self, table: str, key: TaskKey) -> TaskRecord | None:
        self.calls.append(("lookup", table, key))
        return self._records.get((table, key.attribute, key.value))

    def delete(self, table: str, key: TaskKey) -> None:
        self.calls.append(("delete", table, key))
        self._records.pop((table, key.attribute, key.value), None)

    def get(self, table: str, key: TaskKey) -> TaskRecord | None:
        """Peek at a record without recording a call."""
        return self._records.get((table, key.attribute, key.value))

    def count(self, operation: str) -> int:
        return sum(1 for call in self.calls if call[0] == operation)
