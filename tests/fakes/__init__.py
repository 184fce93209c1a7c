"""Shared test doubles, re-export memory backends."""

from __future__ import annotations

from dmsnotify.callbacks.memory_backend import MemoryWorkflowCallback
from dmsnotify.persistence.memory_backend import MemoryTokenStore

__all__ = ["MemoryTokenStore", "MemoryWorkflowCallback"]
