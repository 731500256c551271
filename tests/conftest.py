"""Shared test fakes."""

import copy
from typing import Any, Optional

import pytest

from pickup_monitor.core import KeyValueStore


class InMemoryStore(KeyValueStore):
    """Dict-backed store that records every write."""
    
    def __init__(self, data: Optional[dict] = None) -> None:
        self.data: dict[str, Any] = dict(data or {})
        self.writes: list[tuple[str, Any]] = []
    
    def get(self, key: str) -> Optional[Any]:
        return copy.deepcopy(self.data.get(key))
    
    def set(self, key: str, value: Any) -> None:
        self.data[key] = copy.deepcopy(value)
        self.writes.append((key, copy.deepcopy(value)))


@pytest.fixture
def store() -> InMemoryStore:
    return InMemoryStore()
