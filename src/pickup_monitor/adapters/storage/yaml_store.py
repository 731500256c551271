"""Key-value store persisted as a single YAML file."""

import os
import tempfile
from pathlib import Path
from typing import Any, Optional

import yaml

from pickup_monitor.core.interfaces import KeyValueStore


class YAMLKeyValueStore(KeyValueStore):
    """Store all keys in one YAML mapping.

    Every `set` rewrites the whole file through a temporary file and
    `os.replace`, so a crash mid-write leaves the previous state intact.
    """
    
    def __init__(self, path: Path) -> None:
        self.path = path
    
    def _load(self) -> dict:
        if not self.path.exists():
            return {}
        
        with open(self.path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        
        if not isinstance(data, dict):
            raise ValueError(f"State file {self.path} must contain a mapping")
        return data
    
    def get(self, key: str) -> Optional[Any]:
        return self._load().get(key)
    
    def set(self, key: str, value: Any) -> None:
        data = self._load()
        data[key] = value
        
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(
            dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                yaml.safe_dump(data, f, allow_unicode=True, default_flow_style=False, sort_keys=False)
            os.replace(tmp_path, self.path)
        except BaseException:
            Path(tmp_path).unlink(missing_ok=True)
            raise
