"""Message source backed by an exported SMS inbox file."""

from datetime import datetime
from pathlib import Path
from typing import Any

import yaml

from pickup_monitor.core import Message, MessageSource


class YAMLInboxSource(MessageSource):
    """Read messages from a YAML list, newest first.

    Each entry is either a plain string (the message text) or a mapping
    with `text`, `body`, `sender` and `received_at` keys.
    """
    
    def __init__(self, path: Path) -> None:
        self.path = path
    
    def read_recent(self, limit: int) -> list[Message]:
        if not self.path.exists():
            print(f"  ⚠️  收件箱文件不存在: {self.path}")
            return []
        
        with open(self.path, "r", encoding="utf-8") as f:
            entries = yaml.safe_load(f) or []
        
        if not isinstance(entries, list):
            raise ValueError(f"Inbox file {self.path} must contain a list of messages")
        
        return [self._to_message(entry) for entry in entries[:limit]]
    
    def _to_message(self, entry: Any) -> Message:
        if isinstance(entry, str):
            return Message(text=entry)
        
        if not isinstance(entry, dict):
            raise ValueError(f"Unsupported inbox entry: {entry!r}")
        
        received_at = entry.get("received_at")
        if isinstance(received_at, str):
            received_at = datetime.fromisoformat(received_at)
        
        return Message(
            text=entry.get("text"),
            body=entry.get("body"),
            sender=entry.get("sender"),
            received_at=received_at,
        )
