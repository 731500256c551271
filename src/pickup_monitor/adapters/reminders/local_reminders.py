"""Reminder list kept in a local YAML file."""

from datetime import date, datetime, timedelta
from pathlib import Path
from typing import Any, Optional

import yaml

from pickup_monitor.core import Reminder, ReminderService


def _to_datetime(value: Any) -> Optional[datetime]:
    """Normalize a stored due date to naive local time."""
    if value is None:
        return None
    if not isinstance(value, datetime):
        if isinstance(value, date):
            return datetime.combine(value, datetime.min.time())
        value = datetime.fromisoformat(str(value))
    if value.tzinfo is not None:
        value = value.astimezone().replace(tzinfo=None)
    return value


class LocalReminderList(ReminderService):
    """File-backed reminders for hosts without a system reminder app."""
    
    def __init__(self, path: Path) -> None:
        self.path = path
    
    def _load(self) -> list[dict]:
        if not self.path.exists():
            return []
        
        with open(self.path, "r", encoding="utf-8") as f:
            return yaml.safe_load(f) or []
    
    def _save(self, records: list[dict]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            yaml.safe_dump(records, f, allow_unicode=True, default_flow_style=False, sort_keys=False)
    
    def list_reminders(self) -> list[Reminder]:
        """Return all stored reminders."""
        return [
            Reminder(
                title=record["title"],
                notes=record.get("notes", ""),
                due_at=_to_datetime(record.get("due_at")),
                completed=bool(record.get("completed", False)),
                list_title=record.get("list_title"),
                priority=int(record.get("priority", 0)),
            )
            for record in self._load()
            if record.get("title")
        ]
    
    def get_upcoming(self, days_ahead: int, now: Optional[datetime] = None) -> list[Reminder]:
        """Pending reminders that are undated or due before now + days_ahead.

        Overdue reminders that are still open count as upcoming.
        """
        now = now or datetime.now()
        horizon = now + timedelta(days=days_ahead)
        
        return [
            reminder
            for reminder in self.list_reminders()
            if not reminder.completed
            and (reminder.due_at is None or reminder.due_at <= horizon)
        ]
    
    def create_reminder(
        self, title: str, notes: str, priority: int, list_title: str
    ) -> None:
        records = self._load()
        records.append({
            "title": title,
            "notes": notes,
            "due_at": datetime.now().replace(microsecond=0),
            "completed": False,
            "list_title": list_title,
            "priority": priority,
        })
        self._save(records)
