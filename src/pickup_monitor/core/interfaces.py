"""Core interfaces for adapters."""

from abc import ABC, abstractmethod
from typing import Any, Optional

from pickup_monitor.core.entities import Message, Reminder


class MessageSource(ABC):
    """Interface for reading recent text messages."""
    
    @abstractmethod
    def read_recent(self, limit: int) -> list[Message]:
        """Return up to `limit` most recent messages, newest first."""
        pass


class ReminderService(ABC):
    """Interface for the reminder subsystem."""
    
    @abstractmethod
    def get_upcoming(self, days_ahead: int) -> list[Reminder]:
        """Return pending reminders due within `days_ahead` days."""
        pass
    
    @abstractmethod
    def create_reminder(
        self, title: str, notes: str, priority: int, list_title: str
    ) -> None:
        """Create a reminder item."""
        pass


class NotificationService(ABC):
    """Interface for user-facing notifications."""
    
    @abstractmethod
    def send(self, title: str, body: str, options: Optional[dict] = None) -> None:
        """Deliver a notification."""
        pass


class KeyValueStore(ABC):
    """Interface for durable key-value state."""
    
    @abstractmethod
    def get(self, key: str) -> Optional[Any]:
        """Return stored value or None when absent."""
        pass
    
    @abstractmethod
    def set(self, key: str, value: Any) -> None:
        """Store value under key."""
        pass
