"""Notification adapter printing to stdout."""

from typing import Optional

from pickup_monitor.core.interfaces import NotificationService


class ConsoleNotifier(NotificationService):
    """Print notifications when no push channel is configured."""
    
    def send(self, title: str, body: str, options: Optional[dict] = None) -> None:
        print(f"  🔔 {title}: {body}")
