"""Notification adapters."""

from pickup_monitor.adapters.notifications.console_notifier import ConsoleNotifier
from pickup_monitor.adapters.notifications.slack_notifier import SlackNotifier

__all__ = ["ConsoleNotifier", "SlackNotifier"]
