"""Reminder subsystem adapters."""

from pickup_monitor.adapters.reminders.local_reminders import LocalReminderList
from pickup_monitor.adapters.reminders.macos_reminders import MacOSReminders

__all__ = ["LocalReminderList", "MacOSReminders"]
