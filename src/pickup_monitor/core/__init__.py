"""Core domain layer."""

from pickup_monitor.core.dedup import DedupDecision, DedupGate, RunState
from pickup_monitor.core.entities import ExtractionResult, Message, Reminder, RunSummary
from pickup_monitor.core.interfaces import (
    KeyValueStore,
    MessageSource,
    NotificationService,
    ReminderService,
)
from pickup_monitor.core.patterns import DEFAULT_RULES, PatternRule, match_message, match_text
from pickup_monitor.core.processed_codes import STORAGE_KEY, CodeRecord, ProcessedCodeSet

__all__ = [
    "Message",
    "ExtractionResult",
    "Reminder",
    "RunSummary",
    "MessageSource",
    "ReminderService",
    "NotificationService",
    "KeyValueStore",
    "PatternRule",
    "DEFAULT_RULES",
    "match_text",
    "match_message",
    "CodeRecord",
    "ProcessedCodeSet",
    "STORAGE_KEY",
    "DedupDecision",
    "DedupGate",
    "RunState",
]
