"""Deduplication gate for extracted pickup codes."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from pickup_monitor.core.entities import Reminder
from pickup_monitor.core.processed_codes import ProcessedCodeSet


class DedupDecision(str, Enum):
    """Outcome of the dedup check for one code."""

    PROCESS = "process"
    SKIP_CACHED = "skip_cached"
    SKIP_REMINDER = "skip_reminder"

    @property
    def skip(self) -> bool:
        return self is not DedupDecision.PROCESS


@dataclass
class RunState:
    """Mutable state of a single run."""

    codes: ProcessedCodeSet
    processed_count: int = 0
    has_new: bool = False
    unmatched: int = 0
    skipped_cached: int = 0
    skipped_reminder: int = 0


class DedupGate:
    """Decide whether a code still needs a reminder and notification.

    Checks, first hit wins:
    1. code already in the processed set
    2. code appears in the title of an upcoming reminder
       (backfills the processed set)
    3. otherwise the code is new
    """

    def __init__(self, upcoming_reminders: Optional[list[Reminder]] = None) -> None:
        self.upcoming_reminders = upcoming_reminders or []

    def has_reminder_for(self, code: str) -> bool:
        return any(code in (reminder.title or "") for reminder in self.upcoming_reminders)

    def check(self, code: str, state: RunState) -> DedupDecision:
        """Classify `code`, backfilling the processed set on a reminder hit."""
        if code in state.codes:
            state.skipped_cached += 1
            return DedupDecision.SKIP_CACHED

        if self.has_reminder_for(code):
            state.skipped_reminder += 1
            if state.codes.add(code):
                state.codes.persist()
                state.has_new = True
            return DedupDecision.SKIP_REMINDER

        return DedupDecision.PROCESS

    def commit(self, code: str, state: RunState) -> None:
        """Record a dispatched code and persist immediately."""
        state.codes.add(code)
        state.codes.persist()
        state.has_new = True
        state.processed_count += 1
