"""Core domain entities."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class Message:
    """Raw text message as handed over by the message source."""
    
    text: Optional[str] = None
    body: Optional[str] = None
    sender: Optional[str] = None
    received_at: Optional[datetime] = None
    
    @property
    def content(self) -> str:
        return self.text or self.body or ""


@dataclass(frozen=True)
class ExtractionResult:
    """Pickup code and location extracted from one message."""
    
    code: str
    location: str
    rule_name: str
    sender: Optional[str] = None
    
    def __post_init__(self) -> None:
        if not self.code:
            raise ValueError("Code cannot be empty")
        if not self.location:
            raise ValueError("Location cannot be empty")


@dataclass
class Reminder:
    """Reminder item as seen in the upcoming-reminder view."""
    
    title: str
    notes: str = ""
    due_at: Optional[datetime] = None
    completed: bool = False
    list_title: Optional[str] = None
    priority: int = 0
    
    def __post_init__(self) -> None:
        if not self.title:
            raise ValueError("Title cannot be empty")


@dataclass
class RunSummary:
    """Outcome of a single processing run."""
    
    messages_read: int = 0
    processed: int = 0
    skipped_cached: int = 0
    skipped_reminder: int = 0
    unmatched: int = 0
    has_new: bool = False
    new_codes: list[str] = field(default_factory=list)
