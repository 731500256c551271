"""Pickup-code pattern rules and first-match extraction."""

import re
from dataclasses import dataclass
from typing import Iterable, Optional

from pickup_monitor.core.entities import ExtractionResult, Message


@dataclass(frozen=True)
class PatternRule:
    """Extraction rule with named capture groups.

    The pattern must define `code` and `location` groups. The sender is
    either fixed by the rule or captured through a `sender` / `sender_alt`
    group (one per bracket notation).
    """

    name: str
    pattern: re.Pattern
    sender: Optional[str] = None

    def extract(self, match: re.Match) -> Optional[ExtractionResult]:
        """Build result from a structural match, None if a capture is blank."""
        groups = match.groupdict()
        code = (groups.get("code") or "").strip()
        location = (groups.get("location") or "").strip()
        if not code or not location:
            return None

        sender = self.sender or groups.get("sender") or groups.get("sender_alt")
        return ExtractionResult(
            code=code,
            location=location,
            rule_name=self.name,
            sender=sender,
        )


# Order matters: courier-specific rules must come before the generic one.
DEFAULT_RULES: list[PatternRule] = [
    PatternRule(
        name="hive_box",
        pattern=re.compile(
            r"(?:【丰巢】|\[丰巢\]).*?取件码\s*(?P<code>[0-9]+).*?至\s*(?P<location>.+?)(?:取件|\Z)"
        ),
        sender="丰巢",
    ),
    PatternRule(
        name="generic",
        pattern=re.compile(
            r"(?:【(?P<sender>.*?)】|\[(?P<sender_alt>.*?)\])"
            r".*?(?:已到|至)\s*(?P<location>.+?)(?:，|。|、|请)"
            r".*?凭\s*(?P<code>[A-Za-z0-9-]+?)取件"
        ),
    ),
]


def match_text(
    text: str, rules: Iterable[PatternRule] = DEFAULT_RULES
) -> Optional[ExtractionResult]:
    """Return extraction of the first rule matching `text`.

    Only the first structurally matching rule is considered: if its
    captures are blank the message is a no-match, later rules are not
    tried.
    """
    if not text:
        return None

    for rule in rules:
        match = rule.pattern.search(text)
        if match:
            return rule.extract(match)

    return None


def match_message(
    message: Message, rules: Iterable[PatternRule] = DEFAULT_RULES
) -> Optional[ExtractionResult]:
    """Run the matcher over message content (text, falling back to body)."""
    return match_text(message.content, rules)
