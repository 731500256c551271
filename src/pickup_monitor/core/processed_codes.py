"""Persisted set of pickup codes that were already surfaced."""

from dataclasses import dataclass
from typing import Iterator, Optional

from pickup_monitor.core.interfaces import KeyValueStore

STORAGE_KEY = "sms_processed_codes"
LEGACY_SEPARATOR = "|"


@dataclass(frozen=True)
class CodeRecord:
    """Single persisted entry.

    Older state stored `"<code>|<location>"`; the location part is kept in
    `legacy_suffix` only for reference, lookups use `code`.
    """

    code: str
    legacy_suffix: Optional[str] = None

    @classmethod
    def parse(cls, raw: str) -> "CodeRecord":
        code, separator, suffix = raw.partition(LEGACY_SEPARATOR)
        if separator:
            return cls(code=code, legacy_suffix=suffix)
        return cls(code=raw)


class ProcessedCodeSet:
    """Ordered, append-only collection of processed codes."""

    def __init__(self, store: KeyValueStore, records: Optional[list[CodeRecord]] = None) -> None:
        self.store = store
        self._codes: dict[str, CodeRecord] = {}
        for record in records or []:
            self._codes.setdefault(record.code, record)

    @classmethod
    def load(cls, store: KeyValueStore) -> "ProcessedCodeSet":
        """Load codes from store, normalizing legacy entries."""
        raw = store.get(STORAGE_KEY)
        if raw is None:
            return cls(store)

        if not isinstance(raw, list):
            raise ValueError(
                f"Expected a list under '{STORAGE_KEY}', got {type(raw).__name__}"
            )

        records = [CodeRecord.parse(str(entry)) for entry in raw if entry]
        return cls(store, records)

    def __contains__(self, code: object) -> bool:
        return code in self._codes

    def __iter__(self) -> Iterator[str]:
        return iter(self._codes)

    def __len__(self) -> int:
        return len(self._codes)

    @property
    def legacy_count(self) -> int:
        """Number of entries loaded from the old `code|location` format."""
        return sum(1 for r in self._codes.values() if r.legacy_suffix is not None)

    def add(self, code: str) -> bool:
        """Add code, return True if it was not present."""
        if code in self._codes:
            return False
        self._codes[code] = CodeRecord(code=code)
        return True

    def persist(self) -> None:
        """Write all codes to the store in exact-key form."""
        self.store.set(STORAGE_KEY, list(self._codes))
