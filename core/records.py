"""Recent documents registry."""
import time
from dataclasses import dataclass, replace
from typing import Callable, Iterable

from .errors import NotFoundError
from .fs import derive_display_name

# Snapshot counters are unsigned 64-bit
MAX_COUNTER = 2**64 - 1


@dataclass
class FileRecord:
    """One tracked document."""
    filepath: str
    display_name: str
    last_read: int = 0
    page_num: int = 0  # zero-based

    def to_dict(self) -> dict:
        """Serialize using the snapshot field names."""
        return {
            "name": self.display_name,
            "filepath": self.filepath,
            "last_read": self.last_read,
            "page_num": self.page_num,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "FileRecord":
        return cls(
            filepath=data["filepath"],
            display_name=data["name"],
            last_read=data["last_read"],
            page_num=data["page_num"],
        )

    def copy(self) -> "FileRecord":
        return replace(self)


class FileRegistry:
    """Most-recently-used ordered collection of FileRecord, unique by path.

    Records are kept newest first. Every stamp handed out is strictly
    greater than the newest one already stored, so the order stays correct
    even when the clock does not advance between two opens.
    """

    def __init__(self, clock: Callable[[], float] = time.time):
        self._records: list[FileRecord] = []
        self._clock = clock

    @classmethod
    def from_records(cls, records: Iterable[FileRecord], clock: Callable[[], float] = time.time) -> "FileRegistry":
        """Build a registry from loaded records, newest first, one per path."""
        registry = cls(clock=clock)
        ordered = sorted(records, key=lambda r: r.last_read, reverse=True)
        seen = set()
        for record in ordered:
            if record.filepath in seen:
                continue
            seen.add(record.filepath)
            registry._records.append(record)
        return registry

    def _next_stamp(self) -> int:
        now = int(self._clock())
        if self._records:
            now = max(now, self._records[0].last_read + 1)
        return min(now, MAX_COUNTER)

    def _index(self, filepath: str) -> int:
        for i, record in enumerate(self._records):
            if record.filepath == filepath:
                return i
        return -1

    def _find(self, filepath: str) -> FileRecord:
        idx = self._index(filepath)
        if idx < 0:
            raise NotFoundError(filepath)
        return self._records[idx]

    def get(self, filepath: str) -> FileRecord | None:
        idx = self._index(filepath)
        return self._records[idx].copy() if idx >= 0 else None

    def __contains__(self, filepath: str) -> bool:
        return self._index(filepath) >= 0

    def __len__(self) -> int:
        return len(self._records)

    def upsert(self, filepath: str, display_name: str = "") -> FileRecord:
        """Insert or refresh the record for filepath and move it to the front."""
        stamp = self._next_stamp()
        idx = self._index(filepath)
        if idx < 0:
            record = FileRecord(
                filepath=filepath,
                display_name=display_name or derive_display_name(filepath),
                last_read=stamp,
                page_num=0,
            )
        else:
            record = self._records.pop(idx)
            record.last_read = stamp
            if display_name:
                record.display_name = display_name
        self._records.insert(0, record)
        return record.copy()

    def rename(self, filepath: str, new_display_name: str) -> FileRecord:
        """Change the display name only; position and cursor are untouched."""
        record = self._find(filepath)
        record.display_name = new_display_name
        return record.copy()

    def remove(self, filepath: str) -> None:
        """Remove the record for filepath. Raises NotFoundError if absent."""
        idx = self._index(filepath)
        if idx < 0:
            raise NotFoundError(filepath)
        del self._records[idx]

    def save_page(self, filepath: str, page_num: int) -> FileRecord:
        if not 0 <= page_num <= MAX_COUNTER:
            raise ValueError(f"Page number out of range: {page_num}")
        record = self._find(filepath)
        record.page_num = page_num
        return record.copy()

    def list(self) -> list[FileRecord]:
        """Copies of all records, most recent first."""
        return [r.copy() for r in self._records]

    def count(self) -> int:
        return len(self._records)
