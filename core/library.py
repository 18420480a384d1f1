"""Shared, lock-guarded access to the recent documents registry and session.

Every UI callback holds a ``SharedStateHandle``. All handles created with
``share()`` point at the same registry and session, so a change made through
one is seen through all of them. Each operation takes the gate for the
duration of its work; the gate is not re-entrant, so operations must not call
each other while holding it.
"""
import logging
import threading
from contextlib import contextmanager
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator

from .errors import StorageError
from .persistence import load_or_empty, save_registry
from .records import FileRecord, FileRegistry
from .session import SessionState

logger = logging.getLogger(__name__)


@dataclass
class _SharedCore:
    registry: FileRegistry
    session: SessionState
    snapshot_path: Path
    lock: threading.Lock = field(default_factory=threading.Lock)


@dataclass(frozen=True)
class CurrentDocument:
    """Projection of the active session handed to the UI."""
    path: str
    page: int


class SharedStateHandle:
    """Handle to the shared registry + session state."""

    def __init__(self, registry: FileRegistry, snapshot_path: Path | str, session: SessionState | None = None):
        self._core = _SharedCore(
            registry=registry,
            session=session or SessionState(),
            snapshot_path=Path(snapshot_path),
        )

    @classmethod
    def _from_core(cls, core: _SharedCore) -> "SharedStateHandle":
        handle = cls.__new__(cls)
        handle._core = core
        return handle

    def share(self) -> "SharedStateHandle":
        """Another handle over the same state."""
        return SharedStateHandle._from_core(self._core)

    def shares_state_with(self, other: "SharedStateHandle") -> bool:
        return self._core is other._core

    @property
    def snapshot_path(self) -> Path:
        return self._core.snapshot_path

    @contextmanager
    def access(self) -> Iterator[tuple[FileRegistry, SessionState]]:
        """Exclusive access to (registry, session) for the with-block."""
        with self._core.lock:
            yield self._core.registry, self._core.session

    # Exposed operations

    def open_new(self, filepath: str, display_name: str = "") -> FileRecord:
        with self.access() as (registry, session):
            session.open_new(registry, filepath, display_name)
            record = registry.get(filepath)
        logger.info(f"Opened {filepath}")
        return record

    def open_recent(self, filepath: str) -> CurrentDocument:
        with self.access() as (registry, session):
            session.open_recent(registry, filepath)
            current = CurrentDocument(session.current_path, session.current_page)
        logger.info(f"Reopened {filepath} at page {current.page + 1}")
        return current

    def list_recent(self) -> list[FileRecord]:
        with self.access() as (registry, _):
            return registry.list()

    def count_recent(self) -> int:
        with self.access() as (registry, _):
            return registry.count()

    def rename(self, filepath: str, new_display_name: str) -> FileRecord:
        with self.access() as (registry, _):
            return registry.rename(filepath, new_display_name)

    def delete(self, filepath: str) -> None:
        with self.access() as (registry, _):
            registry.remove(filepath)
        logger.info(f"Removed {filepath} from recent documents")

    def current(self) -> CurrentDocument | None:
        with self.access() as (_, session):
            if not session.is_open:
                return None
            return CurrentDocument(session.current_path, session.current_page)

    def navigate_previous(self) -> int:
        with self.access() as (_, session):
            session.navigate_previous()
            return session.current_page

    def navigate_next(self, total_pages: int) -> int:
        with self.access() as (_, session):
            session.navigate_next(total_pages)
            return session.current_page

    def go_to_page(self, page: int, total_pages: int) -> int:
        with self.access() as (_, session):
            session.go_to_page(page, total_pages)
            return session.current_page

    def page_label(self, total_pages: int) -> str:
        with self.access() as (_, session):
            return session.page_label(total_pages)

    def persist(self) -> bool:
        """Save the registry without touching the session."""
        with self.access() as (registry, _):
            return self._save_locked(registry)

    def close_and_persist(self) -> bool:
        """Fold the active session into the registry and save it.

        Returns False if the snapshot could not be written; the in-memory
        state stays authoritative in that case.
        """
        with self.access() as (registry, session):
            session.close(registry)
            return self._save_locked(registry)

    def _save_locked(self, registry: FileRegistry) -> bool:
        try:
            save_registry(registry, self._core.snapshot_path)
        except StorageError as e:
            logger.error(str(e))
            return False
        logger.debug(f"Saved {registry.count()} recent documents to {self._core.snapshot_path}")
        return True


def open_library(snapshot_path: Path | str) -> SharedStateHandle:
    """Load the snapshot (or start empty) and wrap it in a handle."""
    return SharedStateHandle(load_or_empty(snapshot_path), snapshot_path)
