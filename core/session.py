"""Active viewing session: which document is open and on which page."""
import logging
from dataclasses import dataclass

from .fs import derive_display_name
from .records import FileRegistry

logger = logging.getLogger(__name__)


@dataclass
class SessionState:
    """Current document and page cursor.

    Pages are zero-based everywhere except in page_label, which shows them
    one-based.
    """
    current_path: str | None = None
    current_page: int = 0

    @property
    def is_open(self) -> bool:
        return self.current_path is not None

    def _fold(self, registry: FileRegistry) -> None:
        """Store the cursor of the open document back into the registry."""
        if self.current_path is None:
            return
        if self.current_path not in registry:
            # Deleted from the library while it was still open
            registry.upsert(self.current_path, derive_display_name(self.current_path))
        registry.save_page(self.current_path, self.current_page)

    def open_new(self, registry: FileRegistry, filepath: str, display_name: str = "") -> None:
        self._fold(registry)
        registry.upsert(filepath, display_name)
        self.current_path = filepath
        self.current_page = 0

    def open_recent(self, registry: FileRegistry, filepath: str) -> None:
        """Reopen a library entry, restoring its last page."""
        self._fold(registry)
        if filepath not in registry:
            logger.info(f"{filepath} is no longer in the library, opening as new")
            self.open_new(registry, filepath, derive_display_name(filepath))
            return
        record = registry.upsert(filepath)
        self.current_path = filepath
        self.current_page = record.page_num

    def navigate_previous(self) -> None:
        self.current_page = max(0, self.current_page - 1)

    def navigate_next(self, total_pages: int) -> None:
        if total_pages <= 0:
            return
        self.current_page = min(total_pages - 1, self.current_page + 1)

    def go_to_page(self, page: int, total_pages: int) -> None:
        """Jump to a zero-based page, clamped to the document."""
        if total_pages <= 0:
            return
        self.current_page = max(0, min(total_pages - 1, page))

    def page_label(self, total_pages: int) -> str:
        if total_pages <= 0:
            return "0 of 0"
        return f"{self.current_page + 1} of {total_pages}"

    def close(self, registry: FileRegistry) -> None:
        """Fold the open document into the registry and end the session."""
        self._fold(registry)
        self.current_path = None
        self.current_page = 0
