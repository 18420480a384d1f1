"""Facade for the PDFer core."""

from .config import (
    config, APP_DATA_DIR, SETTINGS_PATH, DEFAULT_DATABASE_PATH,
    MIN_FONT_SIZE, MAX_FONT_SIZE, load_json_file, save_json_file
)

from .errors import (
    PdferError, NotFoundError, ParseError, StorageError, RenderError
)

from .fs import (
    read_text_file, write_text_file, atomic_write_text, get_display_path,
    derive_display_name, shorten_name, format_timestamp, open_path_in_os
)

from .records import FileRecord, FileRegistry

from .session import SessionState

from .persistence import (
    load_registry, load_or_empty, save_registry, encode, decode
)

from .library import SharedStateHandle, CurrentDocument, open_library

from .render import DocumentRenderer, RenderedPage

from .notes import load_note, save_note, parse_font_size
