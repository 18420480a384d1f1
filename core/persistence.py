"""Snapshot codec for the recent documents registry.

The snapshot is a JSON array of objects with the fields ``name``,
``filepath``, ``last_read`` and ``page_num``. A missing or empty file is an
empty registry.
"""
import json
import logging
from pathlib import Path

from .errors import ParseError, StorageError
from .fs import atomic_write_text
from .records import MAX_COUNTER, FileRecord, FileRegistry

logger = logging.getLogger(__name__)

_FIELDS = {"name": str, "filepath": str, "last_read": int, "page_num": int}


def _validate_item(idx: int, item) -> dict:
    if not isinstance(item, dict):
        raise ParseError(f"Record {idx} is not an object")
    for key, kind in _FIELDS.items():
        if key not in item:
            raise ParseError(f"Record {idx} is missing '{key}'")
        value = item[key]
        # bool is an int subclass, reject it explicitly
        if not isinstance(value, kind) or isinstance(value, bool):
            raise ParseError(f"Record {idx} field '{key}' has the wrong type")
        if kind is int and not 0 <= value <= MAX_COUNTER:
            raise ParseError(f"Record {idx} field '{key}' is out of range")
    return item


def decode(text: str) -> FileRegistry:
    """Parse snapshot text into a registry."""
    if not text.strip():
        return FileRegistry()
    try:
        data = json.loads(text)
    except (ValueError, RecursionError) as e:
        # Also covers nesting too deep and over-long integer literals
        raise ParseError(f"Invalid snapshot JSON: {e}") from e
    if not isinstance(data, list):
        raise ParseError("Snapshot must be a JSON array")
    records = [FileRecord.from_dict(_validate_item(i, item)) for i, item in enumerate(data)]
    return FileRegistry.from_records(records)


def encode(registry: FileRegistry) -> str:
    return json.dumps([r.to_dict() for r in registry.list()], indent=2)


def load_registry(path: Path | str) -> FileRegistry:
    """Load a snapshot. Raises ParseError or StorageError."""
    p = Path(path)
    if not p.exists():
        return FileRegistry()
    try:
        text = p.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise StorageError(f"Failed to read {p}: {e}") from e
    return decode(text)


def load_or_empty(path: Path | str) -> FileRegistry:
    """Load a snapshot, falling back to an empty registry on any failure."""
    try:
        registry = load_registry(path)
    except ParseError as e:
        logger.warning(f"Ignoring malformed library snapshot {path}: {e}")
        return FileRegistry()
    except StorageError as e:
        logger.warning(f"Could not read library snapshot: {e}")
        return FileRegistry()
    logger.debug(f"Loaded {registry.count()} recent documents from {path}")
    return registry


def save_registry(registry: FileRegistry, path: Path | str) -> None:
    """Overwrite the snapshot at path. Raises StorageError."""
    try:
        atomic_write_text(path, encode(registry))
    except OSError as e:
        raise StorageError(f"Failed to save library to {path}: {e}") from e
