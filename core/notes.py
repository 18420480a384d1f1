"""Plain-text notes shown beside the document."""
import logging
from pathlib import Path

from .config import MAX_FONT_SIZE, MIN_FONT_SIZE
from .fs import read_text_file, write_text_file

logger = logging.getLogger(__name__)


def load_note(path: Path | str) -> str:
    """Return the note text, or an empty string if it cannot be read."""
    try:
        return read_text_file(path)
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Error loading note {path}: {e}")
        return ""


def save_note(path: Path | str, text: str) -> bool:
    try:
        write_text_file(path, text)
    except OSError as e:
        logger.error(f"Error saving note {path}: {e}")
        return False
    logger.info(f"Note saved: {path}")
    return True


def parse_font_size(text: str, previous: int) -> int:
    """Parse a font size typed by the user.

    Non-numeric or empty input keeps the previous size. The result is clamped to
    MIN_FONT_SIZE..MAX_FONT_SIZE.
    """
    text = text.strip()
    size = int(text) if text.isdecimal() else previous
    return max(MIN_FONT_SIZE, min(MAX_FONT_SIZE, size))
