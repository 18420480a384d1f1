"""File system operations."""
import logging
import os
import subprocess
import sys
import tempfile
from datetime import datetime
from pathlib import Path

logger = logging.getLogger(__name__)


def read_text_file(path: Path | str) -> str:
    """Read an entire text file."""
    return Path(path).read_text(encoding="utf-8")


def atomic_write_text(path: Path | str, text: str) -> None:
    """Write text to a temp file beside path, then swap it into place.

    A crash mid-write leaves the previous file intact.
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_path = tempfile.mkstemp(dir=p.parent, prefix=f".{p.name}_", suffix=".tmp")
    try:
        with open(fd, "w", encoding="utf-8") as f:
            f.write(text)
            f.flush()
            os.fsync(f.fileno())
        Path(tmp_path).replace(p)
    except BaseException:
        Path(tmp_path).unlink(missing_ok=True)
        raise


def write_text_file(path: Path | str, text: str) -> None:
    """Write an entire text file, replacing its contents."""
    atomic_write_text(path, text)


def get_display_path(path: Path | str, cwd: Path | None = None) -> str:
    if cwd is None:
        cwd = Path.cwd()
    p = Path(path)
    try:
        return str(p.relative_to(cwd)).replace("\\", "/")
    except ValueError:
        return str(p).replace("\\", "/")


def derive_display_name(path: Path | str) -> str:
    """Default label for a document: its file name."""
    name = Path(path).name
    return name or str(path)


def shorten_name(name: str, max_len: int) -> str:
    """Trim long names for the library buttons."""
    if max_len <= 5 or len(name) <= max_len:
        return name
    return name[:max_len - 5] + "...pdf"


def format_timestamp(stamp: int, fmt: str = "%Y-%m-%d %H:%M") -> str:
    """Local time for an epoch stamp, or the raw number if the platform cannot represent it."""
    try:
        return datetime.fromtimestamp(stamp).strftime(fmt)
    except (OverflowError, OSError, ValueError):
        return str(stamp)


def open_path_in_os(path: Path | str):
    p = str(Path(path).resolve())
    if sys.platform == "win32":
        os.startfile(p)
    elif sys.platform == "darwin":
        subprocess.Popen(["open", p], stdout=subprocess.DEVNULL, stderr=subprocess.DEVNULL)
    else:
        subprocess.Popen(["xdg-open", p], stdout=subprocess.DEVNULL, stderr=subprocess.DEVNULL)
