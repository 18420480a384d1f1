"""Exceptions raised by the PDFer core."""


class PdferError(Exception):
    """Base class for all PDFer errors."""


class NotFoundError(PdferError, KeyError):
    """No registry record matches the given file path."""

    def __init__(self, filepath: str):
        self.filepath = filepath
        super().__init__(filepath)

    def __str__(self) -> str:
        return f"No recent document registered for: {self.filepath}"


class ParseError(PdferError, ValueError):
    """Snapshot content does not match the expected format."""


class StorageError(PdferError, OSError):
    """Reading or writing a file on disk failed."""


class RenderError(PdferError):
    """The document renderer could not open or rasterize a document."""
