"""Page rasterization through PyMuPDF."""
import logging
import threading
from collections import OrderedDict
from dataclasses import dataclass

import fitz  # PyMuPDF

from .errors import RenderError

logger = logging.getLogger(__name__)


@dataclass
class RenderedPage:
    """RGB pixels of one page plus the document's page count."""
    samples: bytes
    width: int
    height: int
    stride: int
    page_count: int


class DocumentRenderer:
    """Opens documents on demand and renders single pages.

    Keeps a few documents open so repeated page turns do not reparse the
    file. Independent of the library gate.
    """

    def __init__(self, target_width: int = 2000, max_height: int = 2000, max_open: int = 4):
        self.target_width = target_width
        self.max_height = max_height
        self.max_open = max_open
        self._docs: OrderedDict[str, fitz.Document] = OrderedDict()
        self._lock = threading.Lock()

    def _open(self, path: str) -> fitz.Document:
        doc = self._docs.get(path)
        if doc is not None:
            self._docs.move_to_end(path)
            return doc
        try:
            doc = fitz.open(path)
        except Exception as e:
            raise RenderError(f"Failed to open '{path}': {e}") from e
        self._docs[path] = doc
        while len(self._docs) > self.max_open:
            _, old = self._docs.popitem(last=False)
            old.close()
        return doc

    def page_count(self, path: str) -> int:
        with self._lock:
            return self._open(path).page_count

    def _zoom_for(self, page: fitz.Page) -> float:
        rect = page.rect
        if rect.width <= 0 or rect.height <= 0:
            return 1.0
        zoom = self.target_width / rect.width
        if rect.height * zoom > self.max_height:
            zoom = self.max_height / rect.height
        return zoom

    def render_page(self, path: str, index: int) -> RenderedPage:
        with self._lock:
            doc = self._open(path)
            total = doc.page_count
            if not 0 <= index < total:
                raise RenderError(f"Page {index + 1} is out of range for '{path}' ({total} pages)")
            try:
                page = doc.load_page(index)
                zoom = self._zoom_for(page)
                pix = page.get_pixmap(matrix=fitz.Matrix(zoom, zoom), alpha=False)
            except Exception as e:
                raise RenderError(f"Failed to render page {index + 1} of '{path}': {e}") from e
        return RenderedPage(pix.samples, pix.width, pix.height, pix.stride, total)

    def forget(self, path: str) -> None:
        """Close a cached document, e.g. after it was removed from the library."""
        with self._lock:
            doc = self._docs.pop(path, None)
            if doc is not None:
                doc.close()

    def close(self) -> None:
        with self._lock:
            for doc in self._docs.values():
                doc.close()
            self._docs.clear()
