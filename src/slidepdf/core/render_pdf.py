"""reportlab-backed document writer.

The writer always has a current page: ``page_break`` finishes it and opens
the next one, ``close`` finishes the last one (blank or not) and saves the
file. Callers position everything in top-down coordinates.
"""

from __future__ import annotations

from pathlib import Path
from typing import Union

from reportlab.lib.utils import simpleSplit
from reportlab.pdfbase.pdfmetrics import getAscent
from reportlab.pdfgen import canvas

from slidepdf.core.config import DEFAULT_GEOMETRY, PageGeometry

LINE_SPACING = 1.2


class PdfDocumentWriter:
    def __init__(self, path: Union[str, Path], geometry: PageGeometry = DEFAULT_GEOMETRY, title: str = "") -> None:
        self.path = Path(path)
        self.geometry = geometry
        self._canvas = canvas.Canvas(str(self.path), pagesize=(geometry.width, geometry.height))
        if title:
            self._canvas.setTitle(title)
        self._closed = False

    def __enter__(self) -> "PdfDocumentWriter":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if exc_type is None:
            self.close()
        else:
            # Nothing reaches disk before save(); drop the canvas unsaved.
            self._closed = True

    def _baseline(self, top: float, size: float) -> float:
        return self.geometry.height - top - getAscent(self.geometry.font, size)

    def draw_text(self, text: str, *, left: float, top: float, width: float, size: float) -> None:
        """Draw ``text`` centered in the span starting at ``left``, wrapping as needed."""
        font = self.geometry.font
        center_x = left + width / 2
        self._canvas.setFont(font, size)
        baseline = self._baseline(top, size)
        for line in simpleSplit(text, font, size, width):
            self._canvas.drawCentredString(center_x, baseline, line)
            baseline -= size * LINE_SPACING

    def draw_image(self, src: Union[str, Path], *, left: float, top: float, width: float, height: float) -> None:
        """Fit the image inside the box, centered, keeping its aspect ratio."""
        bottom = self.geometry.height - top - height
        self._canvas.drawImage(
            str(src),
            left,
            bottom,
            width=width,
            height=height,
            preserveAspectRatio=True,
            anchor="c",
            mask="auto",
        )

    def page_break(self) -> None:
        self._canvas.showPage()

    def close(self) -> None:
        if self._closed:
            return
        # showPage emits the current page even when nothing was drawn on it.
        self._canvas.showPage()
        self._canvas.save()
        self._closed = True
