"""Inspect a generated slideshow PDF."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Union

from pikepdf import Pdf


def run(pdf_path: Union[str, Path]) -> Dict[str, Any]:
    """Report page count and first-page size of a PDF."""
    path = Path(pdf_path)
    if not path.is_file():
        raise FileNotFoundError(f"PDF not found: {path}")

    with Pdf.open(path) as pdf:
        pages = len(pdf.pages)
        size = None
        if pages:
            x0, y0, x1, y1 = (float(v) for v in pdf.pages[0].mediabox)
            size = [x1 - x0, y1 - y0]
        title = str(pdf.docinfo.get("/Title", ""))

    return {"file": str(path), "pages": pages, "page_size": size, "title": title}
