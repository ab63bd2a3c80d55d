"""Orchestrator for a single slideshow run."""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional, Union

from slidepdf.core.assemble import AssemblyReport, assemble
from slidepdf.core.config import DEFAULT_GEOMETRY, PageGeometry, SlideshowSpec
from slidepdf.core.errors import DocumentWriteError, EmptySlideshowError
from slidepdf.core.naming import output_filename
from slidepdf.core.render_pdf import PdfDocumentWriter
from slidepdf.utils.io import ensure_dirs, remove_partial

logger = logging.getLogger(__name__)

DEFAULT_OUTPUT_DIR = Path("dist")


def create_pdf_slideshow(
    spec: SlideshowSpec,
    output_path: Union[str, Path],
    geometry: PageGeometry = DEFAULT_GEOMETRY,
    page_breaks: str = "emitted",
) -> AssemblyReport:
    """Write the slideshow PDF to ``output_path``.

    Per-image problems are logged and skipped inside :func:`assemble`. Any
    failure while building or saving the document removes the partial file
    and raises :class:`DocumentWriteError`.
    """
    path = Path(output_path)
    try:
        with PdfDocumentWriter(path, geometry, title=spec.title) as writer:
            report = assemble(spec, writer, geometry, page_breaks=page_breaks)
    except Exception as exc:
        remove_partial(path)
        raise DocumentWriteError(f"Error creating PDF {path}: {exc}") from exc
    logger.info("PDF created successfully: %s", path.name)
    return report


def run_slideshow(
    spec: SlideshowSpec,
    output_dir: Union[str, Path] = DEFAULT_OUTPUT_DIR,
    geometry: PageGeometry = DEFAULT_GEOMETRY,
    page_breaks: str = "emitted",
    now: Optional[datetime] = None,
) -> Dict[str, Any]:
    """Validate, name, write and summarize one slideshow."""
    if not spec.images:
        raise EmptySlideshowError()

    now = now or datetime.now()
    filename = output_filename(spec.title, now)

    logger.info("Title: %s", spec.title or "No title")
    if spec.subtitle:
        logger.info("Subtitle: %s", spec.subtitle)
    logger.info("Images to process: %d", len(spec.images))
    logger.info("Output file: %s", filename)

    out_dir = Path(output_dir)
    ensure_dirs([out_dir])
    report = create_pdf_slideshow(spec, out_dir / filename, geometry, page_breaks)

    logger.info("Images processed: %d of %d", len(report.drawn), len(spec.images))
    if report.skipped:
        logger.info("Images skipped: %d", len(report.skipped))
    if report.title_page:
        logger.info("Title slide included")

    return {
        "file": str(out_dir / filename),
        "time": now.isoformat(timespec="seconds"),
        "pages": report.pages,
        "title_page": report.title_page,
        "images_total": len(spec.images),
        "images_drawn": len(report.drawn),
        "images_skipped": [
            {"index": r.index, "src": r.entry.src if r.entry else None, "reason": r.skip.value}
            for r in report.skipped
        ],
    }
