"""Page sequencing: title page, then one page per usable image."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, List, Optional, Protocol, Union

from slidepdf.core.config import DEFAULT_GEOMETRY, ImageEntry, PageGeometry, SlideshowSpec
from slidepdf.core.layout import Dimensions, caption_top, compute_fit_size, compute_title_slide_layout, image_box
from slidepdf.core.probe import ProbeResult, probe_entry

logger = logging.getLogger(__name__)

PAGE_BREAK_POLICIES = ("emitted", "index")


class DocumentWriter(Protocol):
    def draw_text(self, text: str, *, left: float, top: float, width: float, size: float) -> None: ...

    def draw_image(self, src: Union[str, Path], *, left: float, top: float, width: float, height: float) -> None: ...

    def page_break(self) -> None: ...


@dataclass
class AssemblyReport:
    title_page: bool = False
    drawn: List[ProbeResult] = field(default_factory=list)
    skipped: List[ProbeResult] = field(default_factory=list)
    page_breaks: int = 0

    @property
    def pages(self) -> int:
        return self.page_breaks + 1


def add_title_slide(writer: DocumentWriter, title: str, subtitle: str, geometry: PageGeometry) -> None:
    layout = compute_title_slide_layout(bool(subtitle), geometry)
    writer.draw_text(title, left=layout.x, top=layout.title_y, width=layout.width, size=geometry.title_font_size)
    if subtitle and layout.subtitle_y is not None:
        writer.draw_text(subtitle, left=layout.x, top=layout.subtitle_y, width=layout.width, size=geometry.title_font_size)


def add_image_slide(writer: DocumentWriter, entry: ImageEntry, dimensions: Dimensions, geometry: PageGeometry) -> None:
    box = image_box(geometry)
    writer.draw_image(entry.src, left=geometry.margin, top=geometry.margin, width=box.width, height=box.height)

    if entry.caption:
        fitted = compute_fit_size(dimensions.width, dimensions.height, box.width, box.height)
        writer.draw_text(
            entry.caption,
            left=geometry.margin,
            top=caption_top(fitted.height, geometry),
            width=geometry.available_width,
            size=geometry.caption_font_size,
        )


def assemble(
    spec: SlideshowSpec,
    writer: DocumentWriter,
    geometry: PageGeometry = DEFAULT_GEOMETRY,
    page_breaks: str = "emitted",
    probe: Callable[[int, Optional[ImageEntry]], ProbeResult] = probe_entry,
) -> AssemblyReport:
    """Draw every page of the slideshow onto ``writer``.

    With ``page_breaks="emitted"`` a break is inserted only between pages
    that were actually drawn. ``"index"`` keeps the list-position rule: a
    break follows the title page and every image that is not the last list
    entry, even when later entries end up skipped.
    """
    if page_breaks not in PAGE_BREAK_POLICIES:
        raise ValueError(f"Unknown page break policy: {page_breaks!r}")
    index_policy = page_breaks == "index"
    report = AssemblyReport()

    def _break() -> None:
        writer.page_break()
        report.page_breaks += 1

    page_open = False  # something has been drawn on the current page

    if spec.title:
        add_title_slide(writer, spec.title, spec.subtitle, geometry)
        report.title_page = True
        if index_policy:
            _break()
        else:
            page_open = True

    last = len(spec.images) - 1
    for index, entry in enumerate(spec.images):
        result = probe(index, entry)
        if not result.ok:
            report.skipped.append(result)
            continue

        if page_open:
            _break()
        add_image_slide(writer, result.entry, result.dimensions, geometry)
        report.drawn.append(result)

        if index_policy:
            if index < last:
                _break()
        else:
            page_open = True

    logger.debug(
        "Assembled %d page(s): %d image(s) drawn, %d skipped",
        report.pages,
        len(report.drawn),
        len(report.skipped),
    )
    return report
