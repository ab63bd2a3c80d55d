"""Page layout arithmetic.

All vertical positions are measured from the top edge of the canvas; the
document writer converts them to PDF coordinates.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple, Optional

from slidepdf.core.config import DEFAULT_GEOMETRY, PageGeometry

TITLE_OFFSET_WITH_SUBTITLE = -80.0
TITLE_OFFSET_ALONE = -50.0
SUBTITLE_OFFSET = -20.0


class Dimensions(NamedTuple):
    width: float
    height: float


@dataclass(frozen=True)
class TitleSlideLayout:
    x: float
    width: float
    title_y: float
    subtitle_y: Optional[float]


def compute_fit_size(natural_width: float, natural_height: float, box_width: float, box_height: float) -> Dimensions:
    """Largest size with the natural aspect ratio that fits inside the box."""
    scale = min(box_width / natural_width, box_height / natural_height)
    return Dimensions(natural_width * scale, natural_height * scale)


def compute_title_slide_layout(has_subtitle: bool, geometry: PageGeometry = DEFAULT_GEOMETRY) -> TitleSlideLayout:
    center_y = geometry.height / 2
    if has_subtitle:
        title_y = center_y + TITLE_OFFSET_WITH_SUBTITLE
        subtitle_y: Optional[float] = center_y + SUBTITLE_OFFSET
    else:
        title_y = center_y + TITLE_OFFSET_ALONE
        subtitle_y = None
    return TitleSlideLayout(
        x=geometry.margin,
        width=geometry.available_width,
        title_y=title_y,
        subtitle_y=subtitle_y,
    )


def image_box(geometry: PageGeometry = DEFAULT_GEOMETRY) -> Dimensions:
    return Dimensions(*geometry.image_box)


def caption_top(image_height: float, geometry: PageGeometry = DEFAULT_GEOMETRY) -> float:
    """Caption follows the fitted image, not the reserved band."""
    return geometry.margin + image_height + geometry.caption_offset
