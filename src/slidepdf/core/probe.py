"""Per-image checks performed before a page is spent on an image."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional, Union

from PIL import Image, UnidentifiedImageError

from slidepdf.core.config import ImageEntry
from slidepdf.core.errors import ImageReadError
from slidepdf.core.layout import Dimensions

logger = logging.getLogger(__name__)


class SkipReason(Enum):
    MISSING_ENTRY = "missing entry"
    FILE_NOT_FOUND = "file not found"
    UNREADABLE = "unreadable image"


@dataclass(frozen=True)
class ProbeResult:
    index: int
    entry: Optional[ImageEntry]
    dimensions: Optional[Dimensions] = None
    skip: Optional[SkipReason] = None

    @property
    def ok(self) -> bool:
        return self.skip is None and self.entry is not None and self.dimensions is not None


def read_dimensions(path: Union[str, Path]) -> Dimensions:
    """Return the pixel size of an image after decoding its pixel data.

    Decoding catches truncated or corrupt bodies here, where the image can
    still be skipped, instead of later inside the PDF writer.
    """
    try:
        with Image.open(path) as img:
            width, height = img.size
            img.load()
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError, ValueError) as exc:
        raise ImageReadError(path, exc) from exc
    if not width or not height:
        raise ImageReadError(path, "image has a zero dimension")
    return Dimensions(float(width), float(height))


def probe_entry(index: int, entry: Optional[ImageEntry]) -> ProbeResult:
    """Check one configured image; problems are logged and reported, never raised."""
    if entry is None:
        logger.warning("Image data at index %d is undefined, skipping", index)
        return ProbeResult(index, entry, skip=SkipReason.MISSING_ENTRY)

    if not Path(entry.src).exists():
        logger.warning("Image %s not found, skipping", entry.src)
        return ProbeResult(index, entry, skip=SkipReason.FILE_NOT_FOUND)

    try:
        dimensions = read_dimensions(entry.src)
    except ImageReadError as exc:
        logger.error("Error reading image %s: %s", entry.src, exc.cause)
        return ProbeResult(index, entry, skip=SkipReason.UNREADABLE)

    logger.debug("Image %s is %dx%d px", entry.src, dimensions.width, dimensions.height)
    return ProbeResult(index, entry, dimensions=dimensions)
