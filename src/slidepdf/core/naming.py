"""Output file naming."""

from __future__ import annotations

import re
from datetime import datetime
from typing import Optional

DEFAULT_BASENAME = "slideshow"
TIMESTAMP_FORMAT = "%Y%m%d_%H%M%S"

_UNSAFE = re.compile(r"[^A-Za-z0-9]")


def sanitize_title(title: str) -> str:
    """Replace every character outside ``[A-Za-z0-9]`` with an underscore."""
    return _UNSAFE.sub("_", title)


def timestamp(now: Optional[datetime] = None) -> str:
    return (now or datetime.now()).strftime(TIMESTAMP_FORMAT)


def output_filename(title: Optional[str], now: Optional[datetime] = None) -> str:
    base = sanitize_title(title or "") or DEFAULT_BASENAME
    return f"{base}_{timestamp(now)}.pdf"
