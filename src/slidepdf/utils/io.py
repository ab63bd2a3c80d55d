"""Filesystem helper utilities."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

logger = logging.getLogger(__name__)


def ensure_dirs(paths: Iterable[Path]) -> None:
    """Ensure that each provided path exists as a directory."""
    for path in paths:
        path.mkdir(parents=True, exist_ok=True)


def remove_partial(path: Path) -> None:
    """Delete an output file left behind by a failed write."""
    if path.exists():
        logger.debug("Removing partial output %s", path)
        path.unlink(missing_ok=True)
