"""Exception hierarchy for slideshow generation."""

from __future__ import annotations

from typing import Iterable


class SlideshowError(Exception):
    """Base class for all slideshow failures."""


class ConfigError(SlideshowError, ValueError):
    """Raised when a slideshow configuration is invalid."""

    def __init__(self, issues: Iterable[str]):
        self.issues = [str(i).strip() for i in issues if str(i).strip()]
        if not self.issues:
            self.issues = ["Invalid configuration"]
        super().__init__(self._format())

    def _format(self) -> str:
        lines = ["Configuration validation failed:"]
        for issue in self.issues:
            lines.append(f"- {issue}")
        return "\n".join(lines)


class EmptySlideshowError(ConfigError):
    """Raised when the configuration lists no images at all."""

    def __init__(self) -> None:
        super().__init__(["No images found in configuration"])


class ImageReadError(SlideshowError):
    """Raised when an image's pixel dimensions cannot be determined."""

    def __init__(self, path, cause: object):
        self.path = path
        self.cause = cause
        super().__init__(f"Could not read image {path}: {cause}")


class DocumentWriteError(SlideshowError):
    """Raised when the PDF document cannot be assembled or written."""
