"""Slideshow configuration: data model, page geometry and YAML loading."""

from __future__ import annotations

from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

import yaml

from slidepdf.core.errors import ConfigError


@dataclass(frozen=True)
class PageGeometry:
    width: float = 1920.0
    height: float = 1080.0
    margin: float = 72.0  # 1 inch
    caption_band: float = 80.0
    caption_offset: float = 30.0
    title_font_size: float = 48.0
    caption_font_size: float = 26.0
    font: str = "Helvetica"

    @property
    def available_width(self) -> float:
        return self.width - 2 * self.margin

    @property
    def image_box(self) -> Tuple[float, float]:
        """Box an image is fit into; the caption band is always reserved."""
        return self.available_width, self.height - 2 * self.margin - self.caption_band

    def validate(self) -> None:
        box_w, box_h = self.image_box
        if box_w <= 0 or box_h <= 0:
            raise ConfigError(["Margins and caption band are too large for the page size"])
        if self.title_font_size <= 0 or self.caption_font_size <= 0:
            raise ConfigError(["Font sizes must be positive"])


DEFAULT_GEOMETRY = PageGeometry()


@dataclass(frozen=True)
class ImageEntry:
    src: str
    caption: Optional[str] = None


@dataclass(frozen=True)
class SlideshowSpec:
    title: str = ""
    subtitle: str = ""
    images: Tuple[Optional[ImageEntry], ...] = field(default_factory=tuple)


def _resolve_src(src: str, base_dir: Optional[Path]) -> str:
    path = Path(src).expanduser()
    if base_dir is not None and not path.is_absolute():
        path = base_dir / path
    return str(path)


def _parse_image(index: int, raw: Any, base_dir: Optional[Path], issues: List[str]) -> Optional[ImageEntry]:
    if raw is None:
        # Kept as a hole; the assembler warns and skips it.
        return None
    if isinstance(raw, str):
        raw = {"src": raw}
    if not isinstance(raw, Mapping):
        issues.append(f"images[{index}] must be a mapping with a 'src' key")
        return None
    src = raw.get("src")
    if not isinstance(src, str) or not src.strip():
        issues.append(f"images[{index}].src is required and must be a non-empty string")
        return None
    caption = raw.get("caption")
    if caption is not None and not isinstance(caption, str):
        caption = str(caption)
    return ImageEntry(src=_resolve_src(src, base_dir), caption=caption or None)


def geometry_from_dict(data: Optional[Mapping[str, Any]]) -> PageGeometry:
    """Apply ``page:`` overrides on top of the default geometry."""
    if not data:
        return DEFAULT_GEOMETRY
    if not isinstance(data, Mapping):
        raise ConfigError(["page must be a mapping"])

    known = {f.name for f in fields(PageGeometry)}
    overrides: Dict[str, Any] = {}
    issues: List[str] = []
    for key, value in data.items():
        if key not in known:
            issues.append(f"page.{key} is not a known page setting")
        elif key == "font":
            overrides[key] = str(value)
        else:
            try:
                overrides[key] = float(value)
            except (TypeError, ValueError):
                issues.append(f"page.{key} must be a number")
    if issues:
        raise ConfigError(issues)

    geometry = replace(DEFAULT_GEOMETRY, **overrides)
    geometry.validate()
    return geometry


def spec_from_dict(data: Any, base_dir: Optional[Path] = None) -> SlideshowSpec:
    """Build a :class:`SlideshowSpec` from a parsed configuration mapping.

    An empty ``images`` list is accepted here; rejecting it is the job of the
    run that would produce output.
    """
    if not isinstance(data, Mapping):
        raise ConfigError(["Configuration root must be a mapping"])

    issues: List[str] = []
    title = data.get("title") or ""
    subtitle = data.get("subtitle") or ""
    raw_images = data.get("images")
    if raw_images is None:
        raw_images = []
    if not isinstance(raw_images, list):
        issues.append("images must be a list")
        raw_images = []

    images = tuple(_parse_image(i, raw, base_dir, issues) for i, raw in enumerate(raw_images))
    if issues:
        raise ConfigError(issues)
    return SlideshowSpec(title=str(title), subtitle=str(subtitle), images=images)


def load_config(path: Union[str, Path]) -> Tuple[SlideshowSpec, PageGeometry]:
    """Read a YAML slideshow file and return the spec and its page geometry."""
    config_path = Path(path)
    with open(config_path, "r", encoding="utf-8") as handle:
        try:
            data = yaml.safe_load(handle)
        except yaml.YAMLError as exc:
            raise ConfigError([f"Invalid YAML in {config_path}: {exc}"]) from exc
        except UnicodeDecodeError as exc:
            raise ConfigError([f"{config_path} is not UTF-8 text: {exc}"]) from exc

    spec = spec_from_dict(data, base_dir=config_path.resolve().parent)
    geometry = geometry_from_dict(data.get("page"))
    return spec, geometry
