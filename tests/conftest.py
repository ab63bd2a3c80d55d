from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Callable, List, Tuple

import pytest
from PIL import Image


class RecordingWriter:
    """Document writer double that records draw calls and page breaks."""

    def __init__(self) -> None:
        self.ops: List[Tuple[str, Any]] = []

    def draw_text(self, text, *, left, top, width, size):
        self.ops.append(("text", {"text": text, "left": left, "top": top, "width": width, "size": size}))

    def draw_image(self, src, *, left, top, width, height):
        self.ops.append(("image", {"src": str(src), "left": left, "top": top, "width": width, "height": height}))

    def page_break(self):
        self.ops.append(("break", None))

    @property
    def pages(self) -> List[List[Tuple[str, Any]]]:
        pages: List[List[Tuple[str, Any]]] = [[]]
        for op in self.ops:
            if op[0] == "break":
                pages.append([])
            else:
                pages[-1].append(op)
        return pages


@pytest.fixture
def writer() -> RecordingWriter:
    return RecordingWriter()


@pytest.fixture
def make_writer() -> Callable[[], RecordingWriter]:
    return RecordingWriter


@pytest.fixture
def make_image(tmp_path: Path) -> Callable[..., Path]:
    def _make(name: str, size: Tuple[int, int] = (400, 300), fmt: str = "PNG") -> Path:
        path = tmp_path / name
        Image.new("RGB", size, color=(200, 120, 40)).save(path, format=fmt)
        return path

    return _make


@pytest.fixture
def make_truncated_image(tmp_path: Path) -> Callable[[str], Path]:
    """PNG whose header is intact but whose pixel data is cut in half."""

    def _make(name: str) -> Path:
        path = tmp_path / name
        Image.frombytes("RGB", (64, 64), os.urandom(64 * 64 * 3)).save(path, format="PNG")
        data = path.read_bytes()
        path.write_bytes(data[: len(data) // 2])
        return path

    return _make
