from __future__ import annotations

import pytest

from slidepdf.core.config import DEFAULT_GEOMETRY, PageGeometry
from slidepdf.core.layout import caption_top, compute_fit_size, compute_title_slide_layout, image_box

CASES = [
    (4000, 3000, 1776, 856),
    (1080, 1920, 1776, 856),
    (100, 100, 1776, 856),
    (5000, 500, 1776, 856),
    (640, 480, 640, 480),
]


@pytest.mark.parametrize("w,h,box_w,box_h", CASES)
def test_fit_size_stays_inside_box_and_keeps_ratio(w, h, box_w, box_h) -> None:
    fitted = compute_fit_size(w, h, box_w, box_h)
    assert fitted.width <= box_w + 1e-9
    assert fitted.height <= box_h + 1e-9
    assert fitted.width / fitted.height == pytest.approx(w / h)
    assert fitted.width == pytest.approx(box_w) or fitted.height == pytest.approx(box_h)


def test_fit_size_upscales_small_images() -> None:
    fitted = compute_fit_size(100, 50, 1000, 1000)
    assert fitted == pytest.approx((1000, 500))


@pytest.mark.parametrize("w,h,box_w,box_h", CASES)
def test_fit_size_is_idempotent(w, h, box_w, box_h) -> None:
    once = compute_fit_size(w, h, box_w, box_h)
    twice = compute_fit_size(once.width, once.height, box_w, box_h)
    assert twice.width == pytest.approx(once.width)
    assert twice.height == pytest.approx(once.height)


def test_title_moves_up_when_subtitle_present() -> None:
    with_sub = compute_title_slide_layout(True)
    alone = compute_title_slide_layout(False)
    assert with_sub.title_y < alone.title_y
    assert with_sub.title_y == 540 - 80
    assert alone.title_y == 540 - 50
    assert with_sub.subtitle_y == 540 - 20
    assert alone.subtitle_y is None


def test_title_spans_available_width() -> None:
    layout = compute_title_slide_layout(False, PageGeometry(width=1000, height=800, margin=50))
    assert layout.x == 50
    assert layout.width == 900
    assert layout.title_y == 350


def test_image_box_always_reserves_caption_band() -> None:
    box = image_box(DEFAULT_GEOMETRY)
    assert box.width == 1920 - 2 * 72
    assert box.height == 1080 - 2 * 72 - 80


def test_caption_tracks_fitted_image_height() -> None:
    assert caption_top(500) == 72 + 500 + 30
