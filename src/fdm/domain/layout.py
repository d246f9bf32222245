"""Page layouts for a content-management system.

A layout is either a predefined widget or two layouts arranged side by
side (``Horizontal``) or stacked (``Vertical``). The recursion admits any
arrangement and nothing else.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import assert_never


class Widget(StrEnum):
    NEWS_FEED = "news_feed"
    PHOTO_GALLERY = "photo_gallery"


@dataclass(frozen=True)
class Horizontal:
    left: PageLayout
    right: PageLayout


@dataclass(frozen=True)
class Vertical:
    top: PageLayout
    bottom: PageLayout


PageLayout = Widget | Horizontal | Vertical


def widgets(layout: PageLayout) -> list[Widget]:
    """Widgets in reading order: left before right, top before bottom."""
    match layout:
        case Widget():
            return [layout]
        case Horizontal(left, right):
            return widgets(left) + widgets(right)
        case Vertical(top, bottom):
            return widgets(top) + widgets(bottom)
        case _:
            assert_never(layout)


def grid_size(layout: PageLayout) -> tuple[int, int]:
    """``(columns, rows)`` the layout needs when every widget is one cell."""
    match layout:
        case Widget():
            return 1, 1
        case Horizontal(left, right):
            (lc, lr), (rc, rr) = grid_size(left), grid_size(right)
            return lc + rc, max(lr, rr)
        case Vertical(top, bottom):
            (tc, tr), (bc, br) = grid_size(top), grid_size(bottom)
            return max(tc, bc), tr + br
        case _:
            assert_never(layout)


def outline(layout: PageLayout) -> str:
    match layout:
        case Widget():
            return layout.value
        case Horizontal(left, right):
            return f"row({outline(left)}, {outline(right)})"
        case Vertical(top, bottom):
            return f"column({outline(top)}, {outline(bottom)})"
        case _:
            assert_never(layout)
