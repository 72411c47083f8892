from __future__ import annotations

import logging
from typing import Optional, Tuple

from .config import UNBOUNDED, ScrollIcon

logger = logging.getLogger(__name__)


def _clamp(value: int, lo: int, hi: int) -> int:
    return max(lo, min(value, hi))


def compute_window(
    total: int,
    selected: int,
    start_index: int,
    max_elements: Optional[int],
    up_margin: int,
    down_margin: int,
) -> Tuple[int, int]:
    """Return the ``(start, end)`` slice of elements that should be visible.

    The previous ``start_index`` is kept unless the selection gets closer to
    an edge of the window than the matching margin allows, in which case the
    window is pulled or pushed just enough. The result is clamped so the
    window never overshoots either end of the list.
    """
    if max_elements is None or max_elements == UNBOUNDED or max_elements >= total:
        return 0, total

    start = start_index
    if start > selected - up_margin:
        start = selected - up_margin
    if start + max_elements - 1 < selected + down_margin:
        start = selected + down_margin - (max_elements - 1)

    start = _clamp(start, 0, total - 1)
    end = _clamp(start + max_elements, 0, total)
    start = _clamp(end - max_elements, 0, total - 1)
    if start != start_index:
        logger.debug("Scroll window moved: start %d -> %d (selected=%d)", start_index, start, selected)
    return start, end


def scroll_indicators(start: int, end: int, total: int, scroll_icon: ScrollIcon) -> Tuple[str, str]:
    """Pick the top and bottom indicator for a window."""
    top = scroll_icon.top_end_indicator if start == 0 else scroll_icon.top_continue_indicator
    bottom = scroll_icon.bottom_end_indicator if end == total else scroll_icon.bottom_continue_indicator
    return top, bottom


__all__ = ["compute_window", "scroll_indicators"]
