# --------------------------------------------------------
# File: src/element/alignment.py
#
# Alignment tags and the pure span -> coordinate mapping
# behind Element.align_x / Element.align_y.
# --------------------------------------------------------

from enum import Enum


class HorizontalAlignment(str, Enum):
    NONE = "none"
    LEFT = "left"
    RIGHT = "right"
    CENTER = "center"


class VerticalAlignment(str, Enum):
    NONE = "none"
    TOP = "top"
    BOTTOM = "bottom"
    CENTER = "center"


def _tag(alignment):
    return alignment.value if isinstance(alignment, Enum) else alignment


def _span_position(position, size, minimum, maximum, tag, start, end):
    if tag == start:
        return minimum
    if tag == end:
        return maximum - size
    if tag == "center":
        return (minimum + maximum) / 2 - size / 2
    # "none" and unknown tags
    return position


def horizontal_position(x: float, width: float, min_x: float, max_x: float, alignment) -> float:
    """
    Return the x of a box `width` wide aligned inside [min_x, max_x].

    left snaps to min_x, right puts the right edge on max_x, center centers
    the box. "none" (and anything that isn't a horizontal tag) returns `x`.
    """
    return _span_position(x, width, min_x, max_x, _tag(alignment), "left", "right")


def vertical_position(y: float, height: float, min_y: float, max_y: float, alignment) -> float:
    """Vertical counterpart of horizontal_position (top/bottom/center/none)."""
    return _span_position(y, height, min_y, max_y, _tag(alignment), "top", "bottom")
