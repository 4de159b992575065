# --------------------------------------------------------
# File: src/containers/field.py
#
# Field: a container covering the host's drawable surface.
# Each frame it can snap its size to the surface and re-run
# the layout of its children when the size changed.
# --------------------------------------------------------

import logging
from typing import List, Optional

from element.alignment import HorizontalAlignment, VerticalAlignment
from element.element import Behavior, Element, PartBehavior, RenderBehavior

logger = logging.getLogger(__name__)


def field_behavior(should_snap: bool = True, should_retrigger: bool = True) -> Behavior:
    def behavior(this: Element, dt: float, host=None) -> None:
        if not should_snap or host is None:
            return
        new_width, new_height = host.get_drawable_size()
        if this.width != new_width or this.height != new_height:
            logger.debug(
                "field snapped %sx%s -> %sx%s (retrigger=%s)",
                this.width, this.height, new_width, new_height, should_retrigger,
            )
            this.width = new_width
            this.height = new_height
            if should_retrigger:
                this.apply_part_behavior()

    return behavior


def field_part_behavior(
    x_alignment=HorizontalAlignment.NONE,
    y_alignment=VerticalAlignment.NONE,
) -> PartBehavior:
    def part_behavior(this: Element, parts: List[Element], idx: int) -> Element:
        current = parts[idx].copy()
        current.align_x(this.x, this.x + this.width, x_alignment)
        current.align_y(this.y, this.y + this.height, y_alignment)
        return current

    return part_behavior


def Field(
    parts: List[Element],
    x_alignment=HorizontalAlignment.NONE,
    y_alignment=VerticalAlignment.NONE,
    should_snap: bool = True,
    should_retrigger: bool = True,
    x: Optional[float] = None,
    y: Optional[float] = None,
    width: Optional[float] = None,
    height: Optional[float] = None,
    render_behavior: Optional[RenderBehavior] = None,
    host=None,
) -> Element:
    """
    Build a field container.

    Missing width/height are read from `host.get_drawable_size()`; without a
    host they stay 0 until the first update() snaps them.
    """
    if host is not None and (width is None or height is None):
        host_width, host_height = host.get_drawable_size()
        width = host_width if width is None else width
        height = host_height if height is None else height
    return Element(
        x=x,
        y=y,
        width=width,
        height=height,
        behavior=field_behavior(should_snap, should_retrigger),
        parts=list(parts),
        part_behavior=field_part_behavior(
            x_alignment or HorizontalAlignment.NONE,
            y_alignment or VerticalAlignment.NONE,
        ),
        render_behavior=render_behavior,
    )
