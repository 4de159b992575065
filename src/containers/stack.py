# --------------------------------------------------------
# File: src/containers/stack.py
#
# Linear stacking containers.
#   Row    -> children laid left to right, aligned vertically
#   Column -> children laid top to bottom, aligned horizontally
#
# Spacing is charged once per child, including the first:
# child i starts at i*spacing + (sizes of children before it),
# and the container's extent is n*spacing + sum(sizes).
# --------------------------------------------------------

from typing import List, Optional

from element.alignment import HorizontalAlignment, VerticalAlignment
from element.element import Element, PartBehavior, RenderBehavior


def row_part_behavior(spacing: float, alignment=VerticalAlignment.NONE) -> PartBehavior:
    def part_behavior(this: Element, parts: List[Element], idx: int) -> Element:
        current = parts[idx].copy()
        # parts[:idx] have already been replaced during this pass
        x = idx * spacing
        for part in parts[:idx]:
            x += part.width
        current.x = x
        current.align_y(this.y, this.y + this.height, alignment)
        return current

    return part_behavior


def column_part_behavior(spacing: float, alignment=HorizontalAlignment.NONE) -> PartBehavior:
    def part_behavior(this: Element, parts: List[Element], idx: int) -> Element:
        current = parts[idx].copy()
        y = idx * spacing
        for part in parts[:idx]:
            y += part.height
        current.y = y
        current.align_x(this.x, this.x + this.width, alignment)
        return current

    return part_behavior


def Row(
    parts: List[Element],
    spacing: float = 0,
    x: Optional[float] = None,
    y: Optional[float] = None,
    alignment=VerticalAlignment.NONE,
    height: Optional[float] = None,
    render_behavior: Optional[RenderBehavior] = None,
) -> Element:
    """
    Build a row container.

    width is len(parts)*spacing plus the children's widths; height is the
    tallest child unless `height` is given. Children are not positioned until
    apply_part_behavior() runs.
    """
    parts = list(parts)
    width = len(parts) * spacing + sum(part.width for part in parts)
    if height is None:
        height = max((part.height for part in parts), default=0)
    return Element(
        x=x,
        y=y,
        width=width,
        height=height,
        parts=parts,
        part_behavior=row_part_behavior(spacing, alignment or VerticalAlignment.NONE),
        render_behavior=render_behavior,
    )


def Column(
    parts: List[Element],
    spacing: float = 0,
    x: Optional[float] = None,
    y: Optional[float] = None,
    alignment=HorizontalAlignment.NONE,
    width: Optional[float] = None,
    render_behavior: Optional[RenderBehavior] = None,
) -> Element:
    """Vertical counterpart of Row: height is stacked, width is the widest child."""
    parts = list(parts)
    height = len(parts) * spacing + sum(part.height for part in parts)
    if width is None:
        width = max((part.width for part in parts), default=0)
    return Element(
        x=x,
        y=y,
        width=width,
        height=height,
        parts=parts,
        part_behavior=column_part_behavior(spacing, alignment or HorizontalAlignment.NONE),
        render_behavior=render_behavior,
    )
