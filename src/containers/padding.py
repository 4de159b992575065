# --------------------------------------------------------
# File: src/containers/padding.py
#
# Padding stores its amounts as its own width/height and
# places every child at exactly (width, height).
# --------------------------------------------------------

from typing import List

from element.element import Element, PartBehavior


def padding_part_behavior() -> PartBehavior:
    def part_behavior(this: Element, parts: List[Element], idx: int) -> Element:
        current = parts[idx].copy()
        current.x = this.width
        current.y = this.height
        return current

    return part_behavior


def Padding(parts: List[Element], x_amount: float = 0, y_amount: float = 0) -> Element:
    return Element(
        x=0,
        y=0,
        width=x_amount,
        height=y_amount,
        parts=list(parts),
        part_behavior=padding_part_behavior(),
    )
