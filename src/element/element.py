# --------------------------------------------------------
# File: src/element/element.py
#
# Retained-mode layout tree node.
# An Element owns its geometry, an ordered list of child
# Elements ("parts") and three behavior callables:
#   - behavior(element, dt, host)        per-frame update
#   - part_behavior(element, parts, i)   returns the replacement child i
#   - render_behavior(element)           drawing only
# --------------------------------------------------------

from __future__ import annotations

import logging
from typing import Callable, Iterator, List, Optional

from .alignment import horizontal_position, vertical_position

logger = logging.getLogger(__name__)

Behavior = Callable[["Element", float, object], None]
PartBehavior = Callable[["Element", List["Element"], int], "Element"]
RenderBehavior = Callable[["Element"], None]


def noop_behavior(element: "Element", dt: float, host=None) -> None:
    pass


def identity_part_behavior(element: "Element", parts: List["Element"], idx: int) -> "Element":
    return parts[idx]


def noop_render_behavior(element: "Element") -> None:
    pass


class Element:
    def __init__(
        self,
        x: float = 0,
        y: float = 0,
        width: float = 0,
        height: float = 0,
        behavior: Optional[Behavior] = None,
        parts: Optional[List["Element"]] = None,
        part_behavior: Optional[PartBehavior] = None,
        render_behavior: Optional[RenderBehavior] = None,
    ):
        # None falls back to the default for every field
        self.x = 0 if x is None else x
        self.y = 0 if y is None else y
        self.width = 0 if width is None else width
        self.height = 0 if height is None else height
        self.behavior: Behavior = behavior or noop_behavior
        self.parts: List[Element] = list(parts) if parts is not None else []
        self.part_behavior: PartBehavior = part_behavior or identity_part_behavior
        self.render_behavior: RenderBehavior = render_behavior or noop_render_behavior

    # -------------------------------------------------
    # TRAVERSALS
    # -------------------------------------------------

    def update(self, dt: float, host=None, recurse: bool = True) -> None:
        """Run this node's behavior, then (optionally) every child's, in index order."""
        self.behavior(self, dt, host)
        if recurse:
            for part in self.parts:
                part.update(dt, host, recurse)

    def apply_part_behavior(self, recurse: bool = True) -> None:
        """
        Replace every child with `part_behavior(self, parts, i)`.

        Children are replaced one at a time, in index order, and written back
        before the next index is computed: a part behavior reading parts[j]
        sees the new value for j < i and the old one for j > i. The length is
        re-read on every iteration.
        """
        logger.debug("layout pass over %r (%d parts)", self, len(self.parts))
        i = 0
        while i < len(self.parts):
            self.parts[i] = self.part_behavior(self, self.parts, i)
            if recurse:
                self.parts[i].apply_part_behavior(recurse)
            i += 1

    def render(self) -> None:
        """
        Draw the subtree below this node.

        Each child's render_behavior is invoked before recursing into it. A
        node never draws itself: the root's render_behavior has to be called
        by whoever owns the root.
        """
        for part in self.parts:
            part.render_behavior(part)
            part.render()

    def copy(self) -> "Element":
        """Deep copy of the tree structure; behavior callables are shared."""
        return Element(
            x=self.x,
            y=self.y,
            width=self.width,
            height=self.height,
            behavior=self.behavior,
            parts=[part.copy() for part in self.parts],
            part_behavior=self.part_behavior,
            render_behavior=self.render_behavior,
        )

    # -------------------------------------------------
    # ALIGNMENT
    # -------------------------------------------------

    def align_x(self, min_x: float, max_x: float, alignment) -> None:
        self.x = horizontal_position(self.x, self.width, min_x, max_x, alignment)

    def align_y(self, min_y: float, max_y: float, alignment) -> None:
        self.y = vertical_position(self.y, self.height, min_y, max_y, alignment)

    # -------------------------------------------------
    # INSPECTION
    # -------------------------------------------------

    def walk(self) -> Iterator["Element"]:
        """Pre-order iteration over this node and all of its descendants."""
        yield self
        for part in self.parts:
            yield from part.walk()

    def count(self) -> int:
        return sum(1 for _ in self.walk())

    def __repr__(self) -> str:
        return (
            f"Element(x={self.x}, y={self.y}, width={self.width}, "
            f"height={self.height}, parts={len(self.parts)})"
        )
