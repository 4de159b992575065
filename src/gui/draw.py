# --------------------------------------------------------
# File: src/gui/draw.py
#
# Render-behavior factories built on pyglet.shapes / pyglet.text.
# Elements live in a top-left origin space; pyglet draws from
# the bottom-left, so every helper flips y against the host
# surface height at draw time.
# --------------------------------------------------------

from typing import Callable, Tuple

import pyglet
from pyglet import shapes

from element.element import Element, RenderBehavior
from rendering.host import HostSurface

from .constants import PANEL_BORDER, TEXT_COLOR


def _screen_y(host: HostSurface, element: Element) -> float:
    _, surface_h = host.get_drawable_size()
    return surface_h - element.y - element.height


def filled_rect(host: HostSurface, color: Tuple[int, int, int]) -> RenderBehavior:
    def render(element: Element) -> None:
        shapes.Rectangle(
            element.x, _screen_y(host, element), element.width, element.height, color=color
        ).draw()

    return render


def outlined_rect(
    host: HostSurface,
    color: Tuple[int, int, int],
    border_color: Tuple[int, int, int] = PANEL_BORDER,
) -> RenderBehavior:
    def render(element: Element) -> None:
        shapes.BorderedRectangle(
            element.x,
            _screen_y(host, element),
            element.width,
            element.height,
            border=1,
            color=color,
            border_color=border_color,
        ).draw()

    return render


def knob(
    host: HostSurface,
    fraction: Callable[[], float],
    color: Tuple[int, int, int],
) -> RenderBehavior:
    """Square marker at `fraction()` (0..1) of the element's width, as tall as the element."""
    def render(element: Element) -> None:
        size = element.height
        x = element.x + element.width * fraction() - size / 2
        shapes.Rectangle(x, _screen_y(host, element), size, size, color=color).draw()

    return render


def text_label(host: HostSurface, text: Callable[[], str], font_size: int = 11) -> RenderBehavior:
    """Draw `text()` centered on the element; text is a callable so labels can change."""
    def render(element: Element) -> None:
        pyglet.text.Label(
            text(),
            x=element.x + element.width / 2,
            y=_screen_y(host, element) + element.height / 2,
            anchor_x="center",
            anchor_y="center",
            font_size=font_size,
            color=TEXT_COLOR,
        ).draw()

    return render


def layered(*renders: RenderBehavior) -> RenderBehavior:
    def render(element: Element) -> None:
        for r in renders:
            r(element)

    return render
