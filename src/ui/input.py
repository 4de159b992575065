# --------------------------------------------------------
# File: src/ui/input.py
"""
Interactive widgets: Elements whose behavior polls the host pointer.

    Button -> func(element, dt) while the primary pointer is pressed inside it
    Slider -> func(element, dt, value) with the pointer projected on the
              slider axis, then func(element, dt, None) every frame

Both read pointer state from the host passed to Element.update(); with no
host they do nothing.
"""
from typing import Callable, Optional, Tuple

import numpy as np

from element.element import Behavior, Element, RenderBehavior
from ui.bounds import element_contains

ButtonCallback = Callable[[Element, float], None]
SliderCallback = Callable[[Element, float, Optional[float]], None]


# -------------------------------------------------
# BUTTON
# -------------------------------------------------

def button_behavior(func: ButtonCallback) -> Behavior:
    def behavior(this: Element, dt: float, host=None) -> None:
        if host is None:
            return
        if host.is_primary_pointer_pressed():
            px, py = host.get_pointer_position()
            if element_contains(this, px, py):
                func(this, dt)

    return behavior


def Button(
    func: ButtonCallback,
    width: float = 0,
    height: float = 0,
    x: Optional[float] = None,
    y: Optional[float] = None,
    render_behavior: Optional[RenderBehavior] = None,
) -> Element:
    return Element(
        x=x,
        y=y,
        width=width,
        height=height,
        behavior=button_behavior(func),
        render_behavior=render_behavior,
    )


# -------------------------------------------------
# SLIDER
# -------------------------------------------------

def slider_end_position(slider: Element, slider_angle: float) -> Tuple[float, float]:
    """
    Offset of the slider's far end from its anchor.
    slider_angle is in degrees, measured so that 0 points along +y.
    """
    angle = np.radians(slider_angle)
    return float(slider.width * np.sin(angle)), float(slider.width * np.cos(angle))


def slider_coordinates(element: Element, pointer: Tuple[float, float], slider_angle: float) -> Tuple[float, float]:
    """
    Project `pointer` into the slider's rotated frame.

    Returns (along, off): the component along the slider axis and the
    perpendicular distance from it, both relative to (element.x, element.y).
    """
    px, py = pointer
    dx = element.x - px
    dy = element.y - py
    c = np.hypot(dx, dy)
    alpha = np.radians(slider_angle) - np.arctan2(dy, dx)
    return float(c * np.cos(alpha)), float(c * np.sin(alpha))


def slider_behavior(func: SliderCallback, slider_angle: float) -> Behavior:
    def behavior(this: Element, dt: float, host=None) -> None:
        if host is None:
            return
        along, off = slider_coordinates(this, host.get_pointer_position(), slider_angle)
        if off <= this.height and host.is_primary_pointer_pressed():
            func(this, dt, along)
        func(this, dt, None)

    return behavior


def Slider(
    func: SliderCallback,
    slider_angle: float = 0,
    width: float = 0,
    height: float = 0,
    x: Optional[float] = None,
    y: Optional[float] = None,
    render_behavior: Optional[RenderBehavior] = None,
) -> Element:
    return Element(
        x=x,
        y=y,
        width=width,
        height=height,
        behavior=slider_behavior(func, slider_angle),
        render_behavior=render_behavior,
    )
