"""
Demo tree shown by main.py.

A Field covering the window holds a bordered Column with a title, a Row
of three buttons, a horizontal slider and a status line. Row and Column
place children from 0 on their stacking axis rather than from their own
position, so the whole stack is kept left-aligned at the origin where those
offsets line up with the containers. Interaction only touches DemoState;
the tree itself never changes shape.
"""
from dataclasses import dataclass, field
from typing import Dict, Optional

from containers.field import Field
from containers.stack import Column, Row
from element.element import Element
from ui.input import Button, Slider

from . import constants as C


@dataclass
class DemoState:
    clicks: Dict[str, int] = field(default_factory=dict)
    slider_value: float = 0.0

    def status(self) -> str:
        counts = ", ".join(f"{k}: {v}" for k, v in sorted(self.clicks.items())) or "no clicks yet"
        return f"{counts} | slider {self.slider_value:.0f}%"


def _button(state: DemoState, name: str, render) -> Element:
    def on_press(element: Element, dt: float):
        state.clicks[name] = state.clicks.get(name, 0) + 1

    return Button(on_press, width=C.BUTTON_W, height=C.BUTTON_H, render_behavior=render(name))


def _slider(state: DemoState, render) -> Element:
    def on_slide(element: Element, dt: float, value: Optional[float]):
        if value is None:
            return
        state.slider_value = max(0.0, min(100.0, 100.0 * value / element.width))

    # 180 degrees: the value grows as the pointer moves right of the anchor
    return Slider(on_slide, slider_angle=180, width=C.SLIDER_W, height=C.SLIDER_H, render_behavior=render)


def build_demo_tree(host, state: Optional[DemoState] = None, with_graphics: bool = True) -> Element:
    """
    with_graphics=False builds the same tree without pyglet render behaviors
    (headless runs).
    """
    state = state if state is not None else DemoState()

    if with_graphics:
        from . import draw

        def button_render(name):
            return draw.layered(
                draw.filled_rect(host, C.BUTTON_FILL),
                draw.text_label(host, lambda: f"{name} ({state.clicks.get(name, 0)})"),
            )

        slider_render = draw.layered(
            draw.filled_rect(host, C.SLIDER_TRACK),
            draw.knob(host, lambda: state.slider_value / 100.0, C.SLIDER_KNOB),
        )
        title_render = draw.text_label(host, lambda: "Parts Tree", font_size=16)
        status_render = draw.text_label(host, state.status, font_size=10)
        panel_render = draw.outlined_rect(host, C.PANEL_FILL)
    else:
        def button_render(name):
            return None

        slider_render = title_render = status_render = panel_render = None

    buttons = Row(
        [_button(state, name, button_render) for name in ("Alpha", "Beta", "Gamma")],
        spacing=C.SPACING,
        alignment="center",
    )
    column = Column(
        [
            Element(width=C.SLIDER_W, height=C.BUTTON_H, render_behavior=title_render),
            buttons,
            _slider(state, slider_render),
            Element(width=C.SLIDER_W, height=C.BUTTON_H, render_behavior=status_render),
        ],
        spacing=C.SPACING,
        alignment="left",
        render_behavior=panel_render,
    )
    return Field([column], x_alignment="left", y_alignment="top", host=host)
