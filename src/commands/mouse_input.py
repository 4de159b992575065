# commands/mouse_input.py
from typing import Callable, Tuple

# pyglet.window.mouse.LEFT
PRIMARY_BUTTON = 1


class PointerTracker:
    """
    Keeps the latest pointer state from window mouse events.

    Register it with `window.push_handlers(tracker)`. Positions are stored in
    the window's native (bottom-left origin) coordinates; `position()` returns
    them flipped to the top-left origin used by the element tree.
    """

    def __init__(self, surface_height: Callable[[], float], primary_button: int = PRIMARY_BUTTON):
        self._surface_height = surface_height
        self.primary_button = primary_button
        self.x: float = 0.0
        self.y: float = 0.0
        self.pressed: bool = False

    def position(self) -> Tuple[float, float]:
        return self.x, self._surface_height() - self.y

    # ----------------- mouse events -----------------
    def on_mouse_motion(self, x: float, y: float, dx: float, dy: float):
        self.x, self.y = x, y

    def on_mouse_drag(self, x: float, y: float, dx: float, dy: float, buttons: int, modifiers: int):
        self.x, self.y = x, y
        self.pressed = bool(buttons & self.primary_button)

    def on_mouse_press(self, x: float, y: float, button: int, modifiers: int):
        self.x, self.y = x, y
        if button == self.primary_button:
            self.pressed = True

    def on_mouse_release(self, x: float, y: float, button: int, modifiers: int):
        self.x, self.y = x, y
        if button == self.primary_button:
            self.pressed = False

    def on_mouse_leave(self, x: float, y: float):
        # the release may happen outside the window where we never see it
        self.pressed = False
