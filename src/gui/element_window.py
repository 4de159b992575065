"""
Pyglet front-end for an element tree.

ElementWindow owns the root Element and drives it:
  - update(dt, host) on a pyglet clock schedule
  - on_draw: clear, root's own render behavior, then root.render()

The window itself is exposed to the tree through WindowHost, so behaviors
only ever see the HostSurface interface.
"""
import logging
from typing import Tuple

import pyglet

from commands.mouse_input import PointerTracker
from element.element import Element
from rendering.host import HostSurface

from .constants import BACKGROUND, CAPTION, FRAME_RATE, WINDOW_H, WINDOW_W

logger = logging.getLogger(__name__)


class WindowHost(HostSurface):
    def __init__(self, window: pyglet.window.Window):
        self.window = window
        self.pointer = PointerTracker(lambda: self.window.height, pyglet.window.mouse.LEFT)
        window.push_handlers(self.pointer)

    def get_drawable_size(self) -> Tuple[float, float]:
        return self.window.get_size()

    def is_primary_pointer_pressed(self) -> bool:
        return self.pointer.pressed

    def get_pointer_position(self) -> Tuple[float, float]:
        return self.pointer.position()


class ElementWindow(pyglet.window.Window):
    def __init__(self, width: int = WINDOW_W, height: int = WINDOW_H, frame_rate: float = FRAME_RATE):
        super().__init__(width=width, height=height, caption=CAPTION, resizable=True)
        self.host = WindowHost(self)
        self.root: Element = Element()
        self.frame_rate = frame_rate
        logger.debug("window created %dx%d at %.1f fps", width, height, frame_rate)

    def attach(self, root: Element) -> None:
        """Install `root` and lay it out once against the current size."""
        self.root = root
        self.root.apply_part_behavior()

    def _update(self, dt: float):
        self.root.update(dt, self.host)

    def on_draw(self):
        pyglet.gl.glClearColor(*(c / 255.0 for c in BACKGROUND), 1.0)
        self.clear()
        self.root.render_behavior(self.root)
        self.root.render()

    def run(self) -> None:
        pyglet.clock.schedule_interval(self._update, 1.0 / self.frame_rate)
        pyglet.app.run()


def run_pyglet_app(root_factory, width: int = WINDOW_W, height: int = WINDOW_H, frame_rate: float = FRAME_RATE):
    """Entry point used by main.py: root_factory(host) builds the tree."""
    window = ElementWindow(width, height, frame_rate)
    window.attach(root_factory(window.host))
    window.run()
