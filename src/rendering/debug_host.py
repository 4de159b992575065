# --------------------------------------------------------
# File: src/rendering/debug_host.py
"""
Headless host and frame driver.
StaticHost just stores whatever surface/pointer state it is given;
DebugRenderer drives update()/render() on a root element and prints
basic stats every frame. Useful for testing without a window.
"""
import time
from typing import Callable, Optional, Tuple

from element.element import Element
from rendering.host import HostSurface


class StaticHost(HostSurface):
    def __init__(self, width: float = 800, height: float = 600):
        self.size: Tuple[float, float] = (width, height)
        self.pointer: Tuple[float, float] = (0.0, 0.0)
        self.pressed: bool = False

    def get_drawable_size(self) -> Tuple[float, float]:
        return self.size

    def is_primary_pointer_pressed(self) -> bool:
        return self.pressed

    def get_pointer_position(self) -> Tuple[float, float]:
        return self.pointer

    # test / scripting helpers
    def resize(self, width: float, height: float) -> None:
        self.size = (width, height)

    def press(self, x: float, y: float) -> None:
        self.pointer = (x, y)
        self.pressed = True

    def release(self) -> None:
        self.pressed = False


class DebugRenderer:
    def __init__(self, root: Element, host: Optional[HostSurface] = None, verbose: bool = True):
        self.root = root
        self.host = host if host is not None else StaticHost()
        self.verbose = verbose
        self.frames = 0

    def step(self, dt: float) -> None:
        """One frame: update the tree, then draw it (root first)."""
        self.root.update(dt, self.host)
        self.root.render_behavior(self.root)
        self.root.render()
        self.frames += 1

    def run(
        self,
        frames: int = 100,
        dt: float = 1.0 / 60.0,
        delay: float = 0.0,
        before_frame: Optional[Callable[[int, HostSurface], None]] = None,
    ):
        for f in range(frames):
            if before_frame is not None:
                before_frame(f, self.host)
            self.step(dt)
            if self.verbose:
                print(self.describe_frame(f))
            if delay:
                time.sleep(delay)

    def describe_frame(self, frame: int) -> str:
        px, py = self.host.get_pointer_position()
        state = "down" if self.host.is_primary_pointer_pressed() else "up"
        w, h = self.host.get_drawable_size()
        return (
            f"Frame {frame:04d} | Elements: {self.root.count()} | "
            f"Pointer: ({px:g}, {py:g}) {state} | Surface: {w:g}x{h:g}"
        )
