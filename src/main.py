"""
Entry point for the Parts Tree demo.
Run this file from the `src/` directory:

    python main.py --width 960 --height 640

It will:
  - build the demo element tree (a Field holding a Column of widgets)
  - open a pyglet window that drives update()/render() every frame
  - or, with --headless, run a scripted pointer against an in-memory host
    and print one stats line per frame

Most behaviour lives in `element/`, `containers/` and `ui/`.
"""
import os
import sys
import argparse
import logging

# ensure src/ is on sys.path when running main from within src/
HERE = os.path.dirname(os.path.abspath(__file__))
if HERE not in sys.path:
    sys.path.insert(0, HERE)

from gui.constants import FRAME_RATE, WINDOW_H, WINDOW_W
from gui.demo import DemoState, build_demo_tree
from rendering.debug_host import DebugRenderer, StaticHost


def build_args(argv=None):
    p = argparse.ArgumentParser("Parts Tree demo")
    p.add_argument("--width", type=int, default=WINDOW_W, help="Initial window width")
    p.add_argument("--height", type=int, default=WINDOW_H, help="Initial window height")
    p.add_argument("--fps", type=float, default=FRAME_RATE, help="Update rate in frames per second")
    p.add_argument("--headless", action="store_true", help="Run the headless debug driver instead of a window")
    p.add_argument("--frames", type=int, default=120, help="Frames to run with --headless")
    p.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return p.parse_args(argv)


def scripted_pointer(root):
    """Press the first button of the demo row for a few frames, then release."""
    def before_frame(frame, host):
        if frame == 10:
            # Field -> Column -> Row -> first Button
            button = root.parts[0].parts[1].parts[0]
            host.press(button.x + 1, button.y + 1)
        elif frame == 20:
            host.release()
        elif frame == 60:
            w, h = host.get_drawable_size()
            host.resize(w // 2, h)

    return before_frame


def run_headless(args) -> int:
    host = StaticHost(args.width, args.height)
    state = DemoState()
    root = build_demo_tree(host, state, with_graphics=False)
    root.apply_part_behavior()
    print(f"[main] Headless run: {args.frames} frames, {root.count()} elements")
    renderer = DebugRenderer(root, host)
    renderer.run(frames=args.frames, dt=1.0 / args.fps, before_frame=scripted_pointer(root))
    print(f"[main] Final state: {state.status()}")
    return 0


def main(argv=None) -> int:
    args = build_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.headless:
        return run_headless(args)

    try:
        from gui.element_window import run_pyglet_app
    except Exception as e:
        print(f"[main] pyglet window is not available ({e}). Try --headless.")
        return 1

    state = DemoState()
    print(f"[main] Launching pyglet window {args.width}x{args.height}")
    run_pyglet_app(
        lambda host: build_demo_tree(host, state),
        width=args.width,
        height=args.height,
        frame_rate=args.fps,
    )
    print(f"[main] Final state: {state.status()}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
