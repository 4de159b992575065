"""Tests for the demo tree and the headless launcher (no window needed)."""

import sys
from unittest.mock import MagicMock

import pytest

import gui
import main
from gui import constants as C
from gui.demo import DemoState, build_demo_tree


@pytest.fixture
def demo(host):
    state = DemoState()
    root = build_demo_tree(host, state, with_graphics=False)
    root.apply_part_behavior()
    return root, state


class TestDemoTree:

    def test_shape(self, demo):
        root, _ = demo
        column = root.parts[0]
        assert len(column.parts) == 4
        assert len(column.parts[1].parts) == 3
        assert root.count() == 1 + 1 + 4 + 3

    def test_stack_starts_at_the_origin(self, demo):
        root, _ = demo
        column = root.parts[0]
        # 3 buttons of 140 plus 3 * 12 spacing
        assert column.width == 456
        assert (column.x, column.y) == (0, 0)
        assert [p.x for p in column.parts] == [0, 0, 0, 0]
        assert [p.y for p in column.parts] == [0, 48, 96, 124]

    def test_buttons_sit_inside_their_row(self, demo):
        root, _ = demo
        row = root.parts[0].parts[1]
        assert [b.x for b in row.parts] == [0, 152, 304]
        for button in row.parts:
            assert row.x <= button.x
            assert button.x + button.width <= row.x + row.width
            assert row.y <= button.y
            assert button.y + button.height <= row.y + row.height

    def test_button_press_counts(self, demo, host):
        root, state = demo
        button = root.parts[0].parts[1].parts[0]
        host.press(button.x + 1, button.y + 1)
        root.update(0.016, host)
        assert state.clicks == {"Alpha": 1}

    def test_slider_drag_sets_value(self, demo, host):
        root, state = demo
        slider = root.parts[0].parts[2]
        host.press(slider.x + 30, slider.y)
        root.update(0.016, host)
        assert state.slider_value == pytest.approx(10.0)

    def test_resize_relays_out(self, demo, host):
        root, _ = demo
        host.resize(400, 300)
        column = root.parts[0]
        root.update(0.016, host)
        assert (root.width, root.height) == (400, 300)
        assert root.parts[0] is not column
        assert (root.parts[0].x, root.parts[0].y) == (0, 0)

    def test_status(self):
        state = DemoState(clicks={"Beta": 2, "Alpha": 1}, slider_value=42.4)
        assert state.status() == "Alpha: 1, Beta: 2 | slider 42%"
        assert DemoState().status() == "no clicks yet | slider 0%"


def test_headless_main(capsys):
    assert main.main(["--headless", "--frames", "30"]) == 0
    out = capsys.readouterr().out
    assert "[main] Headless run: 30 frames, 9 elements" in out
    assert "Frame 0029" in out
    assert "[main] Final state: Alpha: 10 | slider 0%" in out


@pytest.fixture
def fake_draw(monkeypatch):
    """Stand-in for gui.draw so the graphics path builds without a display."""
    draw = MagicMock(name="gui.draw")
    monkeypatch.setitem(sys.modules, "gui.draw", draw)
    monkeypatch.setattr(gui, "draw", draw, raising=False)
    return draw


class TestDemoGraphics:

    def test_panel_sits_behind_the_column(self, host, fake_draw):
        root = build_demo_tree(host)
        fake_draw.outlined_rect.assert_called_once_with(host, C.PANEL_FILL)
        assert root.parts[0].render_behavior is fake_draw.outlined_rect.return_value

    def test_slider_knob_follows_state(self, host, fake_draw):
        state = DemoState(slider_value=25.0)
        build_demo_tree(host, state)

        (knob_host, fraction, color), _ = fake_draw.knob.call_args
        assert knob_host is host
        assert color == C.SLIDER_KNOB
        assert fraction() == 0.25
        state.slider_value = 80.0
        assert fraction() == 0.8

    def test_buttons_are_filled_and_labelled(self, host, fake_draw):
        build_demo_tree(host)
        fills = [c.args for c in fake_draw.filled_rect.call_args_list]
        assert fills.count((host, C.BUTTON_FILL)) == 3
        assert (host, C.SLIDER_TRACK) in fills
