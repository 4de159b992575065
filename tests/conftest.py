"""Shared test fixtures."""

import pytest

from element.element import Element
from rendering.debug_host import StaticHost


@pytest.fixture
def host():
    """800x600 in-memory host, pointer up at the origin."""
    return StaticHost(800, 600)


@pytest.fixture
def boxes():
    """Build leaf elements from (width, height) pairs."""
    def make(*sizes):
        return [Element(width=w, height=h) for w, h in sizes]
    return make


@pytest.fixture
def recorder():
    """A list plus factories for behaviors that append to it."""
    class Recorder(list):
        def behavior(self, tag):
            def behavior(element, dt, host=None):
                self.append(tag)
            return behavior

        def render(self, tag):
            def render(element):
                self.append(tag)
            return render

    return Recorder()
