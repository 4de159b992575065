# File: src/rendering/host.py
"""
Abstract host surface interface.

The element tree never reads window or pointer state from globals; whatever
drives the frame loop passes an implementation of this into Element.update().
"""
from abc import ABC, abstractmethod
from typing import Tuple


class HostSurface(ABC):
    @abstractmethod
    def get_drawable_size(self) -> Tuple[float, float]:
        pass

    @abstractmethod
    def is_primary_pointer_pressed(self) -> bool:
        pass

    @abstractmethod
    def get_pointer_position(self) -> Tuple[float, float]:
        pass
