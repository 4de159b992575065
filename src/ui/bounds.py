# --------------------------------------------------------
# File: src/ui/bounds.py
"""
Point-in-rectangle tests used by the interactive widgets.
Edges count as inside on both axes.
"""


def is_in_box(px: float, py: float, bx: float, by: float, bw: float, bh: float) -> bool:
    return bx <= px <= bx + bw and by <= py <= by + bh


def element_contains(element, px: float, py: float) -> bool:
    return is_in_box(px, py, element.x, element.y, element.width, element.height)
