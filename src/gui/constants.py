"""
Shared constants for the pyglet front-end and the demo tree.
Keeping them in a tiny module avoids circular imports between gui modules.
"""

WINDOW_W = 960
WINDOW_H = 640
FRAME_RATE = 60.0
CAPTION = "Parts Tree"

# demo palette (RGB)
BACKGROUND = (24, 24, 28)
PANEL_FILL = (40, 40, 45)
PANEL_BORDER = (180, 190, 210)
BUTTON_FILL = (90, 90, 95)
SLIDER_TRACK = (70, 70, 80)
SLIDER_KNOB = (240, 220, 120)
TEXT_COLOR = (230, 230, 235, 255)

BUTTON_W = 140
BUTTON_H = 36
SPACING = 12
SLIDER_W = 300
SLIDER_H = 16
