# src/clockface/display/geometry.py

import math
from collections import namedtuple

# 12 o'clock sits at 270 degrees in screen coordinates (y grows downward)
START_ANGLE = 270
TICK_ANGLE_STEP = 360 // 12

Layout = namedtuple("Layout", ["center_x", "center_y", "radius", "margin"])


def compute_layout(width, height, margin):
    """
    Derive the clock geometry from the current surface size.

    The radius comes from the smaller surface side, minus the margin, and is
    clamped at 0 so an unmeasured (0x0) or tiny surface yields a degenerate
    clock rather than a negative one.
    """
    width = max(int(width), 0)
    height = max(int(height), 0)
    radius = int(min(width, height) // 2 - margin)
    return Layout(width // 2, height // 2, max(radius, 0), margin)


def position_for(layout, value, radius, angle_step=TICK_ANGLE_STEP):
    """
    Map a discrete slot index onto the circle of `radius` around the layout
    center. Slot 0 is 12 o'clock; each step advances `angle_step` degrees
    clockwise. Used for the tick marks (12 slots, 30 degrees apart).
    """
    angle = math.radians(START_ANGLE + value * angle_step)
    x = layout.center_x + radius * math.cos(angle)
    y = layout.center_y + radius * math.sin(angle)
    return x, y


def hand_angle(value):
    """Angle in radians for a hand on the continuous 0-60 dial scale."""
    return math.pi * value / 30 - math.pi / 2


def hand_endpoint(layout, value, length):
    """Tip of a hand of `length` pointing at `value` (0-60 scale)."""
    angle = hand_angle(value)
    return (layout.center_x + math.cos(angle) * length,
            layout.center_y + math.sin(angle) * length)


def hand_lengths(radius):
    """Hour, minute and second hand lengths for a clock of `radius`."""
    return (radius - radius // 3,
            radius - radius // 6,
            radius - radius // 9)
