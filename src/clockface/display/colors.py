# src/clockface/display/colors.py

import logging
from collections import namedtuple

from PIL import ImageColor

logger = logging.getLogger("ClockColors")

COLOR_KEYS = (
    "background", "shadow", "tick_mark", "border",
    "hour_hand", "minute_hand", "second_hand",
)

DEFAULT_COLORS = {
    "background":  "#D3D3D3FF",
    "shadow":      "#808080FF",
    "tick_mark":   "#444444FF",
    "border":      "#000000FF",
    "hour_hand":   "#3700B3FF",
    "minute_hand": "#03DAC5FF",
    "second_hand": "#BB86FCFF",
}

# camelCase spellings accepted alongside the snake_case keys
_ALIASES = {
    "tickMark":   "tick_mark",
    "hourHand":   "hour_hand",
    "minuteHand": "minute_hand",
    "secondHand": "second_hand",
}

# Styling input may only recolour the hands
_STYLE_KEYS = {
    "hour_hand_color":   "hour_hand",
    "minute_hand_color": "minute_hand",
    "second_hand_color": "second_hand",
    "hourHandColor":     "hour_hand",
    "minuteHandColor":   "minute_hand",
    "secondHandColor":   "second_hand",
}


def parse_color(value):
    """
    Turn a config value into an (r, g, b, a) tuple.

    Accepts anything PIL.ImageColor understands ('#RRGGBBAA', 'teal',
    'rgb(1,2,3)') or a sequence of 3 or 4 ints. Raises ValueError otherwise.
    """
    if isinstance(value, str):
        return ImageColor.getcolor(value, "RGBA")
    if isinstance(value, (list, tuple)) and len(value) in (3, 4):
        channels = [int(c) for c in value]
        if any(c < 0 or c > 255 for c in channels):
            raise ValueError(f"color channel out of range: {value!r}")
        if len(channels) == 3:
            channels.append(255)
        return tuple(channels)
    raise ValueError(f"unrecognised color value: {value!r}")


class ClockColors(namedtuple("ClockColors", COLOR_KEYS)):
    """
    The seven colors the clock face is painted with, as RGBA tuples.
    Immutable; the override helpers return a new instance.
    """
    __slots__ = ()

    @classmethod
    def defaults(cls):
        return cls(**{key: parse_color(value) for key, value in DEFAULT_COLORS.items()})

    @classmethod
    def from_config(cls, config=None):
        """
        Build colors from a dict keyed by COLOR_KEYS (or their camelCase
        aliases). Missing or unparseable entries fall back to the defaults.
        """
        return cls.defaults()._merge(config or {}, _keymap(COLOR_KEYS))

    def with_style(self, style=None):
        """Apply hand-color styling overrides (hour/minute/second only)."""
        return self._merge(style or {}, _STYLE_KEYS)

    def _merge(self, overrides, keymap):
        if not isinstance(overrides, dict):
            logger.warning(f"Expected a mapping of colors, got {overrides!r}; ignoring it.")
            return self
        changes = {}
        for key, value in overrides.items():
            field = keymap.get(key)
            if field is None:
                logger.warning(f"Ignoring unknown color key '{key}'.")
                continue
            try:
                changes[field] = parse_color(value)
            except ValueError as e:
                logger.warning(f"Invalid color for '{key}' ({e}); keeping {getattr(self, field)}.")
        return self._replace(**changes)


def _keymap(keys):
    mapping = {key: key for key in keys}
    mapping.update(_ALIASES)
    return mapping
