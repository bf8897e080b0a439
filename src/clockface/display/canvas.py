# src/clockface/display/canvas.py

from collections import namedtuple

from PIL import Image, ImageDraw, ImageFilter

FILL = "fill"
STROKE = "stroke"

CAP_BUTT = "butt"
CAP_ROUND = "round"

ShadowLayer = namedtuple("ShadowLayer", ["radius", "dx", "dy", "color"])


class Paint:
    """
    Mutable drawing state handed to every primitive: color, fill or stroke,
    stroke width and cap, plus an optional soft shadow drawn beneath.
    """

    def __init__(self):
        self.reset()

    def reset(self):
        """Back to defaults: opaque black fill, hairline, butt caps, no shadow."""
        self.color = (0, 0, 0, 255)
        self.style = FILL
        self.stroke_width = 0
        self.stroke_cap = CAP_BUTT
        self.shadow = None

    def set_shadow_layer(self, radius, dx, dy, color):
        self.shadow = ShadowLayer(radius, dx, dy, color)

    def clear_shadow_layer(self):
        self.shadow = None

    def snapshot(self):
        """Copy of the current state, for callers that keep it past a draw."""
        copy = Paint()
        copy.color = self.color
        copy.style = self.style
        copy.stroke_width = self.stroke_width
        copy.stroke_cap = self.stroke_cap
        copy.shadow = self.shadow
        return copy

    def __repr__(self):
        return (f"Paint(color={self.color}, style={self.style}, "
                f"stroke_width={self.stroke_width}, cap={self.stroke_cap}, shadow={self.shadow})")


class PillowCanvas:
    """
    A drawing surface backed by a Pillow RGBA image.

    Shapes are drawn at `supersample` times the target resolution and scaled
    down in `to_image()`, which smooths circle and hand edges.
    """

    def __init__(self, width, height, supersample=1, clear_color=(0, 0, 0, 255)):
        self.width = max(int(width), 0)
        self.height = max(int(height), 0)
        self.scale = max(int(supersample), 1)

        size = (max(self.width * self.scale, 1), max(self.height * self.scale, 1))
        self.image = Image.new("RGBA", size, tuple(clear_color))
        self.draw = ImageDraw.Draw(self.image)

    # -----------------------------------------------------------------
    #  Primitives
    # -----------------------------------------------------------------
    def draw_circle(self, cx, cy, radius, paint):
        if radius < 0:
            return
        if paint.shadow is not None:
            self._draw_shadow(
                lambda d, dx, dy: self._circle_on(d, cx + dx, cy + dy, radius, paint, paint.shadow.color),
                paint.shadow,
            )
        self._circle_on(self.draw, cx, cy, radius, paint, paint.color)

    def draw_line(self, x0, y0, x1, y1, paint):
        if paint.shadow is not None:
            self._draw_shadow(
                lambda d, dx, dy: self._line_on(d, x0 + dx, y0 + dy, x1 + dx, y1 + dy, paint, paint.shadow.color),
                paint.shadow,
            )
        self._line_on(self.draw, x0, y0, x1, y1, paint, paint.color)

    def to_image(self):
        """The finished frame at the canvas' nominal size."""
        if self.scale == 1:
            return self.image.copy()
        size = (max(self.width, 1), max(self.height, 1))
        return self.image.resize(size, Image.LANCZOS)

    # -----------------------------------------------------------------
    #  Internals (all coordinates below are in supersampled pixels)
    # -----------------------------------------------------------------
    def _circle_on(self, draw, cx, cy, radius, paint, color):
        s = self.scale
        cx, cy, r = cx * s, cy * s, radius * s
        if paint.style == STROKE:
            width = max(int(round(paint.stroke_width * s)), 1)
            # Pillow draws the outline inside the box; centre it on the path instead
            outer = r + width / 2.0
            if outer <= 0:
                return
            draw.ellipse((cx - outer, cy - outer, cx + outer, cy + outer), outline=tuple(color), width=width)
        else:
            draw.ellipse((cx - r, cy - r, cx + r, cy + r), fill=tuple(color))

    def _line_on(self, draw, x0, y0, x1, y1, paint, color):
        s = self.scale
        x0, y0, x1, y1 = x0 * s, y0 * s, x1 * s, y1 * s
        width = max(int(round(paint.stroke_width * s)), 1)
        draw.line((x0, y0, x1, y1), fill=tuple(color), width=width)
        if paint.stroke_cap == CAP_ROUND and width > 1:
            half = width / 2.0
            for (x, y) in ((x0, y0), (x1, y1)):
                draw.ellipse((x - half, y - half, x + half, y + half), fill=tuple(color))

    def _draw_shadow(self, paint_shape, shadow):
        layer = Image.new("RGBA", self.image.size, (0, 0, 0, 0))
        paint_shape(ImageDraw.Draw(layer), shadow.dx, shadow.dy)
        if shadow.radius > 0:
            layer = layer.filter(ImageFilter.GaussianBlur(shadow.radius * self.scale / 2.0))
        self.image.alpha_composite(layer)
        self.draw = ImageDraw.Draw(self.image)
