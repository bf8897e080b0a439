# src/clockface/display/screens/analog_clock.py

import logging
import time

from transitions import Machine

from clockface.clock_time import system_time
from clockface.display.canvas import Paint, FILL, STROKE, CAP_ROUND
from clockface.display.colors import ClockColors
from clockface.display.geometry import (
    compute_layout, position_for, hand_endpoint, hand_lengths, TICK_ANGLE_STEP,
)

HOUR = "hour"
MINUTE = "minute"
SECOND = "second"


class AnalogClock:
    """
    Renders an analogue clock face (disc, border, twelve tick dots and the
    hour/minute/second hands) onto any canvas, scaled to the canvas size.

    The clock starts 'uninitialized' and becomes 'ready' on its first draw.
    Layout is cached per canvas size and recomputed on the first draw after
    the size changes. After each frame it asks the host for the next one.
    """

    states = [
        {'name': 'uninitialized'},
        {'name': 'ready', 'on_enter': 'enter_ready'},
    ]

    # Face and tick geometry, in pixels
    FACE_PADDING = 5
    BORDER_WIDTH = 4
    SHADOW_RADIUS = 10
    SHADOW_OFFSET = (-10, -10)

    # Land just past the wall-clock boundary so the new second is already showing
    FRAME_ALIGN_SLACK_MS = 10

    def __init__(
        self,
        colors=None,
        time_source=system_time,
        margin=8,
        hand_width=4,
        density=1.0,
        tick_inset=60,
        tick_radius=20,
        redraw_delay_ms=1000,
        continuous_redraw=False,
        wall_clock=time.time,
    ):
        """
        :param colors:            ClockColors to paint with (defaults if None).
        :param time_source:       Zero-arg callable returning a TimeSample.
        :param margin:            Gap between the surface edge and the face, in dp.
        :param hand_width:        Second-hand stroke width in dp; hour and minute use twice this.
        :param density:           Pixels per dp.
        :param tick_inset:        Distance from the clock radius to the tick ring.
        :param tick_radius:       Radius of each tick dot.
        :param redraw_delay_ms:   Delay before the next frame is requested.
        :param continuous_redraw: Also request an immediate redraw every frame.
        :param wall_clock:        Zero-arg callable returning epoch seconds, used to align frames.
        """
        self.logger = logging.getLogger(self.__class__.__name__)

        self.colors = colors or ClockColors.defaults()
        self.time_source = time_source
        self.margin = margin * density
        self.hand_width = hand_width * density
        self.tick_inset = tick_inset
        self.tick_radius = tick_radius
        self.redraw_delay_ms = redraw_delay_ms
        self.continuous_redraw = continuous_redraw
        self.wall_clock = wall_clock

        self.paint = Paint()
        self.layout = None
        self._layout_size = None

        self.machine = Machine(
            model=self,
            states=AnalogClock.states,
            initial='uninitialized',
            auto_transitions=False
        )
        self.machine.add_transition('initialize', source='uninitialized', dest='ready')

    @classmethod
    def from_config(cls, config, time_source=system_time):
        """
        Build a clock from the 'clock' config section:
        margin, hand_width, density, tick_inset, tick_radius,
        redraw_delay_ms, continuous_redraw, colors and style.
        """
        config = config or {}
        colors = ClockColors.from_config(config.get('colors')).with_style(config.get('style'))
        return cls(
            colors=colors,
            time_source=time_source,
            margin=config.get('margin', 8),
            hand_width=config.get('hand_width', 4),
            density=config.get('density', 1.0),
            tick_inset=config.get('tick_inset', 60),
            tick_radius=config.get('tick_radius', 20),
            redraw_delay_ms=config.get('redraw_delay_ms', 1000),
            continuous_redraw=config.get('continuous_redraw', False),
        )

    def enter_ready(self):
        self.logger.info("AnalogClock: ready, first frame being drawn.")

    def set_colors(self, colors):
        self.colors = colors

    def invalidate_layout(self):
        """Forget the cached layout; the next draw recomputes it."""
        self.layout = None
        self._layout_size = None

    def layout_for(self, width, height):
        if self.layout is None or self._layout_size != (width, height):
            self.layout = compute_layout(width, height, self.margin)
            self._layout_size = (width, height)
            self.logger.debug(f"AnalogClock: layout for {width}x{height} -> {self.layout}")
        return self.layout

    def next_frame_delay_ms(self):
        """
        Milliseconds until just past the next `redraw_delay_ms` wall-clock
        boundary, so slow frames don't push the next one past a second.
        """
        now_ms = self.wall_clock() * 1000
        return self.redraw_delay_ms - now_ms % self.redraw_delay_ms + self.FRAME_ALIGN_SLACK_MS

    def on_draw(self, canvas, host=None):
        """
        1) Initialise on the first call
        2) Fetch (or recompute) the layout for the canvas size
        3) Draw the face, the tick marks, then the hands
        4) Ask the host for the next frame
        """
        if not self.is_ready():
            self.initialize()

        layout = self.layout_for(canvas.width, canvas.height)

        self.draw_clock_shape(canvas, layout)
        self.draw_tick_marks(canvas, layout)
        self.draw_hands(canvas, layout, self.time_source())

        if host is not None:
            host.post_invalidate_delayed(self.next_frame_delay_ms())
            if self.continuous_redraw:
                host.invalidate()

    def draw_clock_shape(self, canvas, layout):
        paint = self.paint
        face_radius = layout.radius + self.FACE_PADDING

        paint.color = self.colors.background
        paint.style = FILL
        dx, dy = self.SHADOW_OFFSET
        paint.set_shadow_layer(self.SHADOW_RADIUS, dx, dy, self.colors.shadow)
        canvas.draw_circle(layout.center_x, layout.center_y, face_radius, paint)

        # Border goes on top, outline only
        paint.clear_shadow_layer()
        paint.style = STROKE
        paint.stroke_width = self.BORDER_WIDTH
        paint.color = self.colors.border
        canvas.draw_circle(layout.center_x, layout.center_y, face_radius, paint)

        paint.reset()

    def draw_tick_marks(self, canvas, layout):
        paint = self.paint
        paint.color = self.colors.tick_mark
        paint.style = FILL

        ring_radius = layout.radius - self.tick_inset
        for i in range(12):
            x, y = position_for(layout, i, ring_radius, TICK_ANGLE_STEP)
            canvas.draw_circle(x, y, self.tick_radius, paint)

        paint.reset()

    def draw_hands(self, canvas, layout, now):
        """Hour first, second last so the fastest hand sits on top."""
        self.draw_hand_line(canvas, layout, now.hour_value, HOUR)
        self.draw_hand_line(canvas, layout, now.minute_value, MINUTE)
        self.draw_hand_line(canvas, layout, now.second_value, SECOND)
        self.paint.reset()

    def draw_hand_line(self, canvas, layout, value, hand):
        hour_length, minute_length, second_length = hand_lengths(layout.radius)
        length, color, width = {
            HOUR:   (hour_length, self.colors.hour_hand, self.hand_width * 2),
            MINUTE: (minute_length, self.colors.minute_hand, self.hand_width * 2),
            SECOND: (second_length, self.colors.second_hand, self.hand_width),
        }[hand]

        paint = self.paint
        paint.color = color
        paint.style = STROKE
        paint.stroke_width = width
        paint.stroke_cap = CAP_ROUND

        end_x, end_y = hand_endpoint(layout, value, length)
        canvas.draw_line(layout.center_x, layout.center_y, end_x, end_y, paint)
