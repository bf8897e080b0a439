# src/clockface/display/screens/clock_screen.py

from clockface.display.canvas import PillowCanvas
from clockface.display.scheduler import FrameScheduler
from clockface.display.screens.analog_clock import AnalogClock
from clockface.display.screens.base_screen import BaseScreen


class ClockScreen(BaseScreen):
    """
    Puts an AnalogClock on the display.

    Each frame gets a fresh canvas sized to the display, the clock draws
    onto it and the finished image is pushed to the device. The clock itself
    asks for the next frame through the FrameScheduler.
    """

    def __init__(self, display_manager, clock=None, supersample=1):
        """
        :param display_manager: The DisplayManager controlling the OLED.
        :param clock:           The AnalogClock renderer (default settings if None).
        :param supersample:     Render at this multiple of the display size, then scale down.
        """
        super().__init__(display_manager)
        self.clock = clock or AnalogClock()
        self.supersample = supersample
        self.scheduler = FrameScheduler(self.update_display)

    @classmethod
    def from_config(cls, display_manager, config):
        config = config or {}
        return cls(
            display_manager,
            clock=AnalogClock.from_config(config),
            supersample=config.get('supersample', 1),
        )

    def start_mode(self):
        if self.is_active:
            self.logger.debug("ClockScreen: Already active.")
            return
        self.is_active = True
        self.scheduler.start()
        self.logger.info("ClockScreen: Started.")

    def stop_mode(self):
        if not self.is_active:
            return
        self.is_active = False
        self.scheduler.stop()
        self.display_manager.clear_screen()
        self.logger.info("ClockScreen: Stopped.")

    def update_display(self):
        width, height = self.display_manager.size
        canvas = PillowCanvas(width, height, supersample=self.supersample)
        self.clock.on_draw(canvas, self.scheduler)
        self.display_manager.display(canvas.to_image())
