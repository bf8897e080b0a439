# src/clockface/display/display_manager.py

import logging
import threading

from PIL import Image

# Luma imports:
from luma.core.device import dummy
from luma.core.interface.serial import spi
from luma.oled.device import ssd1322

DEVICES = ("ssd1322", "dummy")


class DisplayManager:
    def __init__(self, config, device=None):
        """
        Creates the output device and guards access to it with a lock.
        :param config: The 'display' config section: device, width, height,
                       rotate, mode, spi_port, spi_device.
        :param device: An already-built luma device (skips creation).
        """
        self.config = config or {}
        self.lock = threading.Lock()

        # Logging
        self.logger = logging.getLogger(self.__class__.__name__)

        self.oled = device if device is not None else self._create_device()
        self.logger.info(
            f"DisplayManager initialized ({self.oled.width}x{self.oled.height}, mode={self.oled.mode})."
        )

    def _create_device(self):
        kind = self.config.get('device', 'ssd1322')
        width = self.config.get('width', 256)
        height = self.config.get('height', 64)
        rotate = self.config.get('rotate', 0)

        if kind == 'ssd1322':
            # SPI + SSD1322 setup
            serial = spi(device=self.config.get('spi_device', 0), port=self.config.get('spi_port', 0))
            return ssd1322(serial, width=width, height=height, rotate=rotate)
        if kind == 'dummy':
            return dummy(width=width, height=height, rotate=rotate, mode=self.config.get('mode', 'RGB'))
        raise ValueError(f"Unknown display device '{kind}', expected one of {DEVICES}")

    @property
    def size(self):
        return self.oled.size

    def display(self, image):
        """
        Push a frame to the device, converting it to the device's mode.
        RGBA frames are flattened onto black first.
        """
        if image.size != self.oled.size:
            image = image.resize(self.oled.size, Image.LANCZOS)
        if image.mode == "RGBA":
            bg = Image.new("RGB", image.size, (0, 0, 0))
            bg.paste(image, mask=image.split()[3])
            image = bg
        image = image.convert(self.oled.mode)
        with self.lock:
            self.oled.display(image)

    def clear_screen(self):
        """Clears OLED by displaying a solid black image."""
        with self.lock:
            blank_image = Image.new("RGB", self.oled.size, "black").convert(self.oled.mode)
            self.oled.display(blank_image)
            self.logger.info("Screen cleared.")
