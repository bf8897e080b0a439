# src/clockface/display/screens/base_screen.py

from abc import ABC, abstractmethod
import logging


class BaseScreen(ABC):
    def __init__(self, display_manager):
        self.display_manager = display_manager
        self.is_active = False
        self.logger = logging.getLogger(self.__class__.__name__)

    @abstractmethod
    def start_mode(self):
        """Activate the screen."""
        pass

    @abstractmethod
    def stop_mode(self):
        """Deactivate the screen."""
        pass

    @abstractmethod
    def update_display(self):
        """Render one frame to the display."""
        pass
