#!/usr/bin/env python3
# src/clockface/main.py

import logging
import os
import sys
import time

from clockface.config import merged_config, DEFAULT_PREFERENCE_PATH
from clockface.display.display_manager import DisplayManager
from clockface.display.screens.clock_screen import ClockScreen

DEFAULT_CONFIG_PATH = os.path.join(os.getcwd(), 'config.yaml')


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    config_path = argv[0] if argv else DEFAULT_CONFIG_PATH

    # 1. Load YAML config, merged with JSON user preferences
    config = merged_config(config_path, DEFAULT_PREFERENCE_PATH)

    # 2. Set up logging
    logging.basicConfig(
        level=getattr(logging, str(config.get('log_level', 'INFO')).upper(), logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[logging.StreamHandler(sys.stdout)]
    )
    logger = logging.getLogger("Main")
    logger.info(f"Using config from {config_path}.")

    # 3. Initialize DisplayManager
    display_manager = DisplayManager(config.get('display', {}))

    # 4. Start the clock
    clock_screen = ClockScreen.from_config(display_manager, config.get('clock', {}))
    clock_screen.start_mode()

    try:
        while True:
            time.sleep(1)
    except KeyboardInterrupt:
        logger.info("Shutting down clockface...")
    finally:
        clock_screen.stop_mode()
        logger.info("clockface has been shut down gracefully.")


if __name__ == "__main__":
    main()
