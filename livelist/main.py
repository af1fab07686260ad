#!/usr/bin/env python3
"""
Live List UI - GTK4 browser for paginated live streams
Minimal entry point - classes are in separate modules.
"""

import logging
import signal
import sys

logging.basicConfig(
    level=logging.DEBUG,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger("LiveList.UI")


def main():
    """Entry point"""
    from livelist.application.live_list_app import main as app_main

    logger.info("Live List UI starting...")

    def signal_handler(sig, frame):
        logger.info("Shutting down UI...")
        sys.exit(0)

    signal.signal(signal.SIGINT, signal_handler)

    return app_main()


if __name__ == "__main__":
    main()
