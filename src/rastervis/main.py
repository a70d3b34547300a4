"""
Application Initialization
==========================
This module wires logging, the Qt application and the main window, then
starts the Qt Event Loop.

Why is this file needed?
------------------------
It acts as the "Dependency Injection" root. It:
1. Configures logging from `config`.
2. Creates the QApplication.
3. Instantiates the Main Window, which owns the viewport and the playback
   controller.
"""
import logging
import sys

from rastervis import config
from rastervis.app.application import create_app
from rastervis.logging_config import setup_logging
from rastervis.view.main_window import MainWindow

logger = logging.getLogger(__name__)


def main() -> int:
    setup_logging(level=config.LOG_LEVEL, log_file=config.LOG_FILE)

    app = create_app()
    window = MainWindow()
    window.show()
    logger.info("Main window shown.")

    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
