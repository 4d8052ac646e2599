"""
Application Initialization
==========================
This module wires the Store, the Main Window and the Qt event loop together.

Why is this file needed?
------------------------
It acts as the "Dependency Injection" root. It:
1. Sets up logging.
2. Creates the Qt Application.
3. Instantiates the Store (which owns the WaveModel) and hands it to the
   Main Window.
"""
import logging

from wavesuperposition import config
from wavesuperposition.logging_config import setup_logging
from wavesuperposition.app.application import create_app
from wavesuperposition.app.state import Store
from wavesuperposition.app.ui.main_window import MainWindow

logger = logging.getLogger(__name__)


def main() -> int:
    """Main entry point for the application."""
    setup_logging(level=config.get_log_level())

    app = create_app()

    store = Store()
    window = MainWindow(store)
    window.show()

    logger.info("Entering event loop")
    return app.exec()


if __name__ == "__main__":
    raise SystemExit(main())
