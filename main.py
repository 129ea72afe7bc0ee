# main.py

import logging
import sys

from PySide6.QtWidgets import QApplication

from core.logging_setup import configure_logging
from core.settings import Settings
from gui import MainWindow

logger = logging.getLogger(__name__)


def main(argv=None) -> int:
    settings = Settings.from_env()
    configure_logging(settings.log_level_value)

    app = QApplication(sys.argv if argv is None else argv)
    window = MainWindow(settings)
    window.resize(settings.window_width, settings.window_height)
    window.show()
    logger.info("Unit Converter started (log level %s)", settings.log_level)
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
