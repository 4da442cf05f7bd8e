"""
Application Initialization
==========================
This module creates the window and starts the Qt Event Loop.
"""
import logging
import sys

from PySide6.QtCore import QCoreApplication
from PySide6.QtWidgets import QApplication

from recursivetree import config
from recursivetree.logging_config import setup_logging
from recursivetree.view.main_window import MainWindow


def main() -> None:
    # 1. Setup Logging
    # Use logging.DEBUG to see every scheduled depth and paint
    setup_logging(level=logging.INFO)

    # 2. Create the Qt Application
    QCoreApplication.setApplicationName(config.TITLE)
    app = QApplication(sys.argv)

    # 3. Initialize the Main Window, centered on the screen
    window = MainWindow()
    screen = app.primaryScreen()
    if screen is not None:
        frame = window.frameGeometry()
        frame.moveCenter(screen.availableGeometry().center())
        window.move(frame.topLeft())
    window.show()

    # 4. Start Event Loop
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
