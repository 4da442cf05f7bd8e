"""
Main Application Window
=======================
The top-level frame holding the tree canvas.
"""
import logging

from PySide6.QtGui import QCloseEvent
from PySide6.QtWidgets import QMainWindow

from recursivetree import config
from recursivetree.view.canvas import TreeCanvas

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    def __init__(self) -> None:
        super().__init__()
        self.setWindowTitle(config.TITLE)
        self.resize(config.FRAME_WIDTH, config.FRAME_HEIGHT)

        self.canvas = TreeCanvas(self)
        self.setCentralWidget(self.canvas)

        logger.info(f"Main window created ({config.FRAME_WIDTH}x{config.FRAME_HEIGHT}).")

    def closeEvent(self, event: QCloseEvent) -> None:
        self.canvas.shutdown()
        super().closeEvent(event)
