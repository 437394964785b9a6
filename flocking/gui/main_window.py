"""
Main Window
Hosts the flock canvas and wires it to a FlockController.

Keys:
    Space - start/stop the simulation
    R     - rebuild the flock
"""

from PyQt5.QtWidgets import QMainWindow, QShortcut
from PyQt5.QtGui import QKeySequence
from PyQt5.QtCore import Qt

from flocking.boids import FlockConfig, FlockController
from flocking.config import WINDOW_TITLE, DEFAULT_WINDOW_SIZE
from flocking.errors import LifecycleError
from flocking.utils.logger import logger

from .flock_canvas import FlockCanvas


STATUS_TIMEOUT_MS = 4000


class FlockWindow(QMainWindow):
    """Top-level window owning one simulation."""

    def __init__(self, config: FlockConfig, rng=None, parent=None):
        super().__init__(parent)
        self.setWindowTitle(WINDOW_TITLE)
        self.resize(*DEFAULT_WINDOW_SIZE)

        self.canvas = FlockCanvas(config, self)
        self.setCentralWidget(self.canvas)

        self.controller = FlockController(config, self.canvas.bounds, rng=rng, parent=self)
        self.canvas.set_controller(self.controller)

        logger.signal_emitter.log_message.connect(self._on_log_message)
        self._log_connected = True

        QShortcut(QKeySequence(Qt.Key_Space), self, activated=self.toggle_simulation)
        QShortcut(QKeySequence(Qt.Key_R), self, activated=self.reset_flock)

    def begin(self) -> None:
        """Build the flock on the laid-out canvas and start ticking."""
        self.controller.initialize()
        self.controller.start()

    def toggle_simulation(self) -> None:
        try:
            self.controller.toggle()
        except LifecycleError as e:
            logger.warning("Cannot toggle simulation", component="GUI", details=str(e))

    def reset_flock(self) -> None:
        """Rebuild the flock and clear the trails."""
        self.canvas.clear_trails()
        self.controller.initialize()

    def _on_log_message(self, message: str, level: int, timestamp: str) -> None:
        self.statusBar().showMessage(f"{timestamp}  {message}", STATUS_TIMEOUT_MS)

    def closeEvent(self, event):
        if self._log_connected:
            logger.signal_emitter.log_message.disconnect(self._on_log_message)
            self._log_connected = False
        self.controller.dispose()
        super().closeEvent(event)
