"""
Flock Canvas
Drawing surface for the flock: boids on a front layer cleared every frame,
trails on a back layer that persists between frames.
"""

import math
from typing import List, Tuple

from PyQt5.QtWidgets import QWidget
from PyQt5.QtCore import Qt, QPointF, QRectF
from PyQt5.QtGui import QPainter, QColor, QPen, QBrush, QPixmap, QPolygonF

from flocking.boids.agent import Agent, Bounds
from flocking.boids.flock_config import FlockConfig
from flocking.config import BACKGROUND_COLOR
from flocking.utils.logger import logger


def heading_angle(vx: float, vy: float) -> float:
    """Facing angle in radians. Safe for vx == 0 (and for a still boid)."""
    return math.atan2(vy, vx)


def boid_polygon(x: float, y: float, vx: float, vy: float, size: float) -> QPolygonF:
    """Paper-airplane outline with its nose at (x, y), pointing along (vx, vy)."""
    angle = heading_angle(vx, vy)
    cos_a = math.cos(angle)
    sin_a = math.sin(angle)
    outline = [
        (0.0, 0.0),
        (-size * 1.3, size * 0.4),
        (-size, 0.0),
        (-size * 1.3, -size * 0.4),
    ]
    return QPolygonF([
        QPointF(x + px * cos_a - py * sin_a, y + px * sin_a + py * cos_a)
        for px, py in outline
    ])


class FlockCanvas(QWidget):
    """
    Widget the flock lives on.

    Provides the simulation's bounds (its own size), the per-agent render
    callback and click-to-spawn input.
    """

    def __init__(self, config: FlockConfig, parent=None):
        super().__init__(parent)

        self._config = config

        # Boids drawn on the next paint: (x, y, vx, vy)
        self._boids: List[Tuple[float, float, float, float]] = []
        # Boids rendered during the tick in progress
        self._pending: List[Tuple[float, float, float, float]] = []

        self._trail_layer = QPixmap(max(1, self.width()), max(1, self.height()))
        self._trail_layer.fill(Qt.transparent)

        self._boid_pen = QPen(QColor(config.boid_stroke_color))
        self._boid_brush = QBrush(QColor(config.boid_fill_color))
        self._trail_pen = QPen(QColor(config.trail_stroke_color))
        self._trail_fill = QColor(config.trail_fill_color)

        # Reference to flock controller (set externally)
        self._controller = None

        self.setAttribute(Qt.WA_OpaquePaintEvent)

    def set_controller(self, controller) -> None:
        """Attach the controller that ticks and receives spawn requests."""
        self._controller = controller
        if controller:
            controller.set_render_callback(self.render_agent)
            controller.flock_updated.connect(self._on_flock_updated)

    # === Simulation boundary ===

    def bounds(self) -> Bounds:
        """Current surface size, re-read by the simulation every tick."""
        return Bounds(self.width(), self.height())

    def render_agent(self, agent: Agent) -> None:
        """Queue the agent for the front layer and draw its trail."""
        self._pending.append((agent.x, agent.y, agent.vx, agent.vy))
        if self._config.draw_trail:
            self._draw_trail(agent)

    def _sync_trail_layer(self) -> None:
        """Match the trail layer to the widget size, keeping its content."""
        width, height = max(1, self.width()), max(1, self.height())
        if self._trail_layer.width() == width and self._trail_layer.height() == height:
            return
        old_layer = self._trail_layer
        self._trail_layer = QPixmap(width, height)
        self._trail_layer.fill(Qt.transparent)
        painter = QPainter(self._trail_layer)
        painter.drawPixmap(0, 0, old_layer)
        painter.end()

    def _draw_trail(self, agent: Agent) -> None:
        self._sync_trail_layer()
        painter = QPainter(self._trail_layer)
        try:
            if self._config.draw_dotted:
                painter.fillRect(QRectF(agent.x, agent.y, 1, 1), self._trail_fill)
            else:
                painter.setRenderHint(QPainter.Antialiasing)
                painter.setPen(self._trail_pen)
                painter.drawLine(
                    QPointF(agent.x, agent.y),
                    QPointF(agent.x - agent.vx, agent.y - agent.vy),
                )
        finally:
            painter.end()

    def _on_flock_updated(self, flock: list) -> None:
        """Swap in the frame rendered during the last tick."""
        self._boids = self._pending
        self._pending = []
        self.update()

    def clear_trails(self) -> None:
        """Wipe the back layer and the current frame."""
        self._trail_layer.fill(Qt.transparent)
        self._boids = []
        self._pending = []
        self.update()

    @property
    def frame(self) -> List[Tuple[float, float, float, float]]:
        """Boids shown by the most recent paint."""
        return list(self._boids)

    # === Qt events ===

    def mousePressEvent(self, event):
        """Add a boid at the click point."""
        if (event.button() == Qt.LeftButton and self._config.click_adds_boid
                and self._controller is not None):
            agent = self._controller.spawn_agent(event.x(), event.y())
            if not self._controller.is_running:
                # Paused: show it now instead of on the next tick
                self._boids.append((agent.x, agent.y, agent.vx, agent.vy))
                self.update()
            event.accept()
            return
        super().mousePressEvent(event)

    def resizeEvent(self, event):
        """Grow or shrink the trail layer with the widget."""
        super().resizeEvent(event)
        self._sync_trail_layer()
        logger.debug(f"Canvas resized to {self.width()}x{self.height()}", component="GUI")

    def paintEvent(self, event):
        """Draw background, trails, then boids."""
        self._sync_trail_layer()
        painter = QPainter(self)
        painter.fillRect(self.rect(), QColor(BACKGROUND_COLOR))
        painter.drawPixmap(0, 0, self._trail_layer)

        if self._boids:
            painter.setRenderHint(QPainter.Antialiasing)
            painter.setPen(self._boid_pen)
            painter.setBrush(self._boid_brush)
            size = self._config.boid_size
            for x, y, vx, vy in self._boids:
                painter.drawPolygon(boid_polygon(x, y, vx, vy, size))

        painter.end()

    @property
    def trail_layer(self) -> QPixmap:
        self._sync_trail_layer()
        return self._trail_layer
