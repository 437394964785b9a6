"""
Flock Controller - owns one running flock simulation

Connects:
- FlockConfig (validated options)
- flock_engine.step (simulation physics)
- a bounds provider and render callback supplied by the drawing surface

Runs the simulation every tick_period_ms via QTimer on the Qt event loop.
A tick always runs to completion; stop() only prevents future ticks.
"""

from typing import Callable, List, Optional

from PyQt5.QtCore import QObject, QTimer, pyqtSignal

from flocking.config import TICK_LOG_INTERVAL
from flocking.errors import LifecycleError
from flocking.utils.logger import logger

from .agent import Agent, Bounds, build_flock, build_random_agent
from .flock_config import FlockConfig
from .flock_engine import RenderCallback, step
from .rng import RandomSource, make_rng


BoundsProvider = Callable[[], Bounds]


class FlockController(QObject):
    """
    Simulation context: flock, timer and collaborators for one run.

    Lifecycle: construct -> initialize() -> start()/stop() ... -> dispose().
    Starts stopped.
    """

    running_changed = pyqtSignal(bool)
    flock_updated = pyqtSignal(list)  # List[Agent] after each tick

    def __init__(self, config: FlockConfig, bounds_provider: BoundsProvider,
                 render: Optional[RenderCallback] = None,
                 rng: Optional[RandomSource] = None, parent=None):
        super().__init__(parent)

        self._config = config
        self._bounds_provider = bounds_provider
        self._render = render
        self._rng = rng if rng is not None else make_rng(config.seed)

        self._flock: List[Agent] = []
        self._running = False
        self._disposed = False
        self._tick_count = 0

        self._timer = QTimer(self)
        self._timer.setInterval(int(self._config.tick_period_ms))
        self._timer.timeout.connect(self._on_timer)

    @property
    def config(self) -> FlockConfig:
        return self._config

    @property
    def flock(self) -> List[Agent]:
        return self._flock

    @property
    def is_running(self) -> bool:
        return self._running

    @property
    def tick_count(self) -> int:
        return self._tick_count

    def set_render_callback(self, render: Optional[RenderCallback]) -> None:
        """Set callback invoked with each agent after it moved."""
        self._render = render

    # === Lifecycle ===

    def initialize(self) -> None:
        """Rebuild the flock wholesale inside the current bounds."""
        self._check_not_disposed()
        bounds = self._bounds_provider()
        self._flock = build_flock(
            self._config.flock_size, bounds, self._config.max_velocity, self._rng
        )
        self._tick_count = 0
        logger.info(f"Flock of {len(self._flock)} built on "
                    f"{bounds.width:g}x{bounds.height:g}", component="FLOCK")

    def start(self) -> None:
        """Start periodic ticks. Raises LifecycleError if already running."""
        self._check_not_disposed()
        if self._running:
            raise LifecycleError("Simulation is already running")

        self._timer.start()
        self._running = True
        logger.info("Simulation started", component="FLOCK",
                    details=f"{self._timer.interval()}ms period")
        self.running_changed.emit(True)

    def restart(self) -> None:
        """Resume ticking after stop(); same rules as start()."""
        self.start()

    def stop(self) -> None:
        """Stop periodic ticks. Raises LifecycleError if already stopped."""
        if not self._running:
            raise LifecycleError("Simulation is already stopped")

        self._timer.stop()
        self._running = False
        logger.info("Simulation stopped", component="FLOCK")
        self.running_changed.emit(False)

    def toggle(self) -> None:
        """Toggle running state."""
        if self._running:
            self.stop()
        else:
            self.start()

    def dispose(self) -> None:
        """Stop if running and release the flock. The controller is done."""
        if self._disposed:
            return
        if self._running:
            self.stop()
        self._flock = []
        self._render = None
        self._disposed = True
        logger.flock("Controller disposed")

    def _check_not_disposed(self) -> None:
        if self._disposed:
            raise LifecycleError("Simulation has been disposed")

    # === Ticking ===

    def _on_timer(self) -> None:
        # A timeout may already be queued when stop() runs
        if not self._running:
            return
        self.tick()

    def tick(self) -> None:
        """Run one simulation step with freshly read bounds."""
        bounds = self._bounds_provider()
        step(self._flock, bounds, self._config, self._rng, self._render)
        self._tick_count += 1

        if self._tick_count % TICK_LOG_INTERVAL == 0:
            logger.flock(f"Tick {self._tick_count}: {len(self._flock)} boids",
                         details=f"{bounds.width:g}x{bounds.height:g}")

        self.flock_updated.emit(self._flock)

    # === Input ===

    def spawn_agent(self, x: float, y: float) -> Agent:
        """Append a fresh random agent placed at (x, y)."""
        self._check_not_disposed()
        agent = build_random_agent(
            self._bounds_provider(), self._config.max_velocity, self._rng
        )
        agent.x = float(x)
        agent.y = float(y)
        self._flock.append(agent)
        logger.flock(f"Spawned boid {agent.id} at ({x:g}, {y:g})")
        return agent
