"""
Real-time driver — replays the simulation at wall-clock pace.

The SchedulingEngine never sleeps; something outside has to call step().
Tests call it directly, the benchmark fast-forwards with run_until_idle(),
and this ticker calls it from a daemon thread once every TICK_INTERVAL
seconds so a UI can watch the schedule unfold ("Start" / "Pause").

    start() ──> ticker thread ──step()──> SchedulingEngine <──step()/submit── API handlers
                     │                          ▲
                     └── Event.wait(interval) ──┘

While the ticker runs, the engine is flagged auto_advancing and refuses
policy switches; stop() clears the flag once the thread has exited.

Pausing is just stopping: a tick is atomic, so there is nothing to roll back.
"""

import logging
import threading
from typing import Optional

from config.settings import settings
from scheduler.engine import SchedulingEngine

logger = logging.getLogger(__name__)


class SimulationTicker:

    def __init__(
        self,
        engine: SchedulingEngine,
        interval: Optional[float] = None,
        stop_when_idle: bool = False,
    ):
        self._engine = engine
        self.interval = settings.TICK_INTERVAL if interval is None else interval
        self.stop_when_idle = stop_when_idle
        self._stop_event = threading.Event()
        self._thread: Optional[threading.Thread] = None

    @property
    def is_running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> None:
        """Start ticking in a daemon thread. No-op if already running."""
        if self.is_running:
            return
        self._stop_event.clear()
        self._engine.set_auto_advancing(True)
        self._thread = threading.Thread(
            target=self._run_loop, name="simulation-ticker", daemon=True
        )
        self._thread.start()
        logger.info(f"Simulation ticker started (interval={self.interval}s)")

    def stop(self, timeout: Optional[float] = None) -> None:
        """Signal the loop to stop. It finishes its current tick and exits."""
        self._stop_event.set()
        thread = self._thread
        if thread is not None and thread is not threading.current_thread():
            thread.join(timeout)
        self._thread = None
        self._engine.set_auto_advancing(False)
        logger.info(f"Simulation ticker stopped at t={self._engine.current_time}")

    def _run_loop(self) -> None:
        """
        The main loop. Runs until stop() is called.

        A failing tick is logged and the loop carries on with the next one.
        With stop_when_idle, the loop pauses itself once every task is done.
        """
        while not self._stop_event.wait(self.interval):
            try:
                self._engine.step()
                if self.stop_when_idle and self._engine.snapshot().is_idle:
                    logger.info(f"All tasks finished at t={self._engine.current_time}, pausing")
                    self._stop_event.set()
                    self._engine.set_auto_advancing(False)
            except Exception as e:
                logger.error(f"Simulation tick error: {e}", exc_info=True)
