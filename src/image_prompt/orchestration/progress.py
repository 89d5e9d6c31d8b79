"""
Cosmetic progress animation.

Not a progress signal: the value advances on a timer regardless of how far
the awaited operation actually is.
"""
import asyncio
import random
from typing import Callable, Optional

MIN_STEP = 5.0
MAX_STEP = 20.0


class ProgressAnimation:
    """
    Timer-driven progress value.

    Each tick adds a random step in [MIN_STEP, MAX_STEP) and clamps at ceiling.
    When the ceiling is 100 the animation finishes on its own; below 100 it
    holds at the ceiling until stopped.
    """

    def __init__(
        self,
        on_tick: Callable[[float], None],
        interval: float = 0.15,
        ceiling: float = 95.0,
        rng: Optional[random.Random] = None,
    ):
        self._on_tick = on_tick
        self._interval = interval
        self._ceiling = ceiling
        self._rng = rng or random.Random()
        self._task: Optional[asyncio.Task] = None
        self.value = 0.0

    def advance(self) -> float:
        self.value = min(self.value + self._rng.uniform(MIN_STEP, MAX_STEP), self._ceiling)
        return self.value

    @property
    def finished(self) -> bool:
        return self.value >= 100.0

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self) -> asyncio.Task:
        self._task = asyncio.get_running_loop().create_task(self._run())
        return self._task

    async def _run(self) -> None:
        while not self.finished:
            await asyncio.sleep(self._interval)
            self._on_tick(self.advance())

    async def wait(self) -> None:
        """Wait for a self-finishing animation to reach 100 or be stopped."""
        if self._task is not None:
            # asyncio.wait does not raise if the task was cancelled by stop()
            await asyncio.wait({self._task})

    def stop(self) -> None:
        if self._task is not None and not self._task.done():
            self._task.cancel()
        self._task = None
