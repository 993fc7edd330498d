"""Deferred-task queue on a logical clock.

Think and draw delays are pacing only. Instead of real timers the engine
schedules callbacks here and whoever drives the game (a test, the terminal
UI) moves the clock forward. Callbacks run one at a time, in due-time order,
ties broken by scheduling order.
"""

import heapq
import itertools
import logging
from typing import Callable, List, Optional

logger = logging.getLogger(__name__)


class ScheduledTask:
    """Handle returned by Scheduler.schedule(); pass it to cancel()."""
    __slots__ = ('due', 'seq', 'callback', 'label', 'cancelled')

    def __init__(self, due: float, seq: int, callback: Callable[[], None], label: str):
        self.due = due
        self.seq = seq
        self.callback = callback
        self.label = label
        self.cancelled = False

    def cancel(self):
        self.cancelled = True

    def __lt__(self, other):
        return (self.due, self.seq) < (other.due, other.seq)

    def __repr__(self):
        state = "cancelled" if self.cancelled else "pending"
        return f"ScheduledTask({self.label}, due={self.due}, {state})"


class Scheduler:
    """Cancellable deferred tasks over a logical clock (seconds)."""

    def __init__(self):
        self.now = 0.0
        self._queue: List[ScheduledTask] = []
        self._seq = itertools.count()

    def schedule(self, delay: float, callback: Callable[[], None],
                 label: str = "") -> ScheduledTask:
        """Run ``callback`` once ``delay`` seconds of logical time have passed."""
        if delay < 0:
            raise ValueError(f"delay must be >= 0, got {delay}")
        task = ScheduledTask(self.now + delay, next(self._seq), callback, label)
        heapq.heappush(self._queue, task)
        logger.debug("scheduled %s at t=%.2f", label or "task", task.due)
        return task

    def cancel(self, task: Optional[ScheduledTask]):
        if task is not None:
            task.cancel()

    def cancel_all(self):
        """Drop every pending task."""
        for task in self._queue:
            task.cancel()
        self._queue.clear()

    @property
    def pending(self) -> int:
        """Number of tasks that will still run."""
        return sum(1 for t in self._queue if not t.cancelled)

    def next_due(self) -> Optional[float]:
        self._drop_cancelled()
        return self._queue[0].due if self._queue else None

    def _drop_cancelled(self):
        while self._queue and self._queue[0].cancelled:
            heapq.heappop(self._queue)

    def run_next(self) -> bool:
        """Jump the clock to the next task and run it. False if idle."""
        self._drop_cancelled()
        if not self._queue:
            return False
        task = heapq.heappop(self._queue)
        self.now = max(self.now, task.due)
        task.callback()
        return True

    def advance(self, seconds: float) -> int:
        """Move the clock forward, running every task that falls due."""
        target = self.now + seconds
        ran = 0
        while True:
            self._drop_cancelled()
            if not self._queue or self._queue[0].due > target:
                break
            self.run_next()
            ran += 1
        self.now = target
        return ran

    def run_until_idle(self, max_tasks: Optional[int] = None) -> int:
        """Run tasks until the queue is empty (or ``max_tasks`` have run)."""
        ran = 0
        while max_tasks is None or ran < max_tasks:
            if not self.run_next():
                break
            ran += 1
        return ran
