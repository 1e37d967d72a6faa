"""Deferred step queue driven by a virtual millisecond clock.

Battle resolution is a chain of delayed steps (enemy attack, faint and victory
announcements, return to world). Each step is pushed with a delay relative to
the current clock and the queue runs them one at a time in due order; ties
run in the order they were scheduled. Nothing here sleeps: a front end decides
how virtual time maps to wall-clock time.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Callable, List, Optional
import heapq
from palmon.core.logging import logger

@dataclass(order=True)
class DeferredStep:
    due: int
    order: int
    label: str = field(compare=False)
    action: Callable[[], None] = field(compare=False, repr=False)

class DeferredQueue:
    def __init__(self):
        self.now = 0
        self._order = 0
        self._steps: List[DeferredStep] = []

    def __len__(self) -> int:
        return len(self._steps)

    @property
    def pending(self) -> bool:
        return bool(self._steps)

    def labels(self) -> List[str]:
        return [s.label for s in sorted(self._steps)]

    def schedule(self, delay_ms: int, action: Callable[[], None], label: str = "step") -> DeferredStep:
        if delay_ms < 0:
            raise ValueError(f"delay must be non-negative, got {delay_ms}")
        self._order += 1
        step = DeferredStep(self.now + int(delay_ms), self._order, label, action)
        heapq.heappush(self._steps, step)
        logger.debug("StepScheduled", label=label, due=step.due)
        return step

    def time_until_next(self) -> Optional[int]:
        if not self._steps:
            return None
        return max(0, self._steps[0].due - self.now)

    def run_next(self) -> bool:
        """Pop and run the earliest step, moving the clock to its due time."""
        if not self._steps:
            return False
        step = heapq.heappop(self._steps)
        self.now = max(self.now, step.due)
        logger.debug("StepRun", label=step.label, at=self.now)
        step.action()
        return True

    def advance(self, delta_ms: int) -> int:
        """Move the clock forward, running every step that falls due on the way."""
        target = self.now + max(0, int(delta_ms))
        ran = 0
        while self._steps and self._steps[0].due <= target:
            self.run_next()
            ran += 1
        self.now = target
        return ran

    def drain(self, limit: int = 100) -> int:
        ran = 0
        while self._steps and ran < limit:
            self.run_next()
            ran += 1
        return ran

__all__ = ["DeferredQueue", "DeferredStep"]
