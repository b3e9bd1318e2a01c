from __future__ import annotations

import time
from collections.abc import Callable
from dataclasses import dataclass

from domain.models import Point

Clock = Callable[[], float]


@dataclass(frozen=True)
class GestureConfig:
    drag_min_duration: float = 0.125  # seconds
    drag_min_distance: float = 5.0


@dataclass(frozen=True)
class PressState:
    started_at: float
    position: Point


@dataclass(frozen=True)
class GestureSample:
    dragging: bool
    clicked: bool


class GestureClassifier:
    """Turns per-frame pointer samples into click and drag signals.

    The classifier is either idle or pressed. Dragging is not stored: it is
    re-evaluated on every sample against the initial press, and becomes true
    once the press is older than ``drag_min_duration`` or the pointer has moved
    further than ``drag_min_distance`` from where it went down. Releasing a
    press younger than ``drag_min_duration`` reports a click for that one
    sample only.
    """

    def __init__(self, config: GestureConfig | None = None, clock: Clock | None = None) -> None:
        self.config = config or GestureConfig()
        self._clock = clock or time.monotonic
        self.pending: PressState | None = None
        self.clicked_this_sample = False

    def register(self, pointer_down: bool, position: Point) -> GestureSample:
        now = self._clock()
        self.clicked_this_sample = False

        if pointer_down:
            if self.pending is None:
                self.pending = PressState(started_at=now, position=position)
        elif self.pending is not None:
            elapsed = now - self.pending.started_at
            self.clicked_this_sample = elapsed < self.config.drag_min_duration
            self.pending = None

        return GestureSample(
            dragging=self._is_dragging(now, position),
            clicked=self.clicked_this_sample,
        )

    def is_pressed(self) -> bool:
        return self.pending is not None

    def _is_dragging(self, now: float, position: Point) -> bool:
        if self.pending is None:
            return False
        elapsed = now - self.pending.started_at
        moved = self.pending.position.distance(position)
        return elapsed > self.config.drag_min_duration or moved > self.config.drag_min_distance
