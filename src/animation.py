"""Small timeline engine for tkinter-style event loops.

Animations are plain objects with a ``duration_ms`` and a ``seek(elapsed_ms)``
method that pushes interpolated values into setter callbacks. The Animator
drives them with ``scheduler.after`` (the tk root in the app, a fake in
tests), so nothing here imports tkinter.
"""
from __future__ import annotations
import logging
import math
import time
from typing import Callable, Dict, Optional, Protocol, Sequence

logger = logging.getLogger(__name__)

INDEFINITE = -1
FRAME_MS = 16

Interpolator = Callable[[float], float]
Setter = Callable[[float], None]


# -------------------- interpolators --------------------
def linear(t: float) -> float:
    return t


def ease_in(t: float) -> float:
    return t * t


def ease_out(t: float) -> float:
    return 1.0 - (1.0 - t) * (1.0 - t)


def ease_both(t: float) -> float:
    # smoothstep: zero slope at both ends
    return t * t * (3.0 - 2.0 * t)


# -------------------- animations --------------------
class Animation(Protocol):
    @property
    def duration_ms(self) -> float: ...

    def seek(self, elapsed_ms: float) -> None: ...


class Transition:
    """Interpolate ``start -> end`` over ``duration_ms``, feeding ``apply``.

    Nothing is applied while the delay is running. With auto_reverse, odd
    cycles run backwards (end -> start). Seeking past the end applies the
    value at the end of the last cycle.
    """

    def __init__(self, duration_ms: float, apply: Setter, start: float = 0.0, end: float = 1.0,
                 interpolator: Interpolator = linear, cycle_count: int = 1,
                 auto_reverse: bool = False, delay_ms: float = 0.0):
        if cycle_count == 0 or cycle_count < INDEFINITE:
            raise ValueError(f"invalid cycle_count: {cycle_count}")
        self.cycle_ms = max(0.0, float(duration_ms))
        self.apply = apply
        self.start = start
        self.end = end
        self.interpolator = interpolator
        self.cycle_count = cycle_count
        self.auto_reverse = auto_reverse
        self.delay_ms = max(0.0, float(delay_ms))

    @property
    def duration_ms(self) -> float:
        if self.cycle_count == INDEFINITE:
            return math.inf
        return self.delay_ms + self.cycle_ms * self.cycle_count

    def value_at(self, elapsed_ms: float) -> Optional[float]:
        t = elapsed_ms - self.delay_ms
        if t < 0:
            return None
        if self.cycle_ms == 0:
            cycle, frac = max(self.cycle_count, 1) - 1, 1.0
        elif self.cycle_count != INDEFINITE and t >= self.cycle_ms * self.cycle_count:
            cycle, frac = self.cycle_count - 1, 1.0
        else:
            cycle_f, rem = divmod(t, self.cycle_ms)
            cycle, frac = int(cycle_f), rem / self.cycle_ms
        if self.auto_reverse and cycle % 2 == 1:
            frac = 1.0 - frac
        return self.start + (self.end - self.start) * self.interpolator(frac)

    def seek(self, elapsed_ms: float) -> None:
        value = self.value_at(elapsed_ms)
        if value is not None:
            self.apply(value)


class Pause:
    def __init__(self, duration_ms: float):
        self._duration = max(0.0, float(duration_ms))

    @property
    def duration_ms(self) -> float:
        return self._duration

    def seek(self, elapsed_ms: float) -> None:
        pass


class Sequential:
    """Children play one after another."""

    def __init__(self, *children: Animation):
        self.children: Sequence[Animation] = children

    @property
    def duration_ms(self) -> float:
        return sum(c.duration_ms for c in self.children)

    def seek(self, elapsed_ms: float) -> None:
        offset = 0.0
        for child in self.children:
            if elapsed_ms < offset:
                break
            child.seek(min(elapsed_ms - offset, child.duration_ms))
            offset += child.duration_ms


class Parallel:
    """Children start together; done when the longest one is."""

    def __init__(self, *children: Animation):
        self.children: Sequence[Animation] = children

    @property
    def duration_ms(self) -> float:
        return max((c.duration_ms for c in self.children), default=0.0)

    def seek(self, elapsed_ms: float) -> None:
        for child in self.children:
            child.seek(min(elapsed_ms, child.duration_ms))


# -------------------- driver --------------------
class Scheduler(Protocol):
    def after(self, ms: int, func: Callable[[], None]) -> str: ...

    def after_cancel(self, id: str) -> None: ...


class _Running:
    __slots__ = ("animation", "started", "on_finished", "job")

    def __init__(self, animation: Animation, started: float, on_finished: Optional[Callable[[], None]]):
        self.animation = animation
        self.started = started
        self.on_finished = on_finished
        self.job: Optional[str] = None


class Animator:
    """Plays animations on a scheduler, one ``after`` chain per animation."""

    def __init__(self, scheduler: Scheduler, clock: Callable[[], float] = time.monotonic,
                 frame_ms: int = FRAME_MS, enabled: bool = True):
        self.scheduler = scheduler
        self.clock = clock
        self.frame_ms = frame_ms
        self.enabled = enabled
        self._running: Dict[int, _Running] = {}
        self._next_handle = 1

    @property
    def running(self) -> int:
        return len(self._running)

    def _now_ms(self) -> float:
        return self.clock() * 1000.0

    def play(self, animation: Animation, on_finished: Optional[Callable[[], None]] = None) -> Optional[int]:
        """Start an animation; returns a handle for ``stop``.

        When disabled, finite animations jump straight to their final frame
        and indefinite ones are skipped; on_finished still runs.
        """
        if not self.enabled:
            if math.isfinite(animation.duration_ms):
                animation.seek(animation.duration_ms)
            if on_finished is not None:
                on_finished()
            return None
        handle = self._next_handle
        self._next_handle += 1
        self._running[handle] = _Running(animation, self._now_ms(), on_finished)
        self._tick(handle)
        return handle

    def stop(self, handle: Optional[int]) -> None:
        """Stop without jumping to the end and without on_finished."""
        if handle is None:
            return
        run = self._running.pop(handle, None)
        if run is not None and run.job is not None:
            self.scheduler.after_cancel(run.job)

    def stop_all(self) -> None:
        for handle in list(self._running):
            self.stop(handle)

    def _tick(self, handle: int) -> None:
        run = self._running.get(handle)
        if run is None:
            return
        run.job = None
        elapsed = self._now_ms() - run.started
        duration = run.animation.duration_ms
        if elapsed >= duration:
            run.animation.seek(duration)
            del self._running[handle]
            if run.on_finished is not None:
                run.on_finished()
            return
        run.animation.seek(elapsed)
        run.job = self.scheduler.after(self.frame_ms, lambda: self._tick(handle))
