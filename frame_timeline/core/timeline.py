"""Segment cursor for time-windowed and repeating logic.

A :class:`Timeline` describes a half-open window ``[start, end)`` on the time
axis together with the current sample ``now``.  Each frame the caller builds a
fresh cursor with :func:`new` and re-evaluates the same chain::

    new(frame).span(30, fade_in).span(60, hold).loop(20, blink)

Windowing operations return the cursor positioned right after the window they
describe, so consecutive calls lay out back-to-back segments.  Callbacks run
synchronously, only for the segment that contains ``now``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, TypeVar

from .units import check_unit, to_float, trunc_div

T = TypeVar("T")


@dataclass(frozen=True)
class Timeline(Generic[T]):
    """Immutable cursor over a single time sample.

    ``start`` is inclusive and ``end`` exclusive.  ``now`` is shared by every
    cursor derived within one chain.
    """

    start: T
    end: T
    now: T

    @classmethod
    def new(cls, now: T) -> Timeline[T]:
        """Create a zero-width cursor at time ``0`` sampling *now*."""
        check_unit(now)
        zero = now - now
        return cls(start=zero, end=zero, now=now)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def elapsed(self) -> T:
        """Time since the start of the window, negative before it."""
        return self.now - self.start

    def elapsed_f(self) -> float:
        """Elapsed time as a ``float``."""
        return to_float(self.now - self.start)

    def ratio(self) -> float:
        """Progress through the window; ``0.0`` for a zero-width window.

        Not clamped: a cursor outside its own window yields a value outside
        ``[0, 1)``.
        """
        width = self.end - self.start
        if width == 0:
            return 0.0
        return to_float(self.now - self.start) / to_float(width)

    # ------------------------------------------------------------------
    # Windowing
    # ------------------------------------------------------------------

    def _window(self, start: T, end: T) -> Timeline[T]:
        return Timeline(start=start, end=end, now=self.now)

    def span(self, duration: T, *callbacks: Callable[[Timeline[T]], object]) -> Timeline[T]:
        """Window ``[start, start + duration)``.

        Every callback receives the windowed cursor when ``now`` lies inside
        it.  The returned cursor starts where this window ends, whether or
        not anything fired.
        """
        window_end = self.start + duration
        if self.start <= self.now < window_end:
            window = self._window(self.start, window_end)
            for fn in callbacks:
                fn(window)
        return self._window(window_end, window_end)

    def loop(self, duration: T, *callbacks: Callable[[int, Timeline[T]], object]) -> None:
        """Repeat a window of *duration* forever from ``start``.

        Callbacks receive the iteration index and the cursor of the current
        period.  Nothing fires before ``start``.  Terminal: an endless loop
        has no seam to continue from.
        """
        if self.now < self.start:
            return
        n = trunc_div(self.now - self.start, duration)
        window = self._window(self.start + n * duration, self.start + (n + 1) * duration)
        for fn in callbacks:
            fn(int(n), window)

    def loop_n(
        self,
        duration: T,
        n: int,
        *callbacks: Callable[[int, Timeline[T]], object],
    ) -> Timeline[T]:
        """Repeat a window of *duration* exactly *n* times from ``start``.

        Returns the cursor positioned after the last repetition.
        """
        m = trunc_div(self.now - self.start, duration)
        if 0 <= m < n:
            window = self._window(self.start + m * duration, self.start + (m + 1) * duration)
            for fn in callbacks:
                fn(int(m), window)
        seam = self.start + n * duration
        return self._window(seam, seam)

    def once(self, *callbacks: Callable[[], object]) -> Timeline[T]:
        """Fire *callbacks* when ``now`` equals ``start`` exactly.

        Exact equality means a skipped or variable time step can miss the
        trigger; step the sample by one unit per frame for reliable firing.
        """
        if self.now == self.start:
            for fn in callbacks:
                fn()
        return self


def new(now: T) -> Timeline[T]:
    """Alias for :meth:`Timeline.new`."""
    return Timeline.new(now)
