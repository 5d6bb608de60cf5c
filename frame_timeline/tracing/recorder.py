"""Record which callbacks of a timeline chain fire over a range of samples.

A program is a function ``(timeline, recorder) -> Any`` that builds a chain
using the recorder's callback factories::

    def program(tl, rec):
        tl.span(5, rec.span("intro")).span(10, rec.span("main"))

    rec = trace(program, range(15))
    rec.to_frame()
"""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from typing import Any, Callable, Iterable

import numpy as np
import pandas as pd

from ..core.timeline import Timeline, new

logger = logging.getLogger(__name__)

_COLUMNS = ["sample", "label", "iteration", "start", "end", "elapsed", "ratio"]


@dataclass(frozen=True)
class TraceEvent:
    """One callback firing."""

    sample: int
    label: str
    iteration: int | None
    start: int
    end: int
    elapsed: int
    ratio: float


class Recorder:
    """Collects :class:`TraceEvent` records for one tracing run.

    ``sample`` is set by :func:`trace` before each evaluation of the program.
    """

    def __init__(self) -> None:
        self.sample: int = 0
        self.events: list[TraceEvent] = []

    # ------------------------------------------------------------------
    # Callback factories
    # ------------------------------------------------------------------

    def _record(self, label: str, iteration: int | None, tl: Timeline[Any]) -> None:
        self.events.append(TraceEvent(
            sample=int(self.sample),
            label=label,
            iteration=iteration,
            start=int(tl.start),
            end=int(tl.end),
            elapsed=int(tl.elapsed()),
            ratio=tl.ratio(),
        ))

    def span(self, label: str) -> Callable[[Timeline[Any]], None]:
        """Callback for :meth:`Timeline.span` recording under *label*."""
        def callback(tl: Timeline[Any]) -> None:
            self._record(label, None, tl)
        return callback

    def loop(self, label: str) -> Callable[[int, Timeline[Any]], None]:
        """Callback for :meth:`Timeline.loop` / :meth:`Timeline.loop_n`."""
        def callback(n: int, tl: Timeline[Any]) -> None:
            self._record(label, n, tl)
        return callback

    def once(self, label: str) -> Callable[[], None]:
        """Callback for :meth:`Timeline.once`.

        One-shot callbacks take no cursor, so the event spans the sample
        itself with zero elapsed time.
        """
        def callback() -> None:
            s = int(self.sample)
            self.events.append(TraceEvent(
                sample=s, label=label, iteration=None,
                start=s, end=s, elapsed=0, ratio=0.0,
            ))
        return callback

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def labels(self) -> list[str]:
        """Labels in order of first firing."""
        seen: dict[str, None] = {}
        for ev in self.events:
            seen.setdefault(ev.label, None)
        return list(seen)

    def events_for(self, label: str) -> list[TraceEvent]:
        return [ev for ev in self.events if ev.label == label]

    def samples_for(self, label: str) -> list[int]:
        return [ev.sample for ev in self.events if ev.label == label]

    def ratio_series(self, label: str, samples: Iterable[int]) -> np.ndarray:
        """Ratio of *label* at each sample, ``nan`` where it did not fire.

        If a label fires more than once for the same sample, the last firing
        wins.
        """
        by_sample = {ev.sample: ev.ratio for ev in self.events_for(label)}
        return np.array(
            [by_sample.get(int(s), np.nan) for s in samples], dtype=float,
        )

    def to_frame(self) -> pd.DataFrame:
        """One row per event, in firing order."""
        if not self.events:
            return pd.DataFrame(columns=_COLUMNS)
        return pd.DataFrame([asdict(ev) for ev in self.events], columns=_COLUMNS)


def trace(
    program: Callable[[Timeline[Any], Recorder], Any],
    samples: Iterable[int],
    recorder: Recorder | None = None,
) -> Recorder:
    """Evaluate *program* on a fresh cursor for every sample.

    Returns the recorder holding every firing, in sample order.
    """
    rec = recorder if recorder is not None else Recorder()
    count = 0
    for s in samples:
        rec.sample = s
        program(new(s), rec)
        count += 1
    logger.debug("traced %d samples, %d events", count, len(rec.events))
    return rec
