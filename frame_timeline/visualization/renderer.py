"""Matplotlib plots of recorded timeline traces."""

from __future__ import annotations

from typing import Any, Iterable

import numpy as np
import matplotlib.pyplot as plt
import matplotlib.colors as mcolors

from ..tracing.recorder import Recorder


class TraceRenderer:
    """Renders the ratio curves or the activity raster of a trace."""

    def __init__(self, recorder: Recorder) -> None:
        self.recorder = recorder

    def _labels(self, labels: list[str] | None) -> list[str]:
        return list(labels) if labels is not None else self.recorder.labels()

    def _colors(self, labels: list[str]) -> dict[str, str]:
        tab_colors = list(mcolors.TABLEAU_COLORS.values())
        return {lbl: tab_colors[i % len(tab_colors)] for i, lbl in enumerate(labels)}

    def render_ratios(
        self,
        samples: Iterable[int],
        *,
        labels: list[str] | None = None,
        title: str = "Timeline Progress",
        ax: Any = None,
    ) -> Any:
        """Draw one step line per label: its ratio at every sample.

        Gaps appear where the label's window does not contain the sample.
        """
        if ax is None:
            _fig, ax = plt.subplots(1, 1, figsize=(10, 4))

        xs = np.asarray(list(samples))
        lbls = self._labels(labels)
        colors = self._colors(lbls)
        for lbl in lbls:
            ys = self.recorder.ratio_series(lbl, xs)
            ax.step(xs, ys, where="post", color=colors[lbl], label=lbl)

        ax.set_ylim(-0.05, 1.05)
        ax.set_xlabel("sample")
        ax.set_ylabel("ratio")
        if lbls:
            ax.legend(loc="upper right", fontsize=8)
        ax.set_title(title)
        return ax

    def render_activity(
        self,
        samples: Iterable[int],
        *,
        labels: list[str] | None = None,
        title: str = "Timeline Activity",
        ax: Any = None,
    ) -> Any:
        """Draw a raster: one row per label, a mark where it fired."""
        if ax is None:
            _fig, ax = plt.subplots(1, 1, figsize=(10, 3))

        xs = np.asarray(list(samples))
        lbls = self._labels(labels)
        colors = self._colors(lbls)
        for row, lbl in enumerate(lbls):
            fired = set(self.recorder.samples_for(lbl))
            hits = np.array([x for x in xs if int(x) in fired])
            ax.scatter(hits, np.full(len(hits), row), c=colors[lbl],
                       marker="s", s=40, edgecolors="black", linewidths=0.5)

        ax.set_yticks(range(len(lbls)))
        ax.set_yticklabels(lbls)
        ax.set_xlabel("sample")
        if len(xs):
            ax.set_xlim(xs.min() - 0.5, xs.max() + 0.5)
        ax.set_title(title)
        return ax
