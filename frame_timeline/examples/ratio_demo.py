"""Ratio demo.

A 5-frame span followed by a 10-frame span.  Prints the progress ratio for
each of the first 15 frames, then traces the same chain and plots the
sawtooth of both spans.
"""

from __future__ import annotations

from typing import Any

import matplotlib.pyplot as plt

from ..core.timeline import Timeline, new
from ..tracing.recorder import Recorder, trace
from ..visualization.renderer import TraceRenderer

FRAMES = 15


def print_ratios(frames: int = FRAMES) -> None:
    def show(tl: Timeline[int]) -> None:
        print(f"{tl.ratio():g}", end=" ")

    for t in range(frames):
        new(t).span(5, show).span(10, show)
    print()


def ratio_program(tl: Timeline[Any], rec: Recorder) -> None:
    tl.span(5, rec.span("short")).span(10, rec.span("long"))


def main() -> None:
    print_ratios()

    rec = trace(ratio_program, range(FRAMES + 5))
    renderer = TraceRenderer(rec)
    fig, axes = plt.subplots(2, 1, figsize=(10, 6), sharex=True)
    renderer.render_ratios(range(FRAMES + 5), title="Span Ratio", ax=axes[0])
    renderer.render_activity(range(FRAMES + 5), title="Active Span", ax=axes[1])
    plt.tight_layout()
    plt.savefig("ratio_demo.png", dpi=150)
    plt.show()


if __name__ == "__main__":
    main()
