"""Span, loop_n and loop demo.

Drives a plain integer frame counter and re-evaluates the same chain on
every frame, printing what fires.
"""

from __future__ import annotations

from ..core.timeline import Timeline, new


def span_example(frames: int = 8) -> None:
    """Two consecutive 3-frame spans; nothing fires from frame 6 on."""
    print("=== Span Example ===")
    for t in range(frames):
        def first(tl: Timeline[int]) -> None:
            print(f"t={t}: In span [0,3), elapsed={tl.elapsed()}")

        def second(tl: Timeline[int]) -> None:
            print(f"t={t}: In span [3,6), elapsed={tl.elapsed()}")

        new(t).span(3, first).span(3, second)


def loop_n_example(frames: int = 10) -> None:
    """A 4-frame period repeated twice."""
    print("=== LoopN Example ===")
    for t in range(frames):
        def tick(n: int, tl: Timeline[int]) -> None:
            print(f"t={t}: Loop {n}, elapsed={tl.elapsed()}, ratio={tl.ratio():g}")

        new(t).loop_n(4, 2, tick)


def loop_example(frames: int = 8) -> None:
    """A 3-frame period repeated forever."""
    print("=== Loop Example ===")
    for t in range(frames):
        def tick(n: int, tl: Timeline[int]) -> None:
            print(f"t={t}: Infinite loop {n}, elapsed={tl.elapsed()}")

        new(t).loop(3, tick)


def main() -> None:
    span_example()
    loop_n_example()
    loop_example()


if __name__ == "__main__":
    main()
