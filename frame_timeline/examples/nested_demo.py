"""Nested timelines.

The cursor handed to a span callback is itself a timeline: chaining on it
subdivides that span.  Two outer 6-frame spans, the first split into a
3-frame loop, the second into three 2-frame spans.
"""

from __future__ import annotations

from ..core.timeline import Timeline, new


def nested_example(frames: int = 12) -> None:
    print("=== Nested Timeline Example ===")
    for t in range(frames):
        def outer_1(tl: Timeline[int]) -> None:
            print(f"t={t}: Outer span 1, ", end="")
            tl.loop(3, lambda n, inner: print(
                f"inner loop {n} (elapsed={inner.elapsed()})"))

        def outer_2(tl: Timeline[int]) -> None:
            print(f"t={t}: Outer span 2, ", end="")
            (
                tl.span(2, lambda inner: print(f"inner span A (ratio={inner.ratio():.1f})"))
                .span(2, lambda inner: print(f"inner span B (ratio={inner.ratio():.1f})"))
                .span(2, lambda inner: print(f"inner span C (ratio={inner.ratio():.1f})"))
            )

        new(t).span(6, outer_1).span(6, outer_2)


def main() -> None:
    nested_example()


if __name__ == "__main__":
    main()
