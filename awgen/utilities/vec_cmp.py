"""Approximate comparison of floats and vectors."""

from __future__ import annotations

from numbers import Real

from awgen.geometry.linalg import Vec2, Vec3

EPSILON = 1e-6
"""Largest difference at which two components still count as equal."""


def approx_eq(left, right) -> bool:
    """Whether two numbers or two vectors of the same kind differ by less than EPSILON."""
    for kind in (Vec3, Vec2):
        if isinstance(left, kind) and isinstance(right, kind):
            return all(abs(a - b) < EPSILON for a, b in zip(left, right))
    if isinstance(left, Real) and isinstance(right, Real):
        return abs(left - right) < EPSILON
    raise TypeError(
        f"cannot compare {type(left).__name__} with {type(right).__name__}"
    )


def assert_approx_eq(left, right) -> None:
    """Raise AssertionError unless ``left`` and ``right`` are approximately equal."""
    if not approx_eq(left, right):
        raise AssertionError(f"{left!r} is not approximately equal to {right!r}")