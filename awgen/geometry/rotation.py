"""Texture rotation of a block face."""

from __future__ import annotations

from enum import Enum


class FaceRotation(Enum):
    """Clockwise texture rotation of a block face."""

    C0 = "C0"
    C90 = "C90"
    C180 = "C180"
    C270 = "C270"

    @classmethod
    def default(cls) -> FaceRotation:
        """The rotation used when none is given: no rotation."""
        return cls.C0