"""
Type definitions used across layers
"""

from enum import IntEnum, StrEnum


class Color(IntEnum):
    """The six colors a cell can have. Values are the indices the UI sends (ball-0 .. ball-5 icons)."""

    GREY = 0
    ORANGE = 1
    BLUE = 2
    GREEN = 3
    PURPLE = 4
    RED = 5


class Topology(StrEnum):
    PLANE = "plane"
    TORUS = "torus"


class Connectivity(StrEnum):
    ORTHOGONAL = "orthogonal"
    DIAGONAL = "diagonal"
