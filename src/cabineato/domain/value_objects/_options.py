"""Enumerated configuration choices shared by the schema and generators."""

from __future__ import annotations

from enum import Enum


class BackPanelType(str, Enum):
    """How the back panel is attached to the carcass."""

    APPLIED = "applied"
    INSET = "inset"
    NONE = "none"


class Compensation(str, Enum):
    """Which side of the cut line the router bit runs on."""

    OUTSIDE = "outside"
    INSIDE = "inside"
    CENTER = "center"


class PullType(str, Enum):
    """Drawer pull hole pattern."""

    NONE = "none"
    SINGLE = "single"
    DOUBLE = "double"


class RunnerMode(str, Enum):
    """What rests on shelf runner strips.

    FULL_WIDTH adds a loose shelf spanning the interior on each pair of
    strips; STRIPS_ONLY generates the strips alone.
    """

    FULL_WIDTH = "full_width"
    STRIPS_ONLY = "strips_only"
