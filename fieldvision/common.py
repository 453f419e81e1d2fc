"""Shared types and constants for the field vision tools."""

from __future__ import annotations

from enum import IntEnum
from typing import NamedTuple


class ImageEncode(IntEnum):
    """Pixel encodings understood by the vision pipeline."""

    GRAY8BIT = 0
    BGR8BIT = 1


class Point(NamedTuple):
    """An integer pixel position."""

    x: int
    y: int


# Camera mount geometry (metres).
NECK_X = 0.02
NECK_Y = 0.0
NECK_Z = 0.041
NECK2HEAD_X = 0.036644
NECK2HEAD_Y = 0.0
NECK2HEAD_Z = 0.05455

FRAME_WIDTH = 640
FRAME_HEIGHT = 480

POINTS_MAP_H = 600
POINTS_MAP_W = 900

FIT_CIRCLE_MAX_STEPS = 20
FIT_CIRCLE_EPS = 1e-12

RANSAC_NUM_SAMPLES = 3
RANSAC_MAX_ITER = 40

PI = 3.14159265359
TWO_PI = 2.0 * PI
PI_TWO = PI / 2.0
THREE_PI_TWO = 3.0 * PI_TWO
DEG2RAD = PI / 180.0
RAD2DEG = 1.0 / DEG2RAD

ANSI_RESET = "\033[0m"
ANSI_RED = "\033[31m"
ANSI_GREEN = "\033[32m"

# Field dimensions (centimetres).
FIELD_LENGTH = 900
FIELD_WIDTH = 600
GOAL_DEPTH = 60
GOAL_WIDTH = 260
GOAL_AREA_LENGTH = 100
GOAL_AREA_WIDTH = 500
PENALTY_MARK_DISTANCE = 210
CENTER_CIRCLE_DIAMETER = 150
BORDER_STRIP_WIDTH = 70