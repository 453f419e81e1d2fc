"""Field-line point extraction and line fitting for robot self-localization."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass, field
from typing import Iterable, Iterator, NamedTuple, Sequence

import numpy as np

from .common import PI_TWO, Point

_MAX_SCAN_THICKNESS = 50
_MAX_ADAPTIVE_SPAN = 100
_FIXED_SCAN_STEP = 10
_GROUP_GAP = 25

_DEFAULT_STEP = 5.0
_TILT_CONST = 10.0
_PAN_CONST = 4.0


class BoundaryColumn(NamedTuple):
    """One scan line of the field boundary.

    ``x`` is the scanned column, ``y`` the first row of the field and
    ``z`` the row at which scanning stops.
    """

    x: float
    y: float
    z: float


@dataclass
class FieldBoundary:
    """Field boundary scan lines: ``bound1`` for columns, ``bound2`` for rows."""

    bound1: list[BoundaryColumn] = field(default_factory=list)
    bound2: list[BoundaryColumn] = field(default_factory=list)


@dataclass
class RansacResult:
    """Outcome of a RANSAC line search.

    The line is ``y = intercept + slope * x``. ``inliers`` is the largest
    contiguous run of inliers of the best model; ``remaining`` holds the input
    points with that run taken out.
    """

    intercept: float
    slope: float
    inliers: list[Point]
    remaining: list[Point]

    @property
    def model(self) -> tuple[float, float]:
        return self.intercept, self.slope


def step_func(idx: float) -> int:
    """Spacing between successive row scans, growing with the index."""
    return int(1.226446e-7 * idx * idx + 0.0249607537 * idx + 4.0)


def follow_line_by_x(a: float, b: float, x: float) -> float:
    """Evaluate the line ``a * x + b``."""
    return a * x + b


def _half(value: int) -> int:
    """Halve with truncation toward zero."""
    return int(value / 2)


def scan_line_points(
    invert_green: np.ndarray,
    segmented_white: np.ndarray,
    field_boundary: FieldBoundary,
    orientation: int,
) -> list[Point]:
    """Find midpoints of thin non-green runs that are white along boundary scans.

    Orientation 0 scans columns from ``bound1`` every tenth entry; orientation 1
    scans rows from ``bound2`` with a growing step.
    """
    if orientation not in (0, 1):
        raise ValueError(f"orientation must be 0 or 1, not {orientation!r}")
    green = np.asarray(invert_green)
    white = np.asarray(segmented_white)
    if orientation:
        green = green.T
        white = white.T
        boundary = field_boundary.bound2
    else:
        boundary = field_boundary.bound1

    found: list[Point] = []
    i = 0
    while i < len(boundary):
        column = boundary[i]
        tx = int(column.x)
        stop = column.z
        start = int(column.y)
        while start < stop and green[start, tx] > 0:
            start += 1

        target_y = -1
        for j in range(start, math.ceil(stop)):
            pixel = green[j, tx]
            if pixel > 0 and target_y == -1:
                target_y = j
            elif pixel == 0 and target_y != -1:
                if j - target_y < _MAX_SCAN_THICKNESS:
                    target_y = _half(target_y + j - 1)
                    if white[target_y, tx]:
                        found.append(
                            Point(target_y, tx) if orientation else Point(tx, target_y)
                        )
                target_y = -1

        i += step_func(i) if orientation == 1 else _FIXED_SCAN_STEP
    return found


def scan_all_line_points(
    invert_green: np.ndarray,
    segmented_white: np.ndarray,
    field_boundary: FieldBoundary,
) -> list[Point]:
    """Column scan followed by row scan."""
    return scan_line_points(
        invert_green, segmented_white, field_boundary, 0
    ) + scan_line_points(invert_green, segmented_white, field_boundary, 1)


def _ray_pattern(grad: float, width: int, height: int, from_right: bool) -> list[Point]:
    pattern: list[Point] = []
    last_y = 0
    columns = range(width - 1, -1, -1) if from_right else range(width)
    for x in columns:
        if last_y >= height:
            break
        y = int(follow_line_by_x(grad, 0.0, width - x if from_right else x))
        if y >= 0:
            pattern.extend(Point(x, j) for j in range(last_y, min(y, height - 1) + 1))
        last_y = y
    return pattern


def _scan_pattern(
    pattern: Iterable[Point], green: np.ndarray, white: np.ndarray
) -> Iterator[Point]:
    target_x, target_y = -1, -1
    for x, y in pattern:
        pixel = green[y, x]
        if pixel > 0 and target_y == -1:
            target_x, target_y = x, y
        elif pixel == 0 and target_y != -1:
            if x - target_x < _MAX_ADAPTIVE_SPAN and y - target_y < _MAX_ADAPTIVE_SPAN:
                target_x = _half(target_x + x - 1)
                target_y = _half(target_y + y - 1)
                if white[target_y, target_x]:
                    yield Point(target_x, target_y)
            target_y = -1


def adaptive_scan_line_points(
    invert_green: np.ndarray,
    segmented_white: np.ndarray,
    tilt: float,
    pan: float,
) -> list[Point]:
    """Scan rays fanning out from both top corners for line points.

    The number of rays on each side depends on the head tilt and pan.
    """
    green = np.asarray(invert_green)
    white = np.asarray(segmented_white)
    height, width = green.shape[:2]

    tilt_term = math.exp(-_TILT_CONST * tilt)
    sides = (
        (False, _DEFAULT_STEP * (tilt_term + math.exp(-_PAN_CONST * pan))),
        (True, _DEFAULT_STEP * (tilt_term + math.exp(_PAN_CONST * pan))),
    )

    found: list[Point] = []
    for from_right, num_step in sides:
        angle_step = PI_TWO / num_step
        for i in range(math.ceil(num_step)):
            grad = math.tan(angle_step * i)
            pattern = _ray_pattern(grad, width, height, from_right)
            found.extend(_scan_pattern(pattern, green, white))
    return found


def _fit_line(points: Sequence[Point]) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    xs = np.array([p.x for p in points], dtype=np.float64)
    design = np.column_stack((np.ones_like(xs), xs))
    target = np.array([p.y for p in points], dtype=np.float64)
    normal = design.T @ design
    try:
        inverse = np.linalg.inv(normal)
    except np.linalg.LinAlgError:
        inverse = np.zeros((2, 2))
    return inverse @ (design.T @ target), design, target


def ransac(
    data_points: Iterable[Sequence[int]],
    n: int,
    k: int,
    t: float,
    d: int,
    rng: random.Random | None = None,
) -> RansacResult:
    """Fit a line ``y = intercept + slope * x`` by random sample consensus.

    ``n`` points are sampled per trial for ``k`` trials; points closer than
    ``t`` count as inliers and a model needs more than ``d`` of them.
    """
    points = [Point(int(p[0]), int(p[1])) for p in data_points]
    if not points:
        raise ValueError("at least one data point is required")
    rng = rng or random.Random()

    best_model = (0.0, 0.0)
    best_inliers: list[tuple[int, Point]] = []
    opt_error = float("inf")
    opt_inliers = 0

    with np.errstate(all="ignore"):
        for _ in range(k):
            sample = [points[rng.randrange(len(points))] for _ in range(n)]
            coef, _, _ = _fit_line(sample)
            intercept, slope = float(coef[0]), float(coef[1])
            norm = math.sqrt(slope * slope + 1.0)

            inliers = [
                (idx, p)
                for idx, p in enumerate(points)
                if abs(slope * p.x - p.y + intercept) / norm < t
            ]
            if len(inliers) > d and len(inliers) > opt_inliers:
                coef, design, target = _fit_line([p for _, p in inliers])
                residual = target - design @ coef
                err = float(residual @ residual)
                if err < opt_error:
                    best_model = (float(coef[0]), float(coef[1]))
                    opt_error = err
                    opt_inliers = len(inliers)
                    best_inliers = inliers

    selected: list[tuple[int, Point]] = []
    current: list[tuple[int, Point]] = best_inliers[:1]
    for (_, prev), nxt in zip(best_inliers, best_inliers[1:]):
        point = nxt[1]
        if abs(prev.x - point.x) < _GROUP_GAP and abs(prev.y - point.y) < _GROUP_GAP:
            current.append(nxt)
        else:
            if len(current) > len(selected):
                selected = current
            current = []
    if len(current) > len(selected):
        selected = current

    taken = {idx for idx, _ in selected}
    return RansacResult(
        intercept=best_model[0],
        slope=best_model[1],
        inliers=[p for _, p in selected],
        remaining=[p for idx, p in enumerate(points) if idx not in taken],
    )