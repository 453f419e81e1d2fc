"""Algebraic circle fitting (Kasa and Newton-Pratt) on pixel points."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import Iterable, NamedTuple, Sequence

import numpy as np

from .common import FIT_CIRCLE_EPS, FIT_CIRCLE_MAX_STEPS


class Circle(NamedTuple):
    """A fitted circle: centre, radius and the relative algebraic cost."""

    x: float
    y: float
    radius: float
    cost: float = 0.0

    @property
    def is_valid(self) -> bool:
        """False for the sentinel returned when no circle could be fitted."""
        return self != NOT_CIRCLE


NOT_CIRCLE = Circle(-1.0, -1.0, -1.0, -1.0)


@dataclass(frozen=True, eq=False)
class SampleMoments:
    """Sample means of the centred (and truncated) coordinates.

    ``design`` holds one row ``(z, x, y, 1)`` per point, where ``z = x*x + y*y``.
    """

    x_bar: float
    xx_bar: float
    y_bar: float
    yy_bar: float
    xy_bar: float
    xz_bar: float
    yz_bar: float
    z_bar: float
    zz_bar: float
    x_avg: float
    y_avg: float
    design: np.ndarray = field(repr=False)


def _as_array(points: Iterable[Sequence[float]]) -> np.ndarray:
    arr = np.array([(float(p[0]), float(p[1])) for p in points], dtype=np.float64)
    return arr.reshape(-1, 2)


def sample_mean(points: Iterable[Sequence[float]]) -> SampleMoments:
    """Compute the moments used by both fitting methods.

    Coordinates are centred on their mean and truncated toward zero.
    """
    arr = _as_array(points)
    if len(arr) == 0:
        raise ValueError("at least one point is required")
    x_avg, y_avg = arr.mean(axis=0)
    centred = np.trunc(arr - (x_avg, y_avg))
    x = centred[:, 0]
    y = centred[:, 1]
    xx = x * x
    yy = y * y
    z = xx + yy
    design = np.column_stack((z, x, y, np.ones_like(z)))
    return SampleMoments(
        x_bar=float(x.mean()),
        xx_bar=float(xx.mean()),
        y_bar=float(y.mean()),
        yy_bar=float(yy.mean()),
        xy_bar=float((x * y).mean()),
        xz_bar=float((z * x).mean()),
        yz_bar=float((z * y).mean()),
        z_bar=float(z.mean()),
        zz_bar=float((z * z).mean()),
        x_avg=float(x_avg),
        y_avg=float(y_avg),
        design=design,
    )


def kasa_cost(points: Iterable[Sequence[float]], circle: Sequence[float]) -> float:
    """Mean absolute algebraic residual in percent of the squared radius."""
    arr = _as_array(points)
    if len(arr) == 0:
        raise ValueError("at least one point is required")
    cx, cy, r = float(circle[0]), float(circle[1]), float(circle[2])
    with np.errstate(all="ignore"):
        dx = arr[:, 0] - cx
        dy = arr[:, 1] - cy
        total = np.sum(np.abs(dx * dx + dy * dy - r * r))
        return float(total * 100.0 / np.float64(len(arr) * r * r))


def kasa_method(points: Iterable[Sequence[float]]) -> Circle:
    """Fit a circle with the Kasa least-squares method."""
    pts = _as_array(points)
    m = sample_mean(pts)
    a = np.array(
        [
            [m.xx_bar, m.xy_bar, m.x_bar],
            [m.xy_bar, m.yy_bar, m.y_bar],
            [m.x_bar, m.y_bar, 1.0],
        ]
    )
    b = -np.array([m.xz_bar, m.yz_bar, m.z_bar])
    try:
        inverse = np.linalg.inv(a)
    except np.linalg.LinAlgError:
        inverse = np.zeros((3, 3))
    coef_b, coef_c, coef_d = inverse @ b
    with np.errstate(all="ignore"):
        cx = -coef_b / 2.0 + m.x_avg
        cy = -coef_c / 2.0 + m.y_avg
        r = np.sqrt(np.float64(coef_b * coef_b + coef_c * coef_c - 4.0 * coef_d)) / 2.0
    cx, cy, r = float(cx), float(cy), float(r)
    return Circle(cx, cy, r, kasa_cost(pts, (cx, cy, r)))


def pratt_char_eq(eta: float, c2: float, c1: float, c0: float) -> tuple[float, float]:
    """Value and derivative of the Pratt characteristic polynomial at ``eta``."""
    eta2 = eta * eta
    eta3 = eta * eta2
    eta4 = eta * eta3
    value = 4.0 * eta4 + c2 * eta2 + c1 * eta + c0
    slope = 16.0 * eta3 + 2.0 * c2 * eta + c1
    return value, slope


def newton_pratt_method(
    points: Iterable[Sequence[float]],
    max_steps: int = FIT_CIRCLE_MAX_STEPS,
    epsilon: float = FIT_CIRCLE_EPS,
) -> Circle:
    """Fit a circle with Pratt's method, solving for the root by Newton steps.

    Returns ``NOT_CIRCLE`` when there are no points or no null direction exists.
    """
    pts = _as_array(points)
    if len(pts) == 0:
        return NOT_CIRCLE
    m = sample_mean(pts)

    c2 = (
        -m.zz_bar
        - 3.0 * m.xx_bar * m.xx_bar
        - 3.0 * m.yy_bar * m.yy_bar
        - 4.0 * m.xy_bar * m.xy_bar
        - 2.0 * m.xx_bar * m.yy_bar
    )
    c1 = (
        m.z_bar * (m.zz_bar - m.z_bar * m.z_bar)
        + 4.0 * m.z_bar * (m.xx_bar * m.yy_bar - m.xy_bar * m.xy_bar)
        - m.xz_bar * m.xz_bar
        - m.yz_bar * m.yz_bar
    )
    c0 = (
        m.xz_bar * m.xz_bar * m.yy_bar
        + m.yz_bar * m.yz_bar * m.xx_bar
        - 2.0 * m.xz_bar * m.yz_bar * m.xy_bar
        - (m.xx_bar * m.yy_bar - m.xy_bar * m.xy_bar) * (m.zz_bar - m.z_bar * m.z_bar)
    )

    curr_root = 0.0
    next_root = 0.0
    for _ in range(max_steps):
        value, slope = pratt_char_eq(curr_root, c2, c1, c0)
        if slope <= epsilon:
            break
        next_root = curr_root - value / slope
        if next_root != 0.0 and abs((next_root - curr_root) / next_root) < epsilon:
            break
        curr_root = next_root

    constraint = np.zeros((4, 4))
    constraint[0, 3] = -2.0 * next_root
    constraint[1, 1] = next_root
    constraint[2, 2] = next_root
    constraint[3, 0] = -2.0 * next_root

    design = m.design
    system = design.T @ design - constraint
    try:
        _, singular, vt = np.linalg.svd(system)
    except np.linalg.LinAlgError:
        return NOT_CIRCLE

    smin, smax = singular.min(), singular.max()
    span = smax - smin
    scale = 1.0 / span if span > sys.float_info.epsilon else 0.0
    normalized = (singular - smin) * scale
    rank = int(np.count_nonzero(normalized > epsilon))
    if rank == vt.shape[1]:
        return NOT_CIRCLE

    coef_a, coef_b, coef_c, coef_d = (np.float64(v) for v in vt[rank])
    with np.errstate(all="ignore"):
        cx = -coef_b / (2.0 * coef_a) + m.x_avg
        cy = -coef_c / (2.0 * coef_a) + m.y_avg
        r = np.sqrt(
            (coef_b * coef_b + coef_c * coef_c - 4.0 * coef_a * coef_d)
            / (4.0 * coef_a * coef_a)
        )
    cx, cy, r = float(cx), float(cy), float(r)
    return Circle(cx, cy, r, kasa_cost(pts, (cx, cy, r)))