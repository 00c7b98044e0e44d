from __future__ import annotations

from .coords import SQRT3
from .types import OFF_TRIANGLE, Apex, BarycentricCoord


def _outside(v: float, err: float) -> bool:
    return v > 1.0 + err or v < -err


def cartesian_to_barycentric(
    x: float,
    y: float,
    apex: Apex = Apex.UP,
    err: float = 0.0,
) -> BarycentricCoord:
    """Convert plot coordinates in [-1, 1] to triangular coordinates.

    Inverse of :func:`trifab.coords.barycentric_to_cartesian`. Each of a, b, c
    must lie within [-err, 1 + err], checked in that order; otherwise
    ``OFF_TRIANGLE`` (0, 0, 0) is returned. A small ``err`` keeps grid nodes
    on the triangle border so contour lines reach the frame.
    """
    if err < 0:
        raise ValueError(f"err must be >= 0, got {err}")
    xt = x / 1.5
    yt = y if apex is Apex.UP else -y
    a = (yt + 0.5) / 1.5
    if _outside(a, err):
        return OFF_TRIANGLE
    b = -(xt * SQRT3 - 1.0 + a) * 0.5
    if _outside(b, err):
        return OFF_TRIANGLE
    c = 1.0 - a - b
    if _outside(c, err):
        return OFF_TRIANGLE
    return BarycentricCoord(a, b, c)
