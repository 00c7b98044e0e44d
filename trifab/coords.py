"""Eigenvalue, PGR and plot coordinate conversions.

The plot triangle is scaled to a height of 1.5 so that it is inscribed in a
unit circumcircle centered at the origin. PGR plots are drawn apex down:
R at the bottom, P top-left, G top-right.
"""

from __future__ import annotations

import math
from typing import Iterable, List, Tuple

from .types import (
    Apex,
    BarycentricCoord,
    EigenTriplet,
    FrameOutline,
    PGRIndex,
    PlotPoint,
    as_eigen,
)

# 1/sqrt(3) * sqrt(3) must round to 1 so border points survive a round trip.
SQRT3 = math.sqrt(3.0)
INV_SQRT3 = 1.0 / SQRT3


def eigen_to_pgr(eig: EigenTriplet) -> PGRIndex:
    """Convert normalized eigenvalues (e1 >= e2 >= e3) to PGR indexes."""
    return PGRIndex(
        p=eig.e1 - eig.e2,
        g=2.0 * (eig.e2 - eig.e3),
        r=3.0 * eig.e3,
    )


def pgr_to_eigen(p: float, g: float, r: float) -> EigenTriplet:
    e3 = r / 3.0
    e2 = g * 0.5 + e3
    e1 = p + e2
    return EigenTriplet(e1, e2, e3)


def barycentric_to_cartesian(coord: BarycentricCoord, apex: Apex = Apex.UP) -> PlotPoint:
    """Map triangular coordinates to the unit-circumcircle plot.

    ``a`` runs along the apex axis. For Apex.UP the apexes are
    a = (0, 1), b = (-sqrt(3)/2, -1/2), c = (sqrt(3)/2, -1/2);
    Apex.DOWN negates y.
    """
    x = (1.0 - coord.a - 2.0 * coord.b) * INV_SQRT3
    y = coord.a
    x = x * 1.5
    y = y * 1.5 - 0.5
    if apex is Apex.DOWN:
        y = -y
    return PlotPoint(x, y)


def pgr_to_cartesian(pgr: PGRIndex) -> PlotPoint:
    # a = r (bottom), b = p (top left), c = g (top right)
    return barycentric_to_cartesian(BarycentricCoord(pgr.r, pgr.p, pgr.g), Apex.DOWN)


def triangle_frame(apex: Apex = Apex.DOWN) -> FrameOutline:
    """Return the apexes of the equilateral plot triangle.

    Order is top-left, top-right, bottom for Apex.DOWN; Apex.UP negates y.
    """
    sign = -1.0 if apex is Apex.UP else 1.0
    return FrameOutline(
        top_left=PlotPoint(-0.5 * SQRT3, sign * 0.5),
        top_right=PlotPoint(0.5 * SQRT3, sign * 0.5),
        bottom=PlotPoint(0.0, sign * -1.0),
    )


def convert_batch(eigs: Iterable) -> Tuple[List[PGRIndex], List[PlotPoint], FrameOutline]:
    """Convert a sequence of eigenvalue triplets for a PGR plot.

    Items may be EigenTriplet, FabricRecord, or rows whose first three values
    are e1, e2, e3 (e.g. rows of an N x 4 array with a weight column).

    Returns (pgr, points, frame) with pgr and points in input order.
    """
    pgr: List[PGRIndex] = []
    points: List[PlotPoint] = []
    for item in eigs:
        idx = eigen_to_pgr(as_eigen(item))
        pgr.append(idx)
        points.append(pgr_to_cartesian(idx))
    return pgr, points, triangle_frame(Apex.DOWN)
