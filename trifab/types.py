from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import List, Sequence, Tuple

import numpy as np


class Apex(Enum):
    """Orientation of the plot triangle.

    UP puts a single apex at the top; DOWN (the PGR plot layout) puts the
    R apex at the bottom with P top-left and G top-right.
    """

    UP = "up"
    DOWN = "down"


class DensityMode(IntEnum):
    """Scalar index returned by the density evaluator."""

    DENSITY = 0
    INTENSITY = 1
    EXPECTED_DENSITY = 2
    EXPECTED_INTENSITY = 3

    @property
    def uses_expected(self) -> bool:
        return self > 1

    @property
    def is_intensity(self) -> bool:
        return self % 2 == 1


@dataclass(frozen=True)
class EigenTriplet:
    """Normalized orientation tensor eigenvalues with e1 >= e2 >= e3.

    Values are expected to sum to 1; this is not checked.
    """

    e1: float
    e2: float
    e3: float

    def as_tuple(self) -> Tuple[float, float, float]:
        return (self.e1, self.e2, self.e3)


@dataclass(frozen=True)
class PGRIndex:
    """Point, Girdle and Random fabric indexes."""

    p: float
    g: float
    r: float

    def as_tuple(self) -> Tuple[float, float, float]:
        return (self.p, self.g, self.r)

    def total(self) -> float:
        return self.p + self.g + self.r


@dataclass(frozen=True)
class BarycentricCoord:
    """Weights toward the three triangle apexes, a + b + c = 1.

    The all-zero coordinate is reserved for points off the triangle, it can
    never be produced by a normalized on-triangle point.
    """

    a: float
    b: float
    c: float

    def as_tuple(self) -> Tuple[float, float, float]:
        return (self.a, self.b, self.c)

    def is_off_triangle(self) -> bool:
        return (self.a + self.b + self.c) == 0.0


OFF_TRIANGLE = BarycentricCoord(0.0, 0.0, 0.0)


@dataclass(frozen=True)
class PlotPoint:
    x: float
    y: float

    def as_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)


@dataclass(frozen=True)
class FrameOutline:
    """Apexes of the plot triangle inscribed in a unit circumcircle."""

    top_left: PlotPoint
    top_right: PlotPoint
    bottom: PlotPoint

    def vertices(self) -> List[PlotPoint]:
        return [self.top_left, self.top_right, self.bottom]

    def edges(self) -> List[Tuple[PlotPoint, PlotPoint]]:
        """Return the three sides as a closed loop, last vertex back to first."""
        v = self.vertices()
        return [(v[i], v[(i + 1) % 3]) for i in range(3)]


@dataclass(frozen=True)
class FabricRecord:
    """One input row: eigenvalues plus a weight used only for symbol colour."""

    e1: float
    e2: float
    e3: float
    weight: float = 1.0

    @property
    def eigen(self) -> EigenTriplet:
        return EigenTriplet(self.e1, self.e2, self.e3)


@dataclass(frozen=True, eq=False)
class DensityGrid:
    """Regular n x n lattice of plot coordinates with an index value per node.

    x[i, j] holds the i-th x sample and y[i, j] the j-th y sample, so the
    arrays can be passed straight to ``Axes.contour``. z is NaN where the
    node lies off the triangle.
    """

    x: np.ndarray
    y: np.ndarray
    z: np.ndarray

    @property
    def n(self) -> int:
        return int(self.z.shape[0])

    def on_triangle(self) -> np.ndarray:
        return ~np.isnan(self.z)

    def value_at(self, i: int, j: int) -> float:
        return float(self.z[i, j])

    def as_tuple(self) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
        return (self.x, self.y, self.z)


ISOTROPIC = EigenTriplet(1.0 / 3.0, 1.0 / 3.0, 1.0 / 3.0)


def as_eigen(value) -> EigenTriplet:
    """Coerce a record, triplet or row of numbers to an EigenTriplet.

    Rows may carry extra columns (e.g. a weight); only the first three are
    used.
    """
    if isinstance(value, EigenTriplet):
        return value
    if isinstance(value, FabricRecord):
        return value.eigen
    vals: Sequence[float] = list(value)
    if len(vals) < 3:
        raise ValueError(f"expected at least 3 eigenvalues, got {len(vals)}")
    return EigenTriplet(float(vals[0]), float(vals[1]), float(vals[2]))
