"""Fabric density and intensity grids for contouring a PGR plot.

Grid nodes are mapped back to PGR indexes and then to eigenvalues, and the
squared distance of those eigenvalues from a baseline gives the index:

- density, D = sqrt(1.5 * ss)          (Vollmer 2020)
- intensity, I = 7.5 * ss              (Lisle 1985, Vollmer 1990)

The baseline is the isotropic fabric (1/3, 1/3, 1/3), or caller supplied
protolith eigenvalues for the "expected" modes.
"""

from __future__ import annotations

import logging
import math
from typing import Optional, Sequence, Union

import numpy as np

from .barycentric import cartesian_to_barycentric
from .coords import pgr_to_eigen
from .types import ISOTROPIC, Apex, DensityGrid, DensityMode, EigenTriplet, as_eigen

logger = logging.getLogger(__name__)

DEFAULT_NODES = 150
DEFAULT_ERR = 0.005

ExpectedLike = Union[EigenTriplet, Sequence[float]]


def _baseline(mode: DensityMode, expected: Optional[ExpectedLike]) -> EigenTriplet:
    if mode.uses_expected and expected is not None:
        return as_eigen(expected)
    return ISOTROPIC


def _index(e: EigenTriplet, base: EigenTriplet, mode: DensityMode) -> float:
    d1 = e.e1 - base.e1
    d2 = e.e2 - base.e2
    d3 = e.e3 - base.e3
    ss = d1 * d1 + d2 * d2 + d3 * d3
    if mode.is_intensity:
        return 7.5 * ss
    return math.sqrt(1.5 * ss)


def evaluate_density_at(
    x: float,
    y: float,
    err: float = DEFAULT_ERR,
    mode: Union[DensityMode, int] = DensityMode.DENSITY,
    expected: Optional[ExpectedLike] = None,
) -> float:
    """Return the fabric index at plot coordinate (x, y).

    NaN is returned for points off the triangle by more than ``err``.
    ``expected`` holds protolith eigenvalues and is only used by the
    EXPECTED_* modes; it defaults to the isotropic fabric.
    """
    mode = DensityMode(mode)
    return _evaluate(x, y, err, mode, _baseline(mode, expected))


def _evaluate(x: float, y: float, err: float, mode: DensityMode, base: EigenTriplet) -> float:
    # apex down: a = r, b = p, c = g
    r, p, g = cartesian_to_barycentric(x, y, Apex.DOWN, err).as_tuple()
    if (r + p + g) == 0.0:
        return math.nan
    return _index(pgr_to_eigen(p, g, r), base, mode)


def evaluate_density_grid(
    n: int = DEFAULT_NODES,
    err: float = DEFAULT_ERR,
    mode: Union[DensityMode, int] = DensityMode.DENSITY,
    expected: Optional[ExpectedLike] = None,
) -> DensityGrid:
    """Evaluate the fabric index on an n x n grid spanning [-1, 1] in x and y.

    Parameters
    ----------
    n : number of nodes along each axis, at least 2.
    err : tolerance on the triangular coordinates at the plot margins. For
        n=150, 0.005 works well; raise it if contour lines stop short of
        the frame.
    mode : DensityMode or its integer value 0..3.
    expected : protolith eigenvalues for the EXPECTED_* modes.
    """
    n = int(n)
    if n < 2:
        raise ValueError(f"grid needs at least 2 nodes per axis, got {n}")
    if err < 0:
        raise ValueError(f"err must be >= 0, got {err}")
    mode = DensityMode(mode)
    base = _baseline(mode, expected)
    logger.debug("density grid n=%d err=%g mode=%s baseline=%s", n, err, mode.name, base.as_tuple())

    samples = np.linspace(-1.0, 1.0, n)
    x, y = np.meshgrid(samples, samples, indexing="ij")
    z = np.empty((n, n), dtype=float)
    for i in range(n):
        xi = float(samples[i])
        for j in range(n):
            z[i, j] = _evaluate(xi, float(samples[j]), err, mode, base)

    grid = DensityGrid(x=x, y=y, z=z)
    if logger.isEnabledFor(logging.DEBUG):
        inside = grid.on_triangle()
        logger.debug(
            "density grid: %d of %d nodes on triangle, max %s",
            int(inside.sum()), n * n,
            f"{float(np.nanmax(z)):.4f}" if inside.any() else "n/a",
        )
    return grid
