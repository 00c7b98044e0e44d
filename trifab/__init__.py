"""trifab: triangular PGR fabric plots in Python.

Converts normalized orientation tensor eigenvalues to PGR indexes and plot
coordinates (Vollmer 1989, 1990), and evaluates fabric density or intensity
grids for contouring (Vollmer 2020).

Modules are small and focused: ``coords`` for the forward transforms,
``barycentric`` for the inverse mapping, ``density`` for the grid, with
``io`` and ``plots`` as optional loading and matplotlib helpers.
"""

from .barycentric import cartesian_to_barycentric
from .coords import (
    barycentric_to_cartesian,
    convert_batch,
    eigen_to_pgr,
    pgr_to_cartesian,
    pgr_to_eigen,
    triangle_frame,
)
from .density import evaluate_density_at, evaluate_density_grid
from .types import (
    ISOTROPIC,
    OFF_TRIANGLE,
    Apex,
    BarycentricCoord,
    DensityGrid,
    DensityMode,
    EigenTriplet,
    FabricRecord,
    FrameOutline,
    PGRIndex,
    PlotPoint,
)

__version__ = "0.1.0"

__all__ = [
    "Apex",
    "BarycentricCoord",
    "DensityGrid",
    "DensityMode",
    "EigenTriplet",
    "FabricRecord",
    "FrameOutline",
    "ISOTROPIC",
    "OFF_TRIANGLE",
    "PGRIndex",
    "PlotPoint",
    "barycentric_to_cartesian",
    "cartesian_to_barycentric",
    "convert_batch",
    "eigen_to_pgr",
    "evaluate_density_at",
    "evaluate_density_grid",
    "pgr_to_cartesian",
    "pgr_to_eigen",
    "triangle_frame",
]
