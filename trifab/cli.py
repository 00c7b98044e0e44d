from __future__ import annotations

import argparse
import logging
from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np

from .coords import convert_batch
from .density import DEFAULT_ERR, DEFAULT_NODES, evaluate_density_grid
from .io import read_fabric_txt
from .plots import FabricPlotStyle, plot_fabric
from .types import DensityMode, EigenTriplet

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="trifab: triangular PGR fabric plot with density contours")
    p.add_argument("input", type=Path, help="Path to input file (e1,e2,e3,weight per line)")
    p.add_argument("--nodes", type=int, default=DEFAULT_NODES, help="Grid nodes along x and y")
    p.add_argument("--err", type=float, default=DEFAULT_ERR,
                   help="Tolerance at the triangle margins; raise if contours stop short of the frame")
    p.add_argument("--mode", type=int, choices=[m.value for m in DensityMode], default=0,
                   help="0 density, 1 intensity, 2 expected density, 3 expected intensity")
    p.add_argument("--expected", type=float, nargs=3, metavar=("E1", "E2", "E3"), default=None,
                   help="Protolith eigenvalues for modes 2 and 3 (default: first record)")
    p.add_argument("--levels", type=int, default=9, help="Number of contour levels")
    p.add_argument("--colorbar", action="store_true", help="Add a weight colorbar")
    p.add_argument("--show", action="store_true", help="Show the plot interactively")
    p.add_argument("--save", type=Path, default=None, help="Path to save the figure")
    p.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return p


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.nodes < 2:
        parser.error(f"--nodes must be at least 2, got {args.nodes}")
    if args.err < 0:
        parser.error(f"--err must be >= 0, got {args.err}")
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    records = read_fabric_txt(args.input)
    if not records:
        print("No valid fabric records found.")
        return 1

    mode = DensityMode(args.mode)
    expected = None
    if mode.uses_expected:
        expected = EigenTriplet(*args.expected) if args.expected else records[0].eigen
        logger.info("protolith eigenvalues: %s", expected.as_tuple())

    pgr, points, frame = convert_batch(records)
    grid = evaluate_density_grid(args.nodes, args.err, mode, expected)

    inside = grid.on_triangle()
    zmax = float(np.nanmax(grid.z)) if inside.any() else float("nan")
    print(f"Records: {len(records)}; grid {grid.n}x{grid.n}, {int(inside.sum())} nodes on triangle; "
          f"max {mode.name.lower().replace('_', ' ')} = {zmax:.4f}")

    style = FabricPlotStyle(levels=args.levels, colorbar=args.colorbar)
    ax = plot_fabric(points, frame, grid=grid, weights=[r.weight for r in records], style=style)

    if args.save is not None:
        ax.figure.savefig(args.save, dpi=150)
        logger.info("saved %s", args.save)

    if args.show or args.save is None:
        plt.show()

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
