from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Sequence, Tuple

import matplotlib.pyplot as plt
import numpy as np
from matplotlib import colors as mcolors
from matplotlib.axes import Axes
from matplotlib.cm import ScalarMappable
from mpl_toolkits.axes_grid1 import make_axes_locatable

from ..types import DensityGrid, FrameOutline, PlotPoint

ColorLike = str | Tuple[float, float, float]

# Label anchors for the apex-down PGR triangle.
LABELS = (
    ("P", -0.98, 0.54),
    ("G", 0.98, 0.54),
    ("R", 0.0, -1.14),
)


@dataclass
class FabricPlotStyle:
    """Drawing options for :func:`plot_fabric`."""

    levels: int | Sequence[float] = 9
    contour_color: ColorLike = (0.4, 0.4, 0.4)
    contour_linewidth: float = 1.0
    marker_size: float = 72.0
    marker_edgecolor: ColorLike = "k"
    low_color: ColorLike = "white"
    high_color: ColorLike = "red"
    n_colors: int = 256
    frame_color: ColorLike = "k"
    frame_linewidth: float = 2.0
    labels: bool = True
    label_fontsize: float = 24.0
    colorbar: bool = False
    colorbar_label: str = "Weight"


def weight_colors(
    weights: Iterable[float],
    low: ColorLike = "white",
    high: ColorLike = "red",
    n_colors: int = 256,
) -> np.ndarray:
    """Map weights to RGB rows on a linear ramp from ``low`` to ``high``.

    Weights are scaled by their maximum, so the largest weight gets ``high``
    and a zero or non-finite weight gets ``low``. Returns an (N, 3) array.
    """
    w = np.asarray(list(weights), dtype=float)
    w = np.where(np.isfinite(w), w, 0.0)
    if w.size == 0:
        return np.empty((0, 3), dtype=float)
    lo = np.asarray(mcolors.to_rgb(low))
    hi = np.asarray(mcolors.to_rgb(high))
    ramp = lo + np.linspace(0.0, 1.0, n_colors)[:, None] * (hi - lo)
    wmax = float(np.max(w))
    if wmax > 0:
        # round half up
        idx = np.floor(w / wmax * (n_colors - 1) + 0.5)
    else:
        idx = np.zeros_like(w)
    idx = np.clip(idx, 0, n_colors - 1).astype(int)
    return ramp[idx]


def _weight_colorbar(ax: Axes, weights: np.ndarray, style: FabricPlotStyle):
    cmap = mcolors.LinearSegmentedColormap.from_list(
        "trifab_weights", [style.low_color, style.high_color], N=style.n_colors
    )
    wmax = float(np.max(weights)) if weights.size else 1.0
    mappable = ScalarMappable(norm=mcolors.Normalize(vmin=0.0, vmax=wmax or 1.0), cmap=cmap)
    mappable.set_array(weights)
    divider = make_axes_locatable(ax)
    cax = divider.append_axes("bottom", size="5%", pad=0.4)
    cbar = ax.figure.colorbar(mappable, cax=cax, orientation="horizontal")
    cbar.set_label(style.colorbar_label)
    return cbar


def plot_fabric(
    points: Sequence[PlotPoint],
    frame: FrameOutline,
    grid: Optional[DensityGrid] = None,
    weights: Optional[Iterable[float]] = None,
    ax: Optional[Axes] = None,
    style: Optional[FabricPlotStyle] = None,
) -> Axes:
    """Draw a triangular PGR fabric plot.

    Contours ``grid`` (if given), plots ``points`` coloured by ``weights``,
    then the closed triangle frame and the P, G, R apex labels.
    """
    if style is None:
        style = FabricPlotStyle()
    if ax is None:
        fig, ax = plt.subplots(figsize=(6, 6))

    if grid is not None and grid.on_triangle().any():
        ax.contour(
            grid.x, grid.y, grid.z, style.levels,
            colors=[style.contour_color], linewidths=style.contour_linewidth,
        )

    w = np.ones(len(points)) if weights is None else np.asarray(list(weights), dtype=float)
    if len(w) != len(points):
        raise ValueError(f"got {len(w)} weights for {len(points)} points")
    if len(points):
        xy = np.array([p.as_tuple() for p in points], dtype=float)
        c = weight_colors(w, style.low_color, style.high_color, style.n_colors)
        ax.scatter(xy[:, 0], xy[:, 1], s=style.marker_size, c=c,
                   edgecolors=style.marker_edgecolor, zorder=3)

    for a, b in frame.edges():
        ax.plot([a.x, b.x], [a.y, b.y], color=style.frame_color, lw=style.frame_linewidth)

    if style.labels:
        for text, x, y in LABELS:
            ax.text(x, y, text, fontsize=style.label_fontsize, ha="center", va="center")

    ax.set_xlim(-1.0, 1.0)
    ax.set_ylim(-1.0, 1.0)
    ax.set_aspect("equal", adjustable="box")
    ax.axis("off")
    if style.colorbar and len(points):
        _weight_colorbar(ax, w, style)
    return ax
