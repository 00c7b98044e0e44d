from .fabric import FabricPlotStyle, plot_fabric, weight_colors

__all__ = [
    "FabricPlotStyle",
    "plot_fabric",
    "weight_colors",
]
