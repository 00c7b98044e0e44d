"""Tests for the matplotlib fabric plot."""
import numpy as np
import pytest

from trifab import convert_batch, evaluate_density_grid
from trifab.io import read_fabric_txt
from trifab.plots import FabricPlotStyle, plot_fabric, weight_colors


class TestWeightColors:

    def test_ramp_ends(self):
        c = weight_colors([0.0, 5.0, 10.0])
        assert c.shape == (3, 3)
        np.testing.assert_allclose(c[0], [1.0, 1.0, 1.0])
        np.testing.assert_allclose(c[2], [1.0, 0.0, 0.0])
        assert c[1, 0] == 1.0
        assert 0.0 < c[1, 1] < 1.0

    def test_custom_colors(self):
        c = weight_colors([0.0, 2.0], low="black", high="blue", n_colors=2)
        np.testing.assert_allclose(c, [[0.0, 0.0, 0.0], [0.0, 0.0, 1.0]])

    def test_zero_weights_use_low_color(self):
        c = weight_colors([0.0, 0.0])
        np.testing.assert_allclose(c, np.ones((2, 3)))

    def test_empty(self):
        assert weight_colors([]).shape == (0, 3)

    def test_non_finite_weights_use_low_color(self):
        c = weight_colors([float("nan"), 4.0, float("inf")])
        np.testing.assert_allclose(c[0], [1.0, 1.0, 1.0])
        np.testing.assert_allclose(c[1], [1.0, 0.0, 0.0])
        np.testing.assert_allclose(c[2], [1.0, 1.0, 1.0])


class TestPlotFabric:

    def test_full_plot(self, fabric_file):
        records = read_fabric_txt(fabric_file)
        _, points, frame = convert_batch(records)
        grid = evaluate_density_grid(30)
        ax = plot_fabric(points, frame, grid=grid, weights=[r.weight for r in records])
        assert len(ax.lines) == 3
        assert [t.get_text() for t in ax.texts] == ["P", "G", "R"]
        assert len(ax.collections) >= 1
        assert not ax.axison

    def test_style_and_existing_axes(self, fabric_file):
        import matplotlib.pyplot as plt

        records = read_fabric_txt(fabric_file)
        _, points, frame = convert_batch(records)
        fig, ax = plt.subplots()
        style = FabricPlotStyle(labels=False, colorbar=True, frame_linewidth=1.0)
        out = plot_fabric(points, frame, weights=[r.weight for r in records], ax=ax, style=style)
        assert out is ax
        assert len(ax.texts) == 0
        assert len(fig.axes) == 2

    def test_points_only(self):
        _, points, frame = convert_batch([(0.6, 0.3, 0.1)])
        ax = plot_fabric(points, frame)
        assert len(ax.lines) == 3

    def test_weight_count_mismatch(self):
        _, points, frame = convert_batch([(0.6, 0.3, 0.1), (0.5, 0.3, 0.2)])
        with pytest.raises(ValueError):
            plot_fabric(points, frame, weights=[1.0])
