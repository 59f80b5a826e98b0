import matplotlib
matplotlib.use("Agg")

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd
from binner import FixedWidthBinner
from binner.reporting import bins_to_frame
from binner.visualizations import _blend_palette, plot_bins


def test_blend_palette_size():
    assert _blend_palette(0) == []
    assert len(_blend_palette(4)) == 4


def test_plot_bins_from_summary():
    rng = np.random.default_rng(1)
    binner = FixedWidthBinner(bin_width=0.5).fit(rng.normal(size=200))
    ax = plot_bins(binner.bin_summary_)
    assert len(ax.patches) == binner.n_bins_
    assert ax.patches[0].get_width() == 0.5
    plt.close(ax.figure)


def test_plot_bins_skips_non_finite_centers():
    df = bins_to_frame([(-np.inf, 1), (0.5, 2), (1.5, 1), (np.nan, 3)])
    ax = plot_bins(df)
    assert len(ax.patches) == 2
    assert ax.patches[0].get_width() == 1.0
    plt.close(ax.figure)


def test_plot_empty():
    ax = plot_bins(pd.DataFrame(columns=["center", "count"]))
    assert "Sem dados" in ax.get_title()
    plt.close(ax.figure)
