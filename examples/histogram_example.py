"""Example: fixed-width histogram of synthetic latencies with binner."""

import numpy as np
import pandas as pd

from binner import FixedWidthBinner, compute_bins
from binner.reporting import format_bins
from binner.visualizations import plot_bins

# synthetic dataset -------------------------------------------------------
rng = np.random.default_rng(0)
X = pd.DataFrame({"latency_ms": rng.gamma(shape=2.0, scale=5.0, size=800)})

# plain function: (center, count) pairs -----------------------------------
for line in format_bins(compute_bins(X["latency_ms"], bin_width=5.0)):
    print(line)

# estimator: bin table + values replaced by bin centers -------------------
binner = FixedWidthBinner(bin_width=5.0, bin_origin=2.5)
X_binned = binner.fit_transform(X)

print(binner.bin_summary_)
print(X_binned.head())

# plot ------------------------------------------------------------------
ax = plot_bins(binner.bin_summary_, title="Latência (ms)")
ax.figure.savefig("latency_histogram.png")
