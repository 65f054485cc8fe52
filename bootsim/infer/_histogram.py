"""
Histogram binning for a null distribution.

The charting layer itself is left to the caller; this only produces the
bin counts, edges and which bins fall inside a confidence interval.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from bootsim.infer._common import ConfidenceInterval, HistogramData


def bin_distribution(
    stats: NDArray,
    bins: int,
    interval: ConfidenceInterval | None = None,
) -> HistogramData:
    """
    Bin stats into equal-width bins spanning [min, max].

    A bin is shaded when it overlaps the closed interval.
    """
    counts, edges = np.histogram(stats, bins=bins)

    if interval is None:
        shaded = np.zeros(len(counts), dtype=bool)
    else:
        shaded = (edges[1:] >= interval.lower) & (edges[:-1] <= interval.upper)

    counts.setflags(write=False)
    edges.setflags(write=False)
    shaded.setflags(write=False)
    return HistogramData(
        counts=counts,
        edges=edges,
        shaded=shaded,
        interval=interval,
    )
