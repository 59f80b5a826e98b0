# Init file
"""
binner: histograma de largura fixa para dados numéricos em pipelines de shell.

A biblioteca expõe `compute_bins` e o estimador `FixedWidthBinner`.
"""
__version__ = "1.0.0"

from .binning_engine import BinRecord, FixedWidthBinner, compute_bins

__all__ = ["BinRecord", "FixedWidthBinner", "compute_bins"]
