"""
visualizations.py
Gráfico de barras do histograma (contagem por centro de bin).
Usa Matplotlib (sem cores explícitas, conforme guidelines).
"""

from __future__ import annotations
import matplotlib.pyplot as plt
import seaborn as sns
import pandas as pd
import numpy as np
from matplotlib.ticker import FuncFormatter

HEX_BASE = "#023059"             # azul mais escuro
HEX_MIN  = "#B5C1CD"             # azul mais claro permitido


def _blend_palette(n: int):
    """Gera n tons de azul do claro (HEX_MIN) ao escuro (HEX_BASE)."""
    if n <= 0: # Se n for 0 ou negativo, retorna uma lista vazia
        return []
    return sns.blend_palette([HEX_MIN, HEX_BASE], n, as_cmap=False)


def plot_bins(
    summary: pd.DataFrame,
    *,
    ax=None,
    bin_width: float | None = None,
    title: str | None = "Histograma",
    figsize=(10, 4),
):
    """
    Barras com a contagem de cada bin, posicionadas no centro.

    summary
        DataFrame com colunas "center" e "count" (ex.: `bin_summary_`
        ou `reporting.bins_to_frame`). Se houver "lower"/"upper", a
        largura das barras vem delas.
    """
    if ax is None:
        _, ax = plt.subplots(figsize=figsize)

    if summary is None or summary.empty:
        ax.set_title(f"{title} (Sem dados disponíveis)" if title else "(Sem dados disponíveis)")
        ax.set_xlabel("Centro do bin")
        ax.set_ylabel("Contagem")
        return ax

    # bins não finitos não têm posição no eixo
    tbl = summary[np.isfinite(summary["center"].astype(float))]

    if bin_width is None:
        if {"lower", "upper"} <= set(tbl.columns) and len(tbl):
            bin_width = float((tbl["upper"] - tbl["lower"]).iloc[0])
        else:
            diffs = np.diff(tbl["center"].to_numpy(dtype=float))
            bin_width = float(diffs[diffs > 0].min()) if (diffs > 0).any() else 1.0

    # tom mais escuro para as barras mais altas
    order = tbl["count"].rank(method="first").astype(int).to_numpy() - 1
    palette = _blend_palette(len(tbl))
    colors = [palette[i] for i in order]

    ax.bar(tbl["center"], tbl["count"], width=bin_width, color=colors, edgecolor="white")
    ax.set_title(title or "")
    ax.set_xlabel("Centro do bin")
    ax.set_ylabel("Contagem")
    ax.yaxis.set_major_formatter(FuncFormatter(lambda v, _: f"{v:.0f}"))
    ax.set_facecolor("white")
    ax.grid(False)
    ax.figure.tight_layout()
    return ax
