"""
Saída dos bins: linhas "<centro>\\t<contagem>" para a saída padrão e
relatórios (.xlsx / .csv / .json) da tabela de bins.
"""

from __future__ import annotations
import json
import math
import logging
import pandas as pd
import numpy as np
from pathlib import Path
from typing import Iterable, List, Sequence, TextIO, Union

from .binning_engine import BinRecord, FixedWidthBinner

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


# ------------------------------------------------------------------ #
def format_center(x: float) -> str:
    """Decimal posicional mais curto (1.0 -> "1", 1e-7 -> "0.0000001")."""
    if math.isnan(x):
        return "NaN"
    if math.isinf(x):
        return "inf" if x > 0 else "-inf"
    return np.format_float_positional(x, trim="-")


def format_bins(records: Iterable[Sequence]) -> List[str]:
    return [f"{format_center(float(center))}\t{int(count)}" for center, count in records]


def write_bins(records: Iterable[Sequence], stream: TextIO) -> None:
    for line in format_bins(records):
        stream.write(line + "\n")


def bins_to_frame(records: Iterable[Sequence]) -> pd.DataFrame:
    return pd.DataFrame(
        [BinRecord(float(c), int(n)) for c, n in records],
        columns=["center", "count"],
    )


# ------------------------------------------------------------------ #
def _bin_table(source) -> pd.DataFrame:
    if isinstance(source, FixedWidthBinner):
        if not hasattr(source, "bin_summary_"):
            raise RuntimeError("Binner ainda não foi treinado.  Chame .fit() antes.")
        return source.bin_summary_
    return bins_to_frame(source)


def _metrics(source, table: pd.DataFrame) -> dict:
    info = {
        "n_bins": int(len(table)),
        "n_values": int(table["count"].sum()) if len(table) else 0,
    }
    if isinstance(source, FixedWidthBinner):
        info["bin_width"] = float(source.bin_width)
        info["bin_origin"] = float(source.bin_origin)
    return info


def save_bins_report(source: Union[FixedWidthBinner, Iterable[Sequence]], path: PathLike) -> Path:
    """
    Salva tabela de bins e métricas em Excel, CSV ou JSON
    (detecta pela extensão; padrão Excel).

    `source` é um `FixedWidthBinner` treinado ou uma sequência de
    pares (centro, contagem).
    """
    p = Path(path)
    table = _bin_table(source)
    meta = _metrics(source, table)
    suffix = p.suffix.lower()
    if suffix == ".json":
        _save_json(table, meta, p)
    elif suffix == ".csv":
        table.to_csv(p, index=False)
    else:  # padrão Excel
        p = p.with_suffix(".xlsx")
        _save_excel(table, meta, p)
    logger.info("Relatório salvo em %s (%d bins)", p, meta["n_bins"])
    return p


def _save_excel(table: pd.DataFrame, meta: dict, path: Path) -> None:
    with pd.ExcelWriter(path) as writer:
        table.to_excel(writer, sheet_name="bin_table", index=False)
        pd.DataFrame(
            {"metric": list(meta.keys()), "value": list(meta.values())}
        ).to_excel(writer, sheet_name="metrics", index=False)


# ------------------------------------------------------------------ #
def _save_json(table: pd.DataFrame, meta: dict, path: Path) -> None:
    info = dict(meta)
    # NaN/inf não existem em JSON: viram null
    clean = table.astype(object).where(table.notna() & ~table.isin([np.inf, -np.inf]), None)
    info["bin_table"] = clean.to_dict(orient="records")
    path.write_text(json.dumps(info, indent=2, default=float, allow_nan=False))
