#
"""
binning_engine.py
Binagem de largura fixa: agrupa valores reais em intervalos [lower, upper)
e devolve o centro e a contagem de cada bin ocupado.

Também expõe `FixedWidthBinner`, interface scikit-learn-compatível sobre o
mesmo cálculo.
"""
from __future__ import annotations
from typing import Iterable, List, NamedTuple
import math
import logging

import numpy as np
import pandas as pd
from sklearn.base import BaseEstimator, TransformerMixin

logger = logging.getLogger(__name__)

# chave única para todos os valores cujo quociente é NaN
_NAN_KEY = "nan"


class BinRecord(NamedTuple):
    center: float
    count: int


# ------------------------------------------------------------------ #
def _grouping_keys(values: np.ndarray, bin_width: float) -> list:
    """floor(v / largura) para cada valor, com NaN normalizado."""
    with np.errstate(all="ignore"):
        keys = np.floor(values / bin_width)
    return [_NAN_KEY if math.isnan(k) else k for k in keys.tolist()]


def _centers(values: np.ndarray, bin_width: float, bin_origin: float) -> list:
    # o centro usa a grade deslocada pela origem, o agrupamento não
    with np.errstate(all="ignore"):
        centers = bin_width * (np.floor((values - bin_origin) / bin_width) + 0.5) + bin_origin
    return centers.tolist()


def _center_sort_key(record: BinRecord):
    # NaN vai para o fim; entre si ficam na ordem de criação (sort estável)
    if math.isnan(record.center):
        return (1, 0.0)
    return (0, record.center)


def compute_bins(
    values: Iterable[float],
    bin_width: float = 1.0,
    bin_origin: float = 0.0,
) -> List[BinRecord]:
    """
    Agrupa `values` em bins de largura `bin_width`.

    - A identidade do bin é ``floor(v / bin_width)`` (ancorada em zero).
    - O centro é calculado com o primeiro valor que criou o bin:
      ``bin_width * (floor((v - bin_origin) / bin_width) + 0.5) + bin_origin``.
    - Resultado ordenado por centro crescente.

    Não valida `bin_width`: largura zero ou negativa segue a aritmética
    IEEE (inf/NaN se propagam) sem levantar erro.
    """
    if not hasattr(values, "__len__"):
        values = list(values)
    arr = np.asarray(values, dtype=float).ravel()
    if arr.size == 0:
        return []

    keys = _grouping_keys(arr, bin_width)
    centers = _centers(arr, bin_width, bin_origin)

    index: dict = {}                     # chave -> posição do bin
    bin_centers: List[float] = []
    counts: List[int] = []
    for key, center in zip(keys, centers):
        pos = index.get(key)
        if pos is None:
            index[key] = len(counts)
            bin_centers.append(center)
            counts.append(1)
        else:
            counts[pos] += 1

    records = [BinRecord(c, n) for c, n in zip(bin_centers, counts)]
    return sorted(records, key=_center_sort_key)


# ------------------------------------------------------------------ #
def _as_1d(X) -> tuple[np.ndarray, str | None]:
    """Aceita array 1-D, Series ou DataFrame de uma coluna."""
    if isinstance(X, pd.DataFrame):
        if X.shape[1] != 1:
            raise ValueError("Passe apenas uma coluna por vez")
        return X.iloc[:, 0].to_numpy(dtype=float), X.columns[0]
    if isinstance(X, pd.Series):
        return X.to_numpy(dtype=float), X.name
    arr = np.asarray(X, dtype=float)
    if arr.ndim == 2 and arr.shape[1] == 1:
        arr = arr[:, 0]
    if arr.ndim != 1:
        raise ValueError("Passe apenas uma coluna por vez")
    return arr, None


class FixedWidthBinner(BaseEstimator, TransformerMixin):
    """Histograma de largura fixa com fit/transform."""

    def __init__(
        self,
        bin_width: float = 1.0,
        bin_origin: float = 0.0,
        variable: str | None = None,
    ):
        self.bin_width = bin_width
        self.bin_origin = bin_origin
        self.variable = variable

    def fit(self, X, y=None):
        """Calcula os bins de X e guarda `bin_summary_`."""
        width = float(self.bin_width)
        if not math.isfinite(width) or width <= 0:
            raise ValueError(f"bin_width deve ser positivo e finito (recebido {self.bin_width!r})")

        values, name = _as_1d(X)
        variable = self.variable if self.variable is not None else name
        if variable is None:
            variable = "x"
        records = compute_bins(values, width, self.bin_origin)

        summary = pd.DataFrame(records, columns=["center", "count"])
        summary["lower"] = summary["center"] - width / 2
        summary["upper"] = summary["center"] + width / 2
        summary["bin"] = [f"[{lo:g}, {up:g})" for lo, up in zip(summary["lower"], summary["upper"])]
        summary.insert(0, "variable", variable)
        self.bin_summary_ = summary[["variable", "bin", "lower", "upper", "center", "count"]]

        # mesma chave usada no agrupamento -> centro publicado
        self._key_to_center = {}
        for key, center in zip(_grouping_keys(values, width), _centers(values, width, self.bin_origin)):
            self._key_to_center.setdefault(key, center)

        self.n_bins_ = len(records)
        self.n_values_ = int(values.size)
        logger.debug("%s: %d valores em %d bins", variable, self.n_values_, self.n_bins_)
        return self

    # ------------------------------------------------------------------ #
    def transform(self, X):
        """Troca cada valor pelo centro do seu bin (NaN se o bin não existia no fit)."""
        if not hasattr(self, "_key_to_center"):
            raise RuntimeError("Binner ainda não foi treinado.  Chame .fit() antes.")

        values, name = _as_1d(X)
        keys = _grouping_keys(values, float(self.bin_width))
        centers = np.array([self._key_to_center.get(k, np.nan) for k in keys], dtype=float)

        if isinstance(X, pd.DataFrame):
            return pd.DataFrame({X.columns[0]: centers}, index=X.index)
        if isinstance(X, pd.Series):
            return pd.Series(centers, index=X.index, name=name)
        return pd.Series(centers, name=name)

    def bin_records(self) -> List[BinRecord]:
        """Bins do fit como lista de `BinRecord`."""
        if not hasattr(self, "bin_summary_"):
            raise RuntimeError("Binner ainda não foi treinado.  Chame .fit() antes.")
        return [
            BinRecord(float(c), int(n))
            for c, n in zip(self.bin_summary_["center"], self.bin_summary_["count"])
        ]
