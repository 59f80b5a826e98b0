"""
reader.py
Leitura de números reais, um por linha, de um arquivo ou da entrada padrão.
Linhas inválidas são ignoradas com aviso no log; a leitura continua.
"""

from __future__ import annotations
import sys
import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Iterable, Iterator, TextIO, Union

import numpy as np

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def parse_value(line: str) -> float:
    """
    Converte uma linha em float.

    Aceita expoente, ``nan``, ``inf`` e ``infinity`` (qualquer caixa).
    Rejeita linha vazia, separador ``_`` entre dígitos e dígitos não ASCII.
    """
    text = line.strip()
    if "_" in text or not text.isascii():
        raise ValueError(f"valor inválido: {text!r}")
    return float(text)


def read_values(lines: Iterable[str]) -> np.ndarray:
    """Lê todas as linhas válidas em um array float64."""
    values = []
    for lineno, line in enumerate(lines, start=1):
        try:
            values.append(parse_value(line))
        except ValueError:
            logger.warning("Invalid value entered (line %d): %r", lineno, line.rstrip("\n"))
            continue
    return np.asarray(values, dtype=float)


@contextmanager
def open_input(path: PathLike | None = None) -> Iterator[TextIO]:
    """`sys.stdin` quando path é None ou "-"; senão abre o arquivo."""
    if path is None or str(path) == "-":
        # bytes inválidos viram U+FFFD e a linha cai no aviso de valor inválido
        if hasattr(sys.stdin, "reconfigure"):
            sys.stdin.reconfigure(errors="replace")
        yield sys.stdin
        return
    with open(path, encoding="utf-8", errors="replace") as fh:
        yield fh
