"""
Cost functions for local alignment.

A cost function is any callable ``cost(x, y) -> int`` where either symbol may be the gap
sentinel :data:`GAP`. It must be pure and total over the symbols it is given.
"""
from typing import Union, Iterable, Callable, Optional

import numpy as np


# Constants ------------------------------------------------------------------------------------------------------------
GAP = None  # Sentinel for "no corresponding symbol"

CostFunction = Callable[[Optional[str], Optional[str]], int]


# Functions ------------------------------------------------------------------------------------------------------------
def local_alignment_cost(a: Optional[str], b: Optional[str]) -> int:
    """+1 for an exact symbol match, -1 for anything else, including a gap."""
    if a is not GAP and a == b: return 1
    return -1


# Classes --------------------------------------------------------------------------------------------------------------
class ScoreMatrix:
    """
    A substitution matrix over a fixed symbol set with a single linear gap score.

    Instances are callable with the cost function signature, so they can be passed anywhere a
    cost function is expected. When handed to :func:`tracealign.align.build_matrix` the
    matrix is filled by an integer kernel instead of calling back into Python per cell.

    Symbols outside the set score as the lowest substitution value, so lookups never raise.

    Examples:
        >>> m = ScoreMatrix.build('ACGT', match=2, mismatch=-1, gap=-2)
        >>> m('A', 'A'), m('A', 'C'), m('A', None)
        (2, -1, -2)
    """
    _DTYPE = np.int32
    __slots__ = ('_symbols', '_index', '_data', '_gap')

    def __init__(self, symbols: str, data: Union[np.ndarray, Iterable], gap: int = -1):
        if len(set(symbols)) != len(symbols): raise ValueError('ScoreMatrix symbols contain duplicates')
        data = np.ascontiguousarray(data, dtype=self._DTYPE)
        if data.shape != (len(symbols), len(symbols)):
            raise ValueError(f'ScoreMatrix data must have shape {(len(symbols), len(symbols))}, got {data.shape}')
        self._symbols = symbols
        self._index = {s: i for i, s in enumerate(symbols)}
        self._data = self._pad(data)
        self._data.flags.writeable = False
        self._gap = int(gap)

    def __call__(self, a: Optional[str], b: Optional[str]) -> int:
        if a is GAP or b is GAP: return self._gap
        n = len(self._symbols)
        return int(self._data[self._index.get(a, n), self._index.get(b, n)])

    def __repr__(self): return f"ScoreMatrix({self._symbols!r}, gap={self._gap})"
    def __len__(self): return len(self._symbols)

    @property
    def symbols(self) -> str: return self._symbols

    @property
    def gap(self) -> int: return self._gap

    @property
    def data(self) -> np.ndarray:
        """Padded substitution table; the last row and column hold the unknown-symbol score."""
        return self._data

    @classmethod
    def build(cls, symbols: str = 'ACGT', match: int = 1, mismatch: int = -1, gap: int = -1) -> 'ScoreMatrix':
        """Builds a simple match/mismatch matrix."""
        M = np.full((len(symbols), len(symbols)), mismatch, dtype=cls._DTYPE)
        np.fill_diagonal(M, match)
        return cls(symbols, M, gap)

    def encode(self, seq: str) -> np.ndarray:
        """Maps a sequence to row/column indices of :attr:`data`, unknown symbols to the padding index."""
        n = len(self._symbols)
        return np.fromiter((self._index.get(c, n) for c in seq), dtype=np.intp, count=len(seq))

    @staticmethod
    def _pad(data: np.ndarray) -> np.ndarray:
        """Adds one row and column for unknown symbols, filled with the matrix minimum."""
        r, c = data.shape
        fill_value = data.min() if data.size else 0
        padded = np.full((r + 1, c + 1), fill_value, dtype=data.dtype)
        padded[:r, :c] = data
        return padded
