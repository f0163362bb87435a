"""
Dynamic-programming matrix for local alignment.

The matrix holds one score and one traceback direction per cell. Row 0 and column 0 are seeded
with the raw gap cost of each symbol (not a running sum), interior cells take the best of four
candidates and the cells tied for the global maximum are collected while filling.
"""
from dataclasses import dataclass
from enum import IntEnum

import numpy as np

from tracealign.align.cost import GAP, CostFunction, ScoreMatrix
from tracealign.utils.resources import jit


# Constants ------------------------------------------------------------------------------------------------------------
class Direction(IntEnum):
    """
    Traceback pointer stored in each cell.

    The integer values are storage codes for the direction array and carry no ordering;
    tie-breaking is defined by :data:`TIE_BREAK_ORDER`.
    """
    VERTICAL = 0  # gap in B, consumes A[i-1]
    DIAGONAL = 1  # match or mismatch
    HORIZONTAL = 2  # gap in A, consumes B[j-1]
    ORIGIN = 3  # local alignment restarts here


# When candidate scores are exactly equal, the earliest direction in this tuple wins.
TIE_BREAK_ORDER = (Direction.VERTICAL, Direction.DIAGONAL, Direction.HORIZONTAL, Direction.ORIGIN)

# Plain ints for the kernel, numba cannot read IntEnum members
_VERTICAL = int(Direction.VERTICAL)
_DIAGONAL = int(Direction.DIAGONAL)
_HORIZONTAL = int(Direction.HORIZONTAL)
_ORIGIN = int(Direction.ORIGIN)
_SCORE_DTYPE = np.int64
_DIRECTION_DTYPE = np.int8


# Classes --------------------------------------------------------------------------------------------------------------
@dataclass(frozen=True, eq=False)
class DPMatrix:
    """
    A filled local alignment matrix.

    Attributes:
        scores: ``(len(a) + 1, len(b) + 1)`` read-only array of cell scores.
        directions: Read-only array of :class:`Direction` codes, same shape.
        best: The global maximum score over cell (0, 0) and the interior cells.
        maxima: Coordinates tied for ``best``, in fill order (row-major, (0, 0) first if tied).
    """
    scores: np.ndarray
    directions: np.ndarray
    best: int
    maxima: tuple[tuple[int, int], ...]

    def __getitem__(self, item: tuple[int, int]) -> tuple[int, Direction]:
        return int(self.scores[item]), Direction(int(self.directions[item]))

    @property
    def shape(self) -> tuple[int, int]: return self.scores.shape


# Functions ------------------------------------------------------------------------------------------------------------
def select(candidates: dict[Direction, int]) -> tuple[int, Direction]:
    """
    Picks the highest scoring candidate, resolving exact ties with :data:`TIE_BREAK_ORDER`.

    Args:
        candidates: Score for each of the four directions.

    Returns:
        The winning (score, direction) pair.
    """
    score, direction = None, None
    for d in TIE_BREAK_ORDER:
        if score is None or candidates[d] > score: score, direction = candidates[d], d
    return score, direction


def build_matrix(a: str, b: str, cost: CostFunction) -> DPMatrix:
    """
    Fills the local alignment matrix for two sequences.

    Args:
        a: First sequence, indexed by matrix rows.
        b: Second sequence, indexed by matrix columns.
        cost: Cost function, or a :class:`ScoreMatrix` to use the integer kernel.

    Returns:
        The filled :class:`DPMatrix`.
    """
    if isinstance(cost, ScoreMatrix): return _build_encoded(a, b, cost)
    return _build_generic(a, b, cost)


def _build_generic(a: str, b: str, cost: CostFunction) -> DPMatrix:
    """Python fill for arbitrary cost callables."""
    rows, columns = len(a) + 1, len(b) + 1
    scores = np.zeros((rows, columns), dtype=_SCORE_DTYPE)
    directions = np.full((rows, columns), _ORIGIN, dtype=_DIRECTION_DTYPE)

    # cost is pure, so each symbol's gap cost is computed once
    a_gap = [cost(x, GAP) for x in a]
    b_gap = [cost(GAP, y) for y in b]

    scores[0, 1:] = b_gap
    directions[0, 1:] = _HORIZONTAL
    scores[1:, 0] = a_gap
    directions[1:, 0] = _VERTICAL

    best, maxima = 0, [(0, 0)]
    for i in range(1, rows):
        x, x_gap = a[i - 1], a_gap[i - 1]
        for j in range(1, columns):
            score, direction = select({
                Direction.VERTICAL: int(scores[i - 1, j]) + x_gap,
                Direction.DIAGONAL: int(scores[i - 1, j - 1]) + cost(x, b[j - 1]),
                Direction.HORIZONTAL: int(scores[i, j - 1]) + b_gap[j - 1],
                Direction.ORIGIN: 0,
            })
            scores[i, j] = score
            directions[i, j] = direction
            if score > best: best, maxima = score, [(i, j)]
            elif score == best: maxima.append((i, j))

    return _freeze(scores, directions, best, maxima)


def _build_encoded(a: str, b: str, matrix: ScoreMatrix) -> DPMatrix:
    """Integer fill for :class:`ScoreMatrix` costs."""
    rows, columns = len(a) + 1, len(b) + 1
    scores = np.zeros((rows, columns), dtype=_SCORE_DTYPE)
    directions = np.full((rows, columns), _ORIGIN, dtype=_DIRECTION_DTYPE)
    max_rows = np.zeros(rows * columns, dtype=np.int64)
    max_columns = np.zeros(rows * columns, dtype=np.int64)
    best, count = _fill_kernel(matrix.encode(a), matrix.encode(b), matrix.data, matrix.gap,
                               scores, directions, max_rows, max_columns)
    maxima = [(int(i), int(j)) for i, j in zip(max_rows[:count], max_columns[:count])]
    return _freeze(scores, directions, int(best), maxima)


def _freeze(scores: np.ndarray, directions: np.ndarray, best: int, maxima: list) -> DPMatrix:
    scores.flags.writeable = False
    directions.flags.writeable = False
    return DPMatrix(scores, directions, best, tuple(maxima))


@jit(nopython=True, nogil=True)
def _fill_kernel(a, b, sub, gap, scores, directions, max_rows, max_columns):
    """
    Fills ``scores`` and ``directions`` in place from encoded sequences.

    Candidates are visited in tie-break order (vertical, diagonal, horizontal, reset) and only a
    strictly greater score replaces the current winner.

    Returns:
        (best score, number of maximal coordinates written to max_rows / max_columns)
    """
    n, m = a.shape[0], b.shape[0]
    for j in range(1, m + 1):
        scores[0, j] = gap
        directions[0, j] = _HORIZONTAL
    for i in range(1, n + 1):
        scores[i, 0] = gap
        directions[i, 0] = _VERTICAL

    best = 0
    count = 1
    max_rows[0] = 0
    max_columns[0] = 0
    for i in range(1, n + 1):
        for j in range(1, m + 1):
            score = scores[i - 1, j] + gap
            direction = _VERTICAL
            candidate = scores[i - 1, j - 1] + sub[a[i - 1], b[j - 1]]
            if candidate > score:
                score, direction = candidate, _DIAGONAL
            candidate = scores[i, j - 1] + gap
            if candidate > score:
                score, direction = candidate, _HORIZONTAL
            if 0 > score:
                score, direction = 0, _ORIGIN
            scores[i, j] = score
            directions[i, j] = direction

            if score > best:
                best = score
                count = 1
                max_rows[0] = i
                max_columns[0] = j
            elif score == best:
                max_rows[count] = i
                max_columns[count] = j
                count += 1
    return best, count
