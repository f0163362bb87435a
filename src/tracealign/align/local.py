"""
Local alignment returning every co-optimal alignment.
"""
from concurrent.futures import Executor
from typing import NamedTuple, Union, Optional

from tracealign.align.cost import CostFunction, local_alignment_cost
from tracealign.align.matrix import DPMatrix, build_matrix
from tracealign.align.traceback import traceback


# Exceptions and Warnings ----------------------------------------------------------------------------------------------
class AlignmentError(ValueError):
    """Raised when alignment input is invalid, e.g. an empty sequence."""


# Classes --------------------------------------------------------------------------------------------------------------
class LocalAlignment(NamedTuple):
    """
    All optimal local alignments of two sequences.

    ``aligned_a[k]`` and ``aligned_b[k]`` form the k-th alignment; every alignment shares
    ``score`` and none is ranked above another. Unpacks as ``(aligned_a, aligned_b, score)``.
    """
    aligned_a: list[str]
    aligned_b: list[str]
    score: int

    @property
    def pairs(self) -> list[tuple[str, str]]: return list(zip(self.aligned_a, self.aligned_b))


# Functions ------------------------------------------------------------------------------------------------------------
def align(a: Union[str, bytes], b: Union[str, bytes], cost: CostFunction = local_alignment_cost,
          executor: Optional[Executor] = None) -> LocalAlignment:
    """
    Computes all optimal local alignments of two sequences.

    Args:
        a: First sequence.
        b: Second sequence.
        cost: Cost function ``cost(x, y) -> int``; either argument may be ``GAP``.
            A :class:`ScoreMatrix` selects the integer fill kernel.
        executor: Optional executor to run the independent tracebacks on,
            e.g. ``RESOURCES.pool``. Output order does not depend on it.

    Returns:
        A :class:`LocalAlignment`. A score of 0 means no positive scoring alignment exists.

    Raises:
        AlignmentError: If either sequence is empty or not a string.

    Examples:
        >>> align('A', 'A')
        LocalAlignment(aligned_a=['...A...'], aligned_b=['...A...'], score=1)
    """
    a, b = _check_sequence(a, 'a'), _check_sequence(b, 'b')
    matrix = build_matrix(a, b, cost)
    return LocalAlignment(*_reconstruct(matrix, a, b, executor), matrix.best)


def _reconstruct(matrix: DPMatrix, a: str, b: str, executor: Optional[Executor]) -> tuple[list[str], list[str]]:
    rows, columns = zip(*matrix.maxima)
    n = len(rows)
    pairs = executor.map(traceback, [matrix] * n, [a] * n, [b] * n, rows, columns) if executor else \
        map(traceback, [matrix] * n, [a] * n, [b] * n, rows, columns)
    aligned_a, aligned_b = [], []
    for a_track, b_track in pairs:
        aligned_a.append(a_track)
        aligned_b.append(b_track)
    return aligned_a, aligned_b


def _check_sequence(seq: Union[str, bytes], name: str) -> str:
    if isinstance(seq, (bytes, bytearray)):
        try: seq = seq.decode('ascii')
        except UnicodeDecodeError as e: raise AlignmentError(f'Sequence {name} is not ASCII: {e}') from e
    if not isinstance(seq, str): raise AlignmentError(f'Sequence {name} must be a string, got {type(seq).__name__}')
    if not seq: raise AlignmentError(f'Sequence {name} is empty')
    return seq
