"""
Traceback of a filled local alignment matrix into aligned sequence pairs.
"""
from tracealign.align.matrix import DPMatrix, Direction


# Constants ------------------------------------------------------------------------------------------------------------
GAP_MARKER = '_'
BOUNDARY_MARKER = '...'
_CONSUMES_A = frozenset({Direction.VERTICAL, Direction.DIAGONAL})
_CONSUMES_B = frozenset({Direction.HORIZONTAL, Direction.DIAGONAL})


# Exceptions and Warnings ----------------------------------------------------------------------------------------------
class TracebackError(RuntimeError):
    """Raised when a predecessor chain cannot be followed back to the matrix origin."""


# Functions ------------------------------------------------------------------------------------------------------------
def traceback(matrix: DPMatrix, a: str, b: str, row: int, column: int) -> tuple[str, str]:
    """
    Reconstructs the aligned pair ending at one cell by following stored directions.

    The walk is iterative and takes at most ``len(a) + len(b) + 1`` steps. An ``ORIGIN`` cell at
    (0, 0) ends the walk; an interior ``ORIGIN`` cell steps diagonally to (i - 1, j - 1)
    without emitting symbols. Both tracks are returned start-to-end and wrapped in
    :data:`BOUNDARY_MARKER`, e.g. ``'...AC_T...'``.

    Args:
        matrix: The filled matrix.
        a: Sequence indexing matrix rows.
        b: Sequence indexing matrix columns.
        row: Row of the starting cell.
        column: Column of the starting cell.

    Returns:
        The (a track, b track) pair, of equal length.

    Raises:
        TracebackError: If the chain reaches an ``ORIGIN`` cell on a boundary other than (0, 0),
            or does not terminate within the step budget.
    """
    a_track, b_track = [], []
    i, j = row, column
    directions = matrix.directions
    for _ in range(len(a) + len(b) + 1):
        direction = directions[i, j]
        if (i == 0 and direction in _CONSUMES_A) or (j == 0 and direction in _CONSUMES_B):
            raise TracebackError(f'Cell ({i}, {j}) points outside the matrix')
        if direction == Direction.DIAGONAL:
            a_track.append(a[i - 1])
            b_track.append(b[j - 1])
            i, j = i - 1, j - 1
        elif direction == Direction.VERTICAL:
            a_track.append(a[i - 1])
            b_track.append(GAP_MARKER)
            i -= 1
        elif direction == Direction.HORIZONTAL:
            a_track.append(GAP_MARKER)
            b_track.append(b[j - 1])
            j -= 1
        elif i > 0 and j > 0:  # Interior ORIGIN
            i, j = i - 1, j - 1
        elif i == 0 and j == 0:
            a_track.reverse()
            b_track.reverse()
            return _wrap(a_track), _wrap(b_track)
        else:
            raise TracebackError(f'Origin cell ({i}, {j}) lies on the matrix boundary but is not (0, 0)')
    raise TracebackError(f'Traceback from ({row}, {column}) did not reach the origin')


def _wrap(track: list[str]) -> str: return f"{BOUNDARY_MARKER}{''.join(track)}{BOUNDARY_MARKER}"
