"""
Open reading frame (ORF) scanning with start and stop codon patterns.
"""
from re import compile as regex
from typing import Optional


# Exceptions and Warnings ----------------------------------------------------------------------------------------------
class NoResultsError(LookupError):
    """Raised when a scan finds nothing. This is an empty result, not a failure of the scan itself."""


# Constants ------------------------------------------------------------------------------------------------------------
START_CODON = 'ATG'
STOP_CODONS = ('TAA', 'TAG', 'TGA')
UNBOUNDED = -1
DEFAULT_THRESHOLDS = (150, UNBOUNDED)
_START_REGEX = regex(START_CODON)
_STOP_REGEX = regex('|'.join(STOP_CODONS))


# Functions ------------------------------------------------------------------------------------------------------------
def find_orfs(genome: str, thresholds: tuple[int, Optional[int]] = DEFAULT_THRESHOLDS) -> list[str]:
    """
    Finds candidate ORFs: every start codon paired with every stop codon that ends a long enough span.

    Start and stop codons are found as non-overlapping matches scanning left to right. A pair
    ``(s, e)``, where ``s`` is the start of an ``ATG`` and ``e`` the end of a stop codon, yields
    ``genome[s:e]`` when ``e - s`` is positive, at least the minimum and below the maximum.
    Reading frame is not checked.

    Args:
        genome: The nucleotide sequence to scan.
        thresholds: ``(minimum, maximum)`` ORF length, stop codon included.
            A maximum of -1 or None means unbounded.

    Returns:
        ORF sequences, ordered by start then by stop position.

    Raises:
        NoResultsError: If there are no start codons, no stop codons, or no ORF within the thresholds.

    Examples:
        >>> find_orfs('CCATGAAATAGCC', (6, -1))
        ['ATGAAATAG']
    """
    min_length, max_length = thresholds
    if max_length is None: max_length = UNBOUNDED
    starts = [m.start() for m in _START_REGEX.finditer(genome)]
    if not starts: raise NoResultsError(f'No ORFs matched from start codon {START_CODON}')
    stops = [m.end() for m in _STOP_REGEX.finditer(genome)]
    if not stops: raise NoResultsError(f'No ORFs matched from stop codons {"|".join(STOP_CODONS)}')

    orfs, k = [], len(STOP_CODONS[0])
    for start in starts:
        if start + min_length + k > len(genome): continue  # Cannot reach the minimum length
        for stop in stops:
            length = stop - start
            if length > 0 and length >= min_length and (max_length == UNBOUNDED or length < max_length):
                orfs.append(genome[start:stop])

    if not orfs: raise NoResultsError(f'No ORFs matched between {min_length} and {max_length} bases')
    return orfs
