"""
Codon usage and coding potential scoring.
"""
from itertools import product
from math import ceil, prod
from re import compile as regex, error as RegexError
from typing import Iterable


# Exceptions and Warnings ----------------------------------------------------------------------------------------------
class CodonError(ValueError):
    """Raised when a codon is empty or is not a valid pattern."""


# Constants ------------------------------------------------------------------------------------------------------------
NUCLEOTIDES = 'ATCG'
CODON_LENGTH = 3


# Functions ------------------------------------------------------------------------------------------------------------
def generate_triplets(alphabet: str = NUCLEOTIDES, length: int = CODON_LENGTH) -> list[str]:
    """
    Generates every string of ``length`` symbols from ``alphabet``.

    Examples:
        >>> generate_triplets()[:5]
        ['AAA', 'AAT', 'AAC', 'AAG', 'ATA']
    """
    return [''.join(p) for p in product(alphabet, repeat=length)]


def codon_usage(sequence: str, codons: Iterable[str]) -> dict[str, int]:
    """
    Counts non-overlapping occurrences of each codon in a sequence.

    Codons are matched as regular expressions, so patterns such as ``'AT[CG]'`` are allowed.

    Args:
        sequence: The sequence to scan, usually an ORF without its start and stop codons.
        codons: Codons to count. Duplicates are counted once.

    Returns:
        A dict mapping each codon to its count, in first-seen order.

    Raises:
        CodonError: If a codon is empty, not a valid pattern, or a pattern that matches the empty string.
    """
    usage = {}
    for codon in codons:
        if codon in usage: continue
        if not codon: raise CodonError('Codons must not be empty')
        try: pattern = regex(codon)
        except RegexError as e: raise CodonError(f'Invalid codon pattern {codon!r}: {e}') from e
        if pattern.fullmatch(''): raise CodonError(f'Codon pattern {codon!r} matches the empty string')
        usage[codon] = len(pattern.findall(sequence))
    return usage


def coding_potential(sequence: str, codons: Iterable[str]) -> float:
    """
    Scores how likely a sequence is to be coding from its codon usage.

    The score is the product, over codons that occur at least once, of the codon's count divided
    by the number of codon-sized slots in the sequence. It is 0.0 when no codon occurs.

    Raises:
        CodonError: If a codon is empty, not a valid pattern, or matches the empty string.
    """
    usage = codon_usage(sequence, codons)
    frequencies = [count / ceil(len(sequence) / len(codon)) for codon, count in usage.items() if count]
    return float(prod(frequencies)) if frequencies else 0.0
