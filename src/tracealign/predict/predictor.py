"""
Gene prediction: ORF scanning, coding potential scoring and optional matching against reference transcripts.
"""
import logging
from concurrent.futures import Executor
from dataclasses import dataclass
from functools import partial
from operator import attrgetter
from typing import Iterable, Optional

from tracealign.align import align, local_alignment_cost, CostFunction, LocalAlignment
from tracealign.predict.codon import generate_triplets, coding_potential
from tracealign.predict.orf import find_orfs, DEFAULT_THRESHOLDS, START_CODON, STOP_CODONS

LOGGER = logging.getLogger(__name__)


# Classes --------------------------------------------------------------------------------------------------------------
@dataclass
class GenePredictor:
    """
    A candidate gene with its scores.

    Attributes:
        sequence: The ORF, start and stop codons included.
        coding_potential: Codon usage score of the ORF interior.
        transcript_match: Identifier of the best matching reference transcript, if any.
        transcript_distance: Local alignment score against that transcript.
        alignment: The alignments against that transcript.
    """
    sequence: str
    coding_potential: float = 0.0
    transcript_match: Optional[str] = None
    transcript_distance: int = 0
    alignment: Optional[LocalAlignment] = None

    def __len__(self): return len(self.sequence)

    @property
    def interior(self) -> str:
        """The ORF without its start and stop codons."""
        return self.sequence[len(START_CODON):len(self.sequence) - len(STOP_CODONS[0])]


# Functions ------------------------------------------------------------------------------------------------------------
def predict(genome: str, thresholds: tuple[int, Optional[int]] = DEFAULT_THRESHOLDS,
            codons: Optional[Iterable[str]] = None, references: Optional[Iterable[tuple[str, str]]] = None,
            cost: CostFunction = local_alignment_cost, executor: Optional[Executor] = None) -> list[GenePredictor]:
    """
    Predicts genes in a genome.

    Args:
        genome: Nucleotide sequence to scan.
        thresholds: ``(minimum, maximum)`` ORF lengths, see :func:`find_orfs`.
        codons: Codons used for coding potential, defaults to all 64 triplets.
        references: ``(identifier, sequence)`` pairs to align every ORF against.
        cost: Alignment cost function for reference matching.
        executor: Optional executor to fan the per-ORF reference alignments out over.

    Returns:
        Predictions sorted by alignment score, then coding potential, both descending.

    Raises:
        NoResultsError: If no ORF is found.
    """
    codons = generate_triplets() if codons is None else list(codons)
    orfs = find_orfs(genome, thresholds)
    LOGGER.info('Found %d candidate ORFs in %d bases', len(orfs), len(genome))
    predictions = [GenePredictor(orf) for orf in orfs]
    for p in predictions: p.coding_potential = coding_potential(p.interior, codons)

    if references is not None and (references := list(references)):
        match = partial(best_match, references=references, cost=cost)
        matches = executor.map(match, orfs) if executor else map(match, orfs)
        for p, (identifier, alignment) in zip(predictions, matches):
            p.transcript_match, p.transcript_distance, p.alignment = identifier, alignment.score, alignment

    return rank(predictions)


def best_match(orf: str, references: Iterable[tuple[str, str]],
               cost: CostFunction = local_alignment_cost) -> tuple[Optional[str], Optional[LocalAlignment]]:
    """
    Aligns an ORF against each reference and keeps the highest scoring one.

    Ties keep the earliest reference.

    Returns:
        The (identifier, alignment) of the best reference, or (None, None) if there are no references.
    """
    best_id, best = None, None
    for identifier, sequence in references:
        alignment = align(orf, sequence, cost)
        if best is None or alignment.score > best.score: best_id, best = identifier, alignment
    return best_id, best


def rank(predictions: Iterable[GenePredictor]) -> list[GenePredictor]:
    """Sorts predictions by transcript distance, then coding potential, both descending. The sort is stable."""
    return sorted(predictions, key=attrgetter('transcript_distance', 'coding_potential'), reverse=True)
