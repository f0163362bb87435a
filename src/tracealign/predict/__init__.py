"""
Gene prediction from ORFs, codon usage and reference alignment.
"""
from tracealign.predict.codon import generate_triplets, codon_usage, coding_potential, CodonError
from tracealign.predict.orf import find_orfs, NoResultsError, START_CODON, STOP_CODONS, DEFAULT_THRESHOLDS
from tracealign.predict.predictor import GenePredictor, predict, best_match, rank

__all__ = ['generate_triplets', 'codon_usage', 'coding_potential', 'CodonError', 'find_orfs', 'NoResultsError',
           'START_CODON', 'STOP_CODONS', 'DEFAULT_THRESHOLDS', 'GenePredictor', 'predict', 'best_match', 'rank']
