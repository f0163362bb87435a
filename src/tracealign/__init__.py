"""
Top-level module: local alignment with full co-optimal traceback, and the ORF / codon-usage
gene prediction tools built around it.
"""
from importlib.metadata import version, PackageNotFoundError


# Exceptions and Warnings ----------------------------------------------------------------------------------------------
class TracealignWarning(Warning): pass


# Constants ------------------------------------------------------------------------------------------------------------
try: __version__ = version(__name__)
except PackageNotFoundError: __version__ = '0.0.0'


from tracealign.align import align, local_alignment_cost, LocalAlignment, AlignmentError, ScoreMatrix, GAP  # noqa: E402

__all__ = ['TracealignWarning', 'align', 'local_alignment_cost', 'LocalAlignment', 'AlignmentError',
           'ScoreMatrix', 'GAP', '__version__']
