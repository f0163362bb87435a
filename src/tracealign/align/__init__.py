"""
Local alignment: matrix fill, traceback and the public ``align`` entry point.
"""
from tracealign.align.cost import GAP, CostFunction, ScoreMatrix, local_alignment_cost
from tracealign.align.matrix import Direction, DPMatrix, TIE_BREAK_ORDER, build_matrix, select
from tracealign.align.traceback import traceback, TracebackError, GAP_MARKER, BOUNDARY_MARKER
from tracealign.align.local import align, LocalAlignment, AlignmentError

__all__ = ['GAP', 'CostFunction', 'ScoreMatrix', 'local_alignment_cost', 'Direction', 'DPMatrix',
           'TIE_BREAK_ORDER', 'build_matrix', 'select', 'traceback', 'TracebackError', 'GAP_MARKER',
           'BOUNDARY_MARKER', 'align', 'LocalAlignment', 'AlignmentError']
