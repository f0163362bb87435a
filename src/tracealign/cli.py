"""
Command-line interface.

Usage:
    tracealign align ATGCAT TGCA
    tracealign predict --transcripts transcripts/ --threshold 150 --codons ATG,GCC
"""
import logging
import sys
from argparse import ArgumentParser, Namespace
from dataclasses import dataclass
from typing import Optional, Sequence

from tracealign import __version__
from tracealign.align import align, AlignmentError, GAP_MARKER
from tracealign.io import read_transcripts, TranscriptError, TableWriter
from tracealign.predict import predict, NoResultsError, CodonError, GenePredictor
from tracealign.utils import Config, insert_nth, bold, highlight
from tracealign.utils.resources import RESOURCES

LOGGER = logging.getLogger(__name__)

_ORF_CELL_WIDTH = 30


# Classes --------------------------------------------------------------------------------------------------------------
@dataclass
class AlignConfig(Config):
    a: str = ''
    b: str = ''
    colour: bool = False


@dataclass
class PredictConfig(Config):
    transcripts: str = 'transcripts'
    threshold: int = 150
    max_length: int = -1
    codons: Optional[list[str]] = None
    reference: Optional[str] = None
    threads: bool = False

    def __post_init__(self):
        if isinstance(self.codons, str): self.codons = [c.strip() for c in self.codons.split(',') if c.strip()]
        if not self.codons: self.codons = None


# Functions ------------------------------------------------------------------------------------------------------------
def parse_args(argv: Optional[Sequence[str]] = None) -> Namespace:
    parser = ArgumentParser(prog='tracealign', description='Local alignment and ORF-based gene prediction.')
    parser.add_argument('-v', '--verbose', action='store_true', help='Enable verbose logging.')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    subparsers = parser.add_subparsers(dest='command', required=True)

    align_parser = subparsers.add_parser('align', help='Print every optimal local alignment of two sequences.')
    align_parser.add_argument('a', help='First sequence, e.g. ATG')
    align_parser.add_argument('b', help='Second sequence, e.g. GTG')
    align_parser.add_argument('--colour', action='store_true', help='Highlight gaps in the output.')

    predict_parser = subparsers.add_parser('predict', help='Predict genes in a directory of transcripts.')
    predict_parser.add_argument('--transcripts', default='transcripts', help='Directory containing transcripts.')
    predict_parser.add_argument('--threshold', type=int, default=150,
                                help='Minimum ORF length, i.e. threshold = 7: ATG<A>TAG')
    predict_parser.add_argument('--max-length', dest='max_length', type=int, default=-1,
                                help='Exclusive maximum ORF length, -1 for unbounded.')
    predict_parser.add_argument('--codons', default=None,
                                help='Comma-separated codons for codon usage, defaults to all triplets.')
    predict_parser.add_argument('--reference', default=None,
                                help='Directory of reference transcripts to align each ORF against.')
    predict_parser.add_argument('--threads', action='store_true',
                                help='Align ORFs against references on the shared thread pool.')
    return parser.parse_args(argv)


def run_align(config: AlignConfig, out=None):
    out = out or sys.stdout
    a_tracks, b_tracks, score = align(config.a, config.b)
    out.write('Alignments:\n')
    for a_track, b_track in zip(a_tracks, b_tracks):
        if config.colour:
            a_track, b_track = highlight(a_track, [GAP_MARKER], 'red'), highlight(b_track, [GAP_MARKER], 'red')
        out.write(f'A: {a_track}\nB: {b_track}\n{bold("Score:") if config.colour else "Score:"} {score}\n')


def run_predict(config: PredictConfig, out=None):
    out = out or sys.stdout
    references = list(read_transcripts(config.reference)) if config.reference else None
    if references is not None: LOGGER.info('Loaded %d reference transcripts', len(references))
    executor = RESOURCES.pool if config.threads else None
    for transcript, genome in read_transcripts(config.transcripts):
        try:
            predictions = predict(genome, (config.threshold, config.max_length), config.codons, references,
                                  executor=executor)
        except NoResultsError as e:
            LOGGER.warning('%s: %s', transcript, e)
            continue
        out.write(f'> {transcript}\n')
        _predictions_table(predictions, out, with_reference=references is not None).render()
        out.write('\n')


def _predictions_table(predictions: list[GenePredictor], out, with_reference: bool = False) -> TableWriter:
    header = ['ORF', 'CP (%)'] + (['Match', 'Score'] if with_reference else [])
    table = TableWriter(out, header)
    for p in predictions:
        row = [insert_nth(p.sequence, _ORF_CELL_WIDTH), f'{p.coding_potential * 100.0:.2E}%']
        if with_reference: row += [p.transcript_match or '', p.transcript_distance]
        table.append(row)
    return table


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=logging.INFO if args.verbose else logging.WARNING, force=True,
                        format='%(asctime)s %(levelname)s %(name)s: %(message)s')
    try:
        if args.command == 'align': run_align(AlignConfig.from_args(args))
        else: run_predict(PredictConfig.from_args(args))
    except (AlignmentError, TranscriptError, CodonError) as e:
        LOGGER.error('%s', e)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
