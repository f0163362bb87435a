"""
Readers for transcript files: one header line followed by fixed-width sequence lines.
"""
import logging
from pathlib import Path
from typing import BinaryIO, Generator, Union
from warnings import warn

from tracealign import TracealignWarning

LOGGER = logging.getLogger(__name__)


# Exceptions and Warnings ----------------------------------------------------------------------------------------------
class TranscriptError(IOError):
    """Raised when a transcript source cannot be read."""


class TranscriptWarning(TracealignWarning):
    """Issued for transcript files that hold no sequence."""


# Constants ------------------------------------------------------------------------------------------------------------
LINE_WIDTH = 60


# Classes --------------------------------------------------------------------------------------------------------------
class TranscriptReader:
    """
    Reads one transcript from a file handle.

    The first line is a header and is skipped. Sequence lines are joined until the first line
    that is not exactly ``line_width`` long, which is the last line of the record; anything after
    it is ignored.

    Examples:
        >>> with open("transcripts/NM_001.txt", "rb") as f:
        ...     for name, seq in TranscriptReader(f, 'NM_001'):
        ...         print(name, len(seq))
    """
    __slots__ = ('_handle', '_identifier', '_line_width')
    def __init__(self, handle: BinaryIO, identifier: str, line_width: int = LINE_WIDTH):
        self._handle = handle
        self._identifier = identifier
        self._line_width = line_width

    def __enter__(self): return self
    def __exit__(self, exc_type, exc_val, exc_tb): self.close()

    def __iter__(self) -> Generator[tuple[str, str], None, None]:
        """
        Yields:
            A single ``(identifier, sequence)`` pair, or nothing if the file has no sequence lines.
        """
        parts = []
        lines = iter(self._handle)
        next(lines, None)  # Header
        for line in lines:
            line = line.rstrip(b'\r\n')
            parts.append(line)
            if len(line) != self._line_width: break
        sequence = b''.join(parts).decode('ascii', errors='replace')
        if sequence: yield self._identifier, sequence
        else: warn(f'Transcript {self._identifier} contains no sequence', TranscriptWarning)

    def close(self): self._handle.close()


# Functions ------------------------------------------------------------------------------------------------------------
def read_transcripts(directory: Union[str, Path], line_width: int = LINE_WIDTH
                     ) -> Generator[tuple[str, str], None, None]:
    """
    Reads every regular file below a directory as a transcript.

    Args:
        directory: Directory to walk recursively.
        line_width: Width of full sequence lines.

    Yields:
        ``(file name, sequence)`` pairs in sorted path order.

    Raises:
        TranscriptError: If the directory does not exist or a file cannot be opened.
    """
    directory = Path(directory)
    if not directory.is_dir(): raise TranscriptError(f'Transcript directory {directory} does not exist')
    for path in sorted(p for p in directory.rglob('*') if p.is_file()):
        LOGGER.debug('Reading transcript %s', path)
        try: handle = open(path, 'rb')
        except OSError as e: raise TranscriptError(f'Cannot read transcript {path}: {e}') from e
        with TranscriptReader(handle, path.name, line_width) as reader:
            yield from reader
