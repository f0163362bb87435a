"""
Transcript input and tabular output.
"""
from tracealign.io.transcripts import TranscriptReader, TranscriptError, TranscriptWarning, read_transcripts, LINE_WIDTH
from tracealign.io.tabular import TableWriter

__all__ = ['TranscriptReader', 'TranscriptError', 'TranscriptWarning', 'read_transcripts', 'LINE_WIDTH',
           'TableWriter']
