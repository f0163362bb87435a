"""
Plain-text table output.
"""
import sys
from io import StringIO
from typing import TextIO, Iterable

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text


# Constants ------------------------------------------------------------------------------------------------------------
_CONSOLE_WIDTH = 10_000  # Tables are never wrapped to the terminal


# Classes --------------------------------------------------------------------------------------------------------------
class TableWriter:
    """
    Collects rows and renders them as a boxed ASCII table. Cells may span several lines.

    Examples:
        >>> table = TableWriter(header=['ORF', 'CP (%)'])
        >>> table.append(['ATGAAATAG', '1.23E-02%'])
        >>> table.render()
        +-----------+-----------+
        | ORF       | CP (%)    |
        +-----------+-----------+
        | ATGAAATAG | 1.23E-02% |
        +-----------+-----------+
    """
    __slots__ = ('_handle', '_header', '_rows')
    def __init__(self, handle: TextIO = None, header: Iterable[str] = ()):
        self._handle = handle
        self._header = [str(i) for i in header]
        self._rows: list[list[str]] = []

    def __len__(self): return len(self._rows)

    def append(self, row: Iterable):
        row = [str(i) for i in row]
        if self._header and len(row) != len(self._header):
            raise ValueError(f'Row has {len(row)} columns, header has {len(self._header)}')
        self._rows.append(row)

    def table(self) -> Table:
        """Builds the ``rich`` table, cells are plain text and never parsed as markup."""
        table = Table(box=box.ASCII2, show_header=bool(self._header), show_lines=True)
        n_cols = max([len(self._header)] + [len(r) for r in self._rows])
        for i in range(n_cols): table.add_column(Text(self._header[i]) if self._header else '', no_wrap=True)
        for row in self._rows: table.add_row(*(Text(cell) for cell in row))
        return table

    def format(self) -> str:
        """Returns the rendered table as a string."""
        if not self._header and not self._rows: return ''
        handle = StringIO()
        self._print(handle)
        return handle.getvalue().rstrip('\n')

    def render(self):
        """Writes the table to the handle."""
        if not self._header and not self._rows: return (self._handle or sys.stdout).write('\n')
        self._print(self._handle or sys.stdout)

    def _print(self, handle: TextIO):
        Console(file=handle, width=_CONSOLE_WIDTH, color_system=None, force_jupyter=False,
                highlight=False).print(self.table())
