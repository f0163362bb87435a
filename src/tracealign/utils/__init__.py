"""
Module containing various utility functions and classes.
"""
from argparse import Namespace
from dataclasses import dataclass, fields
from typing import Iterable


# Constants ------------------------------------------------------------------------------------------------------------
_COLOURS = {'red': 31, 'green': 32, 'yellow': 33, 'blue': 34}


# Classes --------------------------------------------------------------------------------------------------------------
@dataclass
class Config:
    """
    Config parent class that can conveniently set attributes from CLI args
    """

    @classmethod
    def from_args(cls, args: Namespace):
        """
        Sets attributes of the class from a Namespace object (e.g. from argparse)

        Parameters
        ----------
        args : :class:`argparse.Namespace`
            :class:`argparse.Namespace` object containing attributes to set

        Returns
        -------
        cls
            Class instance with attributes set from args

        """
        return cls(**{f.name: getattr(args, f.name) for f in fields(cls) if hasattr(args, f.name)})


# Functions ------------------------------------------------------------------------------------------------------------
def insert_nth(s: str, n: int, sep: str = '\n') -> str:
    """
    Inserts a separator after every n-th character, never after the last one.

    :param s: Text to break up.
    :param n: Number of characters between separators.
    :param sep: Separator to insert.
    :return: The broken-up text.
    """
    if n < 1: raise ValueError('n must be positive')
    return sep.join(s[i:i + n] for i in range(0, len(s), n))


def bold(text: str):
    """
    Makes text bold in the terminal.

    :param text: Text to make bold.
    :return: Bold text.
    """
    return f"\033[1m{text}\033[0m"


def colour(text: str, name: str = 'blue') -> str:
    """Wraps text in an ANSI colour code; unknown colour names fall back to blue."""
    return f"\033[{_COLOURS.get(name.lower(), _COLOURS['blue'])}m{text}\033[0m"


def highlight(sequence: str, targets: Iterable[str], name: str = 'blue') -> str:
    """Colours every occurrence of each target in a sequence."""
    for target in targets:
        if target: sequence = sequence.replace(target, colour(target, name))
    return sequence
