"""Exceptions raised by the lexicon, board and search engine.

I/O failures are not wrapped: whatever OSError open() raises propagates.
"""


class TileBoggleError(Exception):
    """Base class for all tileboggle errors."""


class InputError(TileBoggleError, ValueError):
    """A missing or malformed argument, e.g. a non-square board."""


class StateError(TileBoggleError, RuntimeError):
    """The operation needs a loaded lexicon, but it's empty."""
