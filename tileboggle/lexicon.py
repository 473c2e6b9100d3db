import os
from typing import Iterable, Iterator, Self

from sortedcontainers import SortedSet

from tileboggle.errors import InputError, StateError


def parse_word(line: str) -> str | None:
    """The first whitespace-delimited token on the line, lowercased.

    Anything after the first token (e.g. a definition) is ignored.
    Returns None for blank lines.
    """
    parts = line.split()
    if not parts:
        return None
    return parts[0].lower()


class Lexicon:
    """A sorted set of lowercase words supporting word and prefix queries."""

    _words: SortedSet

    def __init__(self):
        self._words = SortedSet()

    def load(self, source: str | os.PathLike) -> None:
        """Replace the word list with the contents of a file.

        If the file can't be read, the lexicon is left empty and the OSError
        propagates.
        """
        if source is None:
            raise InputError("lexicon source must not be None")
        self._words = SortedSet()
        with open(source) as f:
            words = SortedSet(w for w in map(parse_word, f) if w)
        self._words = words

    def load_lines(self, lines: Iterable[str]) -> None:
        if lines is None:
            raise InputError("lexicon lines must not be None")
        self._words = SortedSet(w for w in map(parse_word, lines) if w)

    def check_loaded(self):
        if not self._words:
            raise StateError("lexicon has not been loaded")

    def is_valid_word(self, word: str) -> bool:
        if word is None:
            raise InputError("word must not be None")
        self.check_loaded()
        return word.lower() in self._words

    def is_valid_prefix(self, prefix: str) -> bool:
        """Is there at least one word in the lexicon starting with prefix?"""
        if prefix is None:
            raise InputError("prefix must not be None")
        self.check_loaded()
        words = self._words
        prefix = prefix.lower()
        # The smallest word >= prefix is the only candidate worth checking.
        i = words.bisect_left(prefix)
        return i < len(words) and words[i].startswith(prefix)

    def __len__(self):
        return len(self._words)

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    def __contains__(self, word: str):
        return word.lower() in self._words

    @classmethod
    def create_from_wordlist(cls, words: Iterable[str]) -> Self:
        lexicon = cls()
        lexicon.load_lines(words)
        return lexicon

    @classmethod
    def create_from_file(cls, path: str | os.PathLike) -> Self:
        lexicon = cls()
        lexicon.load(path)
        return lexicon
