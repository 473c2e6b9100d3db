"""Scoring: one point for a minimum-length word, plus one per extra character."""

from typing import TYPE_CHECKING, Iterable

from tileboggle.errors import InputError

if TYPE_CHECKING:
    from tileboggle.boggler import TileBoggler


def check_min_length(min_length: int):
    if min_length < 1:
        raise InputError(f"min_length must be at least 1, got {min_length}")


def word_score(word: str, min_length: int) -> int:
    assert len(word) >= min_length
    return 1 + (len(word) - min_length)


def score_words(boggler: "TileBoggler", words: Iterable[str], min_length: int) -> int:
    """Total score for the words which are scorable.

    A scorable word has at least min_length characters, is in the lexicon and
    is on the board.
    """
    check_min_length(min_length)
    if words is None:
        raise InputError("words must not be None")
    boggler.lexicon.check_loaded()

    score = 0
    for word in words:
        # is_valid_word comes first so a None word is an InputError.
        if (
            boggler.is_valid_word(word)
            and len(word) >= min_length
            and boggler.is_on_board(word)
        ):
            score += word_score(word, min_length)
    return score
