import pytest
from sortedcontainers import SortedSet

from tileboggle.boggler import TileBoggler
from tileboggle.errors import InputError, StateError
from tileboggle.scorer import score_words, word_score
from tileboggle.test_utils import get_lexicon


def test_word_score():
    assert word_score("eel", 3) == 1
    assert word_score("lent", 3) == 2
    assert word_score("lent", 1) == 4
    assert word_score("lent", 4) == 1


@pytest.mark.parametrize(
    "word, min_length, expected",
    [
        ("lent", 3, 2),
        ("lent", 4, 1),
        ("lent", 5, 0),  # too short
        ("eel", 3, 1),
        ("pope", 3, 0),  # not on the board
        ("cent", 3, 0),  # not in the lexicon
        ("quits", 1, 0),
    ],
)
def test_single_word(word, min_length, expected):
    b = TileBoggler(get_lexicon())
    assert score_words(b, SortedSet([word]), min_length) == expected


def test_score_words():
    b = TileBoggler(get_lexicon())
    words = b.get_all_scoreable_words(3)
    assert b.get_score_for_words(words, 3) == 9
    assert b.get_score_for_words(get_lexicon(), 3) == 9
    assert b.get_score_for_words(get_lexicon(), 4) == 2
    assert b.get_score_for_words(["LENT", "Bent", "cent"], 4) == 2
    assert b.get_score_for_words([], 3) == 0


def test_errors():
    b = TileBoggler(get_lexicon())
    with pytest.raises(InputError):
        b.get_score_for_words(["lent"], 0)
    with pytest.raises(InputError):
        b.get_score_for_words(None, 3)
    with pytest.raises(InputError):
        score_words(b, ["lent", None], 3)
    with pytest.raises(StateError):
        TileBoggler().get_score_for_words(["lent"], 3)
