import sys

import pytest
from inline_snapshot import snapshot

from tileboggle import find_words, score
from tileboggle.test_utils import WORDS_FILE


def run(main, monkeypatch, capsys, *args):
    monkeypatch.setattr(sys, "argv", ["prog", "--dictionary", WORDS_FILE, *args])
    main()
    return capsys.readouterr().out


def test_find_words_paths(monkeypatch, capsys):
    out = run(find_words.main, monkeypatch, capsys, "lent", "pope")
    assert out == snapshot("""\
E E C A
A L E P
H N B O
Q T T Y

lent: [5, 6, 9, 13] L@1,1 E@1,2 N@2,1 T@3,1
pope: not found
""")


def test_find_words_all(monkeypatch, capsys):
    out = run(find_words.main, monkeypatch, capsys, "--min_length", "4", "--prune")
    assert out.splitlines()[-3:] == snapshot(
        ["bent: [10, 6, 9, 13]", "lent: [5, 6, 9, 13]", "2 words, score: 2"]
    )


def test_find_words_bad_board(monkeypatch, capsys):
    with pytest.raises(SystemExit):
        run(find_words.main, monkeypatch, capsys, "--board", "A B C")


def test_score(monkeypatch, capsys, tmp_path):
    boards = tmp_path / "boards.txt"
    boards.write_text("E E C A A L E P H N B O Q T T Y\n\nQU I T S\n")
    out = run(score.main, monkeypatch, capsys, "--print_words", str(boards))
    assert out == snapshot("""\
E E C A A L E P H N B O Q T T Y: 9
ape
bent
cap
eel
lent
toy
yob
QU I T S: 5
quit
quits
""")
