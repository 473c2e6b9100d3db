import os
from typing import Iterable, Sequence

from sortedcontainers import SortedDict, SortedSet
from tqdm import tqdm

from tileboggle.board import DEFAULT_TILES, Board
from tileboggle.errors import InputError
from tileboggle.lexicon import Lexicon
from tileboggle.neighbors import neighbors
from tileboggle.scorer import check_min_length, score_words


class TileBoggler:
    """Finds lexicon words on a board of (possibly multi-character) tiles.

    The lexicon stores words lowercase, while the board is matched uppercase.
    is_on_board upper-cases its query; the two conventions are never merged.
    """

    _lexicon: Lexicon
    _board: Board

    def __init__(self, lexicon: Lexicon | None = None, tiles=DEFAULT_TILES):
        self._lexicon = lexicon if lexicon is not None else Lexicon()
        self._board = Board.from_tiles(tiles)

    @property
    def lexicon(self) -> Lexicon:
        return self._lexicon

    @property
    def board(self) -> Board:
        return self._board

    def load_lexicon(self, source: str | os.PathLike):
        self._lexicon.load(source)

    def is_valid_word(self, word: str) -> bool:
        return self._lexicon.is_valid_word(word)

    def is_valid_prefix(self, prefix: str) -> bool:
        return self._lexicon.is_valid_prefix(prefix)

    def set_board(self, tiles: Sequence[str]):
        # from_tiles validates everything before we touch self._board.
        self._board = Board.from_tiles(tiles)

    def get_board(self) -> str:
        return self._board.render()

    def is_on_board(self, word: str) -> list[int]:
        """Find a path of row-major indices spelling word, or [] if there isn't one.

        Start cells are tried in row-major order and neighbors in scan order,
        so the result is deterministic, though not necessarily the shortest.
        """
        if word is None:
            raise InputError("word must not be None")
        self._lexicon.check_loaded()

        word = word.upper()
        bd = self._board
        for i in range(0, bd.size * bd.size):
            if bd.matches(i, word, 0):
                path = self._search(bd, i, word)
                if path:
                    return path
        return []

    @staticmethod
    def _search(bd: Board, start: int, word: str) -> list[int]:
        """Backtracking DFS from start, using an explicit stack.

        Each stack frame holds the remaining neighbors of a cell on the path
        and the number of characters matched once that cell is consumed.
        """
        ns = neighbors(bd.size)
        used = [False] * (bd.size * bd.size)
        n = len(word)

        used[start] = True
        path = [start]
        length = len(bd.tile(start))
        if length == n:
            return path
        stack = [(iter(ns[start]), length)]

        while stack:
            it, length = stack[-1]
            for idx in it:
                if used[idx] or not bd.matches(idx, word, length):
                    continue
                used[idx] = True
                path.append(idx)
                next_length = length + len(bd.tile(idx))
                if next_length == n:
                    return path
                stack.append((iter(ns[idx]), next_length))
                break
            else:
                stack.pop()
                used[path.pop()] = False
        return []

    def get_all_scoreable_words(
        self, min_length: int, prune=False, progress=False
    ) -> SortedSet:
        """All lexicon words with at least min_length characters on the board.

        By default this runs is_on_board for every long-enough lexicon word.
        With prune=True it walks the board instead, abandoning any branch
        that isn't a prefix of an upper-cased lexicon word. The results are
        identical.
        """
        check_min_length(min_length)
        self._lexicon.check_loaded()
        if prune:
            return self.find_words(min_length)

        found = SortedSet()
        words: Iterable[str] = self._lexicon
        if progress:
            words = tqdm(words, total=len(self._lexicon), smoothing=0)
        for word in words:
            if len(word) >= min_length and self.is_on_board(word):
                found.add(word)
        return found

    def _upper_index(self, min_length: int) -> SortedDict:
        """Long-enough lexicon words, keyed by their board (upper-case) spelling.

        Upper-casing can change a word's length or collide two words
        ("straße" -> "STRASSE"), so each key maps to a list of words.
        """
        index = SortedDict()
        for w in self._lexicon:
            if len(w) >= min_length:
                index.setdefault(w.upper(), []).append(w)
        return index

    def find_words(self, min_length: int) -> SortedSet:
        """Board-driven search for words, pruned by prefix.

        Tiles are concatenated and compared against upper-cased lexicon
        words, exactly as is_on_board compares them.
        """
        check_min_length(min_length)
        self._lexicon.check_loaded()
        bd = self._board
        ns = neighbors(bd.size)
        index = self._upper_index(min_length)
        found = SortedSet()

        def is_prefix(s: str):
            i = index.bisect_left(s)
            return i < len(index) and index.peekitem(i)[0].startswith(s)

        def visit(s: str):
            found.update(index.get(s, ()))

        for start in range(0, bd.size * bd.size):
            s = bd.tile(start)
            if not is_prefix(s):
                continue
            used = [False] * (bd.size * bd.size)
            used[start] = True
            seq = [start]
            prefixes = [s]
            visit(s)
            stack = [iter(ns[start])]
            while stack:
                for idx in stack[-1]:
                    if used[idx]:
                        continue
                    s = prefixes[-1] + bd.tile(idx)
                    if not is_prefix(s):
                        continue
                    used[idx] = True
                    seq.append(idx)
                    prefixes.append(s)
                    visit(s)
                    stack.append(iter(ns[idx]))
                    break
                else:
                    stack.pop()
                    used[seq.pop()] = False
                    prefixes.pop()
        return found

    def get_score_for_words(self, words: Iterable[str], min_length: int) -> int:
        return score_words(self, words, min_length)
