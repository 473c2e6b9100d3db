import math
from typing import Sequence, Self

from tileboggle.errors import InputError

# fmt: off
# col   0    1    2    3
DEFAULT_TILES = (
    "E", "E", "C", "A",  # row 0
    "A", "L", "E", "P",  # row 1
    "H", "N", "B", "O",  # row 2
    "Q", "T", "T", "Y",  # row 3
)
# fmt: on


class Board:
    """An immutable N x N grid of tiles. Tiles may hold more than one character.

    Cells are addressed either by (row, col) or by their row-major index,
    row * N + col.
    """

    _cells: tuple[str, ...]
    _n: int

    def __init__(self, cells: tuple[str, ...], n: int):
        assert n >= 1
        assert len(cells) == n * n
        self._cells = cells
        self._n = n

    @classmethod
    def from_tiles(cls, tiles: Sequence[str]) -> Self:
        """Build a board from N^2 tiles in row-major order."""
        if tiles is None or len(tiles) == 0:
            raise InputError("tiles must not be None or empty")
        n = math.isqrt(len(tiles))
        if n * n != len(tiles):
            raise InputError(f"Board must be square; got {len(tiles)} tiles")
        for i, tile in enumerate(tiles):
            if not isinstance(tile, str) or tile == "":
                raise InputError(f"Tile {i} must be a non-empty string: {tile!r}")
        return cls(tuple(tiles), n)

    @property
    def size(self) -> int:
        return self._n

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self._n and 0 <= col < self._n

    def index(self, row: int, col: int) -> int:
        return row * self._n + col

    def position(self, idx: int) -> tuple[int, int]:
        return divmod(idx, self._n)

    def tile(self, idx: int) -> str:
        return self._cells[idx]

    def tile_at(self, row: int, col: int) -> str:
        if not self.in_bounds(row, col):
            raise IndexError(f"({row}, {col}) is off the {self._n}x{self._n} board")
        return self._cells[self.index(row, col)]

    def tiles(self) -> tuple[str, ...]:
        return self._cells

    def matches(self, idx: int, word: str, char_index: int) -> bool:
        """Does the whole tile at idx match word, starting at char_index?"""
        tile = self._cells[idx]
        if char_index + len(tile) > len(word):
            return False
        return word.startswith(tile, char_index)

    def spell(self, path: Sequence[int]) -> str:
        return "".join(self._cells[i] for i in path)

    def render(self) -> str:
        n = self._n
        return "".join(
            " ".join(self._cells[row * n : (row + 1) * n]) + "\n" for row in range(n)
        )

    def __str__(self):
        return self.render()

    def __eq__(self, other):
        if not isinstance(other, Board):
            return NotImplemented
        return self._cells == other._cells

    def __hash__(self):
        return hash(self._cells)


DEFAULT_BOARD = Board.from_tiles(DEFAULT_TILES)
