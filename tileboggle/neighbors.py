import functools


def init_neighbors(n: int):
    """Row-major neighbor lists for an n x n board.

    Each list is in scan order: row delta -1..1, then column delta -1..1.
    That's the same as ascending index order.
    """

    def idx(row: int, col: int):
        return n * row + col

    ns: list[tuple[int, ...]] = []
    for i in range(0, n * n):
        row, col = divmod(i, n)
        out = []
        for dr in range(-1, 2):
            nr = row + dr
            if nr < 0 or nr >= n:
                continue
            for dc in range(-1, 2):
                nc = col + dc
                if nc < 0 or nc >= n:
                    continue
                if dr == 0 and dc == 0:
                    continue
                out.append(idx(nr, nc))
        ns.append(tuple(out))
    return tuple(ns)


@functools.cache
def neighbors(n: int) -> tuple[tuple[int, ...], ...]:
    assert n >= 1
    return init_neighbors(n)
