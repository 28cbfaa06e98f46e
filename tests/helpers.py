import numpy as np

from lightsgame.board import BoardState
from lightsgame.algebra import build_A, gf2_solve


class FakeClock:
    """Manually advanced clock for stopwatch/session tests."""

    def __init__(self, start: float = 100.0):
        self.now = start

    def advance(self, seconds: float) -> None:
        self.now += seconds

    def __call__(self) -> float:
        return self.now


def shuffled_board(n: int, presses: int, seed: int = 0) -> BoardState:
    rng = np.random.default_rng(seed)
    board = BoardState(n)
    for i in rng.integers(0, n * n, size=presses):
        board.press(int(i))
    return board


def solve_with_plan(session) -> int:
    """Press every cell of a solver plan; returns the number of presses."""
    x, ok = gf2_solve(build_A(session.n), session.board.to_flat().astype(np.uint8))
    assert ok
    cells = [int(i) for i in np.flatnonzero(x)]
    for i in cells:
        session.press(i)
    return len(cells)
