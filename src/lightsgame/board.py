from __future__ import annotations

import numpy as np


class InvalidMoveError(IndexError):
    """Raised when a press targets a cell outside the board."""

    pass


def neighbors(n: int, i: int) -> list[int]:
    """Cell i followed by its in-bounds orthogonal neighbours."""
    r, c = divmod(i, n)
    neigh = [i]
    if r > 0:
        neigh.append(i - n)
    if r < n - 1:
        neigh.append(i + n)
    if c > 0:
        neigh.append(i - 1)
    if c < n - 1:
        neigh.append(i + 1)
    return neigh


class BoardState:
    def __init__(self, n: int, state: np.ndarray | None = None):
        if n < 1:
            raise ValueError(f"Board size must be positive, got {n}")
        self.n = n
        self.N = n * n
        if state is None:
            self.cells = np.zeros(self.N, dtype=bool)
        else:
            state = np.asarray(state)
            assert state.size == self.N, f"expected {self.N} cells"
            self.cells = state.reshape(-1).astype(bool, copy=True)

    @property
    def state(self) -> np.ndarray:
        # (n, n) view, writes go through to the flat cells
        return self.cells.reshape(self.n, self.n)

    def copy(self) -> "BoardState":
        return BoardState(self.n, self.cells.copy())

    def to_flat(self) -> np.ndarray:
        return self.cells

    @staticmethod
    def from_flat(n: int, flat: np.ndarray) -> "BoardState":
        return BoardState(n, flat)

    def press(self, i: int) -> None:
        """Toggle cell i and its orthogonal neighbours. Self-inverse."""
        if not 0 <= i < self.N:
            raise InvalidMoveError(
                f"Cell {i} is outside a {self.n}x{self.n} board"
            )
        for j in neighbors(self.n, i):
            self.cells[j] ^= True

    def apply_presses(self, presses) -> None:
        """Press every cell whose entry in the 0/1 vector is set."""
        for i in np.flatnonzero(np.asarray(presses)):
            self.press(int(i))

    def is_solved(self) -> bool:
        return not self.cells.any()

    def count_on(self) -> int:
        return int(self.cells.sum())

    def __eq__(self, other) -> bool:
        if not isinstance(other, BoardState):
            return NotImplemented
        return self.n == other.n and bool(np.array_equal(self.cells, other.cells))

    def __repr__(self):
        return f"BoardState(n={self.n}, on={self.count_on()})"

    def __str__(self) -> str:
        return "\n".join(
            "".join("1" if cell else "0" for cell in row) for row in self.state
        )
