from __future__ import annotations

from typing import Optional

import numpy as np
from numpy.typing import NDArray

from ..algebra import build_A, gf2_solve
from ..board import BoardState
from .base import NoPlanError, Strategy


class LinearAlgebraHint(Strategy):
    """
    Solve the board over GF(2) and suggest one press from the solution.
    Replans on every call, so the suggestion always matches the current board.
    The suggestion is the lowest-indexed press, which keeps hints deterministic.
    """

    def __init__(self):
        self.n: Optional[int] = None
        self.N: Optional[int] = None
        self.A: Optional[NDArray] = None

    def reset(self, n: int, params: dict | None = None) -> None:
        self.n = int(n)
        self.N = self.n * self.n

        A = (params or {}).get("A", None)
        if A is not None:
            if A.shape != (self.N, self.N):
                raise ValueError(
                    f"Expected A of shape {(self.N, self.N)}, got {A.shape}"
                )
            self.A = A
        else:
            self.A = build_A(self.n)

    def solve(self, state: BoardState) -> np.ndarray:
        """Return a full press plan (0/1 vector) that clears the board."""
        if self.A is None or state.n != self.n:
            raise RuntimeError(
                "LinearAlgebraHint: A not built for this size, call reset() first"
            )

        target_state = state.to_flat().astype(np.uint8)
        solution, is_valid = gf2_solve(self.A, target_state)
        if not is_valid or solution is None:
            raise NoPlanError("No press set clears this board.")
        return solution

    def select_action(self, state: BoardState, t: int = 0, history=None) -> int:
        if state.is_solved():
            raise NoPlanError("Board is already solved.")

        candidate_actions = np.flatnonzero(self.solve(state))
        if len(candidate_actions) == 0:
            raise NoPlanError(
                "LinearAlgebraHint: empty plan (only zero solution)."
            )
        return int(candidate_actions[0])
