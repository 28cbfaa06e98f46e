from __future__ import annotations

from typing import Optional

import numpy as np

from ..board import BoardState
from .base import Strategy


class RandomPress(Strategy):
    """Uniformly random press; drives the new-game shuffle."""

    def __init__(self, rng: np.random.Generator | None = None):
        self.rng = rng or np.random.default_rng()

        self.n: Optional[int] = None
        self.N: Optional[int] = None

    def reset(self, n: int, params: dict | None = None) -> None:
        self.n = n
        self.N = n * n

        rng = (params or {}).get("rng", None)
        if isinstance(rng, np.random.Generator):
            self.rng = rng

    def select_action(self, state: BoardState, t: int = 0, history=None) -> int:
        assert self.N is not None, "Strategy not initialized properly."

        return int(self.rng.integers(self.N))

    def shuffle(self, state: BoardState, presses: int) -> list[int]:
        """Apply ``presses`` random presses to ``state`` and return them."""
        played = []
        for t in range(presses):
            a = self.select_action(state, t, played)
            state.press(a)
            played.append(a)
        return played
