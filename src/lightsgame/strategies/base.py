from __future__ import annotations

from typing import Protocol

from ..board import BoardState


class NoPlanError(Exception):
    """Raised by a strategy when it cannot suggest a press for the board."""

    pass


class Strategy(Protocol):
    """Picks the next cell to press.

    ``reset`` is called whenever the board size changes; ``params`` may
    carry a prebuilt incidence matrix under ``"A"`` or a generator
    under ``"rng"``.
    """

    def reset(self, n: int, params: dict | None = None) -> None: ...

    def select_action(
        self, state: BoardState, t: int, history=None
    ) -> int: ...
