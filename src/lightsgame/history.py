from __future__ import annotations

import logging
from typing import Optional

from .board import BoardState

logger = logging.getLogger(__name__)


class MoveHistory:
    """Linear undo/redo over played presses.

    ``pointer`` is the index of the last applied entry (-1 when none);
    entries after it are waiting to be redone.
    """

    def __init__(self):
        self._entries: list[int] = []
        self.pointer = -1

    @property
    def moves(self) -> tuple[int, ...]:
        return tuple(self._entries)

    @property
    def can_undo(self) -> bool:
        return self.pointer >= 0

    @property
    def can_redo(self) -> bool:
        return self.pointer < len(self._entries) - 1

    def clear(self) -> None:
        self._entries = []
        self.pointer = -1

    def record(self, move: int) -> None:
        # a new move drops whatever was waiting to be redone
        del self._entries[self.pointer + 1 :]
        self._entries.append(int(move))
        self.pointer += 1

    def undo(self, board: BoardState) -> Optional[int]:
        if not self.can_undo:
            return None
        move = self._entries[self.pointer]
        board.press(move)
        self.pointer -= 1
        logger.debug("Undo press %d (pointer=%d)", move, self.pointer)
        return move

    def redo(self, board: BoardState) -> Optional[int]:
        if not self.can_redo:
            return None
        move = self._entries[self.pointer + 1]
        board.press(move)
        self.pointer += 1
        logger.debug("Redo press %d (pointer=%d)", move, self.pointer)
        return move

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self):
        return f"MoveHistory(len={len(self._entries)}, pointer={self.pointer})"
