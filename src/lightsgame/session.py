from __future__ import annotations

import logging
import time
from typing import Callable, NamedTuple, Optional

import numpy as np

from .algebra import build_A
from .board import BoardState
from .config import GameConfig
from .history import MoveHistory
from .storage import BestStore, MemoryBestStore, YamlBestStore
from .strategies import LinearAlgebraHint, NoPlanError, RandomPress, Strategy
from .timer import Stopwatch, Ticker

logger = logging.getLogger(__name__)

NOT_STARTED = "not_started"
IN_PROGRESS = "in_progress"
SOLVED = "solved"


class SessionSnapshot(NamedTuple):
    """Read-only view of a session, handed to renderers."""

    size: Optional[int]
    cells: tuple
    moves: int
    elapsed: float
    status: str
    hint: Optional[int]
    auto_hint: bool
    can_undo: bool
    can_redo: bool
    best_moves: Optional[int]
    best_time: Optional[float]


class SessionStats:
    def __init__(self, stopwatch: Stopwatch):
        self.stopwatch = stopwatch
        self.moves = 0
        self.best_moves: Optional[int] = None
        self.best_time: Optional[float] = None

    @property
    def elapsed(self) -> float:
        return self.stopwatch.elapsed()

    def __repr__(self):
        return (
            f"SessionStats(moves={self.moves}, elapsed={self.elapsed:.1f}, "
            f"best_moves={self.best_moves}, best_time={self.best_time})"
        )


class GameSession:
    """One player's game: board, matrix, history, stats and timer.

    Every public mutator runs to completion and then notifies subscribers
    with a fresh snapshot. Moves, undo and redo are ignored unless a game
    is in progress.
    """

    def __init__(
        self,
        config: GameConfig | None = None,
        store: BestStore | None = None,
        rng: np.random.Generator | None = None,
        clock: Callable[[], float] = time.perf_counter,
        on_tick: Callable[[float], None] | None = None,
        hint_strategy: Strategy | None = None,
    ):
        self.config = config or GameConfig()
        if not self.config.persist_best:
            # records still tracked for this session, just never written out
            store = MemoryBestStore()
        elif store is None:
            if self.config.best_store:
                store = YamlBestStore(self.config.best_store)
            else:
                store = MemoryBestStore()
        self.store = store

        self.rng = rng or np.random.default_rng(self.config.seed)
        self.shuffler = RandomPress(self.rng)
        self.hinter = hint_strategy or LinearAlgebraHint()

        self.n: Optional[int] = None
        self.A: Optional[np.ndarray] = None
        self.board: Optional[BoardState] = None
        self.history = MoveHistory()
        self.stopwatch = Stopwatch(clock)
        self.stats = SessionStats(self.stopwatch)
        self.status = NOT_STARTED
        self.hint: Optional[int] = None
        self.auto_hint = self.config.auto_hint

        self.ticker: Optional[Ticker] = None
        if on_tick is not None and self.config.tick_interval:
            self.ticker = Ticker(
                self.stopwatch, on_tick, interval=self.config.tick_interval
            )
        self._listeners: list[Callable[[SessionSnapshot], None]] = []

    # -- observers -------------------------------------------------------

    def subscribe(self, listener: Callable[[SessionSnapshot], None]) -> None:
        self._listeners.append(listener)

    def unsubscribe(self, listener: Callable[[SessionSnapshot], None]) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _notify(self) -> None:
        snap = self.snapshot()
        for listener in list(self._listeners):
            listener(snap)

    def snapshot(self) -> SessionSnapshot:
        playing = self.status == IN_PROGRESS
        return SessionSnapshot(
            size=self.n,
            cells=(
                tuple(bool(c) for c in self.board.cells)
                if self.board is not None
                else ()
            ),
            moves=self.stats.moves,
            elapsed=self.stats.elapsed,
            status=self.status,
            hint=self.hint,
            auto_hint=self.auto_hint,
            can_undo=playing and self.history.can_undo,
            can_redo=playing and self.history.can_redo,
            best_moves=self.stats.best_moves,
            best_time=self.stats.best_time,
        )

    # -- game lifecycle --------------------------------------------------

    def _set_size(self, n: int) -> None:
        if n not in self.config.sizes:
            raise ValueError(
                f"Board size {n} not among allowed sizes {self.config.sizes}"
            )
        if n == self.n:
            return
        self.n = n
        self.A = build_A(n)
        self.hinter.reset(n, params={"A": self.A})
        self.shuffler.reset(n)

    def new_game(self, size: int | None = None) -> None:
        """Start a shuffled game, rebuilding the matrix only if the size changed."""
        if size is None:
            size = self.n if self.n is not None else self.config.size
        self._set_size(int(size))
        self._stop_clock()

        board = BoardState(self.n)
        presses = self.config.shuffle_presses(self.n)
        self.shuffler.shuffle(board, presses)
        # never hand out a board that is already won
        while board.is_solved():
            self.shuffler.shuffle(board, 1)
        self.board = board

        self.history.clear()
        self.stats.moves = 0
        self.hint = None
        self.stats.best_moves = self.store.load_best(self.n, "moves")
        self.stats.best_time = self.store.load_best(self.n, "time")
        self.status = IN_PROGRESS
        self.stopwatch.start()
        if self.ticker is not None:
            self.ticker.start()
        logger.info(
            "New %dx%d game, %d shuffle presses, %d lights on",
            self.n,
            self.n,
            presses,
            board.count_on(),
        )
        self._notify()

    def change_size(self, size: int) -> None:
        self.new_game(size)

    def _stop_clock(self) -> None:
        if self.ticker is not None:
            self.ticker.stop()
        self.stopwatch.stop()

    def close(self) -> None:
        self._stop_clock()

    def __enter__(self) -> "GameSession":
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    # -- player input ----------------------------------------------------

    def press(self, i: int) -> bool:
        """Play cell i. Returns False when no game is in progress."""
        if self.status != IN_PROGRESS:
            return False
        self.board.press(i)
        self.history.record(i)
        self.stats.moves += 1
        self.hint = None
        if self.board.is_solved():
            self._finish()
        self._notify()
        return True

    def undo(self) -> Optional[int]:
        if self.status != IN_PROGRESS:
            return None
        move = self.history.undo(self.board)
        if move is None:
            return None
        self.stats.moves = max(0, self.stats.moves - 1)
        self.hint = None
        self._notify()
        return move

    def redo(self) -> Optional[int]:
        if self.status != IN_PROGRESS:
            return None
        move = self.history.redo(self.board)
        if move is None:
            return None
        self.stats.moves += 1
        self.hint = None
        self._notify()
        return move

    def request_hint(self) -> Optional[int]:
        """Suggest the next press, or play it right away in auto-hint mode."""
        if self.status != IN_PROGRESS or self.board.is_solved():
            return None
        try:
            cell = self.hinter.select_action(
                self.board, self.stats.moves, self.history.moves
            )
        except NoPlanError as exc:
            logger.warning(
                "No hint for %dx%d board %s: %s",
                self.n,
                self.n,
                self.board.cells.astype(np.uint8).tolist(),
                exc,
            )
            return None
        logger.debug("Hint: press %d", cell)
        if self.auto_hint:
            self.press(cell)
        else:
            self.hint = cell
            self._notify()
        return cell

    def set_auto_hint(self, enabled: bool) -> None:
        self.auto_hint = bool(enabled)
        self._notify()

    def toggle_auto_hint(self) -> bool:
        self.set_auto_hint(not self.auto_hint)
        return self.auto_hint

    # -- completion ------------------------------------------------------

    def _finish(self) -> None:
        self._stop_clock()
        self.status = SOLVED
        moves, elapsed = self.stats.moves, self.stats.elapsed
        logger.info(
            "Solved %dx%d in %d moves, %.1fs", self.n, self.n, moves, elapsed
        )
        bests = {}
        for kind, value in (("moves", moves), ("time", elapsed)):
            best = self.store.load_best(self.n, kind)
            if best is None or value < best:
                best = value
                try:
                    self.store.persist_best(self.n, kind, value)
                except OSError as exc:
                    logger.warning(
                        "Could not save best %s for %dx%d: %s",
                        kind,
                        self.n,
                        self.n,
                        exc,
                    )
                else:
                    logger.info(
                        "New best %s for %dx%d: %s", kind, self.n, self.n, value
                    )
            bests[kind] = best
        self.stats.best_moves = bests["moves"]
        self.stats.best_time = bests["time"]

    def __repr__(self):
        return f"GameSession(n={self.n}, status={self.status}, {self.stats!r})"
