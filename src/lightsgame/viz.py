import matplotlib.pyplot as plt
import numpy as np
from matplotlib.colors import ListedColormap
from matplotlib.patches import Rectangle

from lightsgame.algebra import build_A
from lightsgame.session import SessionSnapshot

BOARD_CMAP = ListedColormap(["#1f2430", "#ffd166"])


def _outline(ax, cells, n, color, linewidth=2):
    for a in np.atleast_1d(cells):
        r, c = divmod(int(a), n)
        ax.add_patch(
            Rectangle(
                (c - 0.5, r - 0.5),
                1,
                1,
                edgecolor=color,
                facecolor="none",
                linewidth=linewidth,
            )
        )


def _grid_axes(ax, n):
    ax.set_xticks(range(n))
    ax.set_yticks(range(n))
    ax.set_xlabel("col")
    ax.set_ylabel("row")


def show_board(board, hint=None, ax=None, hint_color="red", title=None):
    """
    Draw a board: lit cells yellow, dark cells grey.
    ``hint`` (a cell index) is outlined in ``hint_color``.
    Accepts a BoardState or a SessionSnapshot.
    """
    if isinstance(board, SessionSnapshot):
        n = board.size
        cells = np.asarray(board.cells, dtype=bool)
        if hint is None:
            hint = board.hint
    else:
        n = board.n
        cells = board.to_flat()

    if ax is None:
        _, ax = plt.subplots(figsize=(3.5, 3.5))
    ax.imshow(cells.reshape(n, n), cmap=BOARD_CMAP, vmin=0, vmax=1)
    if hint is not None:
        _outline(ax, hint, n, hint_color, linewidth=3)
    _grid_axes(ax, n)
    if title:
        ax.set_title(title)
    return ax


def show_plan(board, presses, ax=None, pressed_color="red", cmap="viridis"):
    """
    Show which cells a press plan toggles, side by side with the board.

    Parameters
    ----------
    board : BoardState
        Board the plan is meant for.
    presses : 0/1 vector or iterable of cell indices
    """
    n = board.n
    presses = np.asarray(presses)
    if presses.size == n * n and set(np.unique(presses)) <= {0, 1}:
        actions = np.flatnonzero(presses)
    else:
        actions = presses.reshape(-1).astype(int)

    x = np.zeros(n * n, dtype=np.uint8)
    np.bitwise_xor.at(x, actions, 1)
    toggled = (build_A(n).astype(np.int64) @ x) % 2

    if ax is None:
        _, axes = plt.subplots(1, 2, figsize=(7.2, 3.5), constrained_layout=True)
    else:
        axes = ax
    show_board(board, ax=axes[0], title="Board")
    im = axes[1].imshow(toggled.reshape(n, n), cmap=cmap, vmin=0, vmax=1)
    _outline(axes[1], actions, n, pressed_color)
    _grid_axes(axes[1], n)
    axes[1].set_title(f"Plan ({len(actions)} presses)")
    plt.colorbar(im, ax=axes[1], fraction=0.046, pad=0.04, label="toggled")
    return axes
