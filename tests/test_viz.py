import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt  # noqa: E402
from matplotlib.patches import Rectangle  # noqa: E402

from lightsgame.board import BoardState  # noqa: E402
from lightsgame.config import GameConfig  # noqa: E402
from lightsgame.session import GameSession  # noqa: E402
from lightsgame.viz import show_board, show_plan  # noqa: E402


def _rectangles(ax):
    return [p for p in ax.patches if isinstance(p, Rectangle)]


def test_show_board_outlines_hint():
    board = BoardState(3)
    board.press(4)
    ax = show_board(board, hint=4)
    assert len(_rectangles(ax)) == 1
    plt.close("all")


def test_show_board_from_snapshot(clock):
    config = GameConfig.from_dict({"tick_interval": 0, "seed": 1})
    session = GameSession(config, clock=clock)
    session.new_game(4)
    session.request_hint()
    ax = show_board(session.snapshot())
    assert len(_rectangles(ax)) == 1
    assert ax.get_images()[0].get_array().shape == (4, 4)
    plt.close("all")


def test_show_plan_two_panels():
    board = BoardState(3)
    board.press(0)
    board.press(8)
    axes = show_plan(board, [0, 8])
    assert len(axes) == 2
    assert len(_rectangles(axes[1])) == 2
    plt.close("all")


def test_show_plan_repeated_press_cancels():
    axes = show_plan(BoardState(3), [4, 4])
    toggled = axes[1].get_images()[0].get_array()
    assert not toggled.any()
    plt.close("all")
