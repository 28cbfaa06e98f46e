from lightsgame.board import BoardState
from lightsgame.history import MoveHistory


def _play(board, history, moves):
    for m in moves:
        board.press(m)
        history.record(m)


def test_empty_history_is_noop():
    board = BoardState(3)
    history = MoveHistory()
    assert history.undo(board) is None
    assert history.redo(board) is None
    assert history.pointer == -1
    assert board.is_solved()


def test_undo_restores_previous_board():
    board = BoardState(3)
    history = MoveHistory()
    _play(board, history, [0, 4])
    after_first = BoardState(3)
    after_first.press(0)

    assert history.undo(board) == 4
    assert board == after_first
    assert history.pointer == 0
    assert history.can_redo


def test_redo_restores_post_move_board():
    board = BoardState(3)
    history = MoveHistory()
    _play(board, history, [2, 6])
    after = board.copy()
    history.undo(board)
    assert history.redo(board) == 6
    assert board == after
    assert not history.can_redo
    assert history.redo(board) is None


def test_new_move_after_undo_drops_redo_tail():
    board = BoardState(3)
    history = MoveHistory()
    _play(board, history, [1, 2, 3])
    history.undo(board)
    history.undo(board)
    _play(board, history, [8])
    assert history.moves == (1, 8)
    assert not history.can_redo
    assert history.redo(board) is None


def test_undo_all_then_redo_all():
    board = BoardState(4)
    history = MoveHistory()
    _play(board, history, [0, 5, 10, 15])
    final = board.copy()
    while history.undo(board) is not None:
        pass
    assert board.is_solved()
    assert history.pointer == -1
    while history.redo(board) is not None:
        pass
    assert board == final
    assert history.pointer == len(history) - 1


def test_clear():
    board = BoardState(3)
    history = MoveHistory()
    _play(board, history, [0])
    history.clear()
    assert len(history) == 0
    assert not history.can_undo
