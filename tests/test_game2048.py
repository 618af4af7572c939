import pytest

from judgekit.game2048 import max_block


def test_worked_example():
    assert max_block([[2, 2, 2], [4, 4, 4], [8, 8, 8]]) == 16


def test_single_block_stays():
    assert max_block([[32]]) == 32


def test_empty_cells_only():
    assert max_block([[0, 0], [0, 0]]) == 0


@pytest.mark.parametrize(
    "board",
    [
        [[2, 0, 2], [0, 4, 0], [8, 0, 2]],
        [[2, 4], [8, 16]],
        [[4, 4, 0, 0], [0, 0, 2, 2], [8, 0, 0, 8], [0, 16, 0, 0]],
    ],
)
def test_result_bounded_by_board(board):
    result = max_block(board)
    assert result >= max(max(row) for row in board)
    assert result <= sum(sum(row) for row in board)


def test_two_equal_blocks_merge():
    assert max_block([[2, 2], [0, 0]]) == 2 * 2


def test_unmergeable_board_keeps_maximum():
    board = [[2, 4], [8, 16]]
    assert max_block(board) == 16


def test_non_square_rejected():
    with pytest.raises(ValueError):
        max_block([[2, 2, 2], [2, 2, 2]])


def test_empty_board_rejected():
    with pytest.raises(ValueError):
        max_block([])


def test_negative_block_rejected():
    with pytest.raises(ValueError):
        max_block([[2, -2], [0, 0]])