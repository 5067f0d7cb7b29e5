"""Tests for the random, brute-force and heuristic players."""

import random

import pytest

from tictactoe import BoardState, NoMovesAvailable, Player
from tictactoe.ai import EnumerationStrategy, HeuristicStrategy, RandomStrategy, Score, clear_score_cache
from tictactoe.ai import enumeration
from tictactoe.ai.enumeration import score_by_enumeration, score_cache_size

SCRATCH_CELLS = [1, 2, 1, 1, 2, 2, 2, 1, 1]


def _new_cell(before, after):
    (cell,) = [i for i in range(9) if before.cells[i] != after.cells[i]]
    return cell


def _play(board, strategy_one, strategy_two):
    player = Player.ONE
    strategies = {Player.ONE: strategy_one, Player.TWO: strategy_two}
    while not board.has_winner() and not board.is_full():
        board = strategies[player].select_move(board, player)
        player = player.opponent
    return board


@pytest.mark.parametrize(
    "strategy",
    [RandomStrategy(rng=random.Random(0)), EnumerationStrategy(), HeuristicStrategy()],
    ids=["random", "brute", "good"],
)
def test_full_board_has_no_moves(strategy):
    board = BoardState.from_cells(SCRATCH_CELLS)
    with pytest.raises(NoMovesAvailable):
        strategy.select_move(board, Player.ONE)


@pytest.mark.parametrize(
    "strategy",
    [RandomStrategy(rng=random.Random(1)), EnumerationStrategy(), HeuristicStrategy()],
    ids=["random", "brute", "good"],
)
def test_strategies_add_exactly_one_mark(strategy):
    board = BoardState.from_cells([1, 0, 0, 0, 2, 0, 0, 0, 0])
    result = strategy.select_move(board, Player.ONE)
    cell = _new_cell(board, result)
    assert cell in board.empty_cells()
    assert result.cells[cell] is Player.ONE
    assert board.to_ints() == (1, 0, 0, 0, 2, 0, 0, 0, 0)


# ----------------------------------------------------------------------
# RandomStrategy
# ----------------------------------------------------------------------
def test_random_moves_are_always_legal():
    rng = random.Random(1234)
    strategy = RandomStrategy(rng=rng)
    for _ in range(200):
        board = BoardState.empty()
        player = Player.ONE
        while not board.has_winner() and not board.is_full():
            open_cells = board.empty_cells()
            next_board = strategy.select_move(board, player)
            cell = _new_cell(board, next_board)
            assert cell in open_cells
            assert next_board.cells[cell] is player
            board = next_board
            player = player.opponent


def test_random_is_reproducible_with_seed():
    first = _play(BoardState.empty(), RandomStrategy(rng=random.Random(7)), RandomStrategy(rng=random.Random(8)))
    second = _play(BoardState.empty(), RandomStrategy(rng=random.Random(7)), RandomStrategy(rng=random.Random(8)))
    assert first == second


def test_random_single_open_cell():
    board = BoardState.from_cells([1, 2, 1, 1, 2, 2, 2, 1, 0])
    result = RandomStrategy(rng=random.Random(3)).select_move(board, Player.ONE)
    assert result.cells[8] is Player.ONE


# ----------------------------------------------------------------------
# Enumeration scoring
# ----------------------------------------------------------------------
def test_score_addition_and_margin():
    total = Score(2, 1) + Score(0, 3)
    assert total == Score(2, 4)
    assert total.margin == -2
    assert Score(3, 1).beats(Score(5, 4))
    assert not Score(1, 1).beats(Score(0, 0))


def test_score_of_won_board_depends_on_last_player():
    board = BoardState.from_cells([1, 1, 1, 0, 2, 0, 2, 0, 0])
    assert score_by_enumeration(board, scoree=Player.ONE, lastplayer=Player.ONE) == Score(1, 0)
    assert score_by_enumeration(board, scoree=Player.TWO, lastplayer=Player.ONE) == Score(0, 1)


def test_score_of_scratch_is_neutral():
    board = BoardState.from_cells(SCRATCH_CELLS)
    assert score_by_enumeration(board, scoree=Player.ONE, lastplayer=Player.ONE) == Score(0, 0)


def test_score_sums_every_continuation():
    # ONE to move on 2, 5, 8: cell 2 wins at once, cell 5 wins later, cell 8 loses.
    board = BoardState.from_cells([1, 1, 0, 2, 2, 0, 1, 2, 0])
    assert score_by_enumeration(board, scoree=Player.ONE, lastplayer=Player.TWO) == Score(2, 1)


def test_score_cache_gives_same_answer():
    board = BoardState.from_cells([1, 1, 0, 2, 2, 0, 1, 2, 0])
    clear_score_cache()
    assert score_cache_size() == 0
    first = score_by_enumeration(board, scoree=Player.ONE, lastplayer=Player.TWO)
    assert score_cache_size() > 0
    assert score_by_enumeration(board, scoree=Player.ONE, lastplayer=Player.TWO) == first


# ----------------------------------------------------------------------
# EnumerationStrategy
# ----------------------------------------------------------------------
def test_enumeration_takes_immediate_win():
    board = BoardState.from_cells([1, 1, 0, 2, 2, 0, 0, 0, 0])
    result = EnumerationStrategy().select_move(board, Player.ONE)
    assert result == board.with_move(2, Player.ONE)


def test_enumeration_takes_lowest_winning_cell():
    board = BoardState.from_cells([1, 1, 0, 1, 2, 2, 0, 2, 0])
    result = EnumerationStrategy().select_move(board, Player.ONE)
    assert result.cells[2] is Player.ONE
    assert result.cells[6] is None


def test_enumeration_prefers_higher_margin():
    # TWO to move: 6 lets ONE complete 2-5-8, 8 ends in a scratch.
    board = BoardState.from_cells([1, 2, 1, 2, 2, 1, 0, 1, 0])
    result = EnumerationStrategy().select_move(board, Player.TWO)
    assert result == board.with_move(8, Player.TWO)


def test_enumeration_ties_go_to_lowest_cell(monkeypatch):
    scored = []

    def flat_score(board, scoree, lastplayer):
        scored.append(board)
        return Score(1, 1)

    monkeypatch.setattr(enumeration, "score_by_enumeration", flat_score)
    board = BoardState.from_cells([0, 1, 0, 0, 2, 0, 0, 0, 0])
    result = EnumerationStrategy().select_move(board, Player.ONE)
    assert len(scored) == len(board.empty_cells())
    assert result == board.with_move(0, Player.ONE)


def test_enumeration_from_empty_board():
    result = EnumerationStrategy().select_move(BoardState.empty(), Player.ONE)
    assert len(result.cells_of(Player.ONE)) == 1
    assert result.cells_of(Player.TWO) == ()


# ----------------------------------------------------------------------
# HeuristicStrategy
# ----------------------------------------------------------------------
def test_heuristic_opening_is_corner():
    result = HeuristicStrategy().select_move(BoardState.empty(), Player.ONE)
    assert result.to_ints() == (1, 0, 0, 0, 0, 0, 0, 0, 0)


def test_heuristic_opening_for_second_player_identity():
    result = HeuristicStrategy().select_move(BoardState.empty(), Player.TWO)
    assert result.to_ints() == (2, 0, 0, 0, 0, 0, 0, 0, 0)


def test_heuristic_blocks_opponent_line():
    board = BoardState.from_cells([2, 2, 0, 0, 1, 0, 0, 0, 0])
    result = HeuristicStrategy().select_move(board, Player.ONE)
    assert result == board.with_move(2, Player.ONE)


def test_heuristic_prefers_win_over_block():
    board = BoardState.from_cells([1, 1, 0, 2, 2, 0, 0, 0, 0])
    assert HeuristicStrategy().select_move(board, Player.ONE).cells[2] is Player.ONE
    assert HeuristicStrategy().select_move(board, Player.TWO).cells[5] is Player.TWO


def test_heuristic_creates_fork():
    board = BoardState.from_cells([1, 0, 0, 0, 2, 0, 0, 0, 1])
    result = HeuristicStrategy().select_move(board, Player.ONE)
    assert result == board.with_move(2, Player.ONE)


def test_heuristic_blocks_fork_by_taking_fork_cell():
    board = BoardState.from_cells([1, 0, 0, 0, 2, 0, 0, 0, 1])
    result = HeuristicStrategy().select_move(board, Player.TWO)
    assert result == board.with_move(2, Player.TWO)


def test_heuristic_takes_center():
    board = BoardState.from_cells([1, 0, 0, 0, 0, 0, 0, 0, 0])
    result = HeuristicStrategy().select_move(board, Player.TWO)
    assert result == board.with_move(4, Player.TWO)


@pytest.mark.parametrize("corner, opposite", [(0, 8), (8, 0), (2, 6), (6, 2)])
def test_heuristic_answers_opposite_corner(corner, opposite):
    board = BoardState.empty().with_move(4, Player.ONE).with_move(corner, Player.TWO)
    result = HeuristicStrategy().select_move(board, Player.ONE)
    assert result == board.with_move(opposite, Player.ONE)


def test_heuristic_takes_free_corner():
    board = BoardState.from_cells([1, 0, 0, 0, 2, 0, 0, 0, 0])
    result = HeuristicStrategy().select_move(board, Player.ONE)
    assert result == board.with_move(2, Player.ONE)


def test_heuristic_falls_back_to_edge():
    board = BoardState.from_cells([1, 0, 2, 2, 1, 1, 1, 0, 2])
    result = HeuristicStrategy().select_move(board, Player.TWO)
    assert result == board.with_move(1, Player.TWO)


def test_heuristic_self_play_is_scratch():
    strategy = HeuristicStrategy()
    final = _play(BoardState.empty(), strategy, strategy)
    assert final.to_ints() == tuple(SCRATCH_CELLS)
    assert not final.has_winner()


def test_heuristic_always_takes_available_win():
    rng = random.Random(99)
    opponent = RandomStrategy(rng=rng)
    heuristic = HeuristicStrategy()
    for _ in range(100):
        board = BoardState.empty()
        player = Player.ONE
        while not board.has_winner() and not board.is_full():
            if player is Player.TWO:
                could_win = any(board.with_move(cell, player).has_winner() for cell in board.empty_cells())
                board = heuristic.select_move(board, player)
                if could_win:
                    assert board.winner() is Player.TWO
            else:
                board = opponent.select_move(board, player)
            player = player.opponent


def _heuristic_losses(heuristic_player):
    """Final boards of every game the heuristic loses when the other side tries every reply."""

    heuristic = HeuristicStrategy()
    losses = []

    def walk(board, to_move):
        if board.has_winner() or board.is_full():
            if board.winner() is heuristic_player.opponent:
                losses.append(board.to_ints())
            return
        if to_move is heuristic_player:
            walk(heuristic.select_move(board, to_move), to_move.opponent)
        else:
            for cell in board.empty_cells():
                walk(board.with_move(cell, to_move), to_move.opponent)

    walk(BoardState.empty(), Player.ONE)
    return losses


def test_heuristic_never_loses_moving_first():
    assert _heuristic_losses(Player.ONE) == []


def test_heuristic_second_player_losses_are_fork_cell_lines():
    losses = _heuristic_losses(Player.TWO)
    assert len(losses) == 4
    # ONE takes two opposite corners, TWO answers on a fork cell and is forked again.
    assert (1, 0, 2, 2, 2, 0, 1, 1, 1) in losses
    assert (2, 0, 1, 0, 2, 2, 1, 1, 1) in losses
    for cells in losses:
        final = BoardState.from_cells(cells)
        assert final.winner() is Player.ONE
