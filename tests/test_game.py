"""
Unit Tests for Game Module

Tests for the game session, save files and bot worker, focusing on:
    - Turn order and move application
    - Illegal moves being ignored without state change
    - End-of-game detection and winner
    - Bot moves computed off-thread on a snapshot
    - Save file format and loading
"""

import numpy as np
import pytest

from migration_engine.board import (
    EMPTY,
    PLAYER_ONE,
    PLAYER_TWO,
    Move,
    NO_MOVE,
    generate_moves,
    initialize_board,
)
from migration_engine.game import MigrationGame, BotWorker, save_game, load_game
from migration_engine.search import find_best_move, MinimaxPlayer


@pytest.fixture
def game():
    """A 6x6 game against a depth-2 bot."""
    session = MigrationGame(6, 2)
    yield session
    session.close()


class RecordingStrategy:
    """Strategy that remembers the boards it was given."""

    def __init__(self, move=NO_MOVE):
        self.move = move
        self.boards = []

    def decide_move(self, board):
        self.boards.append(board)
        return self.move


class TestGameSession:
    """Tests for MigrationGame state handling."""

    def test_new_game(self, game):
        assert game.size == 6
        assert game.current_player == PLAYER_ONE
        assert np.array_equal(game.board, initialize_board(6))
        assert isinstance(game.bot, MinimaxPlayer)
        assert game.bot.max_depth == 2

    def test_get_cell(self, game):
        assert game.get_cell(1, 5) == PLAYER_ONE
        assert game.get_cell(0, 1) == PLAYER_TWO
        assert game.get_cell(0, 0) == EMPTY
        assert game.get_cell(-1, 0) == EMPTY
        assert game.get_cell(0, 6) == EMPTY

    def test_apply_move_flips_player(self, game):
        game.apply_move(1, 5, 1, 4)

        assert game.get_cell(1, 4) == PLAYER_ONE
        assert game.get_cell(1, 5) == EMPTY
        assert game.current_player == PLAYER_TWO

    def test_occupied_destination_ignored(self, game):
        before = game.board.copy()

        game.apply_move(2, 5, 2, 4)

        assert np.array_equal(game.board, before)
        assert game.current_player == PLAYER_ONE

    def test_empty_source_ignored(self, game):
        before = game.board.copy()

        game.apply_move(0, 0, 1, 0)

        assert np.array_equal(game.board, before)
        assert game.current_player == PLAYER_ONE

    @pytest.mark.parametrize("move", [
        (-1, 5, 0, 5),
        (1, 5, 1, 6),
        (6, 0, 5, 0),
        (1, 5, -1, 4),
    ])
    def test_out_of_bounds_ignored(self, game, move):
        before = game.board.copy()

        game.apply_move(*move)

        assert np.array_equal(game.board, before)
        assert game.current_player == PLAYER_ONE

    def test_apply_move_does_not_check_owner_or_direction(self, game):
        """Any piece may be moved to any empty cell; legality is the caller's job."""

        game.apply_move(0, 1, 0, 0)

        assert game.get_cell(0, 0) == PLAYER_TWO
        assert game.current_player == PLAYER_TWO

    def test_game_over_when_player_one_stuck(self, game):
        board = np.zeros((6, 6), dtype=np.int8)
        board[2, 0] = PLAYER_ONE
        board[0, 3] = PLAYER_TWO
        game.board = board

        assert game.is_game_over()
        assert game.winner() == PLAYER_TWO

    def test_game_over_checks_current_player_only(self, game):
        board = np.zeros((6, 6), dtype=np.int8)
        board[2, 0] = PLAYER_ONE
        board[0, 3] = PLAYER_TWO
        game.board = board
        game.current_player = PLAYER_TWO

        assert not game.is_game_over()
        assert game.winner() is None

    def test_not_over_at_start(self, game):
        assert not game.is_game_over()
        assert game.winner() is None

    def test_repr(self, game):
        assert "size=6" in repr(game)


class TestBotMoves:
    """Tests for bot move computation."""

    def test_calculate_bot_move_leaves_state(self, game):
        game.apply_move(1, 5, 1, 4)
        before = game.board.copy()

        move = game.calculate_bot_move()

        assert move == find_best_move(before, 2)[0]
        assert np.array_equal(game.board, before)
        assert game.current_player == PLAYER_TWO

    def test_run_bot_applies_move(self, game):
        game.apply_move(1, 5, 1, 4)

        move = game.run_bot()

        assert move != NO_MOVE
        assert game.get_cell(move.x2, move.y2) == PLAYER_TWO
        assert game.get_cell(move.x1, move.y1) == EMPTY
        assert game.current_player == PLAYER_ONE

    def test_run_bot_without_moves_is_noop(self, game):
        board = np.zeros((6, 6), dtype=np.int8)
        board[5, 2] = PLAYER_TWO
        board[3, 3] = PLAYER_ONE
        game.board = board
        game.current_player = PLAYER_TWO

        assert game.run_bot() == NO_MOVE
        assert np.array_equal(game.board, board)
        assert game.current_player == PLAYER_TWO

    def test_custom_strategy(self):
        strategy = RecordingStrategy(move=Move(0, 1, 1, 1))

        with MigrationGame(6, 1, strategy=strategy) as session:
            session.apply_move(1, 5, 1, 4)
            move = session.run_bot()

            assert move == Move(0, 1, 1, 1)
            assert session.get_cell(1, 1) == PLAYER_TWO
            assert len(strategy.boards) == 1

    def test_full_game_finishes(self):
        """Player 1 plays its first legal move until someone is stuck."""

        with MigrationGame(6, 2) as session:
            for _ in range(200):
                if session.is_game_over():
                    break
                if session.current_player == PLAYER_ONE:
                    session.apply_move(*generate_moves(PLAYER_ONE, session.board)[0])
                else:
                    session.run_bot()

            assert session.is_game_over()
            assert session.winner() in (PLAYER_ONE, PLAYER_TWO)
            assert int(np.sum(session.board == PLAYER_ONE)) == 6
            assert int(np.sum(session.board == PLAYER_TWO)) == 6


class TestBotWorker:
    """Tests for the off-thread worker."""

    def test_search_runs_on_snapshot(self, board6):
        strategy = RecordingStrategy()
        worker = BotWorker(strategy)
        try:
            result = worker.submit(board6).result()
        finally:
            worker.shutdown()

        assert result == NO_MOVE
        seen = strategy.boards[0]
        assert seen is not board6
        assert np.array_equal(seen, board6)
        assert not seen.flags.writeable
        assert board6.flags.writeable

    def test_snapshot_isolated_from_later_changes(self, board6):
        strategy = RecordingStrategy()
        worker = BotWorker(strategy)
        try:
            future = worker.submit(board6)
            board6[0, 0] = PLAYER_ONE
            future.result()
        finally:
            worker.shutdown()

        assert strategy.boards[0][0, 0] == EMPTY

    def test_minimax_player_on_worker(self, board8):
        worker = BotWorker(MinimaxPlayer(3))
        try:
            move = worker.submit(board8).result()
        finally:
            worker.shutdown()

        assert move == find_best_move(board8, 3)[0]

    def test_requests_run_in_order(self, board6):
        strategy = RecordingStrategy()
        worker = BotWorker(strategy)
        try:
            futures = [worker.submit(board6) for _ in range(5)]
            results = [f.result() for f in futures]
        finally:
            worker.shutdown()

        assert results == [NO_MOVE] * 5
        assert len(strategy.boards) == 5


class TestPersistence:
    """Tests for save files."""

    def test_save_format(self, tmp_path):
        path = tmp_path / "savegame.txt"

        with MigrationGame(4, 1) as session:
            session.save_game(path)

        assert path.read_text() == (
            "4 1\n"
            "0 2 2 0 \n"
            "0 0 0 1 \n"
            "0 0 0 1 \n"
            "0 0 0 0 \n"
        )

    def test_save_records_current_player(self, tmp_path, game):
        path = tmp_path / "savegame.txt"
        game.apply_move(1, 5, 1, 4)

        game.save_game(path)

        assert path.read_text().splitlines()[0] == "6 2"

    def test_load_restores_game(self, tmp_path, game):
        path = tmp_path / "savegame.txt"
        game.apply_move(1, 5, 1, 4)
        game.save_game(path)

        with MigrationGame.load_game(path, 3) as loaded:
            assert loaded.size == 6
            assert loaded.current_player == PLAYER_TWO
            assert np.array_equal(loaded.board, game.board)
            assert loaded.bot.max_depth == 3

    def test_load_tolerates_whitespace(self, tmp_path):
        path = tmp_path / "savegame.txt"
        path.write_text("2 2  \n0 1   \n2 0\n\n")

        size, player, board = load_game(path)

        assert size == 2
        assert player == PLAYER_TWO
        assert board.tolist() == [[0, 1], [2, 0]]

    def test_module_save_then_load(self, tmp_path, board8):
        path = tmp_path / "savegame.txt"

        save_game(path, 8, PLAYER_ONE, board8)
        size, player, board = load_game(path)

        assert (size, player) == (8, PLAYER_ONE)
        assert np.array_equal(board, board8)

    @pytest.mark.parametrize("content", [
        "",
        "4\n",
        "2 3\n0 0\n0 0\n",
        "2 1\n0 0\n",
        "2 1\n0 0 0\n0 0\n",
        "2 1\n0 x\n0 0\n",
        "2 1\n0 5\n0 0\n",
    ])
    def test_load_rejects_malformed(self, tmp_path, content):
        path = tmp_path / "savegame.txt"
        path.write_text(content)

        with pytest.raises(ValueError):
            load_game(path)

    def test_load_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_game(tmp_path / "missing.txt")


class TestLifetime:
    def test_close_twice(self):
        session = MigrationGame(4, 1)
        session.close()
        session.close()

    def test_context_manager_closes(self):
        with MigrationGame(4, 1) as session:
            pass

        with pytest.raises(RuntimeError):
            session.calculate_bot_move()

    def test_invalid_difficulty(self):
        with pytest.raises(ValueError):
            MigrationGame(6, 0)
