import random
import unittest

from fourinrow.errors import CellOccupied, GameOver, OutOfBounds
from fourinrow.game.engine import GameEngine
from fourinrow.game.results import Draw, Ongoing, Win
from fourinrow.game.state import PlayerInfo
from fourinrow.storage.store import default_players
from fourinrow.types import Player

from boards import full_no_win

ANN = PlayerInfo("Ann", "red")
BOB = PlayerInfo("Bob", "yellow")


class TestEngine(unittest.TestCase):
    def setUp(self):
        self.engine = GameEngine(rng=random.Random(7))
        self.engine.new_game(ANN, BOB, Player.A)

    def test_new_game_state(self):
        e = self.engine
        self.assertIs(e.current_player(), Player.A)
        self.assertFalse(e.is_over())
        self.assertEqual(e.winning_line(), [])
        self.assertEqual(e.move_count, 0)
        self.assertTrue(all(v == 0 for row in e.snapshot().board for v in row))

    def test_random_starter_uses_engine_rng(self):
        starters = set()
        e = GameEngine(rng=random.Random(1))
        for _ in range(20):
            e.new_game(ANN, BOB)
            starters.add(e.current_player())
        self.assertEqual(starters, {Player.A, Player.B})

    def test_turns_alternate(self):
        res = self.engine.apply_move(0, 0)
        self.assertTrue(res.success)
        self.assertIsInstance(res.outcome, Ongoing)
        self.assertIs(res.placed_by, Player.A)
        self.assertIs(res.next_player, Player.B)
        self.assertIs(self.engine.current_player(), Player.B)

    def test_occupied_cell_leaves_state_unchanged(self):
        self.engine.apply_move(0, 0)
        before = self.engine.snapshot()
        with self.assertRaises(CellOccupied):
            self.engine.apply_move(0, 0)
        self.assertEqual(self.engine.snapshot(), before)

        res = self.engine.play(0, 0)
        self.assertFalse(res.success)
        self.assertEqual(res.reason, "cell_taken")
        self.assertEqual(self.engine.snapshot(), before)

    def test_out_of_bounds(self):
        with self.assertRaises(OutOfBounds):
            self.engine.apply_move(6, 6)
        self.assertEqual(self.engine.play(-1, 0).reason, "out_of_bounds")
        self.assertIs(self.engine.current_player(), Player.A)

    def test_diagonal_scenario(self):
        e = self.engine
        b_moves = [(0, 1), (0, 2), (0, 3)]
        a_moves = [(2, 2), (3, 3), (4, 4), (5, 5)]
        for i, (r, c) in enumerate(a_moves[:-1]):
            self.assertIsInstance(e.apply_move(r, c).outcome, Ongoing)
            self.assertIsInstance(e.apply_move(*b_moves[i]).outcome, Ongoing)

        res = e.apply_move(5, 5)
        self.assertIsInstance(res.outcome, Win)
        self.assertIs(res.winner, Player.A)
        self.assertEqual(list(res.winning_line), a_moves)
        self.assertEqual(res.player_info, ANN)
        self.assertTrue(e.is_over())
        self.assertEqual(e.winning_line(), a_moves)
        # The winner keeps the turn; nothing flips after a terminal move
        self.assertIs(e.current_player(), Player.A)

        with self.assertRaises(GameOver):
            e.apply_move(1, 1)
        self.assertEqual(e.play(1, 1).reason, "game_over")

    def test_completing_move_wins_in_every_direction(self):
        # (A stones in play order, B replies elsewhere, expected line)
        cases = {
            "horizontal": ([(3, 0), (3, 1), (3, 3), (3, 2)], [(0, 0), (0, 5), (5, 5)],
                           [(3, 0), (3, 1), (3, 2), (3, 3)]),
            "vertical": ([(1, 2), (3, 2), (4, 2), (2, 2)], [(0, 0), (0, 5), (5, 5)],
                         [(1, 2), (2, 2), (3, 2), (4, 2)]),
            "diagonal": ([(1, 1), (2, 2), (4, 4), (3, 3)], [(0, 5), (5, 0), (5, 1)],
                         [(1, 1), (2, 2), (3, 3), (4, 4)]),
            "anti-diagonal": ([(1, 4), (2, 3), (4, 1), (3, 2)], [(5, 0), (5, 1), (5, 5)],
                              [(1, 4), (2, 3), (3, 2), (4, 1)]),
        }
        for name, (a_moves, b_moves, line) in cases.items():
            with self.subTest(direction=name):
                e = GameEngine()
                e.new_game(ANN, BOB, Player.A)
                for a, b in zip(a_moves, b_moves):
                    self.assertIsInstance(e.apply_move(*a).outcome, Ongoing)
                    self.assertIsInstance(e.apply_move(*b).outcome, Ongoing)

                res = e.apply_move(*a_moves[-1])
                self.assertIsInstance(res.outcome, Win)
                self.assertIs(res.winner, Player.A)
                self.assertEqual(list(res.winning_line), line)
                self.assertEqual(e.winning_line(), line)
                self.assertTrue(e.is_over())

    def test_default_players_come_from_config(self):
        snap = GameEngine().snapshot()
        self.assertEqual((snap.player_info(Player.A), snap.player_info(Player.B)), default_players())

    def test_full_board_is_draw(self):
        pattern = full_no_win()
        a_cells = [(r, c) for r in range(6) for c in range(6) if pattern[r][c] == 1]
        b_cells = [(r, c) for r in range(6) for c in range(6) if pattern[r][c] == 2]

        results = []
        for a, b in zip(a_cells, b_cells):
            results.append(self.engine.apply_move(*a))
            results.append(self.engine.apply_move(*b))

        self.assertTrue(all(isinstance(r.outcome, Ongoing) for r in results[:-1]))
        self.assertIsInstance(results[-1].outcome, Draw)
        self.assertTrue(self.engine.is_over())
        self.assertEqual(results[-1].to_dict(), {"success": True, "winner": None, "winningCells": [], "draw": True})

    def test_snapshot_is_stable_and_detached(self):
        self.engine.apply_move(2, 3)
        s1 = self.engine.snapshot()
        s2 = self.engine.snapshot()
        self.assertEqual(s1, s2)
        self.assertEqual(s1.cell(2, 3), 1)
        self.assertEqual(s1.player_info(Player.B), BOB)

        board = self.engine.board_copy()
        board.grid[0][0] = 2
        self.assertEqual(self.engine.snapshot().cell(0, 0), 0)

    def test_win_to_dict(self):
        for r, c in [(0, 0), (5, 0), (0, 1), (5, 1), (0, 2), (5, 2)]:
            self.engine.apply_move(r, c)
        res = self.engine.apply_move(0, 3)
        self.assertEqual(
            res.to_dict(),
            {
                "success": True,
                "winner": 1,
                "winningCells": [{"row": 0, "col": i} for i in range(4)],
                "draw": False,
            },
        )

    def test_new_game_resets(self):
        for r, c in [(0, 0), (5, 0), (0, 1), (5, 1), (0, 2), (5, 2), (0, 3)]:
            self.engine.apply_move(r, c)
        self.assertTrue(self.engine.is_over())
        self.engine.new_game(ANN, BOB, Player.B)
        self.assertFalse(self.engine.is_over())
        self.assertEqual(self.engine.winning_line(), [])
        self.assertIs(self.engine.current_player(), Player.B)

    def test_empty_name_rejected(self):
        with self.assertRaises(ValueError):
            PlayerInfo("  ", "red")


if __name__ == "__main__":
    unittest.main()
