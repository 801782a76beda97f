import time
import unittest
from math import inf

from fourinrow.ai.advisor import MoveAdvisor, Suggestion, evaluate
from fourinrow.config import WIN_SCORE
from fourinrow.core.board import Board
from fourinrow.core.rules import check_winner
from fourinrow.types import Player

from boards import a_threatens_corner, closed_row_three, full_no_win, open_row_three, snapshot_of


def plain_search(board, player, depth):
    """
    Alpha-beta on board copies with row-major move order inside the tree and
    a fresh full window for every root move. Slow, but obviously faithful.
    """
    me, opp = player, player.opponent

    def value(b, d, alpha, beta, maximizing):
        winner = check_winner(b)
        if winner == me:
            return WIN_SCORE + d
        if winner == opp:
            return -WIN_SCORE - d
        if b.is_full():
            return 0
        if d == 0:
            return evaluate(b, me)
        best = -inf if maximizing else inf
        for r, c in b.empty_cells():
            child = b.copy()
            child.grid[r][c] = int(me if maximizing else opp)
            s = value(child, d - 1, alpha, beta, not maximizing)
            if maximizing:
                best = max(best, s)
                alpha = max(alpha, s)
            else:
                best = min(best, s)
                beta = min(beta, s)
            if beta <= alpha:
                break
        return best

    moves = sorted(board.empty_cells(), key=lambda m: abs(m[0] - 2.5) + abs(m[1] - 2.5))
    best = None
    for r, c in moves:
        child = board.copy()
        child.grid[r][c] = int(me)
        s = value(child, depth - 1, -inf, inf, False)
        if best is None or s > best[2]:
            best = (r, c, s)
    return best


def two_stones():
    b = Board()
    b.place(2, 2, Player.A)
    b.place(3, 3, Player.B)
    return b


class TestMoveAdvisor(unittest.TestCase):
    def setUp(self):
        self.advisor = MoveAdvisor()

    def test_full_board_has_no_suggestion(self):
        self.assertIsNone(self.advisor.find_best_move(full_no_win(), Player.A))

    def test_single_empty_cell_is_returned(self):
        rows = full_no_win()
        rows[4][1] = 0
        for player in (Player.A, Player.B):
            with self.subTest(player=player):
                best = self.advisor.find_best_move(rows, player)
                self.assertEqual((best.row, best.col), (4, 1))

    def test_takes_the_immediate_win(self):
        best = self.advisor.find_best_move(a_threatens_corner(), Player.A)
        self.assertEqual(best.move, (5, 5))
        # Found with three plies still to go
        self.assertEqual(best.score, WIN_SCORE + 3)

    def test_blocks_the_opponent(self):
        best = self.advisor.find_best_move(a_threatens_corner(), Player.B)
        self.assertEqual(best.move, (5, 5))
        self.assertGreater(best.score, -WIN_SCORE)

    def test_input_is_not_mutated(self):
        board = Board.from_rows(a_threatens_corner())
        before = board.to_rows()
        self.advisor.find_best_move(board, Player.B)
        self.assertEqual(board.to_rows(), before)

    def test_accepts_snapshots(self):
        snap = snapshot_of(a_threatens_corner(), current=Player.A)
        best = self.advisor.find_best_move(snap, snap.current)
        self.assertIsInstance(best, Suggestion)
        self.assertEqual(best.move, (5, 5))
        self.assertEqual(self.advisor.choose_move(snap), (5, 5))

    def test_deterministic(self):
        rows = a_threatens_corner()
        first = self.advisor.find_best_move(rows, Player.B)
        again = MoveAdvisor().find_best_move(rows, Player.B)
        self.assertEqual(first, again)

    def test_stats_recorded(self):
        self.advisor.find_best_move(a_threatens_corner(), Player.B)
        info = self.advisor.last_info
        self.assertEqual(info["candidates"], 5)
        self.assertGreater(info["nodes"], 0)
        self.assertEqual(info["move"], (6, 6))

    def test_evaluate_matches_static_score(self):
        rows = a_threatens_corner()
        self.assertEqual(self.advisor.evaluate(rows, Player.A), evaluate(Board.from_rows(rows), Player.A))

    def test_shallow_search_prefers_centre_on_empty_board(self):
        best = MoveAdvisor(depth=1).find_best_move(Board(), Player.A)
        self.assertIn(best.move, {(2, 2), (2, 3), (3, 2), (3, 3)})


class TestMinimaxTerminals(unittest.TestCase):
    def test_win_loss_and_draw_scores(self):
        adv = MoveAdvisor()
        won = Board()
        for c in range(4):
            won.place(0, c, Player.A)
        self.assertEqual(adv.minimax(won, 2, float("-inf"), float("inf"), True, Player.A, Player.B), WIN_SCORE + 2)
        self.assertEqual(adv.minimax(won, 2, float("-inf"), float("inf"), True, Player.B, Player.A), -WIN_SCORE - 2)

        drawn = Board.from_rows(full_no_win())
        self.assertEqual(adv.minimax(drawn, 3, float("-inf"), float("inf"), False, Player.A, Player.B), 0)

    def test_depth_zero_is_static_eval(self):
        adv = MoveAdvisor()
        b = Board()
        b.place(2, 2, Player.A)
        self.assertEqual(adv.minimax(b, 0, float("-inf"), float("inf"), True, Player.A, Player.B), evaluate(b, Player.A))


class TestOpenBoardSearch(unittest.TestCase):
    """Full-depth searches on boards with most cells still empty."""

    def test_completes_an_open_three(self):
        best = MoveAdvisor().find_best_move(open_row_three(), Player.A)
        # Both ends win at once; (1,4) is closer to the centre
        self.assertEqual(best.move, (1, 4))
        self.assertEqual(best.score, WIN_SCORE + 3)

    def test_blocks_a_three(self):
        best = MoveAdvisor().find_best_move(closed_row_three(), Player.B)
        self.assertEqual(best.move, (1, 4))
        self.assertGreater(best.score, -WIN_SCORE)

    def test_full_depth_is_quick(self):
        adv = MoveAdvisor()
        start = time.perf_counter()
        best = adv.find_best_move(two_stones(), Player.A)
        elapsed = time.perf_counter() - start
        self.assertIsNotNone(best)
        self.assertEqual(adv.last_info["candidates"], 34)
        self.assertLess(elapsed, 3.0)

    def test_same_choice_as_plain_search(self):
        cases = [(two_stones(), 2)]
        rows = full_no_win()
        for r in range(1, 5):
            for c in range(1, 4):
                rows[r][c] = 0
        cases.append((Board.from_rows(rows), 4))

        for board, depth in cases:
            for player in (Player.A, Player.B):
                with self.subTest(depth=depth, player=player):
                    best = MoveAdvisor(depth=depth).find_best_move(board, player)
                    self.assertEqual(tuple(best), plain_search(board, player, depth))


if __name__ == "__main__":
    unittest.main()
