import tempfile
import unittest
from pathlib import Path

from fourinrow.ai.advisor import MoveAdvisor
from fourinrow.scripts.benchmark import BENCH_COLUMNS, play_headless, write_csv


class TestBenchmark(unittest.TestCase):
    def test_shallow_self_play_finishes(self):
        log = play_headless(MoveAdvisor(depth=1), MoveAdvisor(depth=1), seed=5)
        self.assertIn(log.outcome, {"A", "B", "D"})
        self.assertTrue(log.rows)
        plies = [r["ply"] for r in log.rows]
        # Two random opening stones, then one row per advisor move
        self.assertEqual(plies[0], 3)
        self.assertEqual(plies, list(range(3, 3 + len(plies))))

    def test_same_seed_same_game(self):
        a = play_headless(MoveAdvisor(depth=1), MoveAdvisor(depth=1), seed=11)
        b = play_headless(MoveAdvisor(depth=1), MoveAdvisor(depth=1), seed=11)
        self.assertEqual([(r["row"], r["col"]) for r in a.rows], [(r["row"], r["col"]) for r in b.rows])
        self.assertEqual(a.outcome, b.outcome)

    def test_csv_export(self):
        log = play_headless(MoveAdvisor(depth=1), MoveAdvisor(depth=1), seed=2)
        for row in log.rows:
            row["game"] = 1
            row["outcome"] = log.outcome
        with tempfile.TemporaryDirectory() as tmp:
            out = write_csv(log.rows, Path(tmp) / "bench")
            self.assertTrue(out.name.startswith("advisor_bench_"))
            header = out.read_text().splitlines()[0]
            self.assertEqual(header.split(","), BENCH_COLUMNS)


if __name__ == "__main__":
    unittest.main()
