"""Tests for the scalability experiments, CSV reports and charts."""

from contextlib import redirect_stdout
import csv
import io
from pathlib import Path
import sys
import tempfile
import unittest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import numpy as np

from nqueens.analysis.experiments import run_scalability_experiments
from nqueens.analysis.plots import exponential_fit, plot_and_save
from nqueens.analysis.reporting import save_raw_data_to_csv, save_results_to_csv
from nqueens.analysis.stats import ProgressPrinter, summarize_timings

N_VALUES = [1, 2, 3, 4, 6]
ENGINE_NAMES = ["recursive", "iterative"]


def _quiet(fn, *args, **kwargs):
    with redirect_stdout(io.StringIO()):
        return fn(*args, **kwargs)


class StatsTests(unittest.TestCase):
    def test_empty_values(self):
        summary = summarize_timings([])
        self.assertEqual(summary["count"], 0)
        self.assertIsNone(summary["mean"])

    def test_summary(self):
        summary = summarize_timings([1.0, 2.0, 3.0, 4.0])
        self.assertEqual(summary["count"], 4)
        self.assertAlmostEqual(summary["mean"], 2.5)
        self.assertEqual(summary["min"], 1.0)
        self.assertEqual(summary["max"], 4.0)
        self.assertEqual(summary["range"], 3.0)
        self.assertAlmostEqual(summary["q25"], 1.75)
        self.assertAlmostEqual(summary["q75"], 3.25)

    def test_single_value_is_its_own_quartiles(self):
        summary = summarize_timings([0.5])
        self.assertEqual((summary["q25"], summary["median"], summary["q75"]), (0.5, 0.5, 0.5))
        self.assertEqual(summary["std"], 0.0)
        self.assertEqual(summary["range"], 0.0)

    def test_progress_printer(self):
        out = io.StringIO()
        with redirect_stdout(out):
            ProgressPrinter(0, "BT").update(1, "N=4")
        line = out.getvalue()
        self.assertTrue(line.startswith("[BT] step 1 of 1, "), line)
        self.assertTrue(line.endswith("s elapsed (N=4)\n"), line)


class ExperimentTests(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.results = _quiet(run_scalability_experiments, N_VALUES, 2, ENGINE_NAMES, "test")

    def test_outcomes(self):
        for engine in ENGINE_NAMES:
            for N in N_VALUES:
                entry = self.results[engine][N]
                self.assertEqual(entry["solution_found"], N not in (2, 3))
                self.assertTrue(entry["valid"])
                self.assertEqual(len(entry["raw_runs"]), 2)
                self.assertEqual(entry["time"]["count"], 2)
        self.assertEqual(self.results["recursive"][4]["positions"], [1, 3, 0, 2])
        self.assertEqual(self.results["recursive"][3]["positions"], [-1, -1, -1])

    def test_engines_report_same_effort(self):
        for N in N_VALUES:
            rec = self.results["recursive"][N]
            it = self.results["iterative"][N]
            self.assertEqual(
                (rec["nodes"], rec["backtracks"], rec["max_depth"]),
                (it["nodes"], it["backtracks"], it["max_depth"]),
            )

    def test_invalid_arguments(self):
        with self.assertRaises(ValueError):
            run_scalability_experiments([4], 0, ENGINE_NAMES)
        with self.assertRaises(ValueError):
            run_scalability_experiments([4], 1, ["bitmask"])

    def test_csv_reports(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            summary_path = _quiet(save_results_to_csv, self.results, N_VALUES, tmpdir)
            raw_path = _quiet(save_raw_data_to_csv, self.results, N_VALUES, tmpdir)
            with open(summary_path, newline="") as f:
                rows = list(csv.DictReader(f))
            self.assertEqual(len(rows), len(N_VALUES) * len(ENGINE_NAMES))
            four = [r for r in rows if r["n"] == "4" and r["engine"] == "recursive"][0]
            self.assertEqual(four["solution_found"], "1")
            self.assertEqual(four["positions"], "1 3 0 2")
            for column in ("time_q25", "time_q75", "time_range"):
                self.assertIn(column, four)
                self.assertNotEqual(four[column], "")
            self.assertLessEqual(float(four["time_q25"]), float(four["time_q75"]))
            self.assertGreaterEqual(float(four["time_range"]), 0.0)
            with open(raw_path, newline="") as f:
                raw_rows = list(csv.DictReader(f))
            self.assertEqual(len(raw_rows), len(N_VALUES) * len(ENGINE_NAMES) * 2)

    def test_plots_written(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            paths = _quiet(plot_and_save, self.results, N_VALUES, tmpdir)
            self.assertEqual(len(paths), 3)
            for path in paths:
                self.assertTrue(Path(path).exists())
                self.assertGreater(Path(path).stat().st_size, 0)

    def test_exponential_fit(self):
        a, b = exponential_fit([1, 2, 3], np.exp(np.array([2.0, 4.0, 6.0]) + 1.0))
        self.assertAlmostEqual(a, 2.0, places=6)
        self.assertAlmostEqual(b, 1.0, places=6)
        with self.assertRaises(ValueError):
            exponential_fit([1], np.array([3.0]))


if __name__ == "__main__":
    unittest.main()
