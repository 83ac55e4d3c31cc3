"""Quick regression tests for the N-Queens solver entry points."""

from contextlib import redirect_stdout
import io
from pathlib import Path
import sys
import unittest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from nqueens.analysis import cli


class QuickRegressionTests(unittest.TestCase):
    """Verify that the lightweight regression checks pass."""

    def test_engines_and_csv_generation(self):
        """Ensure both engines and CSV export succeed for N=8."""
        out = io.StringIO()
        with redirect_stdout(out):
            cli.run_quick_regression_tests()
        self.assertIn("Quick regression tests passed.", out.getvalue())


if __name__ == "__main__":
    unittest.main()
