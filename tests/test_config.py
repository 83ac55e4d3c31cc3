"""Tests for configuration loading and the command-line driver."""

from contextlib import redirect_stdout
import io
import json
from pathlib import Path
import sys
import tempfile
import unittest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from config_manager import ConfigManager
from nqueens.analysis import cli, settings
from nqueens.board import Board, InvalidBoardSizeError
from nqueens.render import render


class _SettingsIsolation(unittest.TestCase):
    """Snapshot ``settings`` globals so tests can override them freely."""

    def setUp(self):
        self._saved = {k: getattr(settings, k) for k in dir(settings) if k.isupper()}
        self._tmp = tempfile.TemporaryDirectory()
        self.tmpdir = Path(self._tmp.name)

    def tearDown(self):
        for key, value in self._saved.items():
            setattr(settings, key, value)
        self._tmp.cleanup()

    def write_config(self, data):
        path = self.tmpdir / "config.json"
        path.write_text(json.dumps(data), encoding="utf-8")
        return path


class ConfigManagerTests(_SettingsIsolation):
    def test_missing_file_raises(self):
        with self.assertRaises(FileNotFoundError):
            ConfigManager(self.tmpdir / "missing.json")

    def test_sections_default_to_empty(self):
        mgr = ConfigManager(self.write_config({}))
        self.assertEqual(mgr.get_board_settings(), {})
        self.assertEqual(mgr.get_analysis_settings(), {})

    def test_update_setting_persists(self):
        path = self.write_config({})
        ConfigManager(path).update_setting("board_settings", "size", 6)
        self.assertEqual(ConfigManager(path).get_board_settings(), {"size": 6})

    def test_non_object_root_rejected(self):
        with self.assertRaises(ValueError):
            ConfigManager(self.write_config([1, 2]))

    def test_shipped_config_is_loadable(self):
        mgr = ConfigManager(ROOT / "config.json")
        self.assertEqual(mgr.get_board_settings()["size"], 8)


class ApplyConfigurationTests(_SettingsIsolation):
    def test_values_applied(self):
        path = self.write_config({
            "board_settings": {"size": 5, "queen_glyph": "Q", "engine": "iterative"},
            "analysis_settings": {"N_values": [6, 4, 4], "runs_per_n": 2, "engines": ["recursive"], "output_dir": "out"},
        })
        cli.apply_configuration(str(path))
        self.assertEqual(settings.BOARD_SIZE, 5)
        self.assertEqual(settings.QUEEN_GLYPH, "Q")
        self.assertEqual(settings.ENGINE, "iterative")
        self.assertEqual(settings.N_VALUES, [4, 6])
        self.assertEqual(settings.RUNS_PER_N, 2)
        self.assertEqual(settings.ENGINES, ["recursive"])
        self.assertEqual(settings.OUT_DIR, "out")

    def test_invalid_values_rejected(self):
        bad_configs = [
            {"board_settings": {"size": 0}},
            {"board_settings": {"engine": "bitmask"}},
            {"board_settings": {"queen_glyph": "QQ"}},
            {"analysis_settings": {"N_values": []}},
            {"analysis_settings": {"runs_per_n": 0}},
            {"analysis_settings": {"engines": ["nope"]}},
            {"board_settings": 8},
            {"board_settings": ["size", 5]},
            {"analysis_settings": "fast"},
            {"analysis_settings": {"N_values": 8}},
            {"analysis_settings": {"engines": "recursive"}},
            {"analysis_settings": {"engines": [["recursive"]]}},
            {"analysis_settings": {"output_dir": 3}},
            {"analysis_settings": {"date_in_filenames": "yes"}},
        ]
        for data in bad_configs:
            with self.subTest(data=data):
                with self.assertRaises(ValueError):
                    cli.apply_configuration(str(self.write_config(data)))

    def test_rejected_file_leaves_settings_unchanged(self):
        path = self.write_config({"board_settings": {"size": 5, "queen_glyph": "QQ"}})
        with self.assertRaises(ValueError):
            cli.apply_configuration(str(path))
        self.assertEqual(settings.BOARD_SIZE, self._saved["BOARD_SIZE"])
        self.assertEqual(settings.QUEEN_GLYPH, self._saved["QUEEN_GLYPH"])

        path = self.write_config({"board_settings": {"size": 5}, "analysis_settings": {"runs_per_n": -1}})
        with self.assertRaises(ValueError):
            cli.apply_configuration(str(path))
        self.assertEqual(settings.BOARD_SIZE, self._saved["BOARD_SIZE"])
        self.assertEqual(settings.RUNS_PER_N, self._saved["RUNS_PER_N"])

    def test_negative_size_is_invalid_board_size(self):
        with self.assertRaises(InvalidBoardSizeError):
            cli.apply_configuration(str(self.write_config({"board_settings": {"size": -2}})))


class MainTests(_SettingsIsolation):
    def _run(self, argv):
        out = io.StringIO()
        with redirect_stdout(out):
            cli.main(argv)
        return out.getvalue()

    def test_default_run_prints_eight_queens(self):
        expected = render(Board.from_positions([0, 4, 7, 5, 2, 6, 1, 3]))
        self.assertEqual(self._run([]), expected)

    def test_iterative_engine_prints_same_board(self):
        self.assertEqual(self._run(["--engine", "iterative"]), self._run([]))

    def test_config_changes_board(self):
        path = self.write_config({"board_settings": {"size": 4, "queen_glyph": "Q"}})
        self.assertEqual(self._run(["--config", str(path)]), render(Board.from_positions([1, 3, 0, 2]), "Q"))

    def test_unsolvable_board_prints_empty_grid(self):
        path = self.write_config({"board_settings": {"size": 3}})
        output = self._run(["--config", str(path)])
        self.assertEqual(output, render(Board(3)))

    def test_missing_config_exits_with_error(self):
        with self.assertRaises(SystemExit) as ctx:
            self._run(["--config", str(self.tmpdir / "missing.json")])
        self.assertEqual(ctx.exception.code, 1)

    def test_bad_config_exits_with_error(self):
        path = self.write_config({"board_settings": {"size": 0}})
        with self.assertRaises(SystemExit) as ctx:
            self._run(["--config", str(path)])
        self.assertEqual(ctx.exception.code, 1)

    def test_wrongly_typed_config_exits_with_error(self):
        for data in ({"board_settings": 8}, {"analysis_settings": {"N_values": 8}}, [1, 2]):
            with self.subTest(data=data):
                path = self.write_config(data)
                out = io.StringIO()
                with self.assertRaises(SystemExit) as ctx:
                    with redirect_stdout(out):
                        cli.main(["--config", str(path)])
                self.assertEqual(ctx.exception.code, 1)
                self.assertTrue(out.getvalue().startswith("Configuration error:"))

    def test_print_solution_reports_outcome(self):
        out = io.StringIO()
        with redirect_stdout(out):
            self.assertTrue(cli.print_solution(size=5))
            self.assertFalse(cli.print_solution(size=2))


if __name__ == "__main__":
    unittest.main()
