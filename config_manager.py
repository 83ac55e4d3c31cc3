"""Configuration management for the N-Queens board solver.

This module provides a thin, explicit wrapper around a JSON configuration file
to centralize board settings and the parameters of the scalability analysis.

File format (high-level)
------------------------
- board_settings: board size, queen glyph and search engine for the default
  run.
- analysis_settings: N values, repetitions per N, engines to compare and the
  output directory for CSV files and charts.

All methods return Python native types; semantic validation of the values is
left to ``nqueens.analysis.cli.apply_configuration``.
"""
import json
from pathlib import Path


class ConfigManager:
    """Load, query, and persist configuration settings.

    Parameters
    ----------
    config_path : str | os.PathLike, default "config.json"
        Path to the configuration file.
    """

    def __init__(self, config_path="config.json"):
        self.config_path = Path(config_path)
        self.config = self.load_config()

    def load_config(self):
        """Load and parse the JSON configuration file.

        Returns
        -------
        dict
            Root configuration object.
        """
        if not self.config_path.exists():
            raise FileNotFoundError(
                f"Configuration file not found: {self.config_path}\n"
                f"Create it or use the default config.json template"
            )

        with open(self.config_path, "r", encoding="utf-8") as f:
            config = json.load(f)
        if not isinstance(config, dict):
            raise ValueError(f"Configuration root must be a JSON object: {self.config_path}")
        return config

    def save_config(self):
        """Persist the current in-memory configuration to disk."""
        with open(self.config_path, "w", encoding="utf-8") as f:
            json.dump(self.config, f, indent=2, ensure_ascii=False)

    def get_board_settings(self):
        """Return board settings (size, queen glyph, engine)."""
        return self.config.get("board_settings", {})

    def get_analysis_settings(self):
        """Return analysis settings (N values, runs, engines, output dir)."""
        return self.config.get("analysis_settings", {})

    def update_setting(self, section, key, value):
        """Update a specific setting and persist the change immediately."""
        if section not in self.config:
            self.config[section] = {}
        self.config[section][key] = value
        self.save_config()
