import argparse
import logging
from pathlib import Path

import pytest

from config import DEFAULT_ALGORITHM, DEFAULT_GRAPH_FILE, Settings, load_config, resolve_settings


def namespace(**overrides):
    values = {"graph_file": None, "algorithm": None, "log_level": None, "plot": None}
    values.update(overrides)
    return argparse.Namespace(**values)


class TestLoadConfig:
    def test_reads_mapping(self, tmp_path):
        path = tmp_path / "pathfinder.yaml"
        path.write_text("graph_file: roads.txt\nalgorithm: astar\n", encoding="utf-8")

        assert load_config(path) == {"graph_file": "roads.txt", "algorithm": "astar"}

    def test_empty_file(self, tmp_path):
        path = tmp_path / "pathfinder.yaml"
        path.write_text("", encoding="utf-8")

        assert load_config(path) == {}

    def test_rejects_non_mapping(self, tmp_path):
        path = tmp_path / "pathfinder.yaml"
        path.write_text("42\n", encoding="utf-8")

        with pytest.raises(ValueError):
            load_config(path)


class TestResolveSettings:
    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("PATHFINDER_LOG_LEVEL", raising=False)

        settings = resolve_settings(namespace(), {})

        assert settings == Settings()
        assert settings.graph_file == Path(DEFAULT_GRAPH_FILE)
        assert settings.algorithm == DEFAULT_ALGORITHM
        assert settings.log_level == "WARNING"
        assert settings.plot is None

    def test_config_overrides_defaults(self):
        settings = resolve_settings(namespace(), {"graph_file": "roads.txt", "plot": "out.png"})

        assert settings.graph_file == Path("roads.txt")
        assert settings.plot == Path("out.png")

    def test_command_line_overrides_config(self):
        settings = resolve_settings(
            namespace(algorithm="astar", log_level="DEBUG"),
            {"algorithm": "dijkstra", "log_level": "error"},
        )

        assert settings.algorithm == "astar"
        assert settings.log_level == "DEBUG"

    def test_environment_log_level(self, monkeypatch):
        monkeypatch.setenv("PATHFINDER_LOG_LEVEL", "info")

        assert resolve_settings(namespace(), {}).log_level == "INFO"

    def test_positions(self):
        settings = resolve_settings(namespace(), {"positions": {"A": [0, 1], "B": [2.5, 3]}})

        assert settings.positions == {"A": (0.0, 1.0), "B": (2.5, 3.0)}

    @pytest.mark.parametrize("positions", [[1, 2], {"A": [1]}, {"A": "far"}])
    def test_invalid_positions(self, positions):
        with pytest.raises(ValueError):
            resolve_settings(namespace(), {"positions": positions})

    def test_unknown_keys_warn(self, caplog):
        with caplog.at_level(logging.WARNING, logger="config"):
            resolve_settings(namespace(), {"colour": "red"})

        assert "Ignoring unknown configuration key 'colour'" in caplog.text


class TestValidation:
    def test_malformed_yaml(self, tmp_path):
        path = tmp_path / "pathfinder.yaml"
        path.write_text("algorithm: [astar\n", encoding="utf-8")

        with pytest.raises(ValueError, match="not valid YAML"):
            load_config(path)

    @pytest.mark.parametrize(
        "config",
        [
            {"log_level": "loud"},
            {"log_level": 10},
            {"graph_file": 5},
            {"algorithm": ["astar"]},
            {"plot": True},
            {"positions": {"A": [None, 1]}},
            {"positions": {"A": [True, 1]}},
            {"heuristic": "manhattan"},
            {"heuristic": "euclidean"},
        ],
    )
    def test_rejects_bad_values(self, config):
        with pytest.raises(ValueError):
            resolve_settings(namespace(), config)

    def test_rejects_bad_environment_log_level(self, monkeypatch):
        monkeypatch.setenv("PATHFINDER_LOG_LEVEL", "verbose")

        with pytest.raises(ValueError, match="VERBOSE"):
            resolve_settings(namespace(), {})

    def test_positions_are_layout_only_by_default(self):
        settings = resolve_settings(namespace(), {"positions": {"A": [0, 0]}})

        assert settings.heuristic == "none"

    def test_euclidean_heuristic_with_positions(self):
        settings = resolve_settings(
            namespace(), {"heuristic": "Euclidean", "positions": {"A": [0, 0]}}
        )

        assert settings.heuristic == "euclidean"
