import logging

import pytest
from pydantic import ValidationError

from routefinder.config import (
    AppConfig,
    GraphConfig,
    ObservabilityConfig,
    OutputConfig,
    get_config,
    reset_config,
)


@pytest.fixture(autouse=True)
def fresh_config():
    reset_config()
    yield
    reset_config()


def test_defaults():
    config = AppConfig()

    assert config.graph.routes_file == "input-routes.csv"
    assert config.graph.delimiter == ","
    assert config.graph.routes_path == config.project_root / "data" / "input-routes.csv"
    assert config.output.results_file is None
    assert config.observability.level == "INFO"


def test_environment_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("RF_GRAPH_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("RF_GRAPH_ROUTES_FILE", "routes.csv")
    monkeypatch.setenv("RF_OUTPUT_RESULTS_FILE", str(tmp_path / "results.csv"))
    monkeypatch.setenv("RF_LOG_LEVEL", "debug")

    config = get_config()

    assert config.graph.routes_path == tmp_path / "routes.csv"
    assert config.output.results_file == tmp_path / "results.csv"
    assert config.observability.level == "DEBUG"
    assert config.observability.level_number == logging.DEBUG


def test_get_config_is_cached():
    assert get_config() is get_config()


def test_reset_config_reloads(monkeypatch):
    first = get_config()
    monkeypatch.setenv("RF_GRAPH_ROUTES_FILE", "other.csv")

    reset_config()

    assert get_config() is not first
    assert get_config().graph.routes_file == "other.csv"


@pytest.mark.parametrize("delimiter", ["", ";;"])
def test_delimiter_must_be_one_character(delimiter):
    with pytest.raises(ValidationError):
        GraphConfig(delimiter=delimiter)
    with pytest.raises(ValidationError):
        OutputConfig(delimiter=delimiter)


def test_unknown_log_level_is_rejected():
    with pytest.raises(ValidationError):
        ObservabilityConfig(level="chatty")
