import logging

import pytest

from tictactoe.config import UNLIMITED_DEPTH, SearchConfig, log_level, max_depth


def test_defaults_without_env(monkeypatch):
    monkeypatch.delenv("TTT_MAX_DEPTH", raising=False)
    monkeypatch.delenv("TTT_LOG_LEVEL", raising=False)
    cfg = SearchConfig.from_env()
    assert cfg.max_depth == UNLIMITED_DEPTH
    assert cfg.log_level == logging.INFO


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("TTT_MAX_DEPTH", "3")
    monkeypatch.setenv("TTT_LOG_LEVEL", "debug")
    assert max_depth() == 3
    assert log_level() == logging.DEBUG


@pytest.mark.parametrize("raw", ["0", "-2", "abc", "1.5"])
def test_invalid_max_depth_env(monkeypatch, raw):
    monkeypatch.setenv("TTT_MAX_DEPTH", raw)
    with pytest.raises(ValueError, match="TTT_MAX_DEPTH"):
        max_depth()


def test_invalid_log_level_env(monkeypatch):
    monkeypatch.setenv("TTT_LOG_LEVEL", "loud")
    with pytest.raises(ValueError, match="TTT_LOG_LEVEL"):
        log_level()


def test_search_config_validates():
    with pytest.raises(ValueError):
        SearchConfig(max_depth=0)
