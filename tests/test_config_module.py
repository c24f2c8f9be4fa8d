"""Tests for :mod:`yedwriter.config`."""

from __future__ import annotations

from yedwriter import config


def test_get_env_prefers_process_environment(monkeypatch):
    """Explicit environment variables should win over any ``.env`` contents."""

    config._load_environment.cache_clear()
    monkeypatch.setenv("YEDWRITER_CREATOR", "in-memory")

    assert config.get_env("YEDWRITER_CREATOR") == "in-memory"
    assert config.get_creator() == "in-memory"


def test_get_env_returns_default_when_missing(monkeypatch):
    config._load_environment.cache_clear()
    monkeypatch.delenv("YEDWRITER_DOES_NOT_EXIST", raising=False)

    assert config.get_env("YEDWRITER_DOES_NOT_EXIST", default="fallback") == "fallback"


def test_get_creator_falls_back_when_empty(monkeypatch):
    config._load_environment.cache_clear()
    monkeypatch.setenv(config.CREATOR_ENV, "")

    assert config.get_creator() == config.DEFAULT_CREATOR


def test_load_environment_reads_dotenv_once(monkeypatch):
    calls = []
    monkeypatch.setattr(config, "load_dotenv", lambda *args, **kwargs: calls.append(kwargs))
    config._load_environment.cache_clear()

    config.get_env("ANYTHING")
    config.get_env("ANYTHING_ELSE")

    assert calls == [{"override": False}]
    config._load_environment.cache_clear()
