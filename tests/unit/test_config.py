# tests/unit/test_config.py
"""Tests for configuration loading."""

import yaml

from automation_advisor.config import AdvisorConfig, load_config
from automation_advisor.config.schema import GeminiConfig


def test_missing_config_created_with_defaults(tmp_path):
    path = tmp_path / "nested" / "config.yaml"

    config = load_config(path)

    assert config == AdvisorConfig()
    assert path.exists()
    written = yaml.safe_load(path.read_text(encoding="utf-8"))
    assert written["provider"] == "ollama"
    assert written["ollama"]["model"] == "qwen2.5:32b-instruct"


def test_existing_config_loaded(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(
        "provider: gemini\n"
        "gemini:\n"
        "  model: gemini-2.5-flash\n"
        "  search_grounding: false\n"
        "unknown_key: 1\n",
        encoding="utf-8",
    )

    config = load_config(path)

    assert config.provider == "gemini"
    assert config.gemini.model == "gemini-2.5-flash"
    assert config.gemini.search_grounding is False
    assert config.ollama.base_url == "http://localhost:11434"


def test_empty_config_file(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("", encoding="utf-8")
    assert load_config(path) == AdvisorConfig()


def test_gemini_key_from_environment(monkeypatch):
    monkeypatch.delenv("API_KEY", raising=False)
    monkeypatch.setenv("GEMINI_API_KEY", "env-key")
    assert GeminiConfig().resolve_api_key() == "env-key"
    assert GeminiConfig(api_key="cfg-key").resolve_api_key() == "cfg-key"


def test_gemini_key_missing(monkeypatch):
    monkeypatch.delenv("GEMINI_API_KEY", raising=False)
    monkeypatch.delenv("API_KEY", raising=False)
    assert GeminiConfig().resolve_api_key() is None
