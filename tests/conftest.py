# tests/conftest.py
# Pytest configuration w/ isolation fixtures for deterministic test runs

import json
from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def isolate_config(tmp_path, monkeypatch):
    # Patch Path.home() to isolated temp directory
    fake_home = tmp_path / "fake_home"
    fake_home.mkdir()

    catr_dir = fake_home / ".catr"
    catr_dir.mkdir()

    # ! settings file must never come from the developer's environment
    monkeypatch.delenv("CATR_CONFIG", raising=False)
    monkeypatch.setattr(Path, "home", lambda: fake_home)

    # ! reset global settings_manager state & point it at the isolated location
    from catr.config.settings import settings_manager

    settings_manager.config_path = catr_dir / "config.json"

    # ! reset output manager to NullOutputManager for test isolation
    from catr.core.output import reset_output_manager

    reset_output_manager()

    from catr.catr_io.console import reset_console

    reset_console()

    return fake_home


@pytest.fixture
def write_settings(isolate_config):
    # Write a settings file into the isolated home
    def _write(**values):
        path = isolate_config / ".catr" / "config.json"
        path.write_text(json.dumps(values), encoding="utf-8")

        from catr.config.settings import settings_manager

        settings_manager.reset_cache()
        return path

    return _write


@pytest.fixture
def text_file(tmp_path):
    # Create a text file w/ exact content (no newline translation)
    def _make(name: str, content: str) -> Path:
        path = tmp_path / name
        path.write_bytes(content.encode("utf-8"))
        return path

    return _make
