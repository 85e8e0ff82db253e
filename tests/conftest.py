"""Shared fixtures for filekit tests."""

import tempfile
from pathlib import Path

import pytest

from filekit.paths import Environment


@pytest.fixture
def env(tmp_path: Path) -> Environment:
    """An Environment rooted entirely inside tmp_path."""
    home = tmp_path / "home"
    home.mkdir(exist_ok=True)
    work = tmp_path / "work"
    work.mkdir()
    temp = tmp_path / "tmp"
    temp.mkdir()
    return Environment(
        home=home,
        config_home=home / ".config",
        cache_home=home / ".cache",
        cwd=work,
        temp_dir=temp,
    )


@pytest.fixture
def isolated_os_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point HOME and the XDG dirs at tmp_path so nothing touches the real home."""
    home = tmp_path / "home"
    home.mkdir(exist_ok=True)
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("XDG_CONFIG_HOME", str(home / ".config"))
    monkeypatch.setenv("XDG_CACHE_HOME", str(home / ".cache"))
    monkeypatch.setattr(tempfile, "tempdir", str(tmp_path))
    monkeypatch.delenv("FILEKIT_CONFIG", raising=False)
    return home
