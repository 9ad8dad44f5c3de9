# treesync Test Fixtures
# Pytest fixtures for treesync tests

import os
import tempfile
from collections.abc import Callable, Generator
from pathlib import Path

import pytest
import yaml


def _write_file(path: Path, content: str = "content", mtime: int | None = None) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    if mtime is not None:
        os.utime(path, (mtime, mtime))
    return path


def _set_mtime(path: Path, mtime: int) -> None:
    os.utime(path, (mtime, mtime))


@pytest.fixture
def write_file() -> Callable[..., Path]:
    """Create a file (and its parents) with optional modification time."""
    return _write_file


@pytest.fixture
def set_mtime() -> Callable[[Path, int], None]:
    """Set both timestamps of a path to a fixed value."""
    return _set_mtime


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir).resolve()


@pytest.fixture
def temp_home(temp_dir: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Create a temporary home directory."""
    home = temp_dir / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.delenv("TREESYNC_CONFIG", raising=False)
    return home


@pytest.fixture
def source(temp_dir: Path) -> Path:
    """Empty source root."""
    path = temp_dir / "source"
    path.mkdir()
    return path


@pytest.fixture
def destination(temp_dir: Path) -> Path:
    """Empty destination root."""
    path = temp_dir / "destination"
    path.mkdir()
    return path


@pytest.fixture
def sample_config(source: Path, destination: Path) -> dict:
    """Create sample configuration dict."""
    return {
        "jobs": {
            "mirror": {
                "enabled": True,
                "description": "Test mirror",
                "source": str(source),
                "destination": str(destination),
                "copy_mode": "source",
                "overwrite_priority": "source",
                "sync_delete": True,
                "sync_date": True,
                "sync_overwrite": True,
                "delete_ignored": False,
                "gitignore": ["*.tmp"],
            },
            "disabled": {
                "enabled": False,
                "source": str(source),
                "destination": str(destination),
            },
        },
        "output": {"verbose": False, "colored": False},
    }


@pytest.fixture
def config_file(temp_home: Path, sample_config: dict) -> Path:
    """Create a configuration file."""
    config_dir = temp_home / ".config" / "treesync"
    config_dir.mkdir(parents=True)
    config_path = config_dir / "config.yaml"

    with open(config_path, "w", encoding="utf-8") as f:
        yaml.dump(sample_config, f, default_flow_style=False)

    return config_path
