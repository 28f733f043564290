from __future__ import annotations

from pathlib import Path

import pytest

from configme import registry


class RecordingSink:
    def __init__(self) -> None:
        self.infos: list[str] = []
        self.errors: list[str] = []

    def info(self, message: str) -> None:
        self.infos.append(message)

    def error(self, message: str) -> None:
        self.errors.append(message)


@pytest.fixture(autouse=True)
def fresh_registry(monkeypatch) -> registry.ConfigDirRegistry:
    fresh = registry.ConfigDirRegistry()
    monkeypatch.setattr(registry, "_registry", fresh)
    return fresh


@pytest.fixture
def home(tmp_path: Path, monkeypatch) -> Path:
    home_dir = tmp_path / "home" / "u"
    home_dir.mkdir(parents=True)
    monkeypatch.setenv("HOME", str(home_dir))
    monkeypatch.delenv("CONFIGME_APP_NAME", raising=False)
    return home_dir


@pytest.fixture
def sink() -> RecordingSink:
    return RecordingSink()
