from pathlib import Path

import pytest

from srcmgr.settings import Settings

from .driver import TestDriver


@pytest.fixture(name="driver")
def fixture_driver() -> TestDriver:
    return TestDriver()


@pytest.fixture(name="settings")
def fixture_settings(tmp_path: Path) -> Settings:
    home = tmp_path / "home"
    home.mkdir()
    cwd = tmp_path / "work"
    cwd.mkdir()
    return Settings(home=home, cwd=cwd)
