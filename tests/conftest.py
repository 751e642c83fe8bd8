import pytest

from todotxt import settings as settings_module
from todotxt.models import SETTINGS_KEYS


@pytest.fixture
def isolated_env(monkeypatch, tmp_path):
    """Empty HOME, fresh working directory and no system config file."""
    for key in SETTINGS_KEYS:
        monkeypatch.delenv(key, raising=False)
    home = tmp_path / "home"
    home.mkdir()
    work = tmp_path / "work"
    work.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.chdir(work)
    monkeypatch.setattr(
        settings_module, "SYSTEM_CONFIG_PATH", str(tmp_path / "etc" / "config")
    )
    return tmp_path
