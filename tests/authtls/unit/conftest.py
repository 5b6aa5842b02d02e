import os

import pytest


@pytest.fixture(scope="function", autouse=True)
def clear_configs(monkeypatch: pytest.MonkeyPatch, tmp_path):
    """
    Every test starts without AUTHTLS_* variables, in an empty working directory and with an empty home directory,
    so that no config file is discovered by accident.
    """
    for k in list(os.environ):
        if k.startswith("AUTHTLS_"):
            monkeypatch.delenv(k)
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.chdir(tmp_path)
    yield
