import os

import pytest


@pytest.fixture(autouse=True)
def isolated_workdir(tmp_path, monkeypatch):
    """
    Run every test from an empty directory with no LOGPLUS_* variables,
    so default ./logs paths and .env lookups stay inside tmp_path.
    """
    for key in list(os.environ):
        if key.startswith("LOGPLUS_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
    yield tmp_path
