"""Root test configuration: isolate tests from the developer's sysname settings"""

import os

import pytest


@pytest.fixture(autouse=True)
def clean_settings_env(monkeypatch, tmp_path):
    """Drop SYSNAME_* env vars and run from an empty directory without sysname.yaml."""
    for key in list(os.environ):
        if key.startswith("SYSNAME_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)
