"""Pytest fixtures shared by all tablefmt tests."""

import pytest

from tablefmt.plugins.table_formatter.config import ENV_VARS
from tablefmt.trace import TRACE_ENV_VAR


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch, tmp_path):
    """Run every test without TABLEFMT_* variables or a settings file.

    Options are read from the environment and the working directory on
    each request, so a developer's own configuration would leak in.
    """
    for var in ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    monkeypatch.delenv(TRACE_ENV_VAR, raising=False)
    monkeypatch.chdir(tmp_path)
    yield tmp_path
