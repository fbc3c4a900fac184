import pytest

_ENV_VARS = ("INTCALC_STRICT", "INTCALC_CHECK_GROUPING", "INTCALC_MAX_LINE")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Run every test against the default (permissive) configuration."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
