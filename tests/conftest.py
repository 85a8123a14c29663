import pytest
from levellog.core.context import default_context

FIXED_STAMP = "Wed, 01 Jan 2020 00:00:00 GMT"

@pytest.fixture(autouse=True)
def _reset_default_context():
    default_context.reset()
    yield
    default_context.reset()

@pytest.fixture
def fixed_clock(monkeypatch):
    monkeypatch.setattr("levellog.core.logger.timestamp", lambda: FIXED_STAMP)
    return FIXED_STAMP
