import sys

import pytest
from loguru import logger

from zkevm_claim.core.config import set_config

pytest_plugins = ["zkevm_claim.testing.bridge_api"]


def pytest_configure(config):
    config.addinivalue_line("markers", "integration: mark test as integration")


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch):
    for key in (
        "VERBOSE",
        "ZKEVM_BRIDGE_API_URL",
        "ZKEVM_CLAIM_CONFIG_PATH",
        "ZKEVM_CLAIM_CONFIG",
    ):
        monkeypatch.delenv(key, raising=False)
    yield
    set_config({})
    # The CLI rebinds loguru to the stream CliRunner hands it.
    logger.remove()
    logger.add(sys.stderr)
