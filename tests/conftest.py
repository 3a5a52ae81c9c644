import logging

import pytest

from uuid7time.utils import logger
from uuid7time.utils.constants import ENV_LOG_LEVEL, ENV_SETTINGS_FILE


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    """Keep the user's real settings file and log level out of every test."""
    monkeypatch.setenv(ENV_SETTINGS_FILE, str(tmp_path / "no-settings.json"))
    monkeypatch.delenv(ENV_LOG_LEVEL, raising=False)
    handlers = list(logger.logger.handlers)
    yield
    for handler in list(logger.logger.handlers):
        if handler not in handlers:
            handler.close()
            logger.logger.removeHandler(handler)
    logger.logger.setLevel(logging.WARNING)
