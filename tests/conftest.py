"""Shared test fixtures and configuration.

Provides infrastructure to isolate tests from real filesystem state.
"""

from __future__ import annotations

import logging
from unittest.mock import patch

import pytest

# ---------------------------------------------------------------------------
# Logger isolation
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def isolated_logger(tmp_path):
    """Point the application log file at *tmp_path* and reset the singleton."""
    import pomotimer_cli.utils.logger as logger_mod

    log_dir = tmp_path / "logs"
    logger_mod._logger = None
    logging.getLogger("pomotimer_cli").handlers.clear()
    with patch("pomotimer_cli.utils.logger.user_log_dir", return_value=str(log_dir)):
        yield log_dir
    for handler in logging.getLogger("pomotimer_cli").handlers:
        handler.close()
    logging.getLogger("pomotimer_cli").handlers.clear()
    logger_mod._logger = None


# ---------------------------------------------------------------------------
# Config isolation helpers
# ---------------------------------------------------------------------------


@pytest.fixture()
def tmp_config(tmp_path):
    """Provide a real ConfigService backed by a temporary directory.

    Patches platform dirs so config files land in *tmp_path* only.
    Also clears the lru_cache so each test gets a fresh service instance.
    """
    from pomotimer_cli.services.config_service import get_config_service

    tmpdir = str(tmp_path / "config")
    get_config_service.cache_clear()
    with patch("pomotimer_cli.services.config_service.user_config_dir", return_value=tmpdir):
        from pomotimer_cli.services.config_service import ConfigService

        svc = ConfigService()
        yield svc
    get_config_service.cache_clear()
