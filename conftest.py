"""Root conftest: shared fixtures available to all test layers."""

from __future__ import annotations

import os
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from ngx_e2e.user_store import UserStore
from ngx_e2e.utils.logging_utils import configure_json_logging

CREDENTIAL_ENV_VARS = (
    "TEST_USER_EMAIL",
    "TEST_USER_PASSWORD",
    "DEFAULT_TEST_EMAIL",
    "DEFAULT_TEST_PASSWORD",
    "SAVE_TO_ENV",
)


def pytest_configure(config):
    configure_json_logging(os.environ.get("LOG_LEVEL", "INFO"))


@pytest.fixture()
def user_data_file(tmp_path: Path) -> Path:
    """Location of a fixture file that does not exist yet."""
    return tmp_path / "test-data" / "userData.json"


@pytest.fixture()
def user_store(user_data_file: Path) -> UserStore:
    return UserStore(user_data_file)


@pytest.fixture()
def mock_page() -> MagicMock:
    """A Playwright ``Page`` stand-in positioned on the ngx-admin dashboard."""
    page = MagicMock()
    page.url = "http://localhost:4200/pages/iot-dashboard"
    return page


@pytest.fixture()
def clean_env():
    """Clear credential-related env vars for isolation."""
    with patch.dict(os.environ, {k: "" for k in CREDENTIAL_ENV_VARS}, clear=False):
        yield


@pytest.fixture()
def dispatch_page(mock_page: MagicMock) -> MagicMock:
    """``mock_page`` whose ``locator()`` hands out one stable mock per selector.

    Mocks are reachable through ``page.locators[selector]``; a ``has_text``
    filter is appended to the key as ``selector|text``.
    """
    locators: dict[str, MagicMock] = {}

    def locator(selector: str, has_text: str | None = None, **kwargs) -> MagicMock:
        key = selector if has_text is None else f"{selector}|{has_text}"
        if key not in locators:
            locators[key] = MagicMock(name=key)
        return locators[key]

    mock_page.locator.side_effect = locator
    mock_page.locators = locators
    return mock_page
