"""Environment-driven settings for the ngx-admin suite.

Values come from the process environment, with a project-level ``.env``
file loaded first (existing variables win).
"""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

PROJECT_ROOT = Path(__file__).resolve().parents[2]

load_dotenv(PROJECT_ROOT / ".env")

DEFAULT_BASE_URL = "http://localhost:4200"

# Milliseconds, as Playwright expects
DEFAULT_TIMEOUT = 15_000
NAVIGATION_TIMEOUT = 30_000
SHORT_TIMEOUT = 5_000

VIEWPORT = {"width": 1920, "height": 1080}

_TRUTHY = {"1", "true", "yes", "on"}


def get_base_url() -> str:
    """Return the application under test's root URL, without a trailing slash."""
    return os.environ.get("BASE_URL", DEFAULT_BASE_URL).strip().rstrip("/") or DEFAULT_BASE_URL


def get_directory_from_env(env_name: str, default_path: str | Path) -> Path:
    """Return a directory path from env, ensuring it exists."""
    configured = os.environ.get(env_name) or str(default_path)
    directory = Path(configured)
    directory.mkdir(parents=True, exist_ok=True)
    return directory


def get_test_data_dir() -> Path:
    """Where fixture files live; the directory is created by whoever writes there."""
    return Path(os.environ.get("NGX_TEST_DATA_DIR") or PROJECT_ROOT / "test-data")


def get_env_file() -> Path:
    return Path(os.environ.get("NGX_ENV_FILE") or PROJECT_ROOT / ".env")


def is_env_flag_enabled(env_name: str) -> bool:
    return os.environ.get(env_name, "").strip().lower() in _TRUTHY


def get_headless() -> bool:
    """Headless unless ``HEADLESS`` is explicitly set to a false-y value."""
    raw = os.environ.get("HEADLESS")
    if raw is None or not raw.strip():
        return True
    return raw.strip().lower() in _TRUTHY


def get_slow_mo() -> int:
    try:
        return max(0, int(os.environ.get("SLOW_MO", "0")))
    except ValueError:
        return 0


def get_expected_app_title() -> str | None:
    """Brand title the deployed app is expected to show, if one is configured."""
    return os.environ.get("EXPECTED_APP_TITLE", "").strip() or None
