"""Utility helpers for configuration, logging, waiting, and retries."""

from .config import (
    get_base_url,
    get_directory_from_env,
    get_expected_app_title,
    get_env_file,
    get_headless,
    get_slow_mo,
    get_test_data_dir,
    is_env_flag_enabled,
)
from .logging_utils import configure_json_logging
from .retry import self_healing_retry
from .waits import is_hidden_within, is_visible_within, wait_until

__all__ = [
    "configure_json_logging",
    "get_base_url",
    "get_directory_from_env",
    "get_expected_app_title",
    "get_env_file",
    "get_headless",
    "get_slow_mo",
    "get_test_data_dir",
    "is_env_flag_enabled",
    "is_hidden_within",
    "is_visible_within",
    "self_healing_retry",
    "wait_until",
]
