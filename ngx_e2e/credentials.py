"""Resolution of login credentials for journeys that need an existing account."""

from __future__ import annotations

import os
from dataclasses import dataclass

from .user_store import UserStore


@dataclass(frozen=True)
class Credentials:
    email: str
    password: str


def _from_env(email_var: str, password_var: str) -> Credentials | None:
    email = os.environ.get(email_var, "").strip()
    password = os.environ.get(password_var, "")
    if email and password:
        return Credentials(email=email, password=password)
    return None


def valid_user_credentials(store: UserStore | None = None) -> Credentials | None:
    """Return credentials for a known account, or None when none is configured.

    Lookup order: ``TEST_USER_EMAIL``/``TEST_USER_PASSWORD``, the fixture
    store's newest successfully registered user, then ``DEFAULT_TEST_EMAIL``/
    ``DEFAULT_TEST_PASSWORD``. There are no built-in fallback credentials.
    """
    explicit = _from_env("TEST_USER_EMAIL", "TEST_USER_PASSWORD")
    if explicit is not None:
        return explicit

    last = (store or UserStore()).last_registered_user()
    if last is not None and last.email and last.password:
        return Credentials(email=last.email, password=last.password)

    return _from_env("DEFAULT_TEST_EMAIL", "DEFAULT_TEST_PASSWORD")
