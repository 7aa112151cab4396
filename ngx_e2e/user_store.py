"""JSON fixture file recording users created by registration journeys.

Document layout::

    {
      "registeredUsers": [{"fullName": ..., "email": ..., "password": ...,
                           "registeredAt": ..., "status": "registered"}],
      "lastRegisteredUser": {...}
    }

Records are only ever appended. Each write re-reads and rewrites the whole
file without locking, so the store assumes tests run sequentially.
Passwords are stored in plaintext; they belong to throwaway test accounts.
"""

from __future__ import annotations

import json
import logging
import random
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from .exceptions import UserStoreError
from .utils.config import get_env_file, get_test_data_dir, is_env_flag_enabled

logger = logging.getLogger("ngx-e2e.user-store")

USER_DATA_FILENAME = "userData.json"

STATUS_REGISTERED = "registered"
STATUS_FAILED = "failed"

FIRST_NAMES = ("Emma", "Liam", "Olivia", "Noah", "Ava", "Ethan", "Sophia", "Mason", "Isabella", "William")
LAST_NAMES = ("Smith", "Johnson", "Williams", "Brown", "Jones", "Garcia", "Miller", "Davis", "Rodriguez", "Martinez")


def _utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


@dataclass
class UserRecord:
    """A single account created (or attempted) by a test."""

    full_name: str
    email: str
    password: str
    registered_at: str = field(default_factory=_utc_now_iso)
    status: str = STATUS_REGISTERED

    @property
    def is_registered(self) -> bool:
        return self.status == STATUS_REGISTERED

    def to_dict(self) -> dict[str, Any]:
        return {
            "fullName": self.full_name,
            "email": self.email,
            "password": self.password,
            "registeredAt": self.registered_at,
            "status": self.status,
        }

    @classmethod
    def from_dict(cls, payload: dict[str, Any]) -> "UserRecord":
        """Restore a record; entries written before ``status`` existed count as registered."""
        return cls(
            full_name=payload.get("fullName", ""),
            email=payload.get("email", ""),
            password=payload.get("password", ""),
            registered_at=payload.get("registeredAt") or payload.get("registrationDate", ""),
            status=payload.get("status", STATUS_REGISTERED),
        )


def _empty_document() -> dict[str, Any]:
    return {"registeredUsers": [], "lastRegisteredUser": None}


class UserStore:
    """Append-only store of registered test users backed by one JSON file."""

    def __init__(self, path: str | Path | None = None) -> None:
        self.path = Path(path) if path is not None else get_test_data_dir() / USER_DATA_FILENAME

    def _read(self) -> dict[str, Any]:
        if not self.path.exists():
            return _empty_document()
        data = json.loads(self.path.read_text(encoding="utf-8"))
        if not isinstance(data, dict):
            raise ValueError(f"expected a JSON object, found {type(data).__name__}")
        data.setdefault("registeredUsers", [])
        data.setdefault("lastRegisteredUser", None)
        return data

    def load(self) -> dict[str, Any]:
        """Return the stored document; a missing or unreadable file yields an empty one."""
        try:
            return self._read()
        except (OSError, ValueError) as exc:
            logger.error("Failed to read user data from %s: %s", self.path, exc)
            return _empty_document()

    def append(self, record: UserRecord, *, save_to_env: bool | None = None) -> int:
        """Append *record*, mark it as the last registered user, and return the record count.

        Raises :class:`UserStoreError` if an existing file cannot be parsed, so
        earlier records are never overwritten.
        """
        try:
            data = self._read()
        except (OSError, ValueError) as exc:
            raise UserStoreError(f"Cannot update user data file {self.path}: {exc}") from exc

        entry = record.to_dict()
        data["registeredUsers"].append(entry)
        data["lastRegisteredUser"] = entry

        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(data, indent=2), encoding="utf-8")
        total = len(data["registeredUsers"])
        logger.info("User data saved to %s (total users: %d)", self.path, total)

        if save_to_env is None:
            save_to_env = is_env_flag_enabled("SAVE_TO_ENV")
        if save_to_env:
            append_env_credentials(get_env_file(), record.email, record.password)

        return total

    def registered_users(self) -> list[UserRecord]:
        return [UserRecord.from_dict(item) for item in self.load()["registeredUsers"]]

    def last_appended_user(self) -> UserRecord | None:
        """Return the ``lastRegisteredUser`` pointer regardless of its status."""
        last = self.load()["lastRegisteredUser"]
        return UserRecord.from_dict(last) if last else None

    def last_registered_user(self) -> UserRecord | None:
        """Return the most recent record whose status is ``registered``, or None."""
        for record in reversed(self.registered_users()):
            if record.is_registered:
                return record
        return None


def append_env_credentials(env_path: str | Path, email: str, password: str) -> None:
    """Append the given credentials to a dotenv file as the default test user."""
    env_path = Path(env_path)
    env_path.parent.mkdir(parents=True, exist_ok=True)
    block = (
        "\n# Last registered user (auto-generated)\n"
        f"TEST_USER_EMAIL={email}\n"
        f"TEST_USER_PASSWORD={password}\n"
    )
    with env_path.open("a", encoding="utf-8") as handle:
        handle.write(block)
    logger.info("Appended last registered user credentials to %s", env_path)


def generate_random_user(rng: random.Random | None = None) -> tuple[str, str, str]:
    """Return ``(full_name, email, password)`` in a memorable format.

    Emails look like ``emma.smith123@test.com`` and passwords like
    ``Welcome123!``; the number is shared and lies in 1..999.
    """
    rng = rng or random.Random()
    number = rng.randint(1, 999)
    first = rng.choice(FIRST_NAMES)
    last = rng.choice(LAST_NAMES)
    return (
        f"{first} {last}",
        f"{first.lower()}.{last.lower()}{number}@test.com",
        f"Welcome{number}!",
    )
