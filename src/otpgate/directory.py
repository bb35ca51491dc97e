"""Read-only user directory backed by a JSON or YAML users file.

The file holds a list of {email, company, secret} objects. Secrets may be
stored encrypted with the `enc:` prefix (see otpgate.crypto).
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from otpgate import crypto
from otpgate.models import UserRecord

logger = logging.getLogger(__name__)


class UserDirectory:
    """In-memory lookup of users by email. Immutable after construction."""

    def __init__(self, users: list[UserRecord]) -> None:
        self._by_email = {u.email: u for u in users}

    def __len__(self) -> int:
        return len(self._by_email)

    def find(self, email: str) -> UserRecord | None:
        return self._by_email.get(email)


def load_users(path: Path) -> UserDirectory:
    """Parse the users file. JSON is read through the YAML loader.

    Raises FileNotFoundError if missing, ValueError if malformed.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Users file not found: {path}")
    with open(path, encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid users file {path}: {e}") from e

    if data is None:
        data = []
    if not isinstance(data, list):
        raise ValueError(f"Invalid users file {path}: expected a list of users")

    users: list[UserRecord] = []
    for i, entry in enumerate(data):
        try:
            user = UserRecord.model_validate(entry)
        except ValidationError as e:
            raise ValueError(f"Invalid user entry #{i} in {path}: {e}") from e
        if crypto.is_encrypted(user.secret):
            user = user.model_copy(update={"secret": crypto.decrypt(user.secret)})
        users.append(user)

    logger.info("Loaded %d users from %s", len(users), path)
    return UserDirectory(users)
