"""
Credential Store - YAML credential inventories.

Path: credaudit/vault/store.py

Loads sample/demo credential inventories for auditing. Secrets are
plaintext; this is not an encrypted vault.

Example inventory file (inventory.yaml):
    credentials:
      - id: cred-001
        name: Production DB
        username: dbadmin
        password: "S3cure!Passphrase#2024"
        url: https://db.example.com
        category: database
        created_at: 2023-06-01T00:00:00Z
        modified_at: 1717200000
        tags: [prod, db]
"""

import logging
from datetime import date, datetime, timezone
from pathlib import Path
from typing import Any, Dict, List

import yaml

from credaudit.core.errors import CredentialSourceError
from credaudit.vault.models import Credential

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("id", "name", "username", "password")

# 9999-12-31T23:59:59Z
MAX_EPOCH = 253402300799


def _checked_epoch(value: Any) -> int:
    try:
        epoch = int(value)
    except (OverflowError, ValueError):
        raise ValueError(f"Invalid timestamp: {value!r}")
    if abs(epoch) > MAX_EPOCH:
        raise ValueError(f"Timestamp out of range: {value!r}")
    return epoch


def to_epoch(value: Any) -> int:
    """
    Convert a timestamp value to epoch seconds.

    Accepts integers/floats (epoch seconds), ISO-8601 strings, and the
    date/datetime objects YAML produces for unquoted timestamps. Naive
    datetimes are treated as UTC.

    Raises:
        ValueError: If the value can't be interpreted or is out of range.
    """
    if value is None or value == "":
        return 0
    if isinstance(value, bool):
        raise ValueError(f"Invalid timestamp: {value!r}")
    if isinstance(value, (int, float)):
        return _checked_epoch(value)
    if isinstance(value, datetime):
        dt = value
    elif isinstance(value, date):
        dt = datetime(value.year, value.month, value.day)
    elif isinstance(value, str):
        text = value.strip()
        if text.lstrip("-").isdigit():
            return _checked_epoch(text)
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        dt = datetime.fromisoformat(text)
    else:
        raise ValueError(f"Invalid timestamp: {value!r}")

    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return int(dt.timestamp())


def credential_from_dict(data: Dict[str, Any], position: int = 0) -> Credential:
    """
    Build a Credential from one inventory row.

    Args:
        data: Mapping loaded from YAML.
        position: 1-based row number for error messages.

    Raises:
        CredentialSourceError: If required fields are missing or invalid.
    """
    if not isinstance(data, dict):
        raise CredentialSourceError(f"Entry {position}: expected a mapping")

    missing = [key for key in REQUIRED_FIELDS if data.get(key) is None]
    if missing:
        raise CredentialSourceError(
            f"Entry {position}: missing required field(s): {', '.join(missing)}"
        )

    try:
        created_at = to_epoch(data.get("created_at"))
        modified_at = to_epoch(data.get("modified_at", data.get("created_at")))
    except ValueError as e:
        raise CredentialSourceError(f"Entry {position} ({data['id']}): {e}")

    tags = data.get("tags") or []
    if isinstance(tags, str):
        tags = [t.strip() for t in tags.split(",") if t.strip()]
    elif not isinstance(tags, list):
        raise CredentialSourceError(f"Entry {position}: tags must be a list")

    return Credential(
        id=str(data["id"]),
        name=str(data["name"]),
        username=str(data["username"]),
        password=str(data["password"]),
        url=str(data.get("url") or ""),
        category=str(data.get("category") or ""),
        created_at=created_at,
        modified_at=modified_at,
        tags=frozenset(str(t) for t in tags),
        notes=str(data.get("notes") or ""),
    )


class CredentialStore:
    """
    Load credential inventories from YAML.

    Usage:
        store = CredentialStore(Path("inventory.yaml"))
        credentials = store.load()
    """

    def __init__(self, path: Path):
        self.path = Path(path).expanduser()

    def load(self) -> List[Credential]:
        """
        Load and validate all credentials in the file.

        Returns:
            Credentials in file order.

        Raises:
            CredentialSourceError: File unreadable, invalid YAML, bad rows,
                or duplicate ids.
        """
        if not self.path.exists():
            raise CredentialSourceError(f"Credential file not found: {self.path}")

        logger.info(f"Loading credentials from {self.path}")

        try:
            with open(self.path, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise CredentialSourceError(f"Invalid YAML in {self.path}: {e}")
        except UnicodeDecodeError as e:
            raise CredentialSourceError(f"{self.path} is not valid UTF-8: {e}")
        except OSError as e:
            raise CredentialSourceError(f"Cannot read {self.path}: {e}")

        rows = data.get("credentials") if isinstance(data, dict) else data
        if rows is None:
            rows = []
        if not isinstance(rows, list):
            raise CredentialSourceError(
                f"{self.path}: expected a 'credentials' list"
            )

        credentials: List[Credential] = []
        seen: Dict[str, int] = {}
        for position, row in enumerate(rows, 1):
            credential = credential_from_dict(row, position)

            if credential.id in seen:
                raise CredentialSourceError(
                    f"Entry {position}: duplicate id '{credential.id}' "
                    f"(first seen at entry {seen[credential.id]})"
                )
            seen[credential.id] = position

            if credential.modified_at < credential.created_at:
                logger.warning(
                    f"{credential.id}: modified_at is earlier than created_at"
                )

            credentials.append(credential)

        logger.info(f"Loaded {len(credentials)} credential(s)")
        return credentials
