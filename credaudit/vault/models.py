"""
Credential data models.

Dataclasses representing credentials loaded from an inventory.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet

SECONDS_PER_DAY = 86400


@dataclass(frozen=True)
class Credential:
    """A single stored credential (plaintext, sample data only)."""

    id: str
    name: str
    username: str
    password: str
    url: str = ""  # empty means not applicable
    category: str = ""
    created_at: int = 0  # epoch seconds
    modified_at: int = 0  # epoch seconds
    tags: FrozenSet[str] = field(default_factory=frozenset)
    notes: str = ""

    def age_days(self, now: int) -> int:
        """Whole days since last modification, truncated toward zero."""
        return int((now - self.modified_at) / SECONDS_PER_DAY)

    @property
    def has_url(self) -> bool:
        return self.url != ""

    def to_dict(self) -> Dict[str, Any]:
        """Serialize metadata only; the password is never included."""
        return {
            "id": self.id,
            "name": self.name,
            "username": self.username,
            "url": self.url,
            "category": self.category,
            "created_at": self.created_at,
            "modified_at": self.modified_at,
            "tags": sorted(self.tags),
            "notes": self.notes,
        }
