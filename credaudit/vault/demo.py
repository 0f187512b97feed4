"""
Demo credential set.

Fixed sample data used when no inventory file is given. Timestamps are
relative to the supplied reference time so the demo output is stable.
"""

from typing import List, Tuple

from credaudit.vault.models import Credential, SECONDS_PER_DAY

# Passwords rated by the strength-check half of the demo run
DEMO_PASSWORDS: Tuple[str, ...] = (
    "",
    "password123",
    "Welcome2024",
    "correct horse battery staple",
    "X9#mK2$pL7@nQ4",
)


def _days_ago(now: int, days: int) -> int:
    return now - days * SECONDS_PER_DAY


def demo_credentials(now: int) -> List[Credential]:
    """Return the sample inventory (sample data only, no real secrets)."""
    return [
        Credential(
            id="demo-001",
            name="GitHub",
            username="dev.jane",
            password="X9#mK2$pL7@nQ4",
            url="https://github.com/login",
            category="development",
            created_at=_days_ago(now, 200),
            modified_at=_days_ago(now, 10),
            tags=frozenset({"dev", "sso"}),
        ),
        Credential(
            id="demo-002",
            name="Legacy Router",
            username="admin",
            password="password123",
            url="http://192.168.1.1",
            category="network",
            created_at=_days_ago(now, 900),
            modified_at=_days_ago(now, 400),
            tags=frozenset({"network", "legacy"}),
            notes="Factory web console",
        ),
        Credential(
            id="demo-003",
            name="Staging Database",
            username="sa",
            password="Tr0ub4dor&3xyz",
            category="database",
            created_at=_days_ago(now, 300),
            modified_at=_days_ago(now, 120),
            tags=frozenset({"staging", "db"}),
        ),
        Credential(
            id="demo-004",
            name="Corporate Email",
            username="j.smith",
            password="Welcome2024",
            url="https://mail.example.com",
            category="email",
            created_at=_days_ago(now, 60),
            modified_at=_days_ago(now, 30),
        ),
        Credential(
            id="demo-005",
            name="Intranet Wiki",
            username="wiki-bot",
            password="qwertyuiop",
            url="HTTPS://wiki.internal.example.com",
            category="web",
            created_at=_days_ago(now, 20),
            modified_at=_days_ago(now, 5),
            tags=frozenset({"internal"}),
        ),
    ]
