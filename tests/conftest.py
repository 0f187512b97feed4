"""Shared fixtures: fixed clock and a credential factory."""

import pytest

from credaudit.vault.models import Credential, SECONDS_PER_DAY

NOW = 1_700_000_000  # 2023-11-14T22:13:20Z
STRONG_PASSWORD = "X9#mK2$pL7@nQ4"


def days_ago(days: int) -> int:
    return NOW - days * SECONDS_PER_DAY


def make_credential(**overrides) -> Credential:
    """A clean credential (no findings) with optional field overrides."""
    fields = dict(
        id="cred-1",
        name="Test Account",
        username="jdoe",
        password=STRONG_PASSWORD,
        url="https://example.com/login",
        category="web",
        created_at=days_ago(30),
        modified_at=days_ago(10),
    )
    fields.update(overrides)
    return Credential(**fields)


@pytest.fixture
def isolated_config(tmp_path, monkeypatch):
    """Point CREDAUDIT_CONFIG at a file that doesn't exist yet."""
    path = tmp_path / "config.yaml"
    monkeypatch.setenv("CREDAUDIT_CONFIG", str(path))
    return path
