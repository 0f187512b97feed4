"""Credential records and inventory loading."""

from credaudit.vault.models import Credential
from credaudit.vault.store import CredentialStore

__all__ = [
    "Credential",
    "CredentialStore",
]
