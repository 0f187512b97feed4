"""Exceptions raised by credaudit collaborators (the audit engine raises none)."""


class CredAuditError(Exception):
    """Base class for errors reported to the user."""


class ConfigError(CredAuditError, ValueError):
    """Configuration file could not be read or contains invalid values."""


class CredentialSourceError(CredAuditError):
    """Credential inventory could not be read or is malformed."""


class ExportError(CredAuditError):
    """Audit report could not be written."""
