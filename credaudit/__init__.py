"""
credaudit - Offline credential hygiene audit and password strength scoring.

Usage:
    credaudit --audit --file inventory.yaml
    credaudit --strength
"""

__version__ = "0.1.0"

from credaudit.core.risk import RiskLevel
from credaudit.core.strength import StrengthAnalyzer, StrengthResult, analyze_password
from credaudit.core.auditor import (
    AuditFinding,
    AuditReport,
    AuditSummary,
    CredentialAuditor,
    audit_credential,
    sort_findings,
)
from credaudit.vault.models import Credential

__all__ = [
    # Version
    "__version__",
    # Risk
    "RiskLevel",
    # Strength
    "StrengthAnalyzer",
    "StrengthResult",
    "analyze_password",
    # Audit
    "AuditFinding",
    "AuditReport",
    "AuditSummary",
    "CredentialAuditor",
    "audit_credential",
    "sort_findings",
    # Models
    "Credential",
]
