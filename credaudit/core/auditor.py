"""
Credential Auditor - Rule-based findings for stored credentials.

Path: credaudit/core/auditor.py

Each credential is checked against four independent rules (strength, age,
transport, username). A credential yields at most one finding per rule,
emitted in rule order. The current time is always passed in, never read
from the clock, so audits are reproducible.

Usage:
    from credaudit.core.auditor import CredentialAuditor

    auditor = CredentialAuditor()
    report = auditor.audit_all(credentials, now=int(time.time()), max_workers=4)

    print(f"Findings: {report.summary.total_findings}")
    for finding in report.findings:
        print(f"[{finding.risk.label}] {finding.credential_name}: {finding.issue}")
"""

import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Dict, Iterable, List, Optional, Sequence

from credaudit.core.risk import RiskLevel
from credaudit.core.strength import analyze_password
from credaudit.vault.models import Credential

logger = logging.getLogger(__name__)


ROTATION_DAYS = 90
STALE_DAYS = 365
SECURE_URL_PREFIX = "https://"
PRIVILEGED_USERNAMES = frozenset({"admin", "root", "administrator", "sa"})

CWE_WEAK_PASSWORD = "CWE-521"
CWE_PASSWORD_AGING = "CWE-262"
CWE_CLEARTEXT_TRANSMISSION = "CWE-319"
CWE_DEFAULT_USERNAME = "CWE-1391"


@dataclass(frozen=True)
class AuditFinding:
    """One issue detected on one credential."""
    credential_id: str
    credential_name: str
    issue: str
    risk: RiskLevel
    recommendation: str
    cwe: str

    def to_dict(self) -> dict:
        return {
            "credential_id": self.credential_id,
            "credential_name": self.credential_name,
            "issue": self.issue,
            "risk": self.risk.value,
            "recommendation": self.recommendation,
            "cwe": self.cwe,
        }


def _finding(credential: Credential, issue: str, risk: RiskLevel,
             recommendation: str, cwe: str) -> AuditFinding:
    return AuditFinding(
        credential_id=credential.id,
        credential_name=credential.name,
        issue=issue,
        risk=risk,
        recommendation=recommendation,
        cwe=cwe,
    )


def check_strength(credential: Credential) -> Optional[AuditFinding]:
    """Weak password rule (critical/high strength only)."""
    strength = analyze_password(credential.password)
    if not strength.is_weak:
        return None
    return _finding(
        credential,
        "weak password detected",
        strength.risk,
        ", ".join(strength.suggestions),
        CWE_WEAK_PASSWORD,
    )


def check_age(credential: Credential, now: int) -> Optional[AuditFinding]:
    """Rotation rule. Future-dated credentials get a negative age and pass."""
    age_days = credential.age_days(now)
    if age_days <= ROTATION_DAYS:
        return None
    risk = RiskLevel.HIGH if age_days > STALE_DAYS else RiskLevel.MEDIUM
    return _finding(
        credential,
        f"password not rotated in {age_days} days",
        risk,
        f"rotate password every {ROTATION_DAYS} days",
        CWE_PASSWORD_AGING,
    )


def check_transport(credential: Credential) -> Optional[AuditFinding]:
    """Non-HTTPS URL rule. Prefix match is case-sensitive."""
    if not credential.has_url or credential.url.startswith(SECURE_URL_PREFIX):
        return None
    return _finding(
        credential,
        "credential used with non-HTTPS URL",
        RiskLevel.HIGH,
        "use HTTPS for all credential submissions",
        CWE_CLEARTEXT_TRANSMISSION,
    )


def check_username(credential: Credential) -> Optional[AuditFinding]:
    """Default/privileged username rule (exact, case-sensitive)."""
    if credential.username not in PRIVILEGED_USERNAMES:
        return None
    return _finding(
        credential,
        "using default/privileged username",
        RiskLevel.MEDIUM,
        "use non-obvious usernames for privileged accounts",
        CWE_DEFAULT_USERNAME,
    )


def audit_credential(credential: Credential, now: int) -> List[AuditFinding]:
    """
    Run every rule against a single credential.

    Args:
        credential: Credential to audit (not modified).
        now: Reference time in epoch seconds.

    Returns:
        Findings in rule order (strength, age, transport, username).
    """
    candidates = (
        check_strength(credential),
        check_age(credential, now),
        check_transport(credential),
        check_username(credential),
    )
    findings = [f for f in candidates if f is not None]
    if findings:
        logger.debug(f"{credential.id}: {len(findings)} finding(s)")
    return findings


def sort_findings(findings: Iterable[AuditFinding]) -> List[AuditFinding]:
    """Most severe first; equal severity keeps emission order (stable sort)."""
    return sorted(findings, key=lambda f: f.risk.sort_key)


@dataclass
class AuditSummary:
    """Counts reported after an audit."""
    total_credentials: int = 0
    total_findings: int = 0
    by_risk: Dict[RiskLevel, int] = field(
        default_factory=lambda: {level: 0 for level in RiskLevel}
    )

    @classmethod
    def from_findings(cls, credential_count: int,
                      findings: Sequence[AuditFinding]) -> "AuditSummary":
        summary = cls(total_credentials=credential_count, total_findings=len(findings))
        for finding in findings:
            summary.by_risk[finding.risk] += 1
        return summary

    @property
    def critical(self) -> int:
        return self.by_risk[RiskLevel.CRITICAL]

    @property
    def high(self) -> int:
        return self.by_risk[RiskLevel.HIGH]

    @property
    def medium(self) -> int:
        return self.by_risk[RiskLevel.MEDIUM]

    @property
    def low(self) -> int:
        return self.by_risk[RiskLevel.LOW]

    @property
    def info(self) -> int:
        return self.by_risk[RiskLevel.INFO]

    @property
    def has_blocking(self) -> bool:
        """True when any critical or high finding exists."""
        return (self.critical + self.high) > 0

    def to_dict(self) -> dict:
        return {
            "total_credentials": self.total_credentials,
            "total_findings": self.total_findings,
            "by_risk": {level.value: count for level, count in self.by_risk.items()},
        }


@dataclass
class AuditReport:
    """Sorted findings plus summary for one audit run."""
    generated_at: int
    findings: List[AuditFinding] = field(default_factory=list)
    summary: AuditSummary = field(default_factory=AuditSummary)

    def filtered(self, min_risk: RiskLevel) -> List[AuditFinding]:
        """Findings at or above min_risk, order preserved."""
        return [f for f in self.findings if f.risk >= min_risk]

    def to_dict(self) -> dict:
        return {
            "generated_at": datetime.fromtimestamp(
                self.generated_at, tz=timezone.utc
            ).isoformat(),
            "summary": self.summary.to_dict(),
            "findings": [f.to_dict() for f in self.findings],
        }


class CredentialAuditor:
    """
    Audit credentials and aggregate findings.

    audit() is pure given `now`. audit_all() optionally fans the work out to
    a thread pool, then merges results by input position so the output is
    identical to a serial run.
    """

    def audit(self, credential: Credential, now: int) -> List[AuditFinding]:
        """Audit a single credential."""
        return audit_credential(credential, now)

    def audit_all(
        self,
        credentials: Sequence[Credential],
        now: int,
        max_workers: int = 1,
    ) -> AuditReport:
        """
        Audit every credential and build a severity-sorted report.

        Args:
            credentials: Credentials in inventory order.
            now: Reference time in epoch seconds.
            max_workers: Thread pool size; 1 runs serially.

        Returns:
            AuditReport with findings sorted most severe first.
        """
        credentials = list(credentials)
        logger.info(f"Auditing {len(credentials)} credential(s) (workers={max_workers})")

        if max_workers <= 1 or len(credentials) <= 1:
            per_credential = [audit_credential(c, now) for c in credentials]
        else:
            per_credential = self._audit_parallel(credentials, now, max_workers)

        emitted: List[AuditFinding] = []
        for findings in per_credential:
            emitted.extend(findings)

        findings = sort_findings(emitted)
        summary = AuditSummary.from_findings(len(credentials), findings)

        logger.info(
            f"Audit complete: findings={summary.total_findings}, "
            f"critical={summary.critical}, high={summary.high}, medium={summary.medium}"
        )
        return AuditReport(generated_at=now, findings=findings, summary=summary)

    def _audit_parallel(
        self,
        credentials: List[Credential],
        now: int,
        max_workers: int,
    ) -> List[List[AuditFinding]]:
        """Fan out per-credential audits, fan in by input index."""
        results: List[List[AuditFinding]] = [[] for _ in credentials]

        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            futures = {
                executor.submit(audit_credential, credential, now): index
                for index, credential in enumerate(credentials)
            }

            for future in as_completed(futures):
                results[futures[future]] = future.result()

        return results
