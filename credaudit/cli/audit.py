"""
Audit CLI handler.

Handles: credaudit --audit, credaudit --export <path>, and the demo run.
"""

import logging
import time
from pathlib import Path
from typing import List, Optional

from credaudit.cli.export import export_report
from credaudit.cli.report import (
    make_console,
    print_banner,
    print_findings,
    print_strength,
    print_summary,
)
from credaudit.core.auditor import AuditReport, CredentialAuditor
from credaudit.core.config import Config
from credaudit.core.risk import RiskLevel
from credaudit.core.strength import analyze_password
from credaudit.vault.demo import DEMO_PASSWORDS, demo_credentials
from credaudit.vault.models import Credential
from credaudit.vault.store import CredentialStore

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_FINDINGS = 2


def resolve_now(args) -> int:
    """Reference time: --now if given, else the wall clock."""
    if getattr(args, "now", None) is not None:
        return int(args.now)
    return int(time.time())


def _inventory_path(args, config: Config) -> Optional[Path]:
    if getattr(args, "file", None):
        return Path(args.file)
    return config.credentials_file


def _load_inventory(args, config: Config, now: int) -> List[Credential]:
    path = _inventory_path(args, config)
    if path is None:
        logger.info("No credential file configured, using demo set")
        return demo_credentials(now)
    return CredentialStore(path).load()


def _run_audit(args, config: Config, credentials: List[Credential],
               now: int) -> AuditReport:
    workers = args.workers if getattr(args, "workers", None) else config.audit.max_workers
    return CredentialAuditor().audit_all(credentials, now, max_workers=workers)


def _export_path(value: str, config: Config) -> Path:
    """Bare file names go to the configured report directory."""
    path = Path(value).expanduser()
    if not path.is_absolute() and path.parent == Path("."):
        return config.report_dir / path
    return path


def _min_risk(args, config: Config) -> RiskLevel:
    if getattr(args, "min_risk", None):
        return RiskLevel.parse(args.min_risk)
    return config.audit.min_risk


def handle_audit(args, config: Config) -> int:
    """Audit the inventory, render findings, optionally export."""
    console = make_console(color=config.output.color and not args.no_color)
    now = resolve_now(args)

    credentials = _load_inventory(args, config, now)
    report = _run_audit(args, config, credentials, now)

    console.print(f"Auditing {len(credentials)} credential(s)\n")
    print_findings(console, report.filtered(_min_risk(args, config)))
    console.print()
    print_summary(console, report.summary)

    if args.export:
        written = export_report(report, credentials, _export_path(args.export, config))
        console.print(f"\nReport exported to: {written}", markup=False)

    return EXIT_FINDINGS if report.summary.has_blocking else EXIT_OK


def handle_demo(args, config: Config) -> int:
    """Banner, audit of the demo set, then strength checks."""
    console = make_console(color=config.output.color and not args.no_color)
    now = resolve_now(args)

    print_banner(console)

    credentials = demo_credentials(now)
    report = _run_audit(args, config, credentials, now)

    console.rule("Credential Audit (demo data)")
    print_findings(console, report.findings)
    console.print()
    print_summary(console, report.summary)

    console.rule("Password Strength (demo data)")
    for password in DEMO_PASSWORDS:
        print_strength(console, password, analyze_password(password))
        console.print()

    console.print("Run 'credaudit --help' for usage.")
    return EXIT_OK
