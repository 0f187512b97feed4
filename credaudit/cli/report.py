"""
Terminal rendering for audit and strength results.

Path: credaudit/cli/report.py

Uses Rich for severity-colored output. Color can be turned off with
--no-color or `output.color: false` in the config.
"""

from typing import Sequence

from rich.console import Console
from rich.table import Table
from rich.text import Text

from credaudit import __version__
from credaudit.core.auditor import AuditFinding, AuditSummary
from credaudit.core.risk import RiskLevel
from credaudit.core.strength import StrengthResult

BANNER = f"""\
credaudit {__version__} - offline credential hygiene audit
Rule-based password strength scoring and credential findings.
"""


def make_console(color: bool = True) -> Console:
    """Create the console used for all CLI output."""
    return Console(no_color=not color, highlight=False)


def risk_tag(level: RiskLevel) -> Text:
    """[LEVEL] tag styled by severity."""
    return Text(f"[{level.label}]", style=level.color)


def mask_password(password: str) -> str:
    """Display form of a password: first character plus asterisks."""
    if not password:
        return "<empty>"
    return password[0] + "*" * (len(password) - 1)


def print_banner(console: Console):
    console.print(Text(BANNER, style="bold cyan"))


def print_findings(console: Console, findings: Sequence[AuditFinding]):
    """Print one block per finding, in the order given."""
    if not findings:
        console.print(Text("No findings.", style="green"))
        return

    for finding in findings:
        line = Text.assemble(
            risk_tag(finding.risk),
            " ",
            (finding.credential_name, "bold"),
            f" ({finding.credential_id}): ",
            finding.issue,
        )
        console.print(line)
        console.print(Text(f"    {finding.cwe} - {finding.recommendation}", style="dim"))


def print_summary(console: Console, summary: AuditSummary):
    """Summary block: totals and counts for critical/high/medium."""
    table = Table(title="Audit Summary", show_header=False, title_justify="left")
    table.add_column("Metric", style="cyan")
    table.add_column("Count", justify="right")

    table.add_row("Credentials audited", str(summary.total_credentials))
    table.add_row("Total findings", str(summary.total_findings))
    for level in (RiskLevel.CRITICAL, RiskLevel.HIGH, RiskLevel.MEDIUM):
        table.add_row(risk_tag(level), str(summary.by_risk[level]))
    for level in (RiskLevel.LOW, RiskLevel.INFO):
        if summary.by_risk[level]:
            table.add_row(risk_tag(level), str(summary.by_risk[level]))

    console.print(table)


def print_strength(console: Console, password: str, result: StrengthResult):
    """Score, risk label, issues and suggestions for one password."""
    console.print(Text.assemble(
        "Password: ",
        (mask_password(password), "bold"),
        f"  Score: {result.score}  Risk: ",
        risk_tag(result.risk),
    ))

    if result.issues:
        console.print("  Issues:")
        for issue in result.issues:
            console.print(Text(f"    - {issue}", style="yellow"))

    if result.suggestions:
        console.print("  Suggestions:")
        for suggestion in result.suggestions:
            console.print(Text(f"    - {suggestion}"))
