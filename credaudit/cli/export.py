"""
Audit report export.

Writes the audit report (findings and summary, plus credential metadata)
as JSON. Passwords are never written.
"""

import json
import logging
from pathlib import Path
from typing import Sequence

from credaudit import __version__
from credaudit.core.auditor import AuditReport
from credaudit.core.errors import ExportError
from credaudit.vault.models import Credential

logger = logging.getLogger(__name__)


def export_report(report: AuditReport, credentials: Sequence[Credential],
                  output_path: Path) -> Path:
    """
    Export an audit report to JSON.

    Args:
        report: Completed audit report.
        credentials: Audited credentials (metadata only is written).
        output_path: Destination file; parent directories are created.

    Returns:
        The path written.

    Raises:
        ExportError: If the file can't be written.
    """
    output_path = Path(output_path).expanduser()

    payload = {
        "tool": "credaudit",
        "version": __version__,
        **report.to_dict(),
        "credentials": [c.to_dict() for c in credentials],
    }

    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, "w", encoding="utf-8") as f:
            json.dump(payload, f, indent=2)
    except OSError as e:
        raise ExportError(f"Failed to write report to {output_path}: {e}")

    logger.info(f"Exported audit report to {output_path}")
    return output_path
