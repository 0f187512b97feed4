"""
credaudit CLI - Main entry point.

Usage:
    credaudit                          # Banner + demo run
    credaudit --audit [--file inv.yaml]
    credaudit --strength [PASSWORD]
    credaudit --export report.json [--file inv.yaml]
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from credaudit import __version__
from credaudit.core.config import get_config
from credaudit.core.errors import CredAuditError
from credaudit.core.logging_setup import configure_logging
from credaudit.core.risk import RiskLevel


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    from credaudit.cli.strength import PROMPT

    parser = argparse.ArgumentParser(
        prog="credaudit",
        description="Offline credential hygiene audit and password strength checker",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Modes:
  (no args)          Banner + demo run against built-in sample credentials
  -a, --audit        Audit a credential inventory
  -s, --strength     Rate a single password
  -e, --export PATH  Audit and export the report as JSON

Examples:
  # Audit an inventory file
  credaudit --audit --file inventory.yaml

  # Only show high and critical findings
  credaudit --audit --file inventory.yaml --min-risk high

  # Check a password (prompts when no value is given)
  credaudit --strength
  credaudit --strength 'correct horse battery staple'

  # Export audit results
  credaudit --file inventory.yaml --export reports/audit.json

Exit codes:
  0  no critical/high findings
  1  error (unreadable inventory, bad config, export failure)
  2  critical/high findings present
""",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        "-a", "--audit",
        action="store_true",
        help="Audit all credentials in the inventory",
    )
    mode.add_argument(
        "-s", "--strength",
        nargs="?",
        const=PROMPT,
        default=None,
        metavar="PASSWORD",
        help="Check strength of a single password (prompts if omitted)",
    )
    mode.add_argument(
        "--init-config",
        action="store_true",
        help="Write a default config file and exit",
    )

    parser.add_argument(
        "-e", "--export",
        metavar="PATH",
        help="Audit and export the report as JSON",
    )
    parser.add_argument(
        "-f", "--file",
        help="Credential inventory YAML (default: config credentials_file, else demo set)",
    )
    parser.add_argument(
        "--now",
        type=int,
        help="Reference time in epoch seconds (default: current time)",
    )
    parser.add_argument(
        "--min-risk",
        choices=[level.value for level in RiskLevel],
        help="Hide findings below this level",
    )
    parser.add_argument(
        "--workers",
        type=int,
        help="Parallel audit workers (default: config audit.max_workers)",
    )
    parser.add_argument(
        "--config",
        help="Config file (default: ~/.credaudit/config.yaml or CREDAUDIT_CONFIG)",
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable colored output",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.export and args.strength is not None:
        parser.error("--export cannot be combined with --strength")
    if args.workers is not None and args.workers < 1:
        parser.error("--workers must be at least 1")

    try:
        config = get_config(
            reload=True,
            config_path=Path(args.config) if args.config else None,
        )
        configure_logging(config.logging.level, config.logging.file, debug=args.debug)

        if args.init_config:
            if config.config_file.exists():
                print(f"Config already exists: {config.config_file}")
                return 0
            config.save_default_config()
            print(f"Wrote default config: {config.config_file}")
            return 0

        if args.strength is not None:
            from credaudit.cli.strength import handle_strength

            return handle_strength(args, config)
        elif args.audit or args.export:
            from credaudit.cli.audit import handle_audit

            return handle_audit(args, config)
        else:
            from credaudit.cli.audit import handle_demo

            return handle_demo(args, config)

    except CredAuditError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\nAborted", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
