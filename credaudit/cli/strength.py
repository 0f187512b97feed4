"""
Strength CLI handler.

Handles: credaudit --strength [PASSWORD]
"""

import getpass

from credaudit.cli.audit import EXIT_FINDINGS, EXIT_OK
from credaudit.cli.report import make_console, print_strength
from credaudit.core.config import Config
from credaudit.core.strength import analyze_password

# --strength given without a value
PROMPT = object()


def handle_strength(args, config: Config) -> int:
    """Rate one password; prompt for it when not given on the command line."""
    password = args.strength
    if password is PROMPT:
        password = getpass.getpass("Password to check: ")

    console = make_console(color=config.output.color and not args.no_color)
    result = analyze_password(password)
    print_strength(console, password, result)

    return EXIT_FINDINGS if result.is_weak else EXIT_OK
