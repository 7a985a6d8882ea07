"""
Console Reporting

User-facing error messages. Everything the shell itself has to say
about a failed command goes to standard error, prefixed with the
shell's name.
"""

import sys

from jshell.core.config_loader import get_config


def report_error(message: str) -> None:
    """Write ``<shell name>: <message>`` to standard error."""
    name = get_config().shell.name
    print(f"{name}: {message}", file=sys.stderr, flush=True)
