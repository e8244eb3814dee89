# -----------------------------------------------------------------------------
# OPERATIONAL LOGGING
# -----------------------------------------------------------------------------
# Registry and manifest log lines go to stderr, so command output on stdout
# (the summary report, JSON snapshots) stays clean.
#
# DRAGONFLEET_QUIET is read on every call, not at import time, so a value
# loaded later from a .env file still applies.
# -----------------------------------------------------------------------------

import os

from rich.console import Console

console = Console(stderr=True)


def is_quiet() -> bool:
    """True when DRAGONFLEET_QUIET is set to "true"."""
    return os.getenv("DRAGONFLEET_QUIET", "").lower() == "true"


def log(message: str) -> None:
    """Print a markup log line to stderr unless logging is silenced."""
    if is_quiet():
        return
    console.print(message)
