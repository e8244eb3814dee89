# -----------------------------------------------------------------------------
# DRAGONFLEET - COMMAND LINE INTERFACE
# -----------------------------------------------------------------------------
# Responsibility: Seed a registry from a fleet manifest and report on it.
#
# Commands:
# - dragonfleet summary   : exact text summary (missions and their rockets)
# - dragonfleet tree      : the same summary as a rich tree
# - dragonfleet snapshot  : JSON snapshot of every rocket and mission
#
# Each command takes --manifest PATH (default: $DRAGONFLEET_MANIFEST or
# fleet.yaml). Variables in a .env file in the working directory are
# loaded when main() starts, before the manifest path or any log setting
# is read. Log lines go to stderr; command output goes to stdout.
# -----------------------------------------------------------------------------

import argparse
import sys
from pathlib import Path

from dotenv import load_dotenv
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from dragonfleet import __version__
from dragonfleet.core.manifest import default_manifest_path, registry_from_manifest
from dragonfleet.domain.errors import FleetError

console = Console()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dragonfleet",
        description="Track rockets and the missions they are assigned to.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    manifest_parent = argparse.ArgumentParser(add_help=False)
    manifest_parent.add_argument(
        "--manifest",
        type=Path,
        default=None,
        help="Fleet manifest (YAML) used to seed the registry "
        "(default: $DRAGONFLEET_MANIFEST or fleet.yaml)",
    )

    commands = parser.add_subparsers(dest="command", required=True)
    commands.add_parser("summary", parents=[manifest_parent], help="Print the text summary")
    commands.add_parser("tree", parents=[manifest_parent], help="Print the summary as a tree")
    commands.add_parser("snapshot", parents=[manifest_parent], help="Print a JSON snapshot")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Entry point for the dragonfleet console script."""
    load_dotenv(Path.cwd() / ".env")
    args = build_parser().parse_args(argv)
    manifest_path = args.manifest or default_manifest_path()

    try:
        registry = registry_from_manifest(manifest_path)
    except (FleetError, FileNotFoundError, ValidationError) as e:
        console.print(
            Panel(
                f"[bold red]{escape(str(e))}[/bold red]",
                title=f"{e.__class__.__name__}",
                border_style="red",
            )
        )
        return 1

    if args.command == "summary":
        # plain write: the summary text is a compatibility format
        sys.stdout.write(registry.get_summary())
    elif args.command == "tree":
        console.print(Panel(registry.summary_tree(), title="DRAGONFLEET", border_style="cyan"))
    elif args.command == "snapshot":
        sys.stdout.write(registry.snapshot().model_dump_json(indent=2) + "\n")

    return 0


if __name__ == "__main__":
    sys.exit(main())
