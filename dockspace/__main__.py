"""
Main entry point for running dockspace as a module.

Usage:
    python -m dockspace [--layout FILE] [COMMAND ...]

Loads a layout (the default one unless FILE is given), applies each text
command in order and prints the resulting layout as JSON.
"""

from __future__ import annotations
import argparse
import logging
import sys
from typing import List, Optional

from .config import DockConfig
from .serialization import LayoutFormatError, dumps, loads
from .workspace import DockWorkspace


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        prog="dockspace", description="Apply layout commands and print the layout."
    )
    parser.add_argument("--layout", help="layout JSON file to start from")
    parser.add_argument("commands", nargs="*", help='text commands, e.g. "toggle left"')
    args = parser.parse_args(argv)

    config = DockConfig.from_env()
    logging.basicConfig(level=logging.DEBUG if config.debug else logging.WARNING)

    layout = None
    if args.layout:
        try:
            with open(args.layout, encoding="utf-8") as f:
                layout = loads(f.read())
        except (OSError, LayoutFormatError) as e:
            print(f"Cannot load layout: {e}", file=sys.stderr)
            return 1

    workspace = DockWorkspace(config, layout)
    status = 0
    for command in args.commands:
        result = workspace.run_command(command)[0]
        if not result["success"]:
            print(f"{command}: {result['error']}", file=sys.stderr)
            status = 1

    print(dumps(workspace.controller.serialize_layout(), indent=2))
    return status


if __name__ == "__main__":
    sys.exit(main())
