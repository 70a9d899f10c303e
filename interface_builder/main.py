"""Command-line entry point for interface-builder."""

import argparse
import logging
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

from .builder import build_all_interfaces
from .config import load_config
from .errors import InterfaceBuildError

console = Console()


def setup_logging(verbose: bool = False) -> None:
    """Route library logging through rich."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
    )


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Generate Solidity interface files from directives embedded in contract comments"
    )
    parser.add_argument(
        "files",
        nargs="*",
        help="Contract files to process (default with --all: every contract with a build directive)",
    )
    parser.add_argument(
        "--all",
        action="store_true",
        help="Build every contract under the contracts directory that has a build directive",
    )
    parser.add_argument(
        "--force",
        action="store_true",
        help="Regenerate interface files even if they are up to date",
    )
    parser.add_argument(
        "--config", "-c",
        help="Path to configuration file (default: interface-builder.yaml if present)",
    )
    parser.add_argument(
        "--root",
        help="Contracts directory to scan with --all (overrides contracts_dir)",
    )
    parser.add_argument(
        "--dialect",
        choices=["auto", "custom", "legacy"],
        help="Directive syntax: custom (/// @custom:interface), legacy (/// !interface)",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Show debug logging",
    )

    args = parser.parse_args(argv)

    if not args.files and not args.all:
        parser.print_help()
        return 1

    setup_logging(args.verbose)

    try:
        config = load_config(Path(args.config) if args.config else None)
    except InterfaceBuildError as e:
        console.print(f"[red]Error:[/red] {e}")
        return 1

    summary = build_all_interfaces(
        force=args.force or config.force,
        files=args.files or None,
        root=args.root,
        config=config,
        dialect=args.dialect,
    )

    return 0 if summary.ok else 1


if __name__ == "__main__":
    raise SystemExit(main())
