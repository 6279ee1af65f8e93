"""Command-line interface for storeview."""

import argparse
import asyncio
import sys
from dataclasses import dataclass
from pathlib import Path

from config import ConfigValidationError, ViewerConfig, get_config_path, load_config
from model import collation_key
from store import HttpStoreClient, StoreError

STOREVIEW_VERSION = "0.1.0"


@dataclass
class ParsedArgs:
    """Parsed command-line arguments."""

    config: ViewerConfig
    label: str | None
    list_labels: bool
    warnings: list[str]


def print_error_box(title: str, *lines: str) -> None:
    """Print a formatted error box to stderr.

    Args:
        title: The error title (will be prefixed with "Error: ")
        *lines: Additional lines to print in the box
    """
    print("=" * 60, file=sys.stderr)
    print(f"Error: {title}", file=sys.stderr)
    print("", file=sys.stderr)
    for line in lines:
        print(line, file=sys.stderr)
    print("=" * 60, file=sys.stderr)


class StoreviewHelpFormatter(argparse.RawDescriptionHelpFormatter):
    """Custom formatter that shows our structured help."""

    def format_help(self) -> str:
        lines = [
            "Store Viewer - browse and edit labels in a content-addressed store.",
            f"Version: {STOREVIEW_VERSION}",
            "",
            "Core:",
            "  storeview                             Open the viewer",
            "  storeview --label <name>              Open the viewer on a label",
            "  storeview --list-labels               Print all label names and exit",
            "",
            "Options:",
            "  --url <url>                           Store server (default http://localhost:8080)",
            "  --autosave-delay <seconds>            Idle time before autosave (default 1.0)",
            "  --config <path>                       Config file",
            f"                                        (default {get_config_path()})",
            "  --version                             Print version and exit",
            "",
            "Environment:",
            "  STOREVIEW_URL, STOREVIEW_AUTOSAVE_DELAY",
            "",
            "Keys:",
            "  ctrl+s save   ctrl+n new label   ctrl+b toggle sidebar   ctrl+q quit",
        ]
        return "\n".join(lines) + "\n"


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser for storeview CLI."""
    parser = argparse.ArgumentParser(
        prog="storeview",
        formatter_class=StoreviewHelpFormatter,
        add_help=True,
    )
    parser.add_argument("--url", metavar="URL", help=argparse.SUPPRESS)
    parser.add_argument("--autosave-delay", metavar="SECONDS", type=float, help=argparse.SUPPRESS)
    parser.add_argument("--config", metavar="PATH", help=argparse.SUPPRESS)
    parser.add_argument("--label", metavar="NAME", help=argparse.SUPPRESS)
    parser.add_argument("--list-labels", action="store_true", help=argparse.SUPPRESS)
    parser.add_argument("--version", action="store_true", help=argparse.SUPPRESS)
    return parser


def parse_args(argv: list[str] | None = None) -> ParsedArgs:
    """Parse command line arguments and resolve the effective config.

    Returns:
        ParsedArgs with the config and requested action.
    """
    parser = create_parser()
    args = parser.parse_args(sys.argv[1:] if argv is None else argv)

    if args.version:
        print(f"storeview {STOREVIEW_VERSION}")
        sys.exit(0)

    config_path = Path(args.config).expanduser() if args.config else None
    try:
        config, warnings = load_config(
            config_path,
            overrides={"base_url": args.url, "autosave_delay": args.autosave_delay},
        )
    except ConfigValidationError as e:
        print_error_box("Invalid configuration", str(e))
        sys.exit(1)

    return ParsedArgs(
        config=config,
        label=args.label,
        list_labels=args.list_labels,
        warnings=warnings,
    )


async def fetch_label_names(config: ViewerConfig) -> list[str]:
    """List the store's labels in display order."""
    async with HttpStoreClient(config.base_url, timeout=config.request_timeout) as store:
        names = await store.list_labels()
    return sorted(set(names), key=collation_key)


def list_labels(config: ViewerConfig) -> int:
    """Print every label name, one per line. Returns the exit code."""
    try:
        names = asyncio.run(fetch_label_names(config))
    except StoreError as e:
        print_error_box("Failed to load labels", f"Server: {config.base_url}", str(e))
        return 1
    for name in names:
        print(name)
    return 0


def main() -> None:
    """Main entry point."""
    args = parse_args()
    for warning in args.warnings:
        print(f"Warning: {warning}", file=sys.stderr)

    if args.list_labels:
        sys.exit(list_labels(args.config))

    from app import StoreViewerApp

    store = HttpStoreClient(args.config.base_url, timeout=args.config.request_timeout)
    app = StoreViewerApp(
        store,
        config=args.config,
        initial_label=args.label,
        version=STOREVIEW_VERSION,
    )
    app.run()


if __name__ == "__main__":
    main()
