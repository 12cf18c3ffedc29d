"""CLI entry point."""

from __future__ import annotations

import argparse
import logging
import sys

from dotenv import load_dotenv
from pydantic import ValidationError

from flybrief.config import AppConfig, load_config
from flybrief.pipeline import execute_run


def _load_config_or_exit(path: str | None) -> AppConfig:
    """Load configuration, printing the problem and exiting on failure."""
    try:
        return load_config(path)
    except FileNotFoundError as exc:
        print(f"Error: {exc}")
        sys.exit(1)
    except ValidationError as exc:
        print(f"Error: Invalid configuration:\n{exc}")
        sys.exit(1)


def run_check(config_path: str | None, dry_run: bool = False) -> int:
    """Check all sites, send the message, print it. Returns the exit status."""
    config = _load_config_or_exit(config_path)
    result = execute_run(config, dry_run=dry_run)

    if result.message:
        print(result.message)
    else:
        print("No site is flyable tomorrow.")

    if result.sent:
        print(f"\nSent to {len(config.telegram.chat_ids)} chat(s).")
    for error in result.check.errors:
        print(f"Error: {error}")

    return 1 if result.check.errors else 0


def list_sites(config_path: str | None) -> None:
    """Print the configured sites and their thresholds."""
    config = _load_config_or_exit(config_path)
    for site in config.sites:
        print(
            f"  {site.name} ({site.latitude:.4f}, {site.longitude:.4f}): "
            f"wind {site.min_flyable_wind.meters_per_second:.1f}"
            f"-{site.max_flyable_wind.meters_per_second:.1f} m/s, "
            f"direction {site.min_flyable_wind_degree}-{site.max_flyable_wind_degree} deg"
        )


def main() -> None:
    """CLI entry point."""
    load_dotenv()

    parser = argparse.ArgumentParser(
        prog="flybrief",
        description="Notifies subscribers about tomorrow's wind conditions on flying sites",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    # check subcommand
    check_parser = subparsers.add_parser(
        "check", help="Fetch forecasts and notify about flyable sites"
    )
    check_parser.add_argument(
        "-c", "--config", metavar="FILE",
        help="Config file (or set FLYBRIEF_CONFIG env var)",
    )
    check_parser.add_argument(
        "--dry-run", action="store_true", help="Print the message without sending it"
    )

    # sites subcommand
    sites_parser = subparsers.add_parser("sites", help="List configured sites")
    sites_parser.add_argument(
        "-c", "--config", metavar="FILE",
        help="Config file (or set FLYBRIEF_CONFIG env var)",
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
    )

    if args.command == "sites":
        list_sites(args.config)
    elif args.command == "check":
        sys.exit(run_check(args.config, dry_run=args.dry_run))
