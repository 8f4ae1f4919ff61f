#!/usr/bin/env python3
"""
Command-line interface for the notification manager.

Usage:
    uv run python cli.py [command] [options]

Commands:
    run         Start an interactive session (default)
    demo        Run the scripted demo session
    test        Run the test suite

Examples:
    uv run python cli.py
    uv run python cli.py run --username alice
    uv run python cli.py demo --verbose
    uv run python cli.py test -v
"""

import argparse
import logging
import subprocess
from typing import Optional

from notifications.channels import ConsoleChannel, configure_logging
from notifications.shell import NotificationShell
from notifications.store import NotificationStore


def run_session(username: Optional[str], verbose: bool) -> NotificationStore:
    """Run an interactive session on a fresh store."""
    configure_logging(logging.DEBUG if verbose else logging.WARNING)
    store = NotificationStore(channel=ConsoleChannel())
    store.channel.info("Welcome to the notification manager")
    NotificationShell(store).run(username=username)
    return store


def run_demo(verbose: bool) -> None:
    """Run the scripted demo."""
    from notifications.demo import run_scenario_demo

    configure_logging(logging.DEBUG if verbose else logging.INFO)
    run_scenario_demo()


def run_tests(args: list[str]) -> int:
    """Run the test suite."""
    cmd = ["uv", "run", "pytest"] + args
    return subprocess.run(cmd).returncode


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Notification Manager CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s
  %(prog)s run --username alice
  %(prog)s demo
  %(prog)s test -v
        """,
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # Run command
    run_parser = subparsers.add_parser("run", help="Start an interactive session")
    run_parser.add_argument("--username", default=None, help="Skip the username prompt")
    run_parser.add_argument("--verbose", action="store_true", help="Log debug output to stderr")

    # Demo command
    demo_parser = subparsers.add_parser("demo", help="Run the scripted demo session")
    demo_parser.add_argument("--verbose", action="store_true", help="Log debug output to stderr")

    # Test command
    test_parser = subparsers.add_parser("test", help="Run the test suite")
    test_parser.add_argument(
        "pytest_args",
        nargs="*",
        default=[],
        help="Arguments to pass to pytest",
    )

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == "demo":
        run_demo(args.verbose)
    elif args.command == "test":
        return run_tests(args.pytest_args)
    elif args.command == "run":
        run_session(args.username, args.verbose)
    else:
        run_session(None, False)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
