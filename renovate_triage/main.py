#!/usr/bin/env python3
"""
Renovate Triage - Main Entry Point

Finds open Renovate PRs in an organization that are waiting for your
review, then approves and rebase-merges them one at a time.

Usage:
    renovate-triage --token-variable GITHUB_TOKEN -o my-org -u my-login
    renovate-triage --token-variable GITHUB_TOKEN -o my-org -u my-login -d lodash -y -m "LGTM"
"""

import argparse
import sys
from typing import List, Optional

from github import GithubException

from .config import (
    DEFAULT_API_URL,
    DEFAULT_TIMEOUT,
    RENOVATE_APP,
    DirectToken,
    EnvironmentToken,
    FilterPolicy,
    TriageConfig,
)
from .exceptions import TriageError
from .orchestrator import RenovateOrchestrator
from .tools import Console, GitHubSession
from .utils import setup_logging, get_logger


def positive_float(value: str) -> float:
    """argparse type for timeouts."""
    try:
        number = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid number: {value}")
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be positive: {value}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="renovate-triage",
        description="Approve and merge Renovate PR-s awaiting your review"
    )

    token_group = parser.add_mutually_exclusive_group(required=True)
    token_group.add_argument(
        "--token",
        type=str,
        help="GitHub token to use"
    )
    token_group.add_argument(
        "--token-variable",
        type=str,
        help="Name of an environment variable to read GitHub token from"
    )

    parser.add_argument(
        "-o", "--org",
        type=str,
        required=True,
        help="GitHub organization to renovate"
    )
    parser.add_argument(
        "-u", "--user",
        type=str,
        required=True,
        help="GitHub user who we are renovating for"
    )
    parser.add_argument(
        "-a", "--author",
        type=str,
        default=RENOVATE_APP,
        help=f"The creator of renovate requests (default: {RENOVATE_APP})"
    )
    parser.add_argument(
        "-d", "--dependency",
        type=str,
        help="The dependency to renovate (substring of the PR title)"
    )
    parser.add_argument(
        "-y", "--yes",
        action="store_true",
        help="Approve all PR-s matching --dependency without asking"
    )
    parser.add_argument(
        "-m", "--comment",
        type=str,
        help="The default comment for PR approvals"
    )
    parser.add_argument(
        "--api-url",
        type=str,
        default=DEFAULT_API_URL,
        help=f"GitHub REST API URL (default: {DEFAULT_API_URL})"
    )
    parser.add_argument(
        "--timeout",
        type=positive_float,
        default=DEFAULT_TIMEOUT,
        help=f"Seconds to wait for search and PR fetch (default: {DEFAULT_TIMEOUT:g})"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging"
    )
    return parser


def build_config(args: argparse.Namespace) -> TriageConfig:
    """Turn parsed arguments into a TriageConfig."""
    if args.token is not None:
        credentials = DirectToken(args.token)
    else:
        credentials = EnvironmentToken(args.token_variable)

    filter_policy = None
    if args.dependency is not None:
        filter_policy = FilterPolicy(dependency=args.dependency, auto_approve=args.yes)

    return TriageConfig(
        credentials=credentials,
        organization=args.org,
        user=args.user,
        author=args.author,
        api_url=args.api_url,
        request_timeout=args.timeout,
        filter_policy=filter_policy,
        default_comment=args.comment,
        debug=args.debug,
    )


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.yes and args.dependency is None:
        parser.error("--yes can only be used together with --dependency")
    return args


def run(config: TriageConfig, console: Optional[Console] = None) -> int:
    """
    Run a triage pass.

    Args:
        config: Triage configuration
        console: Interactive prompts

    Returns:
        Process exit code
    """
    logger = get_logger()

    try:
        token = config.credentials.resolve()
        with GitHubSession(
            token=token,
            api_url=config.api_url,
            timeout=config.request_timeout,
        ) as session:
            RenovateOrchestrator(session, config, console=console).run()
        return 0
    except TriageError as e:
        logger.error(str(e))
        return 1
    except GithubException as e:
        logger.exception(f"GitHub request failed: {e}")
        return 1
    except KeyboardInterrupt:
        logger.warning("Interrupted")
        return 130


def main(argv: Optional[List[str]] = None):
    """CLI entry point."""
    config = build_config(parse_args(argv))
    setup_logging(debug=config.debug)
    sys.exit(run(config))


if __name__ == "__main__":
    main()
