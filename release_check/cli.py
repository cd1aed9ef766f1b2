"""
Command line entry point for release-check.

    release-check --product terraform --version 1.9.5 --url

Exits 0 when the latest stable release equals --version, 1 otherwise or
when the index cannot be fetched.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from release_check._core.version import RELEASES_URL, TOOL_VERSION
from release_check.check import check_latest
from release_check.errors import DecodeError, FetchError, NotFoundError

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str = "WARNING") -> None:
    """Send log records to stderr so stdout only carries the URL."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format=LOG_FORMAT,
        stream=sys.stderr,
    )


def _product(value: str) -> str:
    product = value.strip()
    if not product:
        raise argparse.ArgumentTypeError("product must not be empty")
    return product


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="release-check",
        description="Check whether a version is the latest stable release of a product.",
    )
    parser.add_argument("--product", required=True, type=_product, help="Product name, e.g. terraform.")
    parser.add_argument(
        "--version",
        default="",
        help="Expected latest version. Exit status is 0 only if it matches.",
    )
    parser.add_argument(
        "--url",
        action="store_true",
        help="Print the linux/amd64 download URL of the latest release.",
    )
    parser.add_argument(
        "--include-prerelease",
        action="store_true",
        help="Consider prerelease versions when picking the latest.",
    )
    parser.add_argument("--base-url", default=RELEASES_URL, help="Release index root URL.")
    parser.add_argument("--log-level", default="WARNING", help="Log level.")
    parser.add_argument("-V", "--tool-version", action="version", version=f"%(prog)s {TOOL_VERSION}")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)
    logger.debug(f"release-check {TOOL_VERSION}: checking {args.product} against {args.version!r}")

    try:
        result = check_latest(
            args.product,
            expected=args.version,
            include_prerelease=args.include_prerelease,
            base_url=args.base_url,
        )
    except (FetchError, DecodeError) as e:
        print(f"Failed to fetch releases for {args.product}: {e}", file=sys.stderr)
        return 1
    except NotFoundError as e:
        print(f"Failed to find latest release: {e}", file=sys.stderr)
        return 1

    if args.url and result.url:
        print(result.url)
    return result.exit_code
