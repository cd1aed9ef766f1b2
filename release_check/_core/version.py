"""
Version constants and semantic version parsing for release-check.

- TOOL_VERSION: This package's own version
- RELEASES_URL / INDEX_SUFFIX: Location of the release metadata index
- TARGET_OS / TARGET_ARCH: The single platform pair builds are resolved for
"""

from __future__ import annotations

import semver

from release_check.errors import ParseError

# release-check version (user-facing semver)
TOOL_VERSION = "0.1.0"

# Release index: <RELEASES_URL><product><INDEX_SUFFIX>
RELEASES_URL = "https://releases.hashicorp.com/"
INDEX_SUFFIX = "/index.json"

# Build variant resolved for --url
TARGET_OS = "linux"
TARGET_ARCH = "amd64"


def parse_version(version: str) -> semver.Version:
    """
    Parse a strict SemVer 2.0.0 string.

    Args:
        version: Version string like "1.2.3", "2.0.0-beta.1" or "1.5.0+ent"

    Returns:
        Parsed semver.Version (build metadata is ignored when comparing)

    Raises:
        ParseError: If the string does not follow the SemVer grammar
            (a "v" prefix, leading zeros and missing parts are rejected)
    """
    if not isinstance(version, str):
        raise ParseError(str(version), "expected a string")
    if not version:
        raise ParseError(version, "version string is empty")
    # semver's pattern ends in "$", which would accept a trailing newline
    if version != version.strip():
        raise ParseError(version, "surrounding whitespace")

    try:
        return semver.Version.parse(version)
    except ValueError as e:
        raise ParseError(version, str(e)) from e


def is_prerelease(version: semver.Version) -> bool:
    """Check if a parsed version carries a prerelease component."""
    return bool(version.prerelease)


def get_index_url(product: str, base_url: str = RELEASES_URL) -> str:
    """
    Get the release index URL for a product.

    Args:
        product: Product identifier (e.g., "terraform")
        base_url: Index root (default: RELEASES_URL)

    Returns:
        URL of the product's index.json

    Raises:
        ValueError: If product is empty
    """
    if not product:
        raise ValueError("product must be a non-empty string")
    if not base_url.endswith("/"):
        base_url += "/"
    return f"{base_url}{product}{INDEX_SUFFIX}"
