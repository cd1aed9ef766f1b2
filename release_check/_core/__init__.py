"""
Release index access for release-check.

This module handles:
- Index location and platform constants
- Semantic version parsing and precedence
- Fetching and decoding a product's release index
"""

from release_check._core.version import (
    TOOL_VERSION,
    RELEASES_URL,
    INDEX_SUFFIX,
    TARGET_OS,
    TARGET_ARCH,
    is_prerelease,
    parse_version,
    get_index_url,
)
from release_check._core.client import fetch_release

__all__ = [
    # Version
    "TOOL_VERSION",
    "RELEASES_URL",
    "INDEX_SUFFIX",
    "TARGET_OS",
    "TARGET_ARCH",
    "is_prerelease",
    "parse_version",
    "get_index_url",
    # Client
    "fetch_release",
]
