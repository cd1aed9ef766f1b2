"""
release-check: Is this version the latest release?

Queries the HashiCorp-style release metadata index
(https://releases.hashicorp.com/<product>/index.json) for a product,
picks the latest stable version by semantic-version precedence, and
resolves the linux/amd64 download URL for it.

Installation:
    pip install release-check

Quickstart (CLI):
    release-check --product terraform --version 1.9.5 --url
    # prints the download URL; exit status 0 if 1.9.5 is the latest

Quickstart (Library):
    from release_check import fetch_release

    release = fetch_release("terraform")
    latest = release.latest_release()
    if latest is not None:
        build = latest.build()
        print(latest.version, build.url if build else "no linux/amd64 build")
"""

from release_check.types import (
    Build,
    Version,
    Release,
    CheckResult,
)
from release_check.errors import (
    ReleaseCheckError,
    FetchError,
    DecodeError,
    ParseError,
    NotFoundError,
)
from release_check._core.version import (
    TOOL_VERSION,
    RELEASES_URL,
    TARGET_OS,
    TARGET_ARCH,
    is_prerelease,
    parse_version,
)
from release_check._core.client import fetch_release
from release_check.check import check_latest

__version__ = TOOL_VERSION

__all__ = [
    # Version
    "__version__",
    "TOOL_VERSION",
    "RELEASES_URL",
    "TARGET_OS",
    "TARGET_ARCH",
    "is_prerelease",
    "parse_version",
    # Types
    "Build",
    "Version",
    "Release",
    "CheckResult",
    # Errors
    "ReleaseCheckError",
    "FetchError",
    "DecodeError",
    "ParseError",
    "NotFoundError",
    # Fetch / Check
    "fetch_release",
    "check_latest",
]
