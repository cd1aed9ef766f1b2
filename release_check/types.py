"""
Type definitions for release-check.

Defines the records decoded from a product's release index:
- Build: one platform-specific artifact
- Version: one release version and its builds
- Release: a product and every version it has published

plus CheckResult, the outcome of comparing the latest release against an
expected version.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Tuple

import semver

from release_check._core.version import (
    TARGET_ARCH,
    TARGET_OS,
    is_prerelease,
    parse_version,
)
from release_check.errors import DecodeError, ParseError

logger = logging.getLogger(__name__)


def _str_field(data: Mapping[str, Any], key: str, context: str) -> str:
    """Read an optional string field; absent or null decodes to ""."""
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise DecodeError(
            f"{context}.{key}: expected string, got {type(value).__name__}"
        )
    return value


def _require_object(value: Any, context: str) -> Mapping[str, Any]:
    if not isinstance(value, dict):
        raise DecodeError(f"{context}: expected object, got {type(value).__name__}")
    return value


def _selection_key(version: semver.Version) -> tuple:
    # semver equality ignores build metadata; on a tie the key without
    # build metadata ranks highest, then the greatest build string
    return (version, not version.build, version.build or "")


# =============================================================================
# Index Records
# =============================================================================


@dataclass(frozen=True)
class Build:
    """
    A single downloadable artifact for one OS/architecture pair.

    Immutable once decoded.
    """
    name: str = ""
    version: str = ""
    os: str = ""
    arch: str = ""
    filename: str = ""
    url: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> "Build":
        """
        Decode a build entry from the release index.

        Raises:
            DecodeError: If data is not an object or a field has the wrong type
        """
        data = _require_object(data, "build")
        return cls(
            name=_str_field(data, "name", "build"),
            version=_str_field(data, "version", "build"),
            os=_str_field(data, "os", "build"),
            arch=_str_field(data, "arch", "build"),
            filename=_str_field(data, "filename", "build"),
            url=_str_field(data, "url", "build"),
        )


@dataclass
class Version:
    """
    One released version of a product.

    Holds the shasums file references and the builds in index order.
    """
    name: str = ""
    version: str = ""
    shasums: str = ""
    shasums_signature: str = ""
    builds: List[Build] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> "Version":
        """
        Decode a version entry from the release index.

        Raises:
            DecodeError: If data is not an object, builds is not an array,
                or a field has the wrong type
        """
        data = _require_object(data, "version")
        raw_builds = data.get("builds")
        if raw_builds is None:
            raw_builds = []
        if not isinstance(raw_builds, list):
            raise DecodeError(
                f"version.builds: expected array, got {type(raw_builds).__name__}"
            )
        return cls(
            name=_str_field(data, "name", "version"),
            version=_str_field(data, "version", "version"),
            shasums=_str_field(data, "shasums", "version"),
            shasums_signature=_str_field(data, "shasums_signature", "version"),
            builds=[Build.from_dict(b) for b in raw_builds],
        )

    def build(self, os_name: str = TARGET_OS, arch: str = TARGET_ARCH) -> Optional[Build]:
        """
        Find the build for an OS/architecture pair.

        Args:
            os_name: Target OS (default: TARGET_OS)
            arch: Target architecture (default: TARGET_ARCH)

        Returns:
            The first matching Build in index order, or None if no build
            matches. Build is frozen, so the result can be held freely.
        """
        for candidate in self.builds:
            if candidate.os == os_name and candidate.arch == arch:
                return candidate
        return None


@dataclass
class Release:
    """
    Every published version of a product, keyed by version string.

    The parsed, sorted version list is memoized on the instance the
    first time it is needed; the mapping must not be mutated afterwards.

    Example:
        release = Release.from_dict(payload)
        latest = release.latest_release()
        if latest is not None:
            print(latest.version)
    """
    name: str = ""
    versions: Dict[str, Version] = field(default_factory=dict)

    # include_prerelease -> ascending parsed versions
    _sorted: Dict[bool, Tuple[semver.Version, ...]] = field(
        default_factory=dict, init=False, repr=False, compare=False
    )

    @classmethod
    def from_dict(cls, data: Any) -> "Release":
        """
        Decode a product's release index.

        Unknown fields are ignored and missing fields decode to empty
        values.

        Raises:
            DecodeError: If the payload does not have the release index shape
        """
        data = _require_object(data, "release")
        raw_versions = data.get("versions")
        if raw_versions is None:
            raw_versions = {}
        raw_versions = _require_object(raw_versions, "release.versions")
        return cls(
            name=_str_field(data, "name", "release"),
            versions={key: Version.from_dict(value) for key, value in raw_versions.items()},
        )

    def sorted_versions(self, include_prerelease: bool = False) -> Tuple[semver.Version, ...]:
        """
        Get the parseable version keys in ascending precedence order.

        Keys that are not valid semantic versions are logged and skipped.
        The result is computed once per instance and flag value.

        Args:
            include_prerelease: Keep prerelease versions (default: False)

        Returns:
            Ascending tuple of semver.Version
        """
        cached = self._sorted.get(include_prerelease)
        if cached is not None:
            return cached

        parsed: List[semver.Version] = []
        for key in self.versions:
            try:
                parsed_key = parse_version(key)
            except ParseError as e:
                logger.warning(f"Failed to parse version {key!r}: {e.detail}")
                continue
            if is_prerelease(parsed_key) and not include_prerelease:
                logger.debug(f"Skipping pre-release: {key}")
                continue
            parsed.append(parsed_key)

        ordered = tuple(sorted(parsed, key=_selection_key))
        self._sorted[include_prerelease] = ordered
        return ordered

    def latest_release(self, include_prerelease: bool = False) -> Optional[Version]:
        """
        Get the highest version by semantic-version precedence.

        Args:
            include_prerelease: Consider prerelease versions (default: False)

        Returns:
            The Version entry for the maximum, or None if no releases
            were found
        """
        ordered = self.sorted_versions(include_prerelease)
        if not ordered:
            return None
        return self.versions[str(ordered[-1])]


# =============================================================================
# Check Outcome
# =============================================================================


@dataclass
class CheckResult:
    """
    Result of comparing a product's latest release to an expected version.

    build is None when the latest version has no build for the target
    platform; that only suppresses URL output.
    """
    product: str
    expected: str
    latest: Version
    build: Optional[Build] = None

    @property
    def latest_version(self) -> str:
        """Version string of the latest release."""
        return self.latest.version

    @property
    def url(self) -> Optional[str]:
        """Download URL of the matched build, if any."""
        if self.build is None:
            return None
        return self.build.url

    @property
    def matches(self) -> bool:
        """Check if the latest version equals the expected version."""
        return self.latest.version == self.expected

    @property
    def exit_code(self) -> int:
        """Process exit status: 0 on match, 1 otherwise."""
        return 0 if self.matches else 1
