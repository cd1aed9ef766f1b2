"""
Latest-release check for a product.

Fetches the product's release index, selects the latest stable version,
resolves the build for the target platform and compares the version to
what the caller expects.

Usage:
    result = check_latest("terraform", expected="1.9.5")
    if result.url:
        print(result.url)
    sys.exit(result.exit_code)
"""

from __future__ import annotations

import logging
from typing import Optional

import requests

from release_check._core.client import fetch_release
from release_check._core.version import RELEASES_URL, TARGET_ARCH, TARGET_OS
from release_check.errors import NotFoundError
from release_check.types import CheckResult

logger = logging.getLogger(__name__)


def check_latest(
    product: str,
    expected: str = "",
    include_prerelease: bool = False,
    base_url: str = RELEASES_URL,
    session: Optional[requests.Session] = None,
    timeout: Optional[float] = None,
) -> CheckResult:
    """
    Compare a product's latest release to an expected version.
    
    Args:
        product: Product identifier (e.g., "terraform")
        expected: Version string the caller expects to be latest
        include_prerelease: Consider prerelease versions (default: False)
        base_url: Index root (default: RELEASES_URL)
        session: Optional requests session
        timeout: Optional request timeout in seconds
        
    Returns:
        CheckResult with the latest Version and its target build (if any)
        
    Raises:
        FetchError: If the index cannot be retrieved
        DecodeError: If the index cannot be decoded
        NotFoundError: If the product has no selectable release
    """
    release = fetch_release(product, base_url=base_url, session=session, timeout=timeout)
    
    latest = release.latest_release(include_prerelease)
    if latest is None:
        raise NotFoundError(product)
    
    build = latest.build()
    if build is None:
        logger.info(f"No {TARGET_OS}/{TARGET_ARCH} build for {product} {latest.version}")
    
    result = CheckResult(product=product, expected=expected, latest=latest, build=build)
    if result.matches:
        logger.info(f"{product} {latest.version} is the latest release")
    else:
        logger.info(
            f"{product} latest release is {latest.version!r}, expected {expected!r}"
        )
    return result
