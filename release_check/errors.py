"""
Exception types for release-check.

Provides typed exceptions for:
- Fetch errors (transport failures, HTTP error statuses)
- Decode errors (malformed JSON or unexpected index shape)
- Version parse errors (recovered locally by the selector)
- Not-found conditions (no stable release for a product)
"""

from __future__ import annotations

from typing import Optional, Union


class ReleaseCheckError(Exception):
    """Base exception for all release-check errors."""
    pass


# =============================================================================
# Fetch / Decode Errors
# =============================================================================


class FetchError(ReleaseCheckError):
    """
    Raised when the release index cannot be retrieved.
    
    This includes:
    - DNS and connection failures
    - Non-2xx HTTP responses
    
    Example:
        try:
            release = fetch_release("terraform")
        except FetchError as e:
            logger.error(f"Index unavailable at {e.url}: {e.cause}")
    """
    
    def __init__(self, url: str, cause: Optional[BaseException] = None):
        self.url = url
        self.cause = cause
        
        message = f"Failed to fetch from {url}"
        if cause is not None:
            message += f": {cause}"
        
        super().__init__(message)
    
    def __repr__(self) -> str:
        return f"FetchError(url={self.url!r}, cause={self.cause!r})"


class DecodeError(ReleaseCheckError):
    """
    Raised when the release index body cannot be decoded.
    
    Either the body is not valid JSON, or a field holds a value of the
    wrong JSON type.
    """
    
    def __init__(self, cause: Union[BaseException, str]):
        self.cause = cause
        super().__init__(f"Failed to decode release index: {cause}")


# =============================================================================
# Version Errors
# =============================================================================


class ParseError(ReleaseCheckError, ValueError):
    """
    Raised when a string is not a valid semantic version.
    
    The latest-release selector catches this per entry, logs a warning
    and skips the key rather than aborting.
    """
    
    def __init__(self, version: str, detail: str = "not a valid semantic version"):
        self.version = version
        self.detail = detail
        super().__init__(f"Invalid version string {version!r}: {detail}")


class NotFoundError(ReleaseCheckError):
    """
    Raised when a product has no selectable release.
    
    A missing build for the target platform is not an error; it is
    reported as None by Version.build().
    """
    
    def __init__(self, product: str, detail: str = "no releases found"):
        self.product = product
        self.detail = detail
        super().__init__(f"{detail} for {product}")
