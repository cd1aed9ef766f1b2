"""
HTTP client for the release metadata index.

Issues a single GET for <base-url><product>/index.json and decodes the
body into a Release. There are no retries, and no timeout unless the
caller passes one.

Usage:
    release = fetch_release("terraform")
    latest = release.latest_release()

    # Reusing a session (connection pooling, custom headers)
    with requests.Session() as session:
        release = fetch_release("vault", session=session)
"""

from __future__ import annotations

import logging
from typing import Optional, TYPE_CHECKING

import requests

from release_check._core.version import RELEASES_URL, get_index_url
from release_check.errors import DecodeError, FetchError

if TYPE_CHECKING:
    from release_check.types import Release

logger = logging.getLogger(__name__)


def fetch_release(
    product: str,
    base_url: str = RELEASES_URL,
    session: Optional[requests.Session] = None,
    timeout: Optional[float] = None,
) -> Release:
    """
    Fetch and decode the release index for a product.

    Args:
        product: Product identifier (e.g., "terraform")
        base_url: Index root (default: RELEASES_URL)
        session: Optional requests session to issue the request with
        timeout: Optional request timeout in seconds (default: block)

    Returns:
        Decoded Release

    Raises:
        ValueError: If product is empty
        FetchError: If the request fails or returns an error status
        DecodeError: If the body is not a valid release index
    """
    # Import here to avoid circular imports
    from release_check.types import Release

    url = get_index_url(product, base_url)
    getter = session.get if session is not None else requests.get

    logger.debug(f"Fetching release index for {product} from {url}")

    try:
        response = getter(url, timeout=timeout)
    except requests.exceptions.RequestException as e:
        raise FetchError(url, e) from e

    # Closing the response releases the connection on every path
    with response:
        try:
            response.raise_for_status()
        except requests.exceptions.HTTPError as e:
            raise FetchError(url, e) from e

        try:
            payload = response.json()
        except ValueError as e:
            raise DecodeError(e) from e
        except requests.exceptions.RequestException as e:
            # Connection dropped while reading the body
            raise FetchError(url, e) from e

    release = Release.from_dict(payload)
    logger.debug(f"Decoded {len(release.versions)} versions for {release.name or product}")
    return release
