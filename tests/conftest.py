"""
Pytest configuration for release-check tests.
"""

import pytest
from unittest.mock import MagicMock


def _build(product, version, os_name, arch):
    filename = f"{product}_{version}_{os_name}_{arch}.zip"
    return {
        "name": product,
        "version": version,
        "os": os_name,
        "arch": arch,
        "filename": filename,
        "url": f"https://releases.hashicorp.com/{product}/{version}/{filename}",
    }


def _version(product, version, platforms=(("darwin", "arm64"), ("linux", "amd64"))):
    return {
        "name": product,
        "version": version,
        "shasums": f"{product}_{version}_SHA256SUMS",
        "shasums_signature": f"{product}_{version}_SHA256SUMS.sig",
        "builds": [_build(product, version, o, a) for o, a in platforms],
    }


@pytest.fixture
def make_version():
    """Factory for a version entry as it appears in index.json."""
    return _version


@pytest.fixture
def sample_index():
    """Release index with two stable versions and one prerelease."""
    return {
        "name": "terraform",
        "versions": {
            "1.2.0": _version("terraform", "1.2.0"),
            "1.3.0": _version("terraform", "1.3.0"),
            "2.0.0-beta": _version("terraform", "2.0.0-beta"),
        },
    }


@pytest.fixture
def make_response():
    """Factory for a mocked requests.Response."""
    def _make(payload=None, json_error=None, http_error=None):
        response = MagicMock()
        response.status_code = 200
        response.raise_for_status = MagicMock()
        if http_error is not None:
            response.raise_for_status.side_effect = http_error
        if json_error is not None:
            response.json.side_effect = json_error
        else:
            response.json.return_value = payload
        return response
    return _make
