"""
Tests for release_check.errors module.
"""

import pytest
from release_check.errors import (
    ReleaseCheckError,
    FetchError,
    DecodeError,
    ParseError,
    NotFoundError,
)


class TestReleaseCheckError:
    """Tests for base ReleaseCheckError."""
    
    def test_is_exception(self):
        assert issubclass(ReleaseCheckError, Exception)
    
    def test_message(self):
        error = ReleaseCheckError("Test error message")
        assert str(error) == "Test error message"


class TestFetchError:
    """Tests for FetchError."""
    
    def test_inheritance(self):
        assert issubclass(FetchError, ReleaseCheckError)
    
    def test_attributes(self):
        cause = OSError("Name or service not known")
        error = FetchError("https://releases.example.com/x/index.json", cause)
        assert error.url == "https://releases.example.com/x/index.json"
        assert error.cause is cause
    
    def test_message_includes_url_and_cause(self):
        error = FetchError("https://releases.example.com/x/index.json", OSError("timed out"))
        assert str(error) == "Failed to fetch from https://releases.example.com/x/index.json: timed out"
    
    def test_message_without_cause(self):
        error = FetchError("https://releases.example.com/x/index.json")
        assert str(error) == "Failed to fetch from https://releases.example.com/x/index.json"
    
    def test_repr(self):
        error = FetchError("u")
        assert repr(error) == "FetchError(url='u', cause=None)"
    
    def test_can_be_caught_as_base(self):
        with pytest.raises(ReleaseCheckError):
            raise FetchError("u")


class TestDecodeError:
    """Tests for DecodeError."""
    
    def test_inheritance(self):
        assert issubclass(DecodeError, ReleaseCheckError)
    
    def test_cause(self):
        cause = ValueError("Expecting value")
        error = DecodeError(cause)
        assert error.cause is cause
        assert "Expecting value" in str(error)


class TestParseError:
    """Tests for ParseError."""
    
    def test_inheritance(self):
        assert issubclass(ParseError, ReleaseCheckError)
        assert issubclass(ParseError, ValueError)
    
    def test_attributes(self):
        error = ParseError("1.2")
        assert error.version == "1.2"
        assert "'1.2'" in str(error)
    
    def test_custom_detail(self):
        error = ParseError("", "version string is empty")
        assert error.detail == "version string is empty"


class TestNotFoundError:
    """Tests for NotFoundError."""
    
    def test_inheritance(self):
        assert issubclass(NotFoundError, ReleaseCheckError)
    
    def test_message(self):
        error = NotFoundError("terraform")
        assert error.product == "terraform"
        assert str(error) == "no releases found for terraform"
