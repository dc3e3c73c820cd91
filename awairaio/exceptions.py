"""Exceptions for the Awair Local API."""

from __future__ import annotations

from typing import Any


class AwairError(Exception):
    """Error from Awair local api."""

    def __init__(self, *args: Any) -> None:
        """Initialize the exception."""
        Exception.__init__(self, *args)


class InvalidBase(AwairError):
    """API URL is valid, but can't be used as a base for API paths."""

    def __init__(self, url: str) -> None:
        """Initialize the exception."""
        AwairError.__init__(self, f'Invalid API URL: {url} cannot be a base')
        self.url = url


class InvalidUrl(AwairError):
    """API URL could not be parsed."""

    def __init__(self, *args: Any) -> None:
        """Initialize the exception."""
        AwairError.__init__(self, *args)


class RequestError(AwairError):
    """Request to the device failed or returned unusable data."""

    def __init__(self, *args: Any, status: int | None = None) -> None:
        """Initialize the exception."""
        AwairError.__init__(self, *args)
        self.status = status
