"""
Errors Module
Exception hierarchy for the session client, the remote lookups and answer extraction.
"""

from typing import Optional


class SkyAnswersError(Exception):
    """Base class for every error raised by this package."""


class AuthError(SkyAnswersError):
    """Bearer token could not be obtained."""


class TransportError(SkyAnswersError):
    """The HTTP call itself failed (connection, timeout, invalid response)."""


class RemoteError(SkyAnswersError):
    """The remote service answered with a non-success status."""

    def __init__(self, status: int, url: Optional[str] = None):
        self.status = status
        self.url = url
        message = f"Remote returned status {status}"
        if url:
            message += f" for {url}"
        super().__init__(message)


class ResolutionError(SkyAnswersError):
    """Task room lookup failed or returned no usable step list."""


class FetchError(SkyAnswersError):
    """Task content could not be retrieved."""


class MissingContentError(FetchError):
    """Task response had no markup content."""


class ParseError(SkyAnswersError):
    """Task markup could not be turned into a document."""


class DecodeError(SkyAnswersError):
    """An encoded answer payload could not be decoded."""
