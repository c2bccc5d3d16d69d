"""Exception hierarchy for the re-encoder."""

from __future__ import annotations


class ReencodeError(RuntimeError):
    """Raised when a re-encode request cannot complete."""

    def __init__(self, message: str, *, details: dict | None = None):
        super().__init__(message)
        self.details = details or {}

    def as_dict(self) -> dict:
        """Return a serializable representation."""
        payload = {"error": type(self).__name__, "message": str(self)}
        if self.details:
            payload["details"] = self.details
        return payload


class NotFoundError(ReencodeError):
    """The source path does not exist or is not a regular file."""


class ReadError(ReencodeError):
    """The source file exists but could not be read."""


class UnsupportedEncodingError(ReencodeError):
    """An encoding name does not resolve to a text codec."""


class DecodeError(ReencodeError):
    """The source bytes are invalid for the declared source encoding."""


class EncodeError(ReencodeError):
    """The decoded text has a character the target encoding cannot represent."""


class WriteError(ReencodeError):
    """The destination could not be written."""
