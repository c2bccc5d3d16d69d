"""Strict file re-encoding between character encodings, plus scripting helpers."""

from .errors import (
    DecodeError,
    EncodeError,
    NotFoundError,
    ReadError,
    ReencodeError,
    UnsupportedEncodingError,
    WriteError,
)
from .extras import (
    DurationTracker,
    create_directory,
    get_id,
    remove_directory,
    sleep,
    unzip,
    zip,
)
from .reencode import reencode, run_request, transcode

__all__ = [
    "reencode",
    "transcode",
    "run_request",
    "ReencodeError",
    "NotFoundError",
    "ReadError",
    "UnsupportedEncodingError",
    "DecodeError",
    "EncodeError",
    "WriteError",
    "create_directory",
    "remove_directory",
    "get_id",
    "sleep",
    "DurationTracker",
    "zip",
    "unzip",
]
