"""
Codec capability used by the re-encoder.

Everything that touches a named character encoding goes through
``TextCodecs``: resolving names, finding BOMs, strict decode and encode.
A different capability (another charset library, a restricted set of
codecs) can be passed to the re-encoder in its place.
"""

from __future__ import annotations

import codecs
import logging
from typing import Optional, Tuple

from . import rules
from .errors import DecodeError, EncodeError, UnsupportedEncodingError

logger = logging.getLogger(__name__)


class TextCodecs:
    """Python's codec registry, used strictly."""

    def resolve(self, name: str) -> str:
        """
        Return the canonical codec name for ``name`` (case-insensitive).

        Unknown names and codecs that are not text encodings
        (base64, rot13, zlib, ...) raise UnsupportedEncodingError.
        """
        if not isinstance(name, str) or not name.strip():
            raise UnsupportedEncodingError(
                f"Invalid encoding name: {name!r}",
                details={"encoding": str(name)},
            )

        try:
            info = codecs.lookup(name.strip())
        except (LookupError, ValueError) as exc:
            raise UnsupportedEncodingError(
                f"Unsupported encoding: {name!r}",
                details={"encoding": name},
            ) from exc

        # bytes-to-bytes and str-to-str codecs are not text encodings
        if not getattr(info, "_is_text_encoding", True) or info.name in rules.REJECTED_CODECS:
            raise UnsupportedEncodingError(
                f"Not a text encoding: {name}",
                details={"encoding": name},
            )

        return info.name

    def bom(self, name: str) -> bytes:
        """BOM for the target codec ``name``, or ``b""`` when it has none."""
        return rules.TARGET_BOMS.get(self.resolve(name), b"")

    def leading_bom(self, raw: bytes, name: str) -> bytes:
        """Return the BOM of codec ``name`` that ``raw`` starts with, if any."""
        canonical = self.resolve(name)
        candidates = rules.SOURCE_BOMS.get(canonical) or rules.SELF_STRIPPING.get(canonical, ())
        for bom in candidates:
            if raw.startswith(bom):
                return bom
        return b""

    def decode(self, raw: bytes, name: str) -> Tuple[str, bytes]:
        """
        Decode ``raw`` strictly.

        A leading BOM of the codec's own family is consumed, never returned
        as text. Returns the text and the BOM bytes that were consumed.
        """
        canonical = self.resolve(name)
        bom = self.leading_bom(raw, canonical)

        # Decoders in SELF_STRIPPING see the BOM; the others get it cut off.
        skipped = len(bom) if canonical in rules.SOURCE_BOMS else 0
        payload = raw[skipped:]

        try:
            text = payload.decode(canonical, rules.DECODE_ERRORS)
        except LookupError as exc:
            raise UnsupportedEncodingError(
                f"Not a text encoding: {canonical}",
                details={"encoding": canonical},
            ) from exc
        except UnicodeError as exc:
            start = getattr(exc, "start", None)
            end = getattr(exc, "end", None)
            details = {
                "encoding": canonical,
                "position": None if start is None else start + skipped,
                "reason": getattr(exc, "reason", str(exc)),
            }
            if start is not None and end is not None:
                details["bytes"] = payload[start:end].hex(" ")
            raise DecodeError(
                f"Invalid {canonical} byte sequence at offset {details['position']}",
                details=details,
            ) from exc

        if bom:
            logger.debug("Consumed %d-byte %s BOM", len(bom), canonical)
        return text, bom

    def encode(self, text: str, name: str) -> bytes:
        """Encode ``text`` strictly. Unrepresentable characters raise EncodeError."""
        canonical = self.resolve(name)

        try:
            return text.encode(canonical, rules.ENCODE_ERRORS)
        except LookupError as exc:
            raise UnsupportedEncodingError(
                f"Not a text encoding: {canonical}",
                details={"encoding": canonical},
            ) from exc
        except UnicodeError as exc:
            start: Optional[int] = getattr(exc, "start", None)
            details = {
                "encoding": canonical,
                "position": start,
                "reason": getattr(exc, "reason", str(exc)),
            }
            if start is not None and start < len(text):
                char = text[start]
                details["character"] = char
                details["codepoint"] = f"U+{ord(char):04X}"
                message = f"Cannot encode {char!r} at position {start} as {canonical}"
            else:
                message = f"Cannot encode text as {canonical}"
            raise EncodeError(message, details=details) from exc


DEFAULT_CODECS = TextCodecs()
