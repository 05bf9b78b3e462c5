"""
Payload decoding for inline (data URL) sources.

Rules:
- The media type must mention "csv" or "text" (case-insensitive substring).
- base64 payloads are decoded forgivingly (ASCII whitespace ignored, padding
  optional) but reject characters outside the alphabet and impossible
  lengths. The bytes are read as UTF-8: a leading BOM is dropped and invalid
  sequences become U+FFFD.
- Other payloads are percent-decoded strictly: every "%" must start a valid
  escape and the escaped bytes must form valid UTF-8. "+" stays literal.
"""

from __future__ import annotations

import base64
import binascii
import re
from urllib.parse import unquote_to_bytes

from .errors import Base64DecodeError, PercentDecodeError, UnsupportedMediaType
from .models import DataUrlParts
from .rules import ACCEPTED_MEDIA_HINTS

_ASCII_WHITESPACE = re.compile(r"[\t\n\f\r ]")
_BASE64_ALPHABET = re.compile(r"[A-Za-z0-9+/]*")
_BAD_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")


def check_media_type(media_type: str) -> None:
    lowered = media_type.lower()
    if not any(hint in lowered for hint in ACCEPTED_MEDIA_HINTS):
        raise UnsupportedMediaType(media_type)


def decode_base64_to_bytes(payload: str) -> bytes:
    data = _ASCII_WHITESPACE.sub("", payload)

    if len(data) % 4 == 0:
        if data.endswith("=="):
            data = data[:-2]
        elif data.endswith("="):
            data = data[:-1]

    if len(data) % 4 == 1 or not _BASE64_ALPHABET.fullmatch(data):
        raise Base64DecodeError("Failed to decode base64 data")

    padded = data + "=" * (-len(data) % 4)
    try:
        return base64.b64decode(padded, validate=True)
    except binascii.Error as e:
        raise Base64DecodeError("Failed to decode base64 data") from e


def decode_base64_to_text(payload: str) -> str:
    return decode_base64_to_bytes(payload).decode("utf-8-sig", errors="replace")


def percent_decode(payload: str) -> str:
    if _BAD_ESCAPE.search(payload):
        raise PercentDecodeError("Malformed percent-escape in data URL payload")
    try:
        return unquote_to_bytes(payload).decode("utf-8")
    except UnicodeError as e:
        raise PercentDecodeError("Percent-escaped bytes are not valid UTF-8") from e


def decode(parts: DataUrlParts) -> str:
    check_media_type(parts.media_type)
    if parts.is_base64:
        return decode_base64_to_text(parts.raw_payload)
    return percent_decode(parts.raw_payload)
