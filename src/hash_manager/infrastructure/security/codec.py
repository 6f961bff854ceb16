"""Byte-level conversions between text, hexadecimal and base64 forms."""

from __future__ import annotations

import base64
import binascii
import string

from hash_manager.domain.errors import InvalidEncoding

TEXT_ENCODING = "utf-16-le"
_HEX_PREFIX = "0x"
_HEX_DIGITS = frozenset(string.hexdigits)


def to_hex_string(data: bytes) -> str:
    """Render bytes as lowercase hex, two digits per byte, without prefix."""

    return bytes(data).hex()


def from_hex_string(text: str) -> bytes:
    """Decode hex text, tolerating a ``0x`` prefix and odd digit counts."""

    normalized = text.lower()
    if normalized.startswith(_HEX_PREFIX):
        normalized = normalized[len(_HEX_PREFIX) :]
    if len(normalized) % 2:
        normalized = "0" + normalized
    if not _HEX_DIGITS.issuperset(normalized):
        raise InvalidEncoding(f"invalid hexadecimal string: {text!r}")
    return bytes.fromhex(normalized)


def to_base64_string(data: bytes) -> str:
    """Render bytes with the standard base64 alphabet."""

    return base64.b64encode(data).decode("ascii")


def from_base64_string(text: str) -> bytes:
    """Decode standard base64 text; malformed input is rejected."""

    try:
        return base64.b64decode(text, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise InvalidEncoding(f"invalid base64 string: {text!r}") from exc


def string_to_bytes(text: str | None) -> bytes | None:
    """Encode text as UTF-16LE; ``None`` stays ``None``."""

    if text is None:
        return None
    try:
        return text.encode(TEXT_ENCODING, errors="surrogatepass")
    except UnicodeEncodeError as exc:
        raise InvalidEncoding(f"text cannot be encoded as {TEXT_ENCODING}") from exc


def bytes_to_string(data: bytes | None) -> str | None:
    """Decode UTF-16LE bytes back to text; ``None`` stays ``None``."""

    if data is None:
        return None
    try:
        return bytes(data).decode(TEXT_ENCODING, errors="surrogatepass")
    except UnicodeDecodeError as exc:
        raise InvalidEncoding(f"bytes are not valid {TEXT_ENCODING}") from exc
