from __future__ import annotations

import pytest

from hash_manager.domain.errors import InvalidEncoding
from hash_manager.infrastructure.security.codec import (
    bytes_to_string,
    from_base64_string,
    from_hex_string,
    string_to_bytes,
    to_base64_string,
    to_hex_string,
)


def test_hex_encoding_is_lowercase_two_digits_per_byte() -> None:
    assert to_hex_string(b"\x00\x0f\xab\xff") == "000fabff"
    assert to_hex_string(b"") == ""


def test_hex_round_trip_preserves_bytes() -> None:
    data = bytes(range(256))

    assert from_hex_string(to_hex_string(data)) == data


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("0x1", b"\x01"),
        ("0X1", b"\x01"),
        ("abc", b"\x0a\xbc"),
        ("ABCDEF", b"\xab\xcd\xef"),
        ("0xFF00", b"\xff\x00"),
        ("", b""),
        ("0x", b""),
    ],
)
def test_hex_decoding_tolerates_prefix_case_and_odd_length(text: str, expected: bytes) -> None:
    assert from_hex_string(text) == expected


@pytest.mark.parametrize("text", ["zz", "0xg1", "12 34", "0x0x12"])
def test_hex_decoding_rejects_non_hex_characters(text: str) -> None:
    with pytest.raises(InvalidEncoding):
        from_hex_string(text)


def test_base64_round_trip_uses_standard_alphabet() -> None:
    data = b"\xfb\xff\xfe"

    encoded = to_base64_string(data)

    assert encoded == "+//+"
    assert from_base64_string(encoded) == data


def test_base64_rejects_malformed_input() -> None:
    with pytest.raises(InvalidEncoding):
        from_base64_string("not base64!")


def test_text_is_encoded_as_utf16_little_endian_without_bom() -> None:
    assert string_to_bytes("abc") == b"a\x00b\x00c\x00"
    assert string_to_bytes("") == b""
    assert string_to_bytes("€") == b"\xac\x20"


def test_absent_text_maps_to_absent_bytes() -> None:
    assert string_to_bytes(None) is None
    assert bytes_to_string(None) is None


def test_text_round_trip() -> None:
    text = "pässwörd \U0001f512"

    assert bytes_to_string(string_to_bytes(text)) == text


def test_odd_length_utf16_bytes_raise_invalid_encoding() -> None:
    with pytest.raises(InvalidEncoding):
        bytes_to_string(b"a\x00b")
