"""Bech32 account addresses."""

from __future__ import annotations

import hashlib
import secrets
from dataclasses import dataclass

DEFAULT_PREFIX = "cosmos"

_CHARSET = "qpzry9x8gf2tvdw0s3jn54khce6mua7l"
_GENERATOR = (0x3B6A57B2, 0x26508E6D, 0x1EA119FA, 0x3D4233DD, 0x2A1462B3)
_MAX_LENGTH = 1023
_MAX_ADDRESS_BYTES = 255


def _polymod(values: list[int]) -> int:
    checksum = 1
    for value in values:
        top = checksum >> 25
        checksum = ((checksum & 0x1FFFFFF) << 5) ^ value
        for bit, generator in enumerate(_GENERATOR):
            if (top >> bit) & 1:
                checksum ^= generator
    return checksum


def _hrp_expand(hrp: str) -> list[int]:
    return [ord(c) >> 5 for c in hrp] + [0] + [ord(c) & 31 for c in hrp]


def _create_checksum(hrp: str, data: list[int]) -> list[int]:
    polymod = _polymod(_hrp_expand(hrp) + data + [0] * 6) ^ 1
    return [(polymod >> 5 * (5 - i)) & 31 for i in range(6)]


def _convert_bits(data, from_bits: int, to_bits: int, pad: bool) -> list[int]:
    acc = 0
    bits = 0
    result = []
    max_value = (1 << to_bits) - 1
    for value in data:
        if value < 0 or value >> from_bits:
            raise ValueError("invalid data value for bit conversion")
        acc = (acc << from_bits) | value
        bits += from_bits
        while bits >= to_bits:
            bits -= to_bits
            result.append((acc >> bits) & max_value)
    if pad:
        if bits:
            result.append((acc << (to_bits - bits)) & max_value)
    elif bits >= from_bits or ((acc << (to_bits - bits)) & max_value):
        raise ValueError("invalid padding in bech32 data")
    return result


def bech32_encode(hrp: str, data: bytes) -> str:
    """Encode bytes as a bech32 string with the given human-readable part."""
    if not hrp:
        raise ValueError("human-readable part must not be empty")
    hrp = hrp.lower()
    five_bit = _convert_bits(data, 8, 5, pad=True)
    combined = five_bit + _create_checksum(hrp, five_bit)
    return hrp + "1" + "".join(_CHARSET[d] for d in combined)


def bech32_decode(text: str) -> tuple[str, bytes]:
    """Decode a bech32 string into its human-readable part and bytes."""
    if len(text) > _MAX_LENGTH:
        raise ValueError(f"bech32 string too long: {len(text)}")
    if any(ord(c) < 33 or ord(c) > 126 for c in text):
        raise ValueError("bech32 string contains invalid characters")
    if text.lower() != text and text.upper() != text:
        raise ValueError("bech32 string has mixed case")
    text = text.lower()
    separator = text.rfind("1")
    if separator < 1:
        raise ValueError("bech32 string has no human-readable part")
    if separator + 7 > len(text):
        raise ValueError("bech32 string is too short for a checksum")
    hrp = text[:separator]
    try:
        data = [_CHARSET.index(c) for c in text[separator + 1 :]]
    except ValueError:
        raise ValueError("bech32 data part contains invalid characters") from None
    if _polymod(_hrp_expand(hrp) + data) != 1:
        raise ValueError("invalid bech32 checksum")
    return hrp, bytes(_convert_bits(data[:-6], 5, 8, pad=False))


@dataclass(frozen=True)
class Bech32Codec:
    """Converts addresses between raw bytes and bech32 text."""

    prefix: str = DEFAULT_PREFIX

    def bytes_to_string(self, address: bytes) -> str:
        """Render address bytes as text; empty bytes give an empty string."""
        if not address:
            return ""
        return bech32_encode(self.prefix, bytes(address))

    def string_to_bytes(self, text: str) -> bytes:
        """Parse an address string, raising ValueError when it is invalid."""
        if not text.strip():
            raise ValueError("empty address string is not allowed")
        hrp, address = bech32_decode(text)
        if hrp != self.prefix:
            raise ValueError(
                f"hrp does not match bech32 prefix: expected '{self.prefix}' got '{hrp}'"
            )
        if not address:
            raise ValueError("addresses cannot be empty")
        if len(address) > _MAX_ADDRESS_BYTES:
            raise ValueError(
                f"address max length is {_MAX_ADDRESS_BYTES}, got {len(address)}"
            )
        return address


def module_address(name: str) -> bytes:
    """Return the account address that belongs to a named module."""
    return hashlib.sha256(name.encode()).digest()[:20]


def sample_acc_address() -> str:
    """Return a random account address in text form."""
    return Bech32Codec().bytes_to_string(secrets.token_bytes(20))