"""Checksums, non-cryptographic hashes and Base64 coding over byte strings."""

from __future__ import annotations

import base64
import struct
from typing import Union

BytesLike = Union[bytes, bytearray, memoryview, str]

_MASK32 = 0xFFFFFFFF
_MASK64 = 0xFFFFFFFFFFFFFFFF

_ADLER_MOD = 65521
_ADLER_BLOCK = 5552

_FNV32_OFFSET = 0x811C9DC5
_FNV32_PRIME = 0x01000193
_FNV64_OFFSET = 0xCBF29CE484222325
_FNV64_PRIME = 0x100000001B3

_B64_ALPHABET = b"ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"
_B64_DECODE = {symbol: value for value, symbol in enumerate(_B64_ALPHABET)}
_B64_VALID = frozenset(_B64_ALPHABET) | {ord("=")}


def _as_bytes(data: BytesLike) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8")
    return bytes(data)


def _reflected_table(poly: int, mask: int) -> tuple[int, ...]:
    table = []
    for byte in range(256):
        value = byte
        for _ in range(8):
            value = (value >> 1) ^ poly if value & 1 else value >> 1
        table.append(value & mask)
    return tuple(table)


_CRC32_TABLE = _reflected_table(0xEDB88320, _MASK32)
_CRC64_TABLE = _reflected_table(0x95AC9329AC4BC9B5, _MASK64)


def adler32(data: BytesLike) -> int:
    """Return the Adler-32 checksum of *data*."""
    raw = _as_bytes(data)
    a, b = 1, 0
    for start in range(0, len(raw), _ADLER_BLOCK):
        for byte in raw[start:start + _ADLER_BLOCK]:
            a += byte
            b += a
        a %= _ADLER_MOD
        b %= _ADLER_MOD
    return (b << 16) | a


def crc32(data: BytesLike) -> int:
    """Return the CRC-32 (IEEE, reflected) of *data*."""
    result = _MASK32
    for byte in _as_bytes(data):
        result = (result >> 8) ^ _CRC32_TABLE[(result ^ byte) & 0xFF]
    return result ^ _MASK32


def crc64(data: BytesLike) -> int:
    """Return the CRC-64 (Jones polynomial, zero initial value, no final xor) of *data*."""
    result = 0
    for byte in _as_bytes(data):
        result = (result >> 8) ^ _CRC64_TABLE[(result ^ byte) & 0xFF]
    return result


def fnv32(data: BytesLike) -> int:
    """Return the 32-bit FNV-1 hash of *data*."""
    h = _FNV32_OFFSET
    for byte in _as_bytes(data):
        h = ((h * _FNV32_PRIME) & _MASK32) ^ byte
    return h


def fnv64(data: BytesLike) -> int:
    """Return the 64-bit FNV-1 hash of *data*."""
    h = _FNV64_OFFSET
    for byte in _as_bytes(data):
        h = ((h * _FNV64_PRIME) & _MASK64) ^ byte
    return h


def fnv32a(data: BytesLike) -> int:
    """Return the 32-bit FNV-1a hash of *data*."""
    h = _FNV32_OFFSET
    for byte in _as_bytes(data):
        h = ((h ^ byte) * _FNV32_PRIME) & _MASK32
    return h


def fnv64a(data: BytesLike) -> int:
    """Return the 64-bit FNV-1a hash of *data*."""
    h = _FNV64_OFFSET
    for byte in _as_bytes(data):
        h = ((h ^ byte) * _FNV64_PRIME) & _MASK64
    return h


def base64_encode(data: BytesLike) -> bytes:
    """Encode *data* as padded standard Base64; empty input gives empty output."""
    raw = _as_bytes(data)
    if not raw:
        return b""
    return base64.b64encode(raw)


def base64_decode(data: BytesLike) -> bytes:
    """Decode padded standard Base64.

    Raises ValueError on characters outside the Base64 alphabet, on input
    whose length is not a multiple of four, and on misplaced padding.
    """
    text = _as_bytes(data)
    if any(symbol not in _B64_VALID for symbol in text):
        raise ValueError("invalid base64 character")
    if len(text) % 4:
        raise ValueError("base64 input length must be a multiple of 4")
    body = text.rstrip(b"=")
    padding = len(text) - len(body)
    if padding > 2 or b"=" in body:
        raise ValueError("misplaced base64 padding")

    values = [_B64_DECODE[symbol] for symbol in body] + [0] * padding
    out = bytearray()
    for c0, c1, c2, c3 in zip(*[iter(values)] * 4):
        out += ((c0 << 18) | (c1 << 12) | (c2 << 6) | c3).to_bytes(3, "big")
    return bytes(out[: len(text) // 4 * 3 - padding])


def _rotl32(value: int, shift: int) -> int:
    return ((value << shift) | (value >> (32 - shift))) & _MASK32


def murmur32(data: BytesLike, seed: int = 0) -> int:
    """Return the 32-bit MurmurHash3 (x86) of *data* with *seed*."""
    raw = _as_bytes(data)
    c1, c2 = 0xCC9E2D51, 0x1B873593
    h = seed & _MASK32
    nblocks = len(raw) // 4

    for (k,) in struct.iter_unpack("<I", raw[: nblocks * 4]):
        k = (k * c1) & _MASK32
        k = _rotl32(k, 15)
        k = (k * c2) & _MASK32
        h ^= k
        h = (_rotl32(h, 13) * 5 + 0xE6546B64) & _MASK32

    tail = raw[nblocks * 4:]
    if tail:
        k1 = int.from_bytes(tail, "little")
        k1 = (k1 * c1) & _MASK32
        k1 = _rotl32(k1, 15)
        k1 = (k1 * c2) & _MASK32
        h ^= k1

    h ^= len(raw) & _MASK32
    h ^= h >> 16
    h = (h * 0x85EBCA6B) & _MASK32
    h ^= h >> 13
    h = (h * 0xC2B2AE35) & _MASK32
    h ^= h >> 16
    return h


def murmur64(data: BytesLike, seed: int = 0) -> int:
    """Return the 64-bit MurmurHash64A-style hash of *data* with *seed*.

    The trailing partial block is mixed in from the first ``len % 8`` bytes
    of the input rather than from its end.
    """
    raw = _as_bytes(data)
    m = 0xC6A4A7935BD1E995
    r = 47
    length = len(raw)
    h = ((seed & _MASK64) ^ (length * m)) & _MASK64

    for (k,) in struct.iter_unpack("<Q", raw[: length // 8 * 8]):
        k = (k * m) & _MASK64
        k ^= k >> r
        k = (k * m) & _MASK64
        h ^= k
        h = (h * m) & _MASK64

    remainder = length & 7
    if remainder:
        h ^= int.from_bytes(raw[:remainder], "little")
        h = (h * m) & _MASK64

    h ^= h >> r
    h = (h * m) & _MASK64
    h ^= h >> r
    return h