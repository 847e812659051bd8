import base64
import zlib

import pytest

from zkit.hashing import (
    adler32,
    base64_decode,
    base64_encode,
    crc32,
    crc64,
    fnv32,
    fnv32a,
    fnv64,
    fnv64a,
    murmur32,
    murmur64,
)

SAMPLES = [
    b"",
    b"a",
    b"abc",
    b"123456789",
    b"The quick brown fox jumps over the lazy dog",
    bytes(range(256)),
]


@pytest.mark.parametrize("data", SAMPLES + [bytes(range(256)) * 50])
def test_adler32_matches_zlib(data):
    assert adler32(data) == zlib.adler32(data)


def test_adler32_empty_is_one():
    assert adler32(b"") == 1


@pytest.mark.parametrize("data", SAMPLES)
def test_crc32_matches_zlib(data):
    assert crc32(data) == zlib.crc32(data)


def test_crc32_accepts_str():
    assert crc32("abc") == crc32(b"abc")


def test_crc64_check_value():
    assert crc64(b"123456789") == 0xE9C6D914C4B8D9CA


def test_crc64_empty_is_zero():
    assert crc64(b"") == 0


def test_crc64_detects_change():
    assert crc64(b"hello") != crc64(b"hellp")
    assert crc64(b"hello") < 2**64


def test_fnv_empty_is_offset_basis():
    assert fnv32(b"") == 0x811C9DC5
    assert fnv32a(b"") == 0x811C9DC5
    assert fnv64(b"") == 0xCBF29CE484222325
    assert fnv64a(b"") == 0xCBF29CE484222325


def test_fnv32a_single_byte():
    assert fnv32a(b"a") == 0xE40C292C


def test_fnv1_and_fnv1a_differ():
    assert fnv32(b"a") != fnv32a(b"a")
    assert fnv64(b"a") != fnv64a(b"a")


@pytest.mark.parametrize("data", SAMPLES)
def test_fnv_ranges(data):
    assert 0 <= fnv32(data) < 2**32
    assert 0 <= fnv32a(data) < 2**32
    assert 0 <= fnv64(data) < 2**64
    assert 0 <= fnv64a(data) < 2**64


@pytest.mark.parametrize("data", SAMPLES[1:])
def test_base64_encode_matches_stdlib(data):
    assert base64_encode(data) == base64.b64encode(data)


def test_base64_encode_empty():
    assert base64_encode(b"") == b""


@pytest.mark.parametrize("length", range(0, 20))
def test_base64_round_trip(length):
    data = bytes((i * 37 + 11) & 0xFF for i in range(length))
    assert base64_decode(base64_encode(data)) == data


def test_base64_decode_accepts_str():
    assert base64_decode("TWFu") == b"Man"
    assert base64_decode("TWE=") == b"Ma"
    assert base64_decode("TQ==") == b"M"


@pytest.mark.parametrize("bad", ["TW!u", "TWF", "T=Fu", "A===", "TQ==TWFu"])
def test_base64_decode_rejects_invalid(bad):
    with pytest.raises(ValueError):
        base64_decode(bad)


def test_murmur32_empty_seed_zero():
    assert murmur32(b"", 0) == 0


def test_murmur32_empty_seed_one():
    assert murmur32(b"", 1) == 0x514E28B7


@pytest.mark.parametrize("data", SAMPLES)
def test_murmur32_seed_matters(data):
    assert murmur32(data, 1) != murmur32(data, 2)
    assert murmur32(data, 7) == murmur32(data, 7)
    assert 0 <= murmur32(data, 7) < 2**32


def test_murmur32_tail_bytes_matter():
    assert murmur32(b"abcde", 0) != murmur32(b"abcdf", 0)


@pytest.mark.parametrize("data", SAMPLES)
def test_murmur64_deterministic_and_seeded(data):
    assert murmur64(data, 3) == murmur64(data, 3)
    assert murmur64(data, 3) != murmur64(data, 4)
    assert 0 <= murmur64(data, 3) < 2**64


def test_murmur64_tail_is_taken_from_start():
    assert murmur64(b"XXXXXXXXa", 0) == murmur64(b"XXXXXXXXb", 0)
    assert murmur64(b"XXXXXXXXa", 0) != murmur64(b"YXXXXXXXa", 0)


def test_murmur64_short_input_uses_every_byte():
    assert murmur64(b"abc", 0) != murmur64(b"abd", 0)


def test_murmur64_length_matters():
    assert murmur64(b"\x00" * 8, 0) != murmur64(b"\x00" * 16, 0)