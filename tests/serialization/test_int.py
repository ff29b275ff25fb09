import pytest

from bytepack.serialization import BufferTooShortError, Deserializer, Serializer
from bytepack.serialization.encoding.int import decode_int, encode_int


def _encode(n: int, length: int, signed: bool) -> bytes:
    se = Serializer.build_bytes_serializer()
    encode_int(se, n, length=length, signed=signed)
    return bytes(se.finalize())


def _decode(data: bytes, length: int, signed: bool) -> int:
    de = Deserializer.build_bytes_deserializer(data)
    n = decode_int(de, length=length, signed=signed)
    de.finalize()
    return n


@pytest.mark.parametrize(
    ['n', 'length', 'signed', 'expected'],
    [
        (-1, 2, True, 'ffff'),
        (2147483647, 4, True, 'ffffff7f'),
        (-2147483648, 4, True, '00000080'),
        (0x0080, 2, True, '8000'),
        (0x1234, 2, False, '3412'),
        (45321, 2, False, '09b1'),
        (-5, 1, True, 'fb'),
        (250, 1, False, 'fa'),
        (0, 4, False, '00000000'),
        (4294967295, 4, False, 'ffffffff'),
    ],
)
def test_little_endian_layout(n: int, length: int, signed: bool, expected: str) -> None:
    data = _encode(n, length, signed)
    assert data.hex() == expected
    assert _decode(data, length, signed) == n


@pytest.mark.parametrize(
    ['length', 'signed', 'lower_bound', 'upper_bound'],
    [
        (1, True, -128, 127),
        (1, False, 0, 255),
        (2, True, -32768, 32767),
        (2, False, 0, 65535),
        (4, True, -2147483648, 2147483647),
        (4, False, 0, 4294967295),
    ],
)
def test_bounds(length: int, signed: bool, lower_bound: int, upper_bound: int) -> None:
    assert _decode(_encode(lower_bound, length, signed), length, signed) == lower_bound
    assert _decode(_encode(upper_bound, length, signed), length, signed) == upper_bound
    with pytest.raises(ValueError):
        _encode(lower_bound - 1, length, signed)
    with pytest.raises(ValueError):
        _encode(upper_bound + 1, length, signed)


def test_every_int8_value() -> None:
    for n in range(-128, 128):
        data = _encode(n, 1, True)
        assert len(data) == 1
        assert data[0] == n & 0xff
        assert _decode(data, 1, True) == n


def test_every_uint8_value() -> None:
    for n in range(256):
        assert _encode(n, 1, False) == bytes([n])
        assert _decode(bytes([n]), 1, False) == n


@pytest.mark.parametrize('length', [1, 2, 4])
def test_truncated(length: int) -> None:
    data = _encode(0, length, False)
    for end in range(length):
        with pytest.raises(BufferTooShortError):
            _decode(data[:end], length, False)
