import pytest

from bytepack import (
    BadDataError,
    Buffer,
    BufferTooShortError,
    Int8,
    Int16,
    Int32,
    UInt8,
    UInt16,
    UInt32,
    ValueTooLargeError,
    calc_size,
    pack,
    unpack,
    unpack_with_size,
)
from bytepack.conf.settings import PackSettings
from tests import unittest


class BufferTestCase(unittest.TestCase):
    def test_int8(self) -> None:
        for n in range(-128, 128):
            buf = Buffer.of(Int8, n, settings=self.settings)
            self.assertEqual(buf.size, 1)
            self.assertEqual(buf.data[0], n & 0xff)
            self.assertEqual(unpack(Int8, buf.data), n)
            self.assertEqual(unpack_with_size(Int8, buf.data), (n, 1))

    def test_uint8(self) -> None:
        for n in range(256):
            buf = Buffer.of(UInt8, n, settings=self.settings)
            self.assertEqual(buf.to_bytes(), bytes([n]))
            self.assertEqual(unpack_with_size(UInt8, buf), (n, 1))

    def test_int16(self) -> None:
        cases = [
            (0, b'\x00\x00'),
            (-1, b'\xff\xff'),
            (32767, b'\xff\x7f'),
            (-32768, b'\x00\x80'),
            (-31523, b'\xdd\x84'),
        ]
        for n, expected in cases:
            with self.subTest(n=n):
                buf = Buffer.of(Int16, n, settings=self.settings)
                self.assertEqual(len(buf), 2)
                self.assertEqual(bytes(buf), expected)
                self.assertEqual(unpack_with_size(Int16, buf), (n, 2))

    def test_uint16(self) -> None:
        for n, expected in [(0, b'\x00\x00'), (65535, b'\xff\xff'), (45321, b'\x09\xb1')]:
            with self.subTest(n=n):
                buf = Buffer.of(UInt16, n, settings=self.settings)
                self.assertEqual(bytes(buf), expected)
                self.assertEqual(unpack(UInt16, buf), n)

    def test_int32(self) -> None:
        cases = [
            (0, b'\x00\x00\x00\x00'),
            (-1, b'\xff\xff\xff\xff'),
            (2147483647, b'\xff\xff\xff\x7f'),
            (-2147483648, b'\x00\x00\x00\x80'),
        ]
        for n, expected in cases:
            with self.subTest(n=n):
                buf = Buffer.of(Int32, n, settings=self.settings)
                self.assertEqual(buf.size, 4)
                self.assertEqual(bytes(buf), expected)
                self.assertEqual(unpack_with_size(Int32, buf), (n, 4))

    def test_uint32(self) -> None:
        for n, expected in [(0, b'\x00\x00\x00\x00'), (4294967295, b'\xff\xff\xff\xff')]:
            with self.subTest(n=n):
                buf = Buffer.of(UInt32, n, settings=self.settings)
                self.assertEqual(bytes(buf), expected)
                self.assertEqual(unpack(UInt32, buf), n)

    def test_string(self) -> None:
        buf = Buffer.of(str, 'hello guys!', settings=self.settings)
        self.assertEqual(buf.size, 12)
        self.assertEqual(bytes(buf), b'\x0bhello guys!')
        self.assertEqual(unpack(str, buf), 'hello guys!')
        self.assertEqual(unpack_with_size(str, buf), ('hello guys!', 12))

    def test_tuples(self) -> None:
        buf = Buffer.of(tuple[Int8, Int16], (0x12, 0x0080), settings=self.settings)
        self.assertEqual(bytes(buf), b'\x12\x80\x00')
        self.assertEqual(unpack_with_size(tuple[Int8, Int16], buf), ((0x12, 0x0080), 3))

        buf = Buffer.of(tuple[Int8, str], (0x12, 'hello'), settings=self.settings)
        self.assertEqual(bytes(buf), b'\x12\x05hello')
        self.assertEqual(unpack_with_size(tuple[Int8, str], buf), ((0x12, 'hello'), 7))

    def test_sequences(self) -> None:
        buf = Buffer.of(list[Int8], [0x12, 0x34, 0x56], settings=self.settings)
        self.assertEqual(bytes(buf), b'\x03\x12\x34\x56')
        self.assertEqual(unpack_with_size(list[Int8], buf), ([0x12, 0x34, 0x56], 4))

        buf = Buffer.of(list[str], ['hello', 'guys', '!'], settings=self.settings)
        self.assertEqual(buf.size, 14)
        self.assertEqual(bytes(buf), b'\x03\x05hello\x04guys\x01!')
        self.assertEqual(unpack(list[str], buf), ['hello', 'guys', '!'])

        value = [(0x12, 'hello'), (0x34, 'guys'), (0x56, '!')]
        buf = Buffer.of(list[tuple[Int8, str]], value, settings=self.settings)
        self.assertEqual(buf.size, 17)
        self.assertEqual(bytes(buf), b'\x03\x12\x05hello\x34\x04guys\x56\x01!')
        self.assertEqual(unpack_with_size(list[tuple[Int8, str]], buf), (value, 17))

    def test_multiple_values(self) -> None:
        types = [Int8, str, list[UInt16], bool]
        values = [-1, 'ab', [1, 2], True]
        buf = Buffer(types, values, settings=self.settings)
        self.assertEqual(bytes(buf), b'\xff\x02ab\x02\x01\x00\x02\x00\x01')
        self.assertEqual(buf.size, calc_size(types, values))
        self.assertEqual(unpack(tuple[Int8, str, list[UInt16], bool], buf), tuple(values))

    def test_empty(self) -> None:
        buf = Buffer([], [], settings=self.settings)
        self.assertEqual(buf.size, 0)
        self.assertEqual(bytes(buf), b'')
        self.assertEqual(unpack(tuple[()], buf), ())

    def test_mismatched_lengths(self) -> None:
        with self.assertRaises(ValueError):
            Buffer([Int8, Int8], [1], settings=self.settings)
        with self.assertRaises(ValueError):
            calc_size([Int8], [])

    def test_limits(self) -> None:
        Buffer.of(str, 'x' * 255, settings=self.settings)
        with self.assertRaises(ValueTooLargeError):
            Buffer.of(str, 'x' * 256, settings=self.settings)
        with self.assertRaises(ValueTooLargeError):
            Buffer.of(list[Int8], [0] * 256, settings=self.settings)
        # the size is still computed for oversize values
        self.assertEqual(calc_size([str], ['x' * 256]), 257)

    def test_max_buffer_size(self) -> None:
        settings = PackSettings(MAX_BUFFER_SIZE=4)
        Buffer.of(Int32, 1, settings=settings)
        with self.assertRaises(ValueTooLargeError):
            Buffer([Int32, Int8], [1, 1], settings=settings)

    def test_data_is_read_only(self) -> None:
        buf = Buffer.of(UInt8, 1, settings=self.settings)
        self.assertTrue(buf.data.readonly)
        with self.assertRaises(TypeError):
            buf.data[0] = 2
        copy = buf.to_bytes()
        self.assertEqual(copy, b'\x01')

    def test_equality(self) -> None:
        a = Buffer.of(Int16, 1, settings=self.settings)
        b = pack([Int8, Int8], [1, 0], settings=self.settings)
        c = Buffer.of(Int16, 2, settings=self.settings)
        self.assertEqual(a, b)
        self.assertEqual(hash(a), hash(b))
        self.assertNotEqual(a, c)
        self.assertNotEqual(a, b'\x01\x00')
        self.assertEqual(len({a, b, c}), 2)

    def test_repr(self) -> None:
        buf = Buffer.of(tuple[Int8, Int16], (0x12, 0x0080), settings=self.settings)
        self.assertEqual(repr(buf), 'Buffer(size=3, data=128000)')

    def test_invalid_values(self) -> None:
        with self.assertRaises(TypeError):
            Buffer.of(Int8, 'a', settings=self.settings)
        with self.assertRaises(ValueError):
            Buffer.of(UInt8, 256, settings=self.settings)

    def test_unordered_collections_are_rejected(self) -> None:
        # a dict would only keep its keys and a set has no stable order
        with self.assertRaises(TypeError):
            Buffer.of(list[UInt8], {1: 'a', 2: 'b'}, settings=self.settings)
        with self.assertRaises(TypeError):
            Buffer.of(list[str], {'b', 'a', 'c'}, settings=self.settings)
        with self.assertRaises(TypeError):
            Buffer.of(Int8, True, settings=self.settings)


def test_unpack_offset() -> None:
    data = b'\xaa\x03\x12\x34\x56\xbb'
    assert unpack(list[Int8], data, offset=1) == [0x12, 0x34, 0x56]
    assert unpack_with_size(list[Int8], data, offset=1) == ([0x12, 0x34, 0x56], 4)
    assert unpack(UInt8, data, offset=5) == 0xbb


def test_unpack_consecutive_values() -> None:
    data = b'\x02hi\x05\x00'
    first, consumed = unpack_with_size(str, data)
    second = unpack(UInt16, data, offset=consumed)
    assert (first, second) == ('hi', 5)


def test_unpack_trailing_data() -> None:
    data = b'\x01\x02'
    assert unpack(Int8, data) == 1
    assert unpack(Int8, data, exact=False) == 1
    with pytest.raises(BadDataError):
        unpack(Int8, data, exact=True)
    with pytest.raises(BadDataError):
        unpack_with_size(Int8, data, exact=True)
    with pytest.raises(BadDataError):
        unpack(Int8, data, settings=PackSettings(ALLOW_TRAILING_DATA=False))
    assert unpack(Int8, data, settings=PackSettings(ALLOW_TRAILING_DATA=True)) == 1


def test_unpack_too_short() -> None:
    with pytest.raises(BufferTooShortError):
        unpack(Int32, b'\x01\x02\x03')
    with pytest.raises(BufferTooShortError):
        unpack(list[Int8], b'\x03\x12\x34')
    with pytest.raises(BufferTooShortError):
        unpack(str, b'\x0bhello')
    with pytest.raises(BufferTooShortError):
        unpack(Int8, b'\x01', offset=1)


def test_unpack_accepts_bytes_like() -> None:
    for data in (b'\x34\x12', bytearray(b'\x34\x12'), memoryview(b'\x34\x12')):
        assert unpack(UInt16, data) == 0x1234
