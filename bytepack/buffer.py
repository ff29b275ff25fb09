# Copyright 2025 Hathor Labs
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

r"""
The `Buffer` value and the decoding entry points.

A buffer is built from parallel sequences of annotations and values. Each value is encoded with the shape of its
annotation and the encodings are concatenated in argument order, with nothing in between:

>>> from bytepack.types import Int8, Int16
>>> buf = Buffer([Int8, str], [0x12, 'hello'])
>>> buf
Buffer(size=7, data=120568656c6c6f)

Since a fixed tuple carries no prefix, the whole buffer decodes as a tuple of the same annotations:

>>> unpack(tuple[Int8, str], buf)
(18, 'hello')

Decoding does not need a `Buffer`, any bytes will do, `unpack_with_size` also reports how many bytes were used:

>>> unpack_with_size(Int16, b'\xff\xff\x00', exact=False)
(-1, 2)
"""

from collections.abc import Sequence
from typing import Any, Optional, Union

from bytepack.conf.get_settings import get_global_settings
from bytepack.conf.settings import PackSettings
from bytepack.serialization import Deserializer, Serializer, ValueTooLargeError
from bytepack.serialization.types import BytesLike
from bytepack.shapes import calc_values_size, decode_value, encode_values, make_shape


class Buffer:
    """An immutable, exact-sized byte region holding the encoding of a list of values.

    All the work happens on construction: every annotation is classified, the total size is computed, a region of
    exactly that size is allocated and filled. The bytes never change afterwards.
    """

    __slots__ = ('_data',)

    _data: bytes

    def __init__(self, types: Sequence[Any], values: Sequence[Any], *, settings: Optional[PackSettings] = None) -> None:
        if len(types) != len(values):
            raise ValueError(f'got {len(types)} types for {len(values)} values')
        if settings is None:
            settings = get_global_settings()

        shapes = [make_shape(type_) for type_ in types]
        size = calc_values_size(shapes, values)
        if settings.MAX_BUFFER_SIZE is not None and size > settings.MAX_BUFFER_SIZE:
            raise ValueTooLargeError(f'buffer of {size} bytes exceeds MAX_BUFFER_SIZE ({settings.MAX_BUFFER_SIZE})')

        serializer = Serializer.build_fixed_size_serializer(size)
        encode_values(serializer, shapes, values)
        # XXX: finalize checks that exactly `size` bytes were written
        self._data = bytes(serializer.finalize())

    @classmethod
    def of(cls, type_: Any, value: Any, *, settings: Optional[PackSettings] = None) -> 'Buffer':
        """Build a buffer with a single value."""
        return cls([type_], [value], settings=settings)

    @property
    def size(self) -> int:
        return len(self._data)

    @property
    def data(self) -> memoryview:
        """Read-only view of the bytes, no copy is made."""
        return memoryview(self._data)

    def to_bytes(self) -> bytes:
        return bytes(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __bytes__(self) -> bytes:
        return self.to_bytes()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Buffer):
            return NotImplemented
        return self._data == other._data

    def __hash__(self) -> int:
        return hash(self._data)

    def __repr__(self) -> str:
        return f'Buffer(size={self.size}, data={self._data.hex()})'


def pack(types: Sequence[Any], values: Sequence[Any], *, settings: Optional[PackSettings] = None) -> Buffer:
    return Buffer(types, values, settings=settings)


def calc_size(types: Sequence[Any], values: Sequence[Any]) -> int:
    """Number of bytes `Buffer(types, values)` would hold, nothing is allocated.

    Lengths are not checked against the 1-byte prefixes here, the result for a text of 256 bytes is 257 even though
    building that buffer fails.
    """
    if len(types) != len(values):
        raise ValueError(f'got {len(types)} types for {len(values)} values')
    return calc_values_size([make_shape(type_) for type_ in types], values)


def _build_deserializer(data: Union[Buffer, BytesLike], offset: int) -> Deserializer:
    if isinstance(data, Buffer):
        data = data.data
    return Deserializer.build_bytes_deserializer(data, offset=offset)


def unpack_with_size(
    type_: Any,
    data: Union[Buffer, BytesLike],
    *,
    offset: int = 0,
    exact: bool = False,
) -> tuple[Any, int]:
    """ Decode one value of `type_` starting at `offset`, returns the value and how many bytes it used.

    By default bytes after the value are left alone, so a value embedded in larger data can be decoded and the next
    one found at `offset + consumed`.
    """
    shape = make_shape(type_)
    deserializer = _build_deserializer(data, offset)
    value = decode_value(deserializer, shape)
    consumed = deserializer.cur_pos()
    if exact:
        deserializer.finalize()
    return value, consumed


def unpack(
    type_: Any,
    data: Union[Buffer, BytesLike],
    *,
    offset: int = 0,
    exact: Optional[bool] = None,
    settings: Optional[PackSettings] = None,
) -> Any:
    """ Decode one value of `type_` starting at `offset`.

    When `exact` is true any byte left after the value raises `BadDataError`. When it is not given the
    `ALLOW_TRAILING_DATA` setting decides.
    """
    if exact is None:
        if settings is None:
            settings = get_global_settings()
        exact = not settings.ALLOW_TRAILING_DATA
    value, _ = unpack_with_size(type_, data, offset=offset, exact=exact)
    return value
