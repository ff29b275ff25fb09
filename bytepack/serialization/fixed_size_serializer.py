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

from typing_extensions import override

from .exceptions import SerializationError
from .serializer import Serializer
from .types import BytesLike


class FixedSizeSerializer(Serializer):
    """Serializer that writes into a region allocated up-front with an exact size.

    The region never grows: a write that would not fit raises `SerializationError`, and `finalize` refuses to return
    a region that was not completely filled. Either case means the size used for the allocation does not match what
    was written.

    >>> se = FixedSizeSerializer(3)
    >>> se.write_byte(0x03)
    >>> se.write_bytes(b'ab')
    >>> bytes(se.finalize())
    b'\\x03ab'
    """

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError('size cannot be negative')
        self._data = bytearray(size)
        self._pos: int = 0

    def _reserve(self, n: int) -> int:
        start = self._pos
        end = start + n
        if end > len(self._data):
            raise SerializationError(f'write of {n} bytes at {start} exceeds the destination size {len(self._data)}')
        self._pos = end
        return start

    @override
    def finalize(self) -> bytearray:
        if self._pos != len(self._data):
            raise SerializationError(f'destination not filled: wrote {self._pos} of {len(self._data)} bytes')
        result = self._data
        del self._data
        del self._pos
        return result

    @override
    def cur_pos(self) -> int:
        return self._pos

    @override
    def write_byte(self, data: int) -> None:
        if not 0 <= data <= 0xff:
            raise ValueError('byte must be in range(0, 256)')
        start = self._reserve(1)
        self._data[start] = data

    @override
    def write_bytes(self, data: BytesLike) -> None:
        view = memoryview(data).cast('B')
        start = self._reserve(len(view))
        self._data[start:self._pos] = view
