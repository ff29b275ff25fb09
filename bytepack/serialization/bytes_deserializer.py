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

from .deserializer import Deserializer
from .exceptions import BadDataError, BufferTooShortError
from .types import BytesLike


class BytesDeserializer(Deserializer):
    """Simple implementation of a Deserializer to parse values from a byte sequence.

    This implementation maintains a memoryview that is shortened as the bytes are read, so it can never read past the
    end of the data it was given. The data is borrowed, not copied.

    >>> de = BytesDeserializer(b'\\x01\\x02\\x03', offset=1)
    >>> de.read_byte()
    2
    >>> de.cur_pos()
    1
    >>> try:
    ...     de.read_bytes(2)
    ... except BufferTooShortError as e:
    ...     print(*e.args)
    need 2 bytes at position 1, only 1 available
    """

    def __init__(self, data: BytesLike, *, offset: int = 0) -> None:
        view = memoryview(data).cast('B')
        if not 0 <= offset <= len(view):
            raise ValueError(f'offset {offset} out of range for {len(view)} bytes')
        self._view = view[offset:]
        self._pos: int = 0

    @override
    def finalize(self) -> None:
        if not self.is_empty():
            raise BadDataError(f'trailing data: {len(self._view)} bytes left after position {self._pos}')
        del self._view

    @override
    def cur_pos(self) -> int:
        return self._pos

    @override
    def is_empty(self) -> bool:
        # XXX: least amount of OPs, "not" converts to bool with the correct semantics of "is empty"
        return not self._view

    @override
    def peek_byte(self) -> int:
        if not len(self._view):
            raise BufferTooShortError(f'need 1 byte at position {self._pos}, none available')
        return self._view[0]

    @override
    def peek_bytes(self, n: int) -> memoryview:
        if n < 0:
            raise ValueError('value cannot be negative')
        if len(self._view) < n:
            raise BufferTooShortError(f'need {n} bytes at position {self._pos}, only {len(self._view)} available')
        return self._view[:n]

    @override
    def read_byte(self) -> int:
        b = self.peek_byte()
        self._view = self._view[1:]
        self._pos += 1
        return b

    @override
    def read_bytes(self, n: int) -> memoryview:
        b = self.peek_bytes(n)
        self._view = self._view[n:]
        self._pos += n
        return b
