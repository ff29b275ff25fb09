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

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from .consts import MAX_LENGTH_PREFIX_VALUE
from .exceptions import ValueTooLargeError
from .types import BytesLike

if TYPE_CHECKING:
    from .bytes_serializer import BytesSerializer
    from .fixed_size_serializer import FixedSizeSerializer
    from .size_serializer import SizeSerializer


class Serializer(ABC):
    """A sink of bytes.

    Encoders are written once against this interface, which sink they are given decides whether bytes are actually
    stored (`BytesSerializer`, `FixedSizeSerializer`) or only counted (`SizeSerializer`).
    """

    def finalize(self) -> BytesLike:
        """Get the resulting byte sequence, the serializer cannot be reused after this."""
        raise TypeError('this serializer does not support finalization')

    @abstractmethod
    def cur_pos(self) -> int:
        raise NotImplementedError

    @abstractmethod
    def write_byte(self, data: int) -> None:
        """Write a single byte."""
        raise NotImplementedError

    @abstractmethod
    def write_bytes(self, data: BytesLike) -> None:
        # XXX: it is recommended that implementors of Serializer specialize this implementation
        for byte in bytes(memoryview(data)):
            self.write_byte(byte)

    def write_length_prefix(self, length: int) -> None:
        """Write the 1-byte length prefix used by text and sequences.

        Lengths that do not fit in a byte are rejected with `ValueTooLargeError`, they are never truncated.
        """
        if length < 0:
            raise ValueError('length cannot be negative')
        if length > MAX_LENGTH_PREFIX_VALUE:
            raise ValueTooLargeError(f'length {length} does not fit in a 1-byte prefix (max {MAX_LENGTH_PREFIX_VALUE})')
        self.write_byte(length)

    @staticmethod
    def build_bytes_serializer() -> BytesSerializer:
        from .bytes_serializer import BytesSerializer
        return BytesSerializer()

    @staticmethod
    def build_size_serializer() -> SizeSerializer:
        from .size_serializer import SizeSerializer
        return SizeSerializer()

    @staticmethod
    def build_fixed_size_serializer(size: int) -> FixedSizeSerializer:
        from .fixed_size_serializer import FixedSizeSerializer
        return FixedSizeSerializer(size)
