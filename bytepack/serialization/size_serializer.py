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

from .consts import LENGTH_PREFIX_SIZE
from .serializer import Serializer
from .types import BytesLike


class SizeSerializer(Serializer):
    """Serializer that measures instead of writing.

    Running an encoder against this serializer gives the exact number of bytes the same encoder would write to any
    other serializer, without storing any of them. Length prefixes are counted but not range-checked, so the size of
    an oversize text or sequence is still `1 + length`; the limit is enforced by the serializers that write.

    >>> se = SizeSerializer()
    >>> se.write_byte(0x12)
    >>> se.write_bytes(b'hello')
    >>> se.write_length_prefix(300)
    >>> se.cur_pos()
    7
    """

    def __init__(self) -> None:
        self._pos: int = 0

    @override
    def cur_pos(self) -> int:
        return self._pos

    @override
    def write_byte(self, data: int) -> None:
        self._pos += 1

    @override
    def write_bytes(self, data: BytesLike) -> None:
        self._pos += memoryview(data).nbytes

    @override
    def write_length_prefix(self, length: int) -> None:
        self._pos += LENGTH_PREFIX_SIZE
