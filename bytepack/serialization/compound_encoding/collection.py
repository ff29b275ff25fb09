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
A collection is basically any value that has a known size and is iterable.

Layout: [N: 1 unsigned byte][value_0]...[value_N-1]

>>> from bytepack.serialization.encoding.utf8 import encode_utf8, decode_utf8
>>> se = Serializer.build_bytes_serializer()
>>> value = ['hello', 'guys', '!']
>>> encode_collection(se, value, encode_utf8)
>>> bytes(se.finalize()).hex()
'030568656c6c6f04677579730121'

Breakdown of the result:

    03: the element count
    0568656c6c6f: 'hello' (with length prefix)
    0467757973: 'guys' (with length prefix)
    0121: '!' (with length prefix)

When decoding, the builder can be any compatible collection. The previous example encoded a `list`, but when
decoding a `tuple` could be used, it only matters that the collection can be initialized with an `Iterable[T]`.

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('030568656c6c6f04677579730121'))
>>> decode_collection(de, decode_utf8, tuple)
('hello', 'guys', '!')
>>> de.finalize()

At most 255 elements can be counted by the prefix:

>>> from bytepack.serialization.encoding.bool import encode_bool
>>> se = Serializer.build_bytes_serializer()
>>> try:
...     encode_collection(se, [True] * 256, encode_bool)
... except ValueTooLargeError as e:
...     print(*e.args)
length 256 does not fit in a 1-byte prefix (max 255)
"""

from collections.abc import Collection, Iterable
from typing import Callable, TypeVar

from bytepack.serialization import Deserializer, Serializer, ValueTooLargeError  # noqa: F401

from . import Decoder, Encoder

T = TypeVar('T')
R = TypeVar('R', bound=Collection)


def encode_collection(serializer: Serializer, values: Collection[T], encoder: Encoder[T]) -> None:
    serializer.write_length_prefix(len(values))
    for value in values:
        encoder(serializer, value)


def decode_collection(
    deserializer: Deserializer,
    decoder: Decoder[T],
    builder: Callable[[Iterable[T]], R],
) -> R:
    length = deserializer.read_length_prefix()
    return builder(decoder(deserializer) for _ in range(length))
