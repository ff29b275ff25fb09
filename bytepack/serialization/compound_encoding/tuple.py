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
In Python a tuple type can be used in annotations in 2 different ways:

1. `tuple[A, B, C]`: known fixed length and heterogeneous types
2. `tuple[X, ...]`: variable length and homogeneous type

This module only implements encoding of the first case, the second case can be encoded using the collection encoder.

There actually isn't a "format" per-se, the encoding of `tuple[A, B, C]` is just the encoding of A concatenated with B
concatenated with C, with no prefix. Both sides must already agree on the arity and on the type of each slot.

>>> from bytepack.serialization.encoding.int import encode_int, decode_int
>>> from bytepack.serialization.encoding.utf8 import encode_utf8, decode_utf8
>>> def encode_int8(se, value):
...     encode_int(se, value, length=1, signed=True)
>>> def decode_int8(de):
...     return decode_int(de, length=1, signed=True)
>>> se = Serializer.build_bytes_serializer()
>>> encode_tuple(se, (0x12, 'hello'), (encode_int8, encode_utf8))
>>> bytes(se.finalize()).hex()
'120568656c6c6f'

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('120568656c6c6f'))
>>> decode_tuple(de, (decode_int8, decode_utf8))
(18, 'hello')
"""

from typing import Any

from typing_extensions import TypeVarTuple, Unpack

from bytepack.serialization import Deserializer, Serializer

from . import Decoder, Encoder

Ts = TypeVarTuple('Ts')


def encode_tuple(serializer: Serializer, values: tuple[Unpack[Ts]], encoders: tuple[Encoder[Any], ...]) -> None:
    if len(values) != len(encoders):
        raise TypeError(f'expected a tuple of {len(encoders)} values, got {len(values)}')
    # mypy can't track tuple element-wise mapping yet, safe due to length check above
    for value, encoder in zip(values, encoders):  # type: ignore
        encoder(serializer, value)


def decode_tuple(deserializer: Deserializer, decoders: tuple[Decoder[Any], ...]) -> tuple[Unpack[Ts]]:
    return tuple(decoder(deserializer) for decoder in decoders)
