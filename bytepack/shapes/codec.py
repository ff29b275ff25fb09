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
The single recursive traversal behind sizing, encoding and decoding.

`encode_value` is written once against the `Serializer` interface, which sink it is given decides the action: a
`SizeSerializer` measures and a writing serializer stores bytes. Since both phases run the exact same code they cannot
disagree on the layout. `decode_value` is the mirror traversal. Both are a total match over the `Shape` union.

>>> from bytepack.shapes.shape import ScalarShape, SequenceShape, TextShape, TupleShape
>>> int8 = ScalarShape(1, signed=True)
>>> shape = SequenceShape(TupleShape((int8, TextShape())))
>>> value = [(0x12, 'hello'), (0x34, 'guys'), (0x56, '!')]
>>> calc_size(shape, value)
17
>>> data = shape.to_bytes(value)
>>> data.hex(' ')
'03 12 05 68 65 6c 6c 6f 34 04 67 75 79 73 56 01 21'
>>> shape.from_bytes(data)
[(18, 'hello'), (52, 'guys'), (86, '!')]
"""

from collections.abc import Sequence
from typing import Any

from typing_extensions import assert_never

from bytepack.serialization import Deserializer, Serializer
from bytepack.serialization.compound_encoding.collection import decode_collection, encode_collection
from bytepack.serialization.compound_encoding.tuple import decode_tuple, encode_tuple
from bytepack.serialization.encoding.bool import decode_bool, encode_bool
from bytepack.serialization.encoding.bytes import decode_bytes, encode_bytes
from bytepack.serialization.encoding.int import decode_int, encode_int
from bytepack.serialization.encoding.utf8 import decode_utf8, encode_utf8
from bytepack.shapes.shape import ScalarShape, SequenceShape, Shape, TextShape, TupleShape


def _expected(what: str, value: Any) -> TypeError:
    return TypeError(f'expected {what}, got {type(value).__name__}')


def encode_value(serializer: Serializer, shape: Shape, value: Any) -> None:
    """ Encode `value` according to `shape`.

    Raises `TypeError` when the value does not have the Python type the shape expects, `ValueError` when a scalar is
    out of range, and `ValueTooLargeError` (only from writing serializers) when a length prefix would overflow.
    """
    match shape:
        case ScalarShape(boolean=True):
            if not isinstance(value, bool):
                raise _expected('bool', value)
            encode_bool(serializer, value)
        case ScalarShape():
            if not isinstance(value, int) or isinstance(value, bool):
                raise _expected('int', value)
            encode_int(serializer, value, length=shape.width, signed=shape.signed)
        case TextShape(binary=True):
            if not isinstance(value, (bytes, bytearray, memoryview)):
                raise _expected('bytes', value)
            encode_bytes(serializer, value)
        case TextShape():
            if not isinstance(value, str):
                raise _expected('str', value)
            encode_utf8(serializer, value)
        case SequenceShape():
            if not isinstance(value, Sequence) or isinstance(value, str):
                raise _expected('a sequence', value)
            encode_collection(serializer, value, shape.item.serialize)
        case TupleShape():
            if not isinstance(value, (tuple, list)):
                raise _expected('tuple', value)
            encode_tuple(serializer, tuple(value), tuple(slot.serialize for slot in shape.slots))
        case _:
            assert_never(shape)


def decode_value(deserializer: Deserializer, shape: Shape) -> Any:
    """ Decode one value of `shape`, consuming exactly the bytes it occupies.

    Nothing in the bytes identifies the shape, decoding with a different shape than the one used to encode is a
    caller error that may raise or silently produce a different value.
    """
    match shape:
        case ScalarShape(boolean=True):
            return decode_bool(deserializer)
        case ScalarShape():
            return decode_int(deserializer, length=shape.width, signed=shape.signed)
        case TextShape(binary=True):
            return decode_bytes(deserializer)
        case TextShape():
            return decode_utf8(deserializer)
        case SequenceShape():
            return decode_collection(deserializer, shape.item.deserialize, shape.builder)
        case TupleShape():
            values = decode_tuple(deserializer, tuple(slot.deserialize for slot in shape.slots))
            if shape.factory is not None:
                return shape.factory(*values)
            return values
        case _:
            assert_never(shape)


def encode_values(serializer: Serializer, shapes: Sequence[Shape], values: Sequence[Any]) -> None:
    """ Encode each value with its shape, back-to-back, with nothing between them.
    """
    if len(shapes) != len(values):
        raise ValueError(f'got {len(shapes)} types for {len(values)} values')
    for shape, value in zip(shapes, values):
        encode_value(serializer, shape, value)


def calc_size(shape: Shape, value: Any) -> int:
    serializer = Serializer.build_size_serializer()
    encode_value(serializer, shape, value)
    return serializer.cur_pos()


def calc_values_size(shapes: Sequence[Shape], values: Sequence[Any]) -> int:
    serializer = Serializer.build_size_serializer()
    encode_values(serializer, shapes, values)
    return serializer.cur_pos()
