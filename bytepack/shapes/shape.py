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

from dataclasses import dataclass
from enum import Enum, unique
from typing import TYPE_CHECKING, Any, Callable, Literal, TypeAlias

from bytepack.serialization.types import BytesLike

if TYPE_CHECKING:
    from bytepack.serialization import Deserializer, Serializer


@unique
class ShapeKind(Enum):
    """The closed set of shape categories, each one maps to exactly one wire layout."""
    SCALAR_1 = 'scalar-1'
    SCALAR_2 = 'scalar-2'
    SCALAR_4 = 'scalar-4'
    TEXT = 'text'
    SEQUENCE = 'sequence'
    FIXED_TUPLE = 'fixed-tuple'


class _ShapeMixin:
    """Shortcuts shared by every shape, they all go through the single encode/decode traversal."""

    __slots__ = ()

    def calc_size(self, value: Any, /) -> int:
        """Exact number of bytes `value` occupies when encoded with this shape."""
        from bytepack.shapes.codec import calc_size
        return calc_size(self, value)  # type: ignore[arg-type]

    def serialize(self, serializer: Serializer, value: Any, /) -> None:
        from bytepack.shapes.codec import encode_value
        encode_value(serializer, self, value)  # type: ignore[arg-type]

    def deserialize(self, deserializer: Deserializer, /) -> Any:
        from bytepack.shapes.codec import decode_value
        return decode_value(deserializer, self)  # type: ignore[arg-type]

    def to_bytes(self, value: Any, /) -> bytes:
        """ Shortcut to quickly convert a value to `bytes` in a single pass, without sizing it first.
        """
        from bytepack.serialization import Serializer
        serializer = Serializer.build_bytes_serializer()
        self.serialize(serializer, value)
        return bytes(serializer.finalize())

    def from_bytes(self, data: BytesLike, /) -> Any:
        """ Shortcut to parse a value that must use all of `data`.
        """
        from bytepack.serialization import Deserializer
        deserializer = Deserializer.build_bytes_deserializer(data)
        value = self.deserialize(deserializer)
        deserializer.finalize()
        return value


@dataclass(frozen=True, slots=True)
class ScalarShape(_ShapeMixin):
    """Fixed-width integer, `width` raw bytes in little-endian order.

    A boolean scalar is a 1-byte unsigned scalar restricted to 0 and 1 that decodes to `bool`.
    """
    width: Literal[1, 2, 4]
    signed: bool
    boolean: bool = False

    def __post_init__(self) -> None:
        if self.width not in (1, 2, 4):
            raise ValueError(f'invalid scalar width: {self.width}')
        if self.boolean and (self.width != 1 or self.signed):
            raise ValueError('a boolean scalar must be 1 unsigned byte')

    @property
    def kind(self) -> ShapeKind:
        match self.width:
            case 1:
                return ShapeKind.SCALAR_1
            case 2:
                return ShapeKind.SCALAR_2
            case 4:
                return ShapeKind.SCALAR_4
        raise AssertionError('unreachable')

    def lower_bound(self) -> int:
        if self.signed:
            return -(2**(self.width * 8 - 1))
        return 0

    def upper_bound(self) -> int:
        if self.boolean:
            return 1
        if self.signed:
            return 2**(self.width * 8 - 1) - 1
        return 2**(self.width * 8) - 1


@dataclass(frozen=True, slots=True)
class TextShape(_ShapeMixin):
    """Length-prefixed text, `binary=False` is a UTF-8 `str`, `binary=True` is raw `bytes`."""
    binary: bool = False

    @property
    def kind(self) -> ShapeKind:
        return ShapeKind.TEXT


@dataclass(frozen=True, slots=True)
class SequenceShape(_ShapeMixin):
    """Count-prefixed homogeneous sequence, decoded into `builder` (either `list` or `tuple`)."""
    item: Shape
    builder: type[list] | type[tuple] = list

    @property
    def kind(self) -> ShapeKind:
        return ShapeKind.SEQUENCE


@dataclass(frozen=True, slots=True)
class TupleShape(_ShapeMixin):
    """Fixed-arity heterogeneous record, slots are concatenated without any prefix.

    When `factory` is set (for named tuples) decoded slots are passed to it positionally, otherwise a plain `tuple`
    is built.
    """
    slots: tuple[Shape, ...]
    factory: Callable[..., tuple] | None = None

    @property
    def kind(self) -> ShapeKind:
        return ShapeKind.FIXED_TUPLE


"""A type alias for the closed union of every shape, code dispatching on shapes must handle all of them."""
Shape: TypeAlias = ScalarShape | TextShape | SequenceShape | TupleShape

SHAPE_CLASSES: tuple[type, ...] = (ScalarShape, TextShape, SequenceShape, TupleShape)


def is_shape(obj: object) -> bool:
    return isinstance(obj, SHAPE_CLASSES)
