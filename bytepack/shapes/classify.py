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

"""
Classification of static type annotations into shapes.

>>> from bytepack.types import Int8, Int16
>>> make_shape(tuple[Int8, Int16]).to_bytes((0x12, 0x0080)).hex()
'128000'
>>> make_shape(list[str]).kind
<ShapeKind.SEQUENCE: 'sequence'>
>>> make_shape(int)
Traceback (most recent call last):
    ...
bytepack.serialization.exceptions.UnsupportedTypeError: int has no fixed width, annotate it with one of bytepack.types
"""

from collections.abc import Mapping, Sequence as AbcSequence
from functools import cache
from types import GenericAlias
from typing import Any, NamedTuple, get_args, get_origin, get_type_hints

from structlog import get_logger

from bytepack.serialization import UnsupportedTypeError
from bytepack.shapes.shape import ScalarShape, SequenceShape, Shape, TextShape, TupleShape, is_shape
from bytepack.types import Int8, Int16, Int32, UInt8, UInt16, UInt32

logger = get_logger()

SCALAR_TYPE_MAP: Mapping[Any, Shape] = {
    Int8: ScalarShape(1, signed=True),
    UInt8: ScalarShape(1, signed=False),
    Int16: ScalarShape(2, signed=True),
    UInt16: ScalarShape(2, signed=False),
    Int32: ScalarShape(4, signed=True),
    UInt32: ScalarShape(4, signed=False),
    bool: ScalarShape(1, signed=False, boolean=True),
    str: TextShape(binary=False),
    bytes: TextShape(binary=True),
}

# types that are classified as if they were another type
TYPE_ALIAS_MAP: Mapping[type, type] = {
    bytearray: bytes,
}


def pretty_type(type_: Any) -> str:
    """ Shows a cleaner string representation for a type.

    >>> pretty_type(bytes)
    'bytes'
    >>> pretty_type(list[bytes])
    'list[bytes]'
    """
    if isinstance(type_, GenericAlias) or not hasattr(type_, '__name__'):
        return str(type_)
    return type_.__name__


def _is_namedtuple(type_: Any) -> bool:
    if not isinstance(type_, type) or not issubclass(type_, tuple):
        return False
    return NamedTuple in getattr(type_, '__orig_bases__', ()) or hasattr(type_, '_fields')


@cache
def make_shape(type_: Any, /) -> Shape:
    """ Build the shape that a value annotated with `type_` is encoded with.

    A `Shape` instance is returned as is, so hand built shapes can be used anywhere an annotation is accepted. The
    result is cached, the same annotation always maps to the same shape.
    """
    if is_shape(type_):
        return type_
    if isinstance(type_, str):
        raise UnsupportedTypeError('string annotations are not supported')

    if type_ in SCALAR_TYPE_MAP:
        return SCALAR_TYPE_MAP[type_]

    if type_ in TYPE_ALIAS_MAP:
        aliased_type = TYPE_ALIAS_MAP[type_]
        logger.debug('type replaced', old=pretty_type(type_), new=pretty_type(aliased_type))
        return make_shape(aliased_type)

    # NewType over anything else, including other NewTypes
    supertype = getattr(type_, '__supertype__', None)
    if supertype is not None:
        shape = make_shape(supertype)
        logger.debug('new type resolved', type=pretty_type(type_), supertype=pretty_type(supertype))
        return shape

    if type_ is int:
        raise UnsupportedTypeError('int has no fixed width, annotate it with one of bytepack.types')

    origin = get_origin(type_)
    args = get_args(type_)

    if origin is list or origin is AbcSequence:
        if len(args) != 1:
            raise UnsupportedTypeError(f'expected exactly 1 item type: {pretty_type(type_)}')
        item_type, = args
        return SequenceShape(make_shape(item_type), list)

    if origin is tuple:
        if len(args) == 2 and args[1] is Ellipsis:
            return SequenceShape(make_shape(args[0]), tuple)
        if Ellipsis in args:
            raise UnsupportedTypeError(f'invalid use of ... in {pretty_type(type_)}')
        # `tuple[()]` has no args, it is the empty fixed tuple
        return TupleShape(tuple(make_shape(arg) for arg in args))

    if origin is not None:
        raise UnsupportedTypeError(f'type {pretty_type(type_)} is not supported')

    if _is_namedtuple(type_):
        hints = get_type_hints(type_)
        try:
            slot_types = [hints[field_name] for field_name in type_._fields]
        except KeyError as e:
            raise UnsupportedTypeError(f'{pretty_type(type_)} has a field without annotation: {e.args[0]}')
        logger.debug('named tuple classified', type=pretty_type(type_), fields=list(type_._fields))
        return TupleShape(tuple(make_shape(slot_type) for slot_type in slot_types), type_)

    if type_ in (list, tuple, AbcSequence):
        raise UnsupportedTypeError(f'{pretty_type(type_)} needs a type argument')

    raise UnsupportedTypeError(f'type {pretty_type(type_)} is not supported')
