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
Compact binary packing of typed values.

Values are packed back-to-back using only as many bytes as their annotated types need, no type information is stored
in the bytes, so the reader must know the exact types used by the writer.
"""

from bytepack.buffer import Buffer, calc_size, pack, unpack, unpack_with_size
from bytepack.serialization import (
    BadDataError,
    BufferTooShortError,
    SerializationError,
    UnsupportedTypeError,
    ValueTooLargeError,
)
from bytepack.shapes import Shape, ShapeKind, make_shape
from bytepack.types import Int8, Int16, Int32, UInt8, UInt16, UInt32
from bytepack.version import __version__

__all__ = [
    'Buffer',
    'calc_size',
    'pack',
    'unpack',
    'unpack_with_size',
    'BadDataError',
    'BufferTooShortError',
    'SerializationError',
    'UnsupportedTypeError',
    'ValueTooLargeError',
    'Shape',
    'ShapeKind',
    'make_shape',
    'Int8',
    'UInt8',
    'Int16',
    'UInt16',
    'Int32',
    'UInt32',
    '__version__',
]
