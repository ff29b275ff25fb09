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

from bytepack.shapes.classify import make_shape
from bytepack.shapes.codec import calc_size, calc_values_size, decode_value, encode_value, encode_values
from bytepack.shapes.shape import (
    SHAPE_CLASSES,
    ScalarShape,
    SequenceShape,
    Shape,
    ShapeKind,
    TextShape,
    TupleShape,
    is_shape,
)

__all__ = [
    'SHAPE_CLASSES',
    'ScalarShape',
    'SequenceShape',
    'Shape',
    'ShapeKind',
    'TextShape',
    'TupleShape',
    'calc_size',
    'calc_values_size',
    'decode_value',
    'encode_value',
    'encode_values',
    'is_shape',
    'make_shape',
]
