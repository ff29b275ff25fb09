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
Compound encoders: values made of other values.

A compound encoder writes its own framing (a count prefix for collections, nothing for fixed tuples) and hands every
element to an `Encoder`/`Decoder` it receives as an argument. For a `list[T]` that is the encoder of `T`; for a
nested shape it is the shape's bound `serialize`/`deserialize`.
"""

from typing import Protocol, TypeVar

from bytepack.serialization.deserializer import Deserializer
from bytepack.serialization.serializer import Serializer

T_co = TypeVar('T_co', covariant=True)
T_contra = TypeVar('T_contra', contravariant=True)


class Decoder(Protocol[T_co]):
    def __call__(self, deserializer: Deserializer, /) -> T_co:
        ...


class Encoder(Protocol[T_contra]):
    def __call__(self, serializer: Serializer, value: T_contra, /) -> None:
        ...
