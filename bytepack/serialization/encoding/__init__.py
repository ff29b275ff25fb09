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
Leaf encoders: values that are written without delegating to another encoder.

Each submodule handles one kind of value and exposes a pair of plain functions:

    def encode_x(serializer: Serializer, value: ValueType, ...options...) -> None:
        ...

    def decode_x(deserializer: Deserializer, ...options...) -> ValueType:
        ...

Options such as the width or signedness of an integer are keyword arguments. Which annotation maps to which encoder
is decided in `bytepack.shapes`, never here.
"""
