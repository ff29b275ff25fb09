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
This modules implements encoding of byte sequence by prefixing it with the length of the sequence encoded as a single
unsigned byte. There is no terminator.

>>> se = Serializer.build_bytes_serializer()
>>> encode_bytes(se, b'test')  # will prepend b'\x04' before writing b'test'
>>> bytes(se.finalize()).hex()
'0474657374'

The largest sequence that can be encoded has 255 bytes, anything longer is refused instead of having its length
truncated:

>>> se = Serializer.build_bytes_serializer()
>>> encode_bytes(se, b'x' * 255)
>>> len(se.finalize())
256
>>> se = Serializer.build_bytes_serializer()
>>> try:
...     encode_bytes(se, b'x' * 256)
... except ValueTooLargeError as e:
...     print(*e.args)
length 256 does not fit in a 1-byte prefix (max 255)

>>> de = Deserializer.build_bytes_deserializer(b'\x04testfoo')
>>> decode_bytes(de)
b'test'
>>> de.cur_pos()
5

>>> de = Deserializer.build_bytes_deserializer(b'\x05test')
>>> try:
...     decode_bytes(de)
... except BufferTooShortError as e:
...     print(*e.args)
need 5 bytes at position 1, only 4 available
"""

from bytepack.serialization import BufferTooShortError, Deserializer, Serializer, ValueTooLargeError  # noqa: F401
from bytepack.serialization.types import BytesLike


def encode_bytes(serializer: Serializer, data: BytesLike) -> None:
    """ Encodes a byte-sequence adding a length prefix.

    This modules's docstring has more details and examples.
    """
    view = memoryview(data)
    serializer.write_length_prefix(view.nbytes)
    serializer.write_bytes(view)


def decode_bytes(deserializer: Deserializer) -> bytes:
    """ Decodes a byte-sequnce with a length prefix.

    This modules's docstring has more details and examples.
    """
    size = deserializer.read_length_prefix()
    return bytes(deserializer.read_bytes(size))
