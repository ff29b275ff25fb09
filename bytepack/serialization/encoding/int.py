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
This module implements encoding of integers with a fixed size, the size and signedness are parametrized.

The encoding format is little-endian: byte 0 holds the least significant 8 bits. Negative values use two's complement,
so `-1` in any width is all bits set.

>>> se = Serializer.build_bytes_serializer()
>>> encode_int(se, -1, length=2, signed=True)  # writes ffff
>>> encode_int(se, 2147483647, length=4, signed=True)  # writes ffffff7f
>>> encode_int(se, -2147483648, length=4, signed=True)  # writes 00000080
>>> encode_int(se, 0x1234, length=2, signed=False)  # writes 3412
>>> bytes(se.finalize()).hex()
'ffffffffff7f000000803412'

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('ffffffffff7f000000803412'))
>>> decode_int(de, length=2, signed=True)  # reads ffff
-1
>>> decode_int(de, length=4, signed=True)  # reads ffffff7f
2147483647
>>> decode_int(de, length=4, signed=True)  # reads 00000080
-2147483648
>>> hex(decode_int(de, length=2, signed=False))  # reads 3412
'0x1234'

>>> se = Serializer.build_bytes_serializer()
>>> try:
...     encode_int(se, 256, length=1, signed=False)
... except ValueError as e:
...     print(*e.args)
256 does not fit in 1 unsigned byte(s)
"""

from bytepack.serialization import Deserializer, Serializer


def encode_int(serializer: Serializer, number: int, *, length: int, signed: bool) -> None:
    """ Encode an int using the given byte-length and signedness.

    This modules's docstring has more details and examples.
    """
    try:
        data = int.to_bytes(number, length, byteorder='little', signed=signed)
    except OverflowError:
        kind = 'signed' if signed else 'unsigned'
        raise ValueError(f'{number} does not fit in {length} {kind} byte(s)')
    serializer.write_bytes(data)


def decode_int(deserializer: Deserializer, *, length: int, signed: bool) -> int:
    """ Decode an int using the given byte-length and signedness.

    This modules's docstring has more details and examples.
    """
    data = deserializer.read_bytes(length)
    return int.from_bytes(data, byteorder='little', signed=signed)
