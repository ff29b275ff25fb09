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

class SerializationError(Exception):
    """Base class for every error raised while packing or unpacking values."""
    pass


class ValueTooLargeError(SerializationError):
    """Raised when a length does not fit where it has to be written.

    This covers text byte-lengths and sequence element-counts above 255 (they have a 1-byte prefix) and buffers
    larger than the configured maximum size. Nothing is truncated, the write is refused instead.
    """
    pass


class BufferTooShortError(SerializationError):
    """Raised when decoding would read past the end of the available bytes."""
    pass


class BadDataError(SerializationError):
    """Raised when the bytes can be read but do not form a valid value for the requested shape."""
    pass


class UnsupportedTypeError(TypeError):
    """Raised when a type annotation cannot be mapped to any shape."""
    pass
