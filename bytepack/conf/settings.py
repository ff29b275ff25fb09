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

from pathlib import Path
from typing import Optional, Union

from pydantic import field_validator

from bytepack.utils.pydantic import BaseModel
from bytepack.utils.yaml import dict_from_yaml


class PackSettings(BaseModel):
    """Process-wide tunables, none of them affects the wire format."""

    # Upper bound on the total size of a `Buffer`, larger buffers are rejected before any byte is written. `None`
    # means no bound other than the per-prefix limit.
    MAX_BUFFER_SIZE: Optional[int] = None

    # Whether `unpack` accepts bytes left over after the decoded value when the caller does not choose explicitly.
    ALLOW_TRAILING_DATA: bool = True

    # Default wall time, in seconds, spent on each benchmark.
    BENCH_DURATION_SECONDS: float = 1.0

    @field_validator('MAX_BUFFER_SIZE')
    @classmethod
    def _validate_max_buffer_size(cls, max_buffer_size: Optional[int]) -> Optional[int]:
        if max_buffer_size is not None and max_buffer_size <= 0:
            raise ValueError('MAX_BUFFER_SIZE must be a positive integer')
        return max_buffer_size

    @field_validator('BENCH_DURATION_SECONDS')
    @classmethod
    def _validate_bench_duration(cls, duration: float) -> float:
        if duration <= 0:
            raise ValueError('BENCH_DURATION_SECONDS must be positive')
        return duration

    @classmethod
    def from_yaml(cls, *, filepath: Union[Path, str]) -> 'PackSettings':
        """Takes a filepath to a yaml file and returns a validated PackSettings instance."""
        settings_dict = dict_from_yaml(filepath=filepath)
        return cls.model_validate(settings_dict)
