# Copyright 2026 TIER IV, inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Configuration management for the constraints validator."""

import os
import logging
from dataclasses import dataclass

from .utils.logging_utils import configure_package_logging


@dataclass(frozen=True)
class ValidatorConfig:
    """Configuration class for constraint validation runs."""
    # Deepest nesting (objects and array elements) walked before giving up.
    max_depth: int = 64
    root_symbol: str = "$"
    log_level: str = "INFO"

    def __post_init__(self):
        if self.max_depth < 1:
            raise ValueError(f"max_depth must be a positive integer, got: {self.max_depth}")
        if not self.root_symbol:
            raise ValueError("root_symbol must be a non-empty string")

    @classmethod
    def from_env(cls) -> 'ValidatorConfig':
        """Create configuration from environment variables."""
        return cls(
            max_depth=int(os.getenv('DESCRIPTOR_CONSTRAINTS_MAX_DEPTH', '64')),
            root_symbol=os.getenv('DESCRIPTOR_CONSTRAINTS_ROOT_SYMBOL', '$'),
            log_level=os.getenv('DESCRIPTOR_CONSTRAINTS_LOG_LEVEL', 'INFO'),
        )

    def set_logging(self) -> logging.Logger:
        """Setup package logging based on configuration.

        Diagnostics go to stderr; stdout is left to the caller's own output.
        """
        level = getattr(logging, self.log_level.upper(), logging.INFO)
        formatter = logging.Formatter('%(name)s - %(levelname)s - %(message)s')
        return configure_package_logging(level=level, formatter=formatter)


# Global configuration instance
validator_config = ValidatorConfig.from_env()
