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

"""Descriptor file loading (YAML or JSON) into in-memory records."""

import yaml
import logging
from pathlib import Path
from typing import Any, Union

from ..exceptions import DescriptorLoadError

logger = logging.getLogger(__name__)


def load_descriptor_from_string(content: str, source: str = "descriptor content") -> Any:
    """Decode YAML (or JSON) content.

    Args:
        content: Serialized descriptor
        source: What the content was read from, used in error messages

    Returns:
        Decoded record; empty content decodes to an empty dictionary

    Raises:
        DescriptorLoadError: If the content cannot be parsed
    """
    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as exc:
        raise DescriptorLoadError(f"Failed to parse {source}: {exc}")
    return {} if data is None else data


def load_descriptor(file_path: Union[str, Path]) -> Any:
    """Load a descriptor file.

    Args:
        file_path: Path to a YAML or JSON descriptor

    Returns:
        Decoded record; an empty file decodes to an empty dictionary

    Raises:
        DescriptorLoadError: If the file is missing, unreadable or malformed
    """
    path = Path(file_path)

    if not path.exists():
        raise DescriptorLoadError(f"Descriptor file not found: {path}")

    if not path.is_file():
        raise DescriptorLoadError(f"Path is not a file: {path}")

    logger.debug(f"Loading descriptor file: {path}")
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise DescriptorLoadError(f"Failed to read descriptor file {path}: {exc}")

    return load_descriptor_from_string(content, source=f"descriptor file {path}")
