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

"""Command line checker for bundle descriptor files."""

import logging
from pathlib import Path
from typing import Any, List, Optional

from ..bundle import BUNDLE_DESCRIPTOR_CONSTRAINTS
from ..exceptions import DescriptorLoadError, ValidationError
from ..schema import ConstraintsValidator
from ..utils.descriptor_loader import load_descriptor
from .report import CheckResult

__all__ = ['check_files', 'CheckResult']

logger = logging.getLogger(__name__)


def check_files(
    file_paths: List[Path],
    constraint: Any = BUNDLE_DESCRIPTOR_CONSTRAINTS,
    validator: Optional[ConstraintsValidator] = None,
) -> List[CheckResult]:
    """Validate a list of descriptor files.

    Validation is fail-fast, so each result holds at most one violation.

    Args:
        file_paths: List of file paths to check
        constraint: Constraint tree every file is validated against
        validator: Validator to use; a default one is created when omitted

    Returns:
        List of CheckResult objects, one per file
    """
    validator = validator or ConstraintsValidator()
    results = []

    for file_path in file_paths:
        result = CheckResult(file_path)
        logger.debug(f"Checking {file_path}")

        try:
            data = load_descriptor(file_path)
            validator.validate(data, constraint)
        except DescriptorLoadError as e:
            result.add_error(str(e))
        except ValidationError as e:
            result.add_error(e.message, path=e.path)

        results.append(result)

    return results
