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

"""Per-file results of a descriptor check."""

from pathlib import Path
from typing import List, Dict, Any, Optional


class CheckResult:
    """Container for the check result of a single file."""

    def __init__(self, file_path: Path):
        """Initialize check result.

        Args:
            file_path: Path to the file being checked
        """
        self.file_path = file_path
        self.errors: List[Dict[str, Any]] = []

    @property
    def ok(self) -> bool:
        return not self.errors

    def add_error(self, message: str, path: Optional[str] = None):
        """Add an error message.

        Args:
            message: Error message
            path: Optional location of the violation inside the descriptor
        """
        error = {'message': message}
        if path is not None:
            error['path'] = path
        self.errors.append(error)

    def to_dict(self) -> Dict[str, Any]:
        return {'file': str(self.file_path), 'errors': self.errors}
