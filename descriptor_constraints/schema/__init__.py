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

"""Constraint model and validation engine.

This package knows nothing about any particular descriptor format; it only
walks a constraint tree against a data tree.
"""

from .constraints import (
    FieldConstraint,
    ObjectConstraints,
    UnionConstraints,
    as_constraint,
)
from .engine import ConstraintsValidator, validate
from .path import ROOT_PATH
from .union import select_alternative
from .validators import (
    Validator,
    ValidatorKind,
    custom,
    is_map_of_strings,
    regexp,
    required,
    values,
)
