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

"""Declarative constraint validation for nested configuration records."""

__version__ = "0.1.0"

from .exceptions import (
    DependencyError,
    DescriptorConstraintsError,
    FieldTypeError,
    FieldValueError,
    NestingDepthError,
    RequiredFieldError,
    SchemaDefinitionError,
    ValidationError,
)
from .schema import (
    ConstraintsValidator,
    FieldConstraint,
    ObjectConstraints,
    UnionConstraints,
    Validator,
    custom,
    is_map_of_strings,
    regexp,
    required,
    validate,
    values,
)
