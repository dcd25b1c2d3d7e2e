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

"""Recursive, fail-fast validation of records against constraint trees.

Fields are walked depth-first in declaration order. For every field:

1. presence: an absent or null value fails a required field and ends the
   checks of an optional one
2. shape: array fields must hold a sequence, other fields must match ``type``
3. validators, in order, against the field's own value
4. dependency rules against sibling fields of the same record
5. descent into array elements or ``children`` (object map or union)

The first violation raises a :class:`ValidationError` subclass and stops the
walk. Data is never modified.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import AbstractSet, Any, Optional, Sequence

from ..config import ValidatorConfig, validator_config
from ..exceptions import (
    DependencyError,
    FieldTypeError,
    FieldValueError,
    NestingDepthError,
    RequiredFieldError,
)
from .constraints import (
    Constraint,
    FieldConstraint,
    ObjectConstraints,
    UnionConstraints,
    as_constraint,
    matches_type,
)
from .path import join_index, join_key
from .union import UnionResolver
from .validators import Validator


def _is_sequence(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def _with_article(type_name: str) -> str:
    article = "an" if type_name[0] in "aeiou" else "a"
    return f"{article} {type_name}"


def describe_violation(name: str, validator: Validator, fragment: str) -> str:
    """Compose the message for ``validator`` rejecting the value of ``name``."""
    if validator.is_presence:
        return f'Field "{name}" {fragment}'
    return f'Field "{name}" is not valid. {fragment}'


class ConstraintsValidator:
    """Validates records against :class:`ObjectConstraints` or :class:`UnionConstraints`.

    Instances keep no per-call state, so one instance can serve concurrent
    validation calls.
    """

    def __init__(self, config: Optional[ValidatorConfig] = None):
        self.config = config if config is not None else validator_config
        self._union_resolver = UnionResolver(self)

    def validate(self, data: Any, constraint: Any, path: Optional[str] = None) -> None:
        """Validate ``data`` against ``constraint``.

        Args:
            data: Decoded record (mappings, sequences and primitives)
            constraint: Object constraint map or union alternatives; plain
                dicts and lists of dicts are accepted as well
            path: Location of ``data``; defaults to the configured root symbol

        Raises:
            ValidationError: For the first violation found, located at or below ``path``
        """
        path = path if path is not None else self.config.root_symbol
        self.validate_value(data, as_constraint(constraint), path, label=path, depth=0)

    def validate_value(self, value: Any, constraint: Constraint, path: str, label: str, depth: int) -> None:
        if depth > self.config.max_depth:
            raise NestingDepthError(
                f"Maximum nesting depth of {self.config.max_depth} exceeded",
                path,
            )

        if isinstance(constraint, UnionConstraints):
            self._union_resolver.resolve(value, constraint, path, label, depth)
        else:
            self.validate_object(value, constraint, path, label, depth)

    def validate_object(self, value: Any, constraints: ObjectConstraints, path: str, label: str, depth: int) -> None:
        if not isinstance(value, Mapping):
            raise FieldTypeError(f'Field "{label}" is not valid. Should be an object', path)

        for name, field_constraint in constraints.fields():
            self._validate_field(value, name, field_constraint, path, depth)

    def _validate_field(self, record: Mapping, name: str, constraint: FieldConstraint, path: str, depth: int) -> None:
        field_path = join_key(path, name)
        field_value = record.get(name)

        if field_value is None:
            if constraint.required:
                raise RequiredFieldError(f'Field "{name}" is required', field_path)
            return

        if constraint.is_array:
            if not _is_sequence(field_value):
                raise FieldTypeError(f'Field "{name}" should be an array', field_path)
        elif constraint.type is not None and not matches_type(field_value, constraint.type):
            raise FieldTypeError(
                f'Field "{name}" is not valid. Should be {_with_article(constraint.type)}',
                field_path,
            )

        self.run_validators(name, field_value, constraint.validators, field_path)
        self.check_dependencies(record, name, constraint, path)

        if constraint.is_array:
            self._validate_elements(name, field_value, constraint, field_path, depth)
        elif constraint.children is not None:
            self.validate_value(field_value, constraint.children, field_path, name, depth + 1)

    def _validate_elements(
        self, name: str, elements: Sequence, constraint: FieldConstraint, path: str, depth: int
    ) -> None:
        for index, element in enumerate(elements):
            element_path = join_index(path, index)
            element_label = f"{name}[{index}]"

            if element is None:
                raise RequiredFieldError(f'Field "{element_label}" is required', element_path)

            if constraint.children is not None:
                self.validate_value(element, constraint.children, element_path, element_label, depth + 1)
            elif constraint.type is not None and not matches_type(element, constraint.type):
                raise FieldTypeError(
                    f'Field "{element_label}" is not valid. Should be {_with_article(constraint.type)}',
                    element_path,
                )

    def run_validators(self, name: str, value: Any, validators: Sequence[Validator], path: str) -> None:
        for validator in validators:
            fragment = validator(value)
            if fragment is not None:
                raise FieldValueError(describe_violation(name, validator, fragment), path)

    def check_dependencies(
        self,
        record: Mapping,
        name: str,
        constraint: FieldConstraint,
        record_path: str,
        targets: Optional[AbstractSet[str]] = None,
    ) -> None:
        """Run ``name``'s dependency rules against its siblings in ``record``.

        Failures are located at the depending field, not at the sibling that
        was checked; the sibling's location is quoted in the message. When
        ``targets`` is given, only rules on those siblings are run.
        """
        for target, validators in constraint.depends_on:
            if targets is not None and target not in targets:
                continue
            target_value = record.get(target)
            for validator in validators:
                fragment = validator(target_value)
                if fragment is not None:
                    raise DependencyError(
                        f'Field "{name}" depends on field "{target}" with validation: '
                        f'{describe_violation(target, validator, fragment)} '
                        f'(at {join_key(record_path, target)})',
                        join_key(record_path, name),
                        field=name,
                        depends_on=target,
                    )


def validate(data: Any, constraint: Any) -> None:
    """Validate ``data`` against ``constraint`` using the global configuration.

    Raises:
        ValidationError: For the first violation found
    """
    ConstraintsValidator().validate(data, constraint)
