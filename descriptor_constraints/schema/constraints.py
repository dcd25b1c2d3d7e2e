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

"""Constraint model: field descriptors, object maps and union alternatives.

Constraint trees are plain immutable data. They are declared once and can be
shared between any number of validation calls and threads.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Iterator, Optional, Sequence, Tuple, Union

from ..exceptions import SchemaDefinitionError
from .validators import Validator


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_integer(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


TYPE_CHECKS = {
    'string': lambda value: isinstance(value, str),
    'number': _is_number,
    'integer': _is_integer,
    'boolean': lambda value: isinstance(value, bool),
    'object': lambda value: isinstance(value, Mapping),
}


def matches_type(value: Any, type_name: str) -> bool:
    return TYPE_CHECKS[type_name](value)


class ObjectConstraints(Mapping):
    """Read-only, ordered mapping of field name to :class:`FieldConstraint`.

    Iteration order is declaration order, which is also evaluation order.
    """

    __slots__ = ('_fields', '_index')

    def __init__(self, fields: Union[Mapping, Iterable[Tuple[str, 'FieldConstraint']]] = ()):
        items = list(fields.items()) if isinstance(fields, Mapping) else list(fields)
        index: Dict[str, FieldConstraint] = {}
        for entry in items:
            try:
                name, constraint = entry
            except (TypeError, ValueError):
                raise SchemaDefinitionError(f"Expected a (name, FieldConstraint) pair, got: {entry!r}")
            if not isinstance(name, str) or not name:
                raise SchemaDefinitionError(f"Field name must be a non-empty string, got: {name!r}")
            if not isinstance(constraint, FieldConstraint):
                raise SchemaDefinitionError(
                    f"Constraint for field '{name}' must be a FieldConstraint, got: {type(constraint).__name__}"
                )
            if name in index:
                raise SchemaDefinitionError(f"Field '{name}' is declared more than once")
            index[name] = constraint
        self._fields: Tuple[Tuple[str, FieldConstraint], ...] = tuple(index.items())
        self._index = index

    def __getitem__(self, name: str) -> 'FieldConstraint':
        return self._index[name]

    def __iter__(self) -> Iterator[str]:
        return (name for name, _ in self._fields)

    def __len__(self) -> int:
        return len(self._fields)

    def __hash__(self) -> int:
        return hash(self._fields)

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, ObjectConstraints):
            return self._fields == other._fields
        return NotImplemented

    def __repr__(self) -> str:
        return f"ObjectConstraints({list(self._index)!r})"

    def fields(self) -> Tuple[Tuple[str, 'FieldConstraint'], ...]:
        return self._fields

    def discriminators(self) -> Tuple[Tuple[str, 'FieldConstraint'], ...]:
        """Fields carrying an enumerated-values validator."""
        return tuple(
            (name, constraint) for name, constraint in self._fields
            if any(v.is_discriminator for v in constraint.validators)
        )


@dataclass(frozen=True)
class UnionConstraints:
    """Ordered alternatives (variants) for one value; order breaks ties."""
    alternatives: Tuple[ObjectConstraints, ...]

    def __post_init__(self):
        alternatives = tuple(
            alt if isinstance(alt, ObjectConstraints) else _as_object_constraints(alt)
            for alt in self.alternatives
        )
        if not alternatives:
            raise SchemaDefinitionError("Union constraints require at least one alternative")
        object.__setattr__(self, 'alternatives', alternatives)

    def __iter__(self) -> Iterator[ObjectConstraints]:
        return iter(self.alternatives)

    def __len__(self) -> int:
        return len(self.alternatives)

    def __getitem__(self, index: int) -> ObjectConstraints:
        return self.alternatives[index]

    def declared_fields(self) -> Tuple[str, ...]:
        """Every field name declared by at least one alternative, first seen first."""
        seen: Dict[str, None] = {}
        for alt in self.alternatives:
            for name in alt:
                seen.setdefault(name, None)
        return tuple(seen)


Children = Union[ObjectConstraints, UnionConstraints]
DependsOn = Tuple[Tuple[str, Tuple[Validator, ...]], ...]


@dataclass(frozen=True)
class FieldConstraint:
    required: bool = False
    type: Optional[str] = None
    is_array: bool = False
    children: Optional[Children] = None
    validators: Tuple[Validator, ...] = ()
    depends_on: DependsOn = field(default=())

    def __post_init__(self):
        if self.type is not None and self.type not in TYPE_CHECKS:
            raise SchemaDefinitionError(
                f"Unknown type '{self.type}'. Valid types: {sorted(TYPE_CHECKS)}"
            )

        if self.children is not None:
            object.__setattr__(self, 'children', _as_children(self.children))

        validators = tuple(self.validators)
        for validator in validators:
            if not isinstance(validator, Validator):
                raise SchemaDefinitionError(f"Expected a Validator, got: {validator!r}")
        object.__setattr__(self, 'validators', validators)

        object.__setattr__(self, 'depends_on', _as_depends_on(self.depends_on))


def _as_object_constraints(value: Any) -> ObjectConstraints:
    if isinstance(value, ObjectConstraints):
        return value
    if isinstance(value, Mapping):
        return ObjectConstraints(value)
    raise SchemaDefinitionError(f"Expected an object constraint map, got: {type(value).__name__}")


def _as_children(value: Any) -> Children:
    if isinstance(value, (ObjectConstraints, UnionConstraints)):
        return value
    if isinstance(value, Mapping):
        return ObjectConstraints(value)
    if isinstance(value, (list, tuple)):
        return UnionConstraints(tuple(value))
    raise SchemaDefinitionError(
        f"Children must be an object constraint map or a list of alternatives, got: {type(value).__name__}"
    )


def _as_depends_on(value: Any) -> DependsOn:
    items: Sequence = list(value.items()) if isinstance(value, Mapping) else list(value)
    normalized = []
    for entry in items:
        try:
            target, validators = entry
        except (TypeError, ValueError):
            raise SchemaDefinitionError(f"Expected a (field, validators) pair in depends_on, got: {entry!r}")
        validators = tuple(validators)
        if not validators:
            raise SchemaDefinitionError(f"Dependency on field '{target}' declares no validators")
        for validator in validators:
            if not isinstance(validator, Validator):
                raise SchemaDefinitionError(f"Expected a Validator, got: {validator!r}")
        normalized.append((target, validators))
    return tuple(normalized)


Constraint = Union[ObjectConstraints, UnionConstraints]


def as_constraint(value: Any) -> Constraint:
    """Coerce a dict, list of dicts or model object into a constraint tree."""
    if isinstance(value, (ObjectConstraints, UnionConstraints)):
        return value
    if isinstance(value, Mapping):
        return ObjectConstraints(value)
    if isinstance(value, (list, tuple)):
        return UnionConstraints(tuple(value))
    raise SchemaDefinitionError(f"Unsupported constraint type: {type(value).__name__}")
