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

"""Selection of one union alternative for a candidate value.

The candidate is validated only against the selected alternative, so the
reported error talks about the variant the author most likely meant instead
of a generic "matches none of the alternatives" message.

Selection rule, evaluated on the candidate's present (non-null) fields:

1. Shape: a field declared by some alternative but not by alternative *k*
   is foreign to *k*. Alternatives with the fewest foreign fields stay in.
2. Discriminators: among those, the first alternative whose
   enumerated-values fields accept their values (type check plus
   validators) is selected; when none does, the first of them is.

Presence and dependency failures play no part in selection. Once an
alternative is selected, the dependency rules of present fields that point
at one of its discriminators are checked first, then the candidate goes
through the regular field walk, which runs every other rule in place.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, List, Tuple

from .constraints import ObjectConstraints, UnionConstraints, matches_type

if TYPE_CHECKING:
    from .engine import ConstraintsValidator

logger = logging.getLogger(__name__)


def _discriminators_pass(value: Mapping, alternative: ObjectConstraints) -> bool:
    for name, constraint in alternative.discriminators():
        field_value = value.get(name)
        if field_value is None:
            continue
        if not constraint.is_array and constraint.type is not None and not matches_type(field_value, constraint.type):
            return False
        if any(validator(field_value) is not None for validator in constraint.validators):
            return False
    return True


def select_alternative(value: Any, union: UnionConstraints) -> Tuple[int, ObjectConstraints]:
    """Return ``(index, alternative)`` of the alternative ``value`` is validated against."""
    if not isinstance(value, Mapping):
        return 0, union[0]

    present = {name for name in union.declared_fields() if value.get(name) is not None}
    foreign_counts = [len(present.difference(alternative)) for alternative in union]
    fewest = min(foreign_counts)
    candidates: List[Tuple[int, ObjectConstraints]] = [
        (index, alternative)
        for index, alternative in enumerate(union)
        if foreign_counts[index] == fewest
    ]

    for index, alternative in candidates:
        if _discriminators_pass(value, alternative):
            return index, alternative
    return candidates[0]


class UnionResolver:
    """Validates a value against the alternative chosen by :func:`select_alternative`."""

    def __init__(self, engine: 'ConstraintsValidator'):
        self._engine = engine

    def resolve(self, value: Any, union: UnionConstraints, path: str, label: str, depth: int) -> None:
        index, alternative = select_alternative(value, union)
        logger.debug(f"Selected alternative {index + 1} of {len(union)} for {path}")

        if isinstance(value, Mapping):
            discriminators = {name for name, _ in alternative.discriminators()}
            for name, constraint in alternative.fields():
                if constraint.depends_on and value.get(name) is not None:
                    self._engine.check_dependencies(value, name, constraint, path, targets=discriminators)

        self._engine.validate_object(value, alternative, path, label, depth)
