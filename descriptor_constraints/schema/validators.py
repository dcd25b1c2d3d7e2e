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

"""Built-in field validators.

A validator pairs a predicate with the message fragment reported when the
predicate rejects a value. Validators never see the field name or the path;
the engine composes those into the final error.
"""

from __future__ import annotations

import enum
import re
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Optional, Pattern, Tuple, Union

from ..exceptions import SchemaDefinitionError


class ValidatorKind(str, enum.Enum):
    PRESENCE = "presence"
    PATTERN = "pattern"
    VALUES = "values"
    MAP_OF_STRINGS = "map_of_strings"
    CUSTOM = "custom"


@dataclass(frozen=True)
class Validator:
    check: Callable[[Any], bool]
    message: str
    kind: ValidatorKind = ValidatorKind.CUSTOM

    def __call__(self, value: Any) -> Optional[str]:
        """Return ``None`` when ``value`` passes, the message fragment otherwise."""
        if self.check(value):
            return None
        return self.message

    @property
    def is_presence(self) -> bool:
        return self.kind is ValidatorKind.PRESENCE

    @property
    def is_discriminator(self) -> bool:
        return self.kind is ValidatorKind.VALUES


def custom(check: Callable[[Any], bool], message: str) -> Validator:
    return Validator(check=check, message=message, kind=ValidatorKind.CUSTOM)


required = Validator(
    check=lambda value: value is not None,
    message="is required",
    kind=ValidatorKind.PRESENCE,
)


def regexp(pattern: Union[str, Pattern[str]], message: str) -> Validator:
    """Accept strings in which ``pattern`` finds a match.

    Anchor the pattern (``^...$``) to constrain the whole string.
    """
    compiled = re.compile(pattern) if isinstance(pattern, str) else pattern

    def _check(value: Any) -> bool:
        return isinstance(value, str) and compiled.search(value) is not None

    return Validator(check=_check, message=message, kind=ValidatorKind.PATTERN)


def _allowed_tuple(allowed: Union[Iterable[Any], type]) -> Tuple[Any, ...]:
    if isinstance(allowed, type) and issubclass(allowed, enum.Enum):
        return tuple(member.value for member in allowed)
    return tuple(item.value if isinstance(item, enum.Enum) else item for item in allowed)


def values(allowed: Union[Iterable[Any], type]) -> Validator:
    """Accept only members of ``allowed`` (an iterable or an ``Enum`` class)."""
    allowed_values = _allowed_tuple(allowed)
    if not allowed_values:
        raise SchemaDefinitionError("values() requires at least one allowed value")

    def _check(value: Any) -> bool:
        # bool is an int subclass; True must not match an allowed 1
        return any(
            value == item and isinstance(value, bool) == isinstance(item, bool)
            for item in allowed_values
        )

    message = "Allowed values are: " + ", ".join(str(item) for item in allowed_values)
    return Validator(check=_check, message=message, kind=ValidatorKind.VALUES)


def _is_map_of_strings(value: Any) -> bool:
    return isinstance(value, Mapping) and all(isinstance(item, str) for item in value.values())


is_map_of_strings = Validator(
    check=_is_map_of_strings,
    message="Should be a key-value map of strings",
    kind=ValidatorKind.MAP_OF_STRINGS,
)
