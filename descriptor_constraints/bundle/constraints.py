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

"""Constraint trees for the bundle descriptor format."""

from typing import Dict, Optional, Sequence, Tuple

from ..schema.constraints import FieldConstraint, ObjectConstraints, UnionConstraints
from ..schema.validators import Validator, is_map_of_strings, regexp, required, values
from .models import (
    DBMS,
    ApiType,
    MicroFrontendAppBuilderSlot,
    MicroFrontendStack,
    MicroFrontendType,
    MicroserviceStack,
    SecurityLevel,
)

ALLOWED_NAME_REGEXP = r"^[\w-]+$"
INVALID_NAME_MESSAGE = "Only alphanumeric characters, underscore and dash are allowed"

_name_validator = regexp(ALLOWED_NAME_REGEXP, INVALID_NAME_MESSAGE)


def _string(
    required: bool = False,
    validators: Sequence[Validator] = (),
    depends_on: Optional[Dict[str, Tuple[Validator, ...]]] = None,
) -> FieldConstraint:
    return FieldConstraint(
        required=required,
        type="string",
        validators=tuple(validators),
        depends_on=depends_on or {},
    )


def _string_array(required: bool = False, depends_on=None) -> FieldConstraint:
    return FieldConstraint(required=required, type="string", is_array=True, depends_on=depends_on or {})


def _labels(required: bool = True) -> FieldConstraint:
    # Localized labels: {"en": "...", "it": "..."}
    return FieldConstraint(required=required, validators=(is_map_of_strings,), children={})


# -------------------------
# Shared pieces
# -------------------------

ENVIRONMENT_VARIABLE_CONSTRAINTS = UnionConstraints((
    ObjectConstraints({
        "name": _string(required=True),
        "value": _string(required=True),
    }),
    ObjectConstraints({
        "name": _string(required=True),
        "valueFrom": FieldConstraint(
            required=True,
            children={
                "secretKeyRef": FieldConstraint(
                    required=True,
                    children={
                        "name": _string(required=True),
                        "key": _string(required=True),
                    },
                ),
            },
        ),
    }),
))

API_CLAIMS_CONSTRAINTS = UnionConstraints((
    ObjectConstraints({
        "name": _string(required=True),
        "type": _string(required=True, validators=[values([ApiType.INTERNAL])]),
        "serviceId": _string(required=True),
    }),
    ObjectConstraints({
        "name": _string(required=True),
        "type": _string(
            required=True,
            validators=[values([ApiType.EXTERNAL])],
            depends_on={"bundleId": (required,)},
        ),
        "serviceId": _string(required=True),
        "bundleId": _string(
            required=True,
            depends_on={"type": (values([ApiType.EXTERNAL]),)},
        ),
    }),
))

NAV_CONSTRAINTS = ObjectConstraints({
    "label": _labels(),
    "target": _string(required=True),
    "url": _string(required=True),
})

_COMMANDS = FieldConstraint(
    required=False,
    children={
        "build": _string(),
    },
)

# -------------------------
# Microservices
# -------------------------

MICROSERVICE_CONSTRAINTS = ObjectConstraints({
    "name": _string(required=True, validators=[_name_validator]),
    "stack": _string(required=True, validators=[values(MicroserviceStack)]),
    "deploymentBaseName": _string(),
    "dbms": _string(validators=[values(DBMS)]),
    "ingressPath": _string(),
    "healthCheckPath": _string(),
    "roles": _string_array(),
    "securityLevel": _string(validators=[values(SecurityLevel)]),
    "permissions": FieldConstraint(
        is_array=True,
        children={
            "clientId": _string(required=True),
            "role": _string(required=True),
        },
    ),
    "env": FieldConstraint(is_array=True, children=ENVIRONMENT_VARIABLE_CONSTRAINTS),
    "commands": _COMMANDS,
})

# -------------------------
# Micro frontends
# -------------------------


def _micro_frontend_common() -> Dict[str, FieldConstraint]:
    return {
        "name": _string(required=True, validators=[_name_validator]),
        "code": _string(),
        "stack": _string(required=True, validators=[values(MicroFrontendStack)]),
        "titles": _labels(),
        "publicFolder": _string(),
        "group": _string(required=True),
        "apiClaims": FieldConstraint(is_array=True, children=API_CLAIMS_CONSTRAINTS),
        "nav": FieldConstraint(is_array=True, children=NAV_CONSTRAINTS),
        "commands": _COMMANDS,
    }


_app_builder_type = _string(
    required=True,
    validators=[values([MicroFrontendType.APP_BUILDER])],
    depends_on={"slot": (required,)},
)

WIDGET_CONSTRAINTS = ObjectConstraints({
    **_micro_frontend_common(),
    "type": _string(
        required=True,
        validators=[values([MicroFrontendType.WIDGET, MicroFrontendType.WIDGET_CONFIG])],
    ),
})

APP_BUILDER_MENU_CONSTRAINTS = ObjectConstraints({
    **_micro_frontend_common(),
    "type": _app_builder_type,
    "slot": _string(
        required=True,
        validators=[values([
            MicroFrontendAppBuilderSlot.PRIMARY_HEADER,
            MicroFrontendAppBuilderSlot.PRIMARY_MENU,
        ])],
        depends_on={"type": (values([MicroFrontendType.APP_BUILDER]),)},
    ),
})

APP_BUILDER_CONTENT_CONSTRAINTS = ObjectConstraints({
    **_micro_frontend_common(),
    "type": _app_builder_type,
    "slot": _string(
        required=True,
        validators=[values([MicroFrontendAppBuilderSlot.CONTENT])],
        depends_on={
            "type": (values([MicroFrontendType.APP_BUILDER]),),
            "paths": (required,),
        },
    ),
    "paths": _string_array(
        required=True,
        depends_on={"slot": (values([MicroFrontendAppBuilderSlot.CONTENT]),)},
    ),
})

MICROFRONTEND_CONSTRAINTS = UnionConstraints((
    WIDGET_CONSTRAINTS,
    APP_BUILDER_MENU_CONSTRAINTS,
    APP_BUILDER_CONTENT_CONSTRAINTS,
))

# -------------------------
# Bundle descriptor
# -------------------------

BUNDLE_DESCRIPTOR_CONSTRAINTS = ObjectConstraints({
    "name": _string(required=True, validators=[_name_validator]),
    "description": _string(),
    "version": _string(required=True),
    "type": _string(required=True, validators=[values(["bundle"])]),
    "microservices": FieldConstraint(required=True, is_array=True, children=MICROSERVICE_CONSTRAINTS),
    "microfrontends": FieldConstraint(required=True, is_array=True, children=MICROFRONTEND_CONSTRAINTS),
    "svc": _string_array(),
    "global": FieldConstraint(
        children={
            "nav": FieldConstraint(required=True, is_array=True, children=NAV_CONSTRAINTS),
        },
    ),
})
