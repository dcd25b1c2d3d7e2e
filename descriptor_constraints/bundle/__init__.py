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

"""Bundle descriptor format: enumerations and constraint trees."""

from .constraints import (
    ALLOWED_NAME_REGEXP,
    API_CLAIMS_CONSTRAINTS,
    BUNDLE_DESCRIPTOR_CONSTRAINTS,
    ENVIRONMENT_VARIABLE_CONSTRAINTS,
    INVALID_NAME_MESSAGE,
    MICROFRONTEND_CONSTRAINTS,
    MICROSERVICE_CONSTRAINTS,
    NAV_CONSTRAINTS,
)
from .models import (
    DBMS,
    ApiType,
    MicroFrontendAppBuilderSlot,
    MicroFrontendStack,
    MicroFrontendType,
    MicroserviceStack,
    SecurityLevel,
)
