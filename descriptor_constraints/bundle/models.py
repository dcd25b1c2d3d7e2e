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

"""Enumerated values used by the bundle descriptor format."""

from enum import Enum


class ApiType(str, Enum):
    INTERNAL = "internal"
    EXTERNAL = "external"


class MicroFrontendType(str, Enum):
    WIDGET = "widget"
    WIDGET_CONFIG = "widget-config"
    APP_BUILDER = "app-builder"


class MicroFrontendAppBuilderSlot(str, Enum):
    PRIMARY_HEADER = "primary-header"
    PRIMARY_MENU = "primary-menu"
    CONTENT = "content"


class DBMS(str, Enum):
    POSTGRESQL = "postgresql"
    MYSQL = "mysql"
    NONE = "none"


class SecurityLevel(str, Enum):
    STRICT = "strict"
    LENIENT = "lenient"


class MicroserviceStack(str, Enum):
    SPRING_BOOT = "spring-boot"
    NODE = "node"
    CUSTOM = "custom"


class MicroFrontendStack(str, Enum):
    REACT = "react"
    ANGULAR = "angular"
    CUSTOM = "custom"
