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

"""Location strings for violations, e.g. ``$.microservices[0].name``."""

import json
import re

ROOT_PATH = "$"

_PLAIN_KEY_RE = re.compile(r"^[A-Za-z_][\w-]*$")


def join_key(base: str, key: str) -> str:
    if _PLAIN_KEY_RE.match(key):
        return f"{base}.{key}"
    # Quote keys that would make the dotted form ambiguous ("a.b", "x[0]", "")
    return f"{base}[{json.dumps(key)}]"


def join_index(base: str, index: int) -> str:
    return f"{base}[{index}]"
