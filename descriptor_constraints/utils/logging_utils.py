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

"""Diagnostics logging for the validator and the checker CLI.

Check reports are written to stdout by the CLI itself; every log record
(union selection traces, per-file progress, missing paths) goes to stderr so
that redirected reports stay machine-readable. Only the package logger is
configured; the root logger and handlers installed by the host application
are left alone.
"""

import logging
import sys
from typing import Optional, TextIO

PACKAGE_LOGGER_NAME = 'descriptor_constraints'
DEFAULT_FORMAT = '%(name)s - %(levelname)s - %(message)s'


class _DiagnosticsHandler(logging.StreamHandler):
    """Marks the handler installed here so it can be replaced on reconfiguration."""


def configure_package_logging(
    level: int = logging.INFO,
    stream: Optional[TextIO] = None,
    formatter: Optional[logging.Formatter] = None,
) -> logging.Logger:
    """Route ``descriptor_constraints.*`` records at ``level`` and above to ``stream``.

    Args:
        level: Lowest level emitted
        stream: Destination, ``sys.stderr`` when omitted
        formatter: Record format; defaults to ``name - LEVEL - message``

    Returns:
        The package logger
    """
    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    for handler in list(package_logger.handlers):
        if isinstance(handler, _DiagnosticsHandler):
            package_logger.removeHandler(handler)

    handler = _DiagnosticsHandler(stream=stream if stream is not None else sys.stderr)
    handler.setFormatter(formatter or logging.Formatter(DEFAULT_FORMAT))

    package_logger.addHandler(handler)
    package_logger.setLevel(level)
    # records are already emitted here; root handlers would duplicate them
    package_logger.propagate = False
    return package_logger
