# Copyright 2026 Firefly Software Solutions Inc.
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
"""PyShield Logging — logging port and its structlog adapter."""

from __future__ import annotations

from pyshield.core.config import Config
from pyshield.logging.port import LoggingPort
from pyshield.logging.structlog_adapter import StructlogAdapter


def configure_logging(config: Config, adapter: LoggingPort | None = None) -> LoggingPort:
    """Configure logging from *config*, defaulting to :class:`StructlogAdapter`."""
    port = adapter or StructlogAdapter()
    port.configure(config)
    return port


__all__ = ["LoggingPort", "StructlogAdapter", "configure_logging"]
