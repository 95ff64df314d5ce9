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
"""Outbound port: the host response's header collection."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class ResponseHeadersPort(Protocol):
    """Header collection of an outgoing response.

    Any web framework adapter (Starlette, in-memory, etc.) must implement this protocol.
    """

    def has_header(self, name: str) -> bool:
        """Whether a header named *name* is present (case-insensitive)."""
        ...

    def set_header(self, name: str, value: str) -> None:
        """Overwrite every existing value of header *name* with *value*."""
        ...

    def append_header(self, name: str, value: str) -> None:
        """Add a new *name*: *value* entry."""
        ...
