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
"""Starlette adapter for the response headers port."""

from __future__ import annotations

from starlette.datastructures import MutableHeaders
from starlette.responses import Response


class StarletteResponseHeaders:
    """Wraps Starlette's :class:`MutableHeaders`."""

    def __init__(self, headers: MutableHeaders) -> None:
        self._headers = headers

    @classmethod
    def from_response(cls, response: Response) -> StarletteResponseHeaders:
        return cls(response.headers)

    @property
    def headers(self) -> MutableHeaders:
        return self._headers

    def has_header(self, name: str) -> bool:
        return name in self._headers

    def set_header(self, name: str, value: str) -> None:
        # MutableHeaders.__setitem__ drops duplicates and keeps one entry.
        self._headers[name] = value

    def append_header(self, name: str, value: str) -> None:
        self._headers.append(name, value)
