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
"""Strict-Transport-Security header value."""

from __future__ import annotations

from dataclasses import dataclass

from pyshield.headers.directives import Duration, to_seconds
from pyshield.headers.names import HeaderNames


@dataclass(frozen=True)
class StrictTransportSecurityValue:
    """HSTS policy: ``max-age=<seconds>[; includeSubDomains][; preload]``.

    ``max_age`` accepts a ``timedelta`` or a number of seconds and is stored
    as whole seconds. Preload without ``include_subdomains`` is accepted even
    though the preload list will reject it.
    """

    max_age: Duration
    include_subdomains: bool = False
    preload: bool = False

    header_name = HeaderNames.STRICT_TRANSPORT_SECURITY

    def __post_init__(self) -> None:
        object.__setattr__(self, "max_age", to_seconds(self.max_age, header=self.header_name))

    def to_header_string(self) -> str:
        directives = [f"max-age={self.max_age}"]
        if self.include_subdomains:
            directives.append("includeSubDomains")
        if self.preload:
            directives.append("preload")
        return "; ".join(directives)

    def __str__(self) -> str:
        return self.to_header_string()
