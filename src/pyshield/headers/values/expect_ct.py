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
"""Expect-CT header value."""

from __future__ import annotations

from dataclasses import dataclass

from pyshield.headers.directives import Duration, require_absolute_uri, to_seconds
from pyshield.headers.names import HeaderNames


@dataclass(frozen=True)
class ExpectCtValue:
    """Certificate Transparency policy: ``max-age=<seconds>[, enforce][, report-uri="<uri>"]``.

    Expect-CT separates its directives with commas. A value that neither
    enforces nor reports is valid and serialized as-is.
    """

    max_age: Duration
    enforce: bool = False
    report_uri: str | None = None

    header_name = HeaderNames.EXPECT_CT

    def __post_init__(self) -> None:
        object.__setattr__(self, "max_age", to_seconds(self.max_age, header=self.header_name))
        if self.report_uri is not None:
            require_absolute_uri(self.report_uri, header=self.header_name, field="report_uri")

    def to_header_string(self) -> str:
        directives = [f"max-age={self.max_age}"]
        if self.enforce:
            directives.append("enforce")
        if self.report_uri is not None:
            directives.append(f'report-uri="{self.report_uri}"')
        return ", ".join(directives)

    def __str__(self) -> str:
        return self.to_header_string()
