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
"""X-XSS-Protection header value."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from pyshield.headers.directives import coerce_choice, reject_payload, require_absolute_uri
from pyshield.headers.names import HeaderNames


class XssFilteringMode(StrEnum):
    """Modes of the legacy browser XSS auditor."""

    DISABLED = "DISABLED"
    ENABLED = "ENABLED"
    BLOCK = "BLOCK"
    REPORT = "REPORT"


_MODE_VALUES: dict[XssFilteringMode, str] = {
    XssFilteringMode.DISABLED: "0",
    XssFilteringMode.ENABLED: "1",
    XssFilteringMode.BLOCK: "1; mode=block",
}


@dataclass(frozen=True)
class XXssProtectionValue:
    """One of ``0``, ``1``, ``1; mode=block`` or ``1; report=<uri>``.

    ``report_uri`` is required for REPORT and rejected for every other mode.
    """

    mode: XssFilteringMode
    report_uri: str | None = None

    header_name = HeaderNames.X_XSS_PROTECTION

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "mode", coerce_choice(XssFilteringMode, self.mode, header=self.header_name, field="mode")
        )
        if self.mode is XssFilteringMode.REPORT:
            require_absolute_uri(
                self.report_uri, header=self.header_name, field="report_uri", separators=";,"
            )
        else:
            reject_payload(self.report_uri, header=self.header_name, field="report_uri", variant=self.mode.value)

    @staticmethod
    def disabled() -> XXssProtectionValue:
        return XXssProtectionValue(XssFilteringMode.DISABLED)

    @staticmethod
    def enabled() -> XXssProtectionValue:
        return XXssProtectionValue(XssFilteringMode.ENABLED)

    @staticmethod
    def block() -> XXssProtectionValue:
        return XXssProtectionValue(XssFilteringMode.BLOCK)

    @staticmethod
    def report(uri: str) -> XXssProtectionValue:
        return XXssProtectionValue(XssFilteringMode.REPORT, uri)

    def to_header_string(self) -> str:
        if self.mode is XssFilteringMode.REPORT:
            return f"1; report={self.report_uri}"
        return _MODE_VALUES[self.mode]

    def __str__(self) -> str:
        return self.to_header_string()
