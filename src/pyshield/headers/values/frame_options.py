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
"""X-Frame-Options header value."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from pyshield.headers.directives import coerce_choice, reject_payload, require_absolute_uri
from pyshield.headers.names import HeaderNames


class FrameOption(StrEnum):
    """Framing policies understood by X-Frame-Options."""

    DENY = "DENY"
    SAMEORIGIN = "SAMEORIGIN"
    ALLOW_FROM = "ALLOW-FROM"


@dataclass(frozen=True)
class XFrameOptionsValue:
    """One of ``DENY``, ``SAMEORIGIN`` or ``ALLOW-FROM <uri>``.

    ``uri`` is required for ALLOW-FROM and rejected for the other options.
    Prefer the factories over the constructor::

        XFrameOptionsValue.same_origin()
        XFrameOptionsValue.allow_from("https://example.com")
    """

    option: FrameOption
    uri: str | None = None

    header_name = HeaderNames.X_FRAME_OPTIONS

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "option", coerce_choice(FrameOption, self.option, header=self.header_name, field="option")
        )
        if self.option is FrameOption.ALLOW_FROM:
            require_absolute_uri(self.uri, header=self.header_name, field="uri", separators=";,")
        else:
            reject_payload(self.uri, header=self.header_name, field="uri", variant=self.option.value)

    @staticmethod
    def deny() -> XFrameOptionsValue:
        return XFrameOptionsValue(FrameOption.DENY)

    @staticmethod
    def same_origin() -> XFrameOptionsValue:
        return XFrameOptionsValue(FrameOption.SAMEORIGIN)

    @staticmethod
    def allow_from(uri: str) -> XFrameOptionsValue:
        """Allow framing by the single origin *uri* (must be absolute)."""
        return XFrameOptionsValue(FrameOption.ALLOW_FROM, uri)

    def to_header_string(self) -> str:
        if self.option is FrameOption.ALLOW_FROM:
            return f"{self.option.value} {self.uri}"
        return self.option.value

    def __str__(self) -> str:
        return self.to_header_string()
