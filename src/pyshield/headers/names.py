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
"""Names of the HTTP response headers PyShield writes."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Final


class HeaderNames:
    """Header name constants."""

    CONTENT_SECURITY_POLICY: Final = "Content-Security-Policy"
    CONTENT_SECURITY_POLICY_REPORT_ONLY: Final = "Content-Security-Policy-Report-Only"
    EXPECT_CT: Final = "Expect-CT"
    STRICT_TRANSPORT_SECURITY: Final = "Strict-Transport-Security"
    X_CONTENT_TYPE_OPTIONS: Final = "X-Content-Type-Options"
    X_FRAME_OPTIONS: Final = "X-Frame-Options"
    X_XSS_PROTECTION: Final = "X-XSS-Protection"


# Lower-cased lookup, for matching names as they arrive from ASGI or WSGI servers.
HEADER_NAMES: Mapping[str, str] = MappingProxyType(
    {
        value.lower(): value
        for key, value in vars(HeaderNames).items()
        if key.isupper()
    }
)


def canonical_header_name(name: str) -> str:
    """Return the canonical spelling of a known header name, or *name* unchanged."""
    return HEADER_NAMES.get(name.lower(), name)
