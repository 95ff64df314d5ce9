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
"""Writing header values into a response.

Every setter funnels into :func:`set_response_header`, which upserts: an
existing header of the same name is overwritten, otherwise the header is
appended. A ``None``, empty or whitespace-only value is not written.
"""

from __future__ import annotations

import logging
from enum import StrEnum
from typing import Final

from pyshield.headers.config import SecurityHeadersConfig
from pyshield.headers.names import HeaderNames, canonical_header_name
from pyshield.headers.ports.response import ResponseHeadersPort
from pyshield.headers.values import (
    ContentSecurityPolicyValue,
    ExpectCtValue,
    StrictTransportSecurityValue,
    XFrameOptionsValue,
    XssFilteringMode,
    XXssProtectionValue,
)

logger = logging.getLogger(__name__)

NOSNIFF: Final = "nosniff"


class HeaderApplicationResult(StrEnum):
    """Outcome of a single header write."""

    WRITTEN = "WRITTEN"
    SKIPPED = "SKIPPED"


def set_response_header(
    response: ResponseHeadersPort, header_name: str, header_value: str | None
) -> HeaderApplicationResult:
    """Upsert *header_name* on *response*, or do nothing when the value is blank.

    Known security header names are written in their canonical spelling.
    """
    header_name = canonical_header_name(header_name)
    if header_value is None or not header_value.strip():
        logger.debug("Skipped empty value for header %s", header_name)
        return HeaderApplicationResult.SKIPPED

    if response.has_header(header_name):
        response.set_header(header_name, header_value)
    else:
        response.append_header(header_name, header_value)
    logger.debug("Set header %s: %s", header_name, header_value)
    return HeaderApplicationResult.WRITTEN


def set_strict_transport_security(
    response: ResponseHeadersPort, hsts: StrictTransportSecurityValue | None
) -> HeaderApplicationResult:
    return set_response_header(
        response, HeaderNames.STRICT_TRANSPORT_SECURITY, hsts.to_header_string() if hsts is not None else None
    )


def set_expect_ct(response: ResponseHeadersPort, expect_ct: ExpectCtValue | None) -> HeaderApplicationResult:
    return set_response_header(
        response, HeaderNames.EXPECT_CT, expect_ct.to_header_string() if expect_ct is not None else None
    )


def set_x_content_type_options(response: ResponseHeadersPort) -> HeaderApplicationResult:
    """Set ``X-Content-Type-Options: nosniff``."""
    return set_response_header(response, HeaderNames.X_CONTENT_TYPE_OPTIONS, NOSNIFF)


def set_x_frame_options(
    response: ResponseHeadersPort, x_frame_options: XFrameOptionsValue | None
) -> HeaderApplicationResult:
    return set_response_header(
        response,
        HeaderNames.X_FRAME_OPTIONS,
        x_frame_options.to_header_string() if x_frame_options is not None else None,
    )


def set_x_xss_protection(
    response: ResponseHeadersPort, x_xss_protection: XXssProtectionValue | XssFilteringMode | None
) -> HeaderApplicationResult:
    """Set X-XSS-Protection from a value object or a bare filtering mode.

    A bare :attr:`XssFilteringMode.REPORT` has no report URI and raises
    :class:`~pyshield.kernel.exceptions.InvalidDirectiveException`.
    """
    if isinstance(x_xss_protection, XssFilteringMode):
        x_xss_protection = XXssProtectionValue(x_xss_protection)
    return set_response_header(
        response,
        HeaderNames.X_XSS_PROTECTION,
        x_xss_protection.to_header_string() if x_xss_protection is not None else None,
    )


def set_content_security_policy(
    response: ResponseHeadersPort, csp: ContentSecurityPolicyValue | None
) -> HeaderApplicationResult:
    """Set CSP, or CSP-Report-Only when the policy is report-only."""
    if csp is None:
        return set_response_header(response, HeaderNames.CONTENT_SECURITY_POLICY, None)
    return set_response_header(response, csp.header_name, csp.to_header_string())


def apply_security_headers(
    response: ResponseHeadersPort, config: SecurityHeadersConfig
) -> dict[str, HeaderApplicationResult]:
    """Apply every header of *config*; returns the outcome keyed by header name."""
    results = {
        HeaderNames.STRICT_TRANSPORT_SECURITY: set_strict_transport_security(
            response, config.strict_transport_security
        ),
        HeaderNames.EXPECT_CT: set_expect_ct(response, config.expect_ct),
        HeaderNames.X_FRAME_OPTIONS: set_x_frame_options(response, config.x_frame_options),
        HeaderNames.X_XSS_PROTECTION: set_x_xss_protection(response, config.x_xss_protection),
        HeaderNames.X_CONTENT_TYPE_OPTIONS: (
            set_x_content_type_options(response)
            if config.x_content_type_options
            else set_response_header(response, HeaderNames.X_CONTENT_TYPE_OPTIONS, None)
        ),
    }
    csp = config.content_security_policy
    name = csp.header_name if csp else HeaderNames.CONTENT_SECURITY_POLICY
    results[name] = set_content_security_policy(response, csp)
    return results
