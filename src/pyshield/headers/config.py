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
"""Security headers policy and its configuration binding."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta

from pydantic import BaseModel, Field

from pyshield.core.config import Config, config_properties
from pyshield.headers.values import (
    ContentSecurityPolicyValue,
    ExpectCtValue,
    StrictTransportSecurityValue,
    XFrameOptionsValue,
    XXssProtectionValue,
)

ONE_YEAR = timedelta(days=365)


@dataclass(frozen=True)
class SecurityHeadersConfig:
    """The set of security headers to apply to each response.

    Defaults follow OWASP recommendations. ``None`` leaves a header out;
    Expect-CT and CSP are off by default (CSP is too app-specific).
    """

    strict_transport_security: StrictTransportSecurityValue | None = StrictTransportSecurityValue(
        ONE_YEAR, include_subdomains=True
    )
    expect_ct: ExpectCtValue | None = None
    x_frame_options: XFrameOptionsValue | None = XFrameOptionsValue.deny()
    # Modern browsers: disable legacy XSS auditor
    x_xss_protection: XXssProtectionValue | None = XXssProtectionValue.disabled()
    x_content_type_options: bool = True
    content_security_policy: ContentSecurityPolicyValue | None = None


class HstsProperties(BaseModel):
    enabled: bool = True
    max_age: int = Field(default=int(ONE_YEAR.total_seconds()), ge=0)
    include_subdomains: bool = True
    preload: bool = False


class ExpectCtProperties(BaseModel):
    enabled: bool = False
    max_age: int = Field(default=86400, ge=0)
    enforce: bool = False
    report_uri: str | None = None


class FrameOptionsProperties(BaseModel):
    enabled: bool = True
    option: str = "DENY"
    uri: str | None = None


class XssProtectionProperties(BaseModel):
    enabled: bool = True
    mode: str = "DISABLED"
    report_uri: str | None = None


class ContentTypeOptionsProperties(BaseModel):
    enabled: bool = True


class CspProperties(BaseModel):
    enabled: bool = False
    report_only: bool = False
    directives: dict[str, list[str] | bool | str] = Field(default_factory=dict)


@config_properties(prefix="pyshield.headers")
class SecurityHeadersProperties(BaseModel):
    """Header settings under ``pyshield.headers``.

    Each section has an ``enabled`` switch; the remaining keys mirror the
    fields of the matching value object::

        pyshield:
          headers:
            hsts: {max_age: 63072000, preload: true}
            frame_options: {option: ALLOW-FROM, uri: "https://partner.example"}
            csp:
              enabled: true
              directives:
                default-src: "'self'"
                img-src: ["'self'", "data:"]
    """

    hsts: HstsProperties = Field(default_factory=HstsProperties)
    expect_ct: ExpectCtProperties = Field(default_factory=ExpectCtProperties)
    frame_options: FrameOptionsProperties = Field(default_factory=FrameOptionsProperties)
    xss_protection: XssProtectionProperties = Field(default_factory=XssProtectionProperties)
    content_type_options: ContentTypeOptionsProperties = Field(default_factory=ContentTypeOptionsProperties)
    csp: CspProperties = Field(default_factory=CspProperties)

    def to_config(self) -> SecurityHeadersConfig:
        """Build the value objects; raises InvalidDirectiveException on bad directive data."""
        hsts = self.hsts
        expect_ct = self.expect_ct
        frame = self.frame_options
        xss = self.xss_protection
        csp = self.csp
        return SecurityHeadersConfig(
            strict_transport_security=(
                StrictTransportSecurityValue(hsts.max_age, hsts.include_subdomains, hsts.preload)
                if hsts.enabled
                else None
            ),
            expect_ct=(
                ExpectCtValue(expect_ct.max_age, expect_ct.enforce, expect_ct.report_uri)
                if expect_ct.enabled
                else None
            ),
            x_frame_options=XFrameOptionsValue(frame.option, frame.uri) if frame.enabled else None,  # type: ignore[arg-type]
            x_xss_protection=XXssProtectionValue(xss.mode, xss.report_uri) if xss.enabled else None,  # type: ignore[arg-type]
            x_content_type_options=self.content_type_options.enabled,
            content_security_policy=(
                ContentSecurityPolicyValue.of(csp.directives, report_only=csp.report_only) if csp.enabled else None
            ),
        )


def load_security_headers(config: Config) -> SecurityHeadersConfig:
    """Bind ``pyshield.headers`` from *config* and build the header policy."""
    return config.bind(SecurityHeadersProperties).to_config()
