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
"""PyShield Headers — security header values and their application to responses."""

from pyshield.headers.apply import (
    HeaderApplicationResult,
    apply_security_headers,
    set_content_security_policy,
    set_expect_ct,
    set_response_header,
    set_strict_transport_security,
    set_x_content_type_options,
    set_x_frame_options,
    set_x_xss_protection,
)
from pyshield.headers.config import SecurityHeadersConfig, SecurityHeadersProperties, load_security_headers
from pyshield.headers.names import HeaderNames
from pyshield.headers.ports import ResponseHeadersPort
from pyshield.headers.values import (
    ContentSecurityPolicyValue,
    ExpectCtValue,
    FrameOption,
    StrictTransportSecurityValue,
    XFrameOptionsValue,
    XssFilteringMode,
    XXssProtectionValue,
)

__all__ = [
    "ContentSecurityPolicyValue",
    "ExpectCtValue",
    "FrameOption",
    "HeaderApplicationResult",
    "HeaderNames",
    "ResponseHeadersPort",
    "SecurityHeadersConfig",
    "SecurityHeadersProperties",
    "StrictTransportSecurityValue",
    "XFrameOptionsValue",
    "XXssProtectionValue",
    "XssFilteringMode",
    "apply_security_headers",
    "load_security_headers",
    "set_content_security_policy",
    "set_expect_ct",
    "set_response_header",
    "set_strict_transport_security",
    "set_x_content_type_options",
    "set_x_frame_options",
    "set_x_xss_protection",
]
