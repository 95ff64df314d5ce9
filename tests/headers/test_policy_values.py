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
"""Tests for XFrameOptionsValue and XXssProtectionValue."""

import pytest

from pyshield.headers.values import FrameOption, XFrameOptionsValue, XssFilteringMode, XXssProtectionValue
from pyshield.kernel.exceptions import InvalidDirectiveException


class TestXFrameOptionsValue:
    def test_deny(self):
        assert XFrameOptionsValue.deny().to_header_string() == "DENY"

    def test_same_origin(self):
        assert XFrameOptionsValue.same_origin().to_header_string() == "SAMEORIGIN"

    def test_allow_from(self):
        value = XFrameOptionsValue.allow_from("https://a.example")
        assert value.option is FrameOption.ALLOW_FROM
        assert value.to_header_string() == "ALLOW-FROM https://a.example"

    @pytest.mark.parametrize("uri", ["", "a.example", "/frame", None])
    def test_allow_from_requires_absolute_uri(self, uri):
        with pytest.raises(InvalidDirectiveException):
            XFrameOptionsValue.allow_from(uri)  # type: ignore[arg-type]

    @pytest.mark.parametrize("uri", ["https://пример.example", "https://a.example/x;y", "https://a.example/x,y"])
    def test_allow_from_rejects_unsafe_characters(self, uri):
        with pytest.raises(InvalidDirectiveException):
            XFrameOptionsValue.allow_from(uri)

    def test_deny_with_uri_is_unrepresentable(self):
        with pytest.raises(InvalidDirectiveException, match="does not take a uri"):
            XFrameOptionsValue(FrameOption.DENY, "https://a.example")

    def test_option_from_string(self):
        assert XFrameOptionsValue("SAMEORIGIN").option is FrameOption.SAMEORIGIN  # type: ignore[arg-type]

    def test_unknown_option_rejected(self):
        with pytest.raises(InvalidDirectiveException):
            XFrameOptionsValue("ALLOWALL")  # type: ignore[arg-type]

    def test_values_compare_by_content(self):
        assert XFrameOptionsValue.deny() == XFrameOptionsValue(FrameOption.DENY)


class TestXXssProtectionValue:
    def test_disabled(self):
        assert XXssProtectionValue.disabled().to_header_string() == "0"

    def test_enabled(self):
        assert XXssProtectionValue.enabled().to_header_string() == "1"

    def test_block(self):
        assert XXssProtectionValue.block().to_header_string() == "1; mode=block"

    def test_report(self):
        assert XXssProtectionValue.report("https://r.example/xss").to_header_string() == "1; report=https://r.example/xss"

    @pytest.mark.parametrize("uri", ["", "  ", "relative/path"])
    def test_report_requires_absolute_uri(self, uri):
        with pytest.raises(InvalidDirectiveException):
            XXssProtectionValue.report(uri)

    @pytest.mark.parametrize("uri", ["https://r.example/отчёт", "https://r.example/x;y", "https://r.example/x,y"])
    def test_report_rejects_unsafe_characters(self, uri):
        with pytest.raises(InvalidDirectiveException):
            XXssProtectionValue.report(uri)

    def test_report_mode_without_uri_rejected(self):
        with pytest.raises(InvalidDirectiveException):
            XXssProtectionValue(XssFilteringMode.REPORT)

    def test_block_with_uri_rejected(self):
        with pytest.raises(InvalidDirectiveException):
            XXssProtectionValue(XssFilteringMode.BLOCK, "https://r.example")

    def test_mode_from_string(self):
        assert str(XXssProtectionValue("block")) == "1; mode=block"  # type: ignore[arg-type]
