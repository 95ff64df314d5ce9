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
"""Tests for the duration and URI helpers."""

from datetime import timedelta

import pytest

from pyshield.headers.directives import coerce_choice, require_absolute_uri, to_seconds
from pyshield.headers.values import FrameOption
from pyshield.kernel.exceptions import InvalidDirectiveException


class TestToSeconds:
    def test_timedelta(self):
        assert to_seconds(timedelta(days=1), header="H") == 86400

    def test_truncates_sub_second(self):
        assert to_seconds(timedelta(seconds=59, milliseconds=999), header="H") == 59
        assert to_seconds(1.9, header="H") == 1

    def test_int_seconds(self):
        assert to_seconds(0, header="H") == 0

    @pytest.mark.parametrize("value", [-1, -0.5, timedelta(seconds=-1), float("nan"), float("inf"), True, "10"])
    def test_rejects(self, value):
        with pytest.raises(InvalidDirectiveException) as exc_info:
            to_seconds(value, header="H")
        assert exc_info.value.field == "max_age"


class TestRequireAbsoluteUri:
    def test_accepts_absolute(self):
        assert require_absolute_uri("https://a.example/path?q=1", header="H", field="uri") == "https://a.example/path?q=1"

    @pytest.mark.parametrize(
        "uri",
        [None, "", "   ", "/relative", "a.example", "https://", 'https://a.example/"x', "https://a.example/ x"],
    )
    def test_rejects(self, uri):
        with pytest.raises(InvalidDirectiveException):
            require_absolute_uri(uri, header="H", field="uri")


    @pytest.mark.parametrize("uri", ["https://пример.example", "https://r.example/отчёт", "https://a.example/\u00e9"])
    def test_rejects_non_ascii(self, uri):
        with pytest.raises(InvalidDirectiveException, match="not allowed in a header value"):
            require_absolute_uri(uri, header="H", field="uri")

    @pytest.mark.parametrize("uri", ["https://a.example/x;y", "https://a.example/x,y"])
    def test_rejects_separators_when_asked(self, uri):
        with pytest.raises(InvalidDirectiveException, match="must not contain"):
            require_absolute_uri(uri, header="H", field="uri", separators=";,")

    def test_separators_allowed_by_default(self):
        assert require_absolute_uri("https://a.example/x;y", header="H", field="uri") == "https://a.example/x;y"


class TestCoerceChoice:
    def test_by_value_and_name(self):
        assert coerce_choice(FrameOption, "ALLOW-FROM", header="H", field="option") is FrameOption.ALLOW_FROM
        assert coerce_choice(FrameOption, "allow_from", header="H", field="option") is FrameOption.ALLOW_FROM
        assert coerce_choice(FrameOption, "sameorigin", header="H", field="option") is FrameOption.SAMEORIGIN

    def test_unknown_raises(self):
        with pytest.raises(InvalidDirectiveException, match="must be one of"):
            coerce_choice(FrameOption, "ALLOWALL", header="H", field="option")
