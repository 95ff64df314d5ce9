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
"""Tests for the PyShield exception hierarchy."""

from pyshield.kernel.exceptions import (
    ConfigurationException,
    InvalidDirectiveException,
    PyShieldException,
    ValidationException,
)


class TestPyShieldException:
    def test_basic_creation(self):
        exc = PyShieldException("something went wrong")
        assert str(exc) == "something went wrong"
        assert exc.code is None
        assert exc.context == {}

    def test_with_code_and_context(self):
        exc = PyShieldException("bad", code="X_001", context={"key": "value"})
        assert exc.code == "X_001"
        assert exc.context["key"] == "value"

    def test_context_not_shared_between_instances(self):
        exc = PyShieldException("test")
        exc.context["key"] = "value"
        assert PyShieldException("test2").context == {}


class TestInvalidDirectiveException:
    def test_carries_header_and_field(self):
        exc = InvalidDirectiveException("bad uri", header="X-Frame-Options", field="uri")
        assert exc.code == "INVALID_DIRECTIVE"
        assert exc.header == "X-Frame-Options"
        assert exc.field == "uri"
        assert exc.context == {"header": "X-Frame-Options", "field": "uri"}


class TestExceptionHierarchy:
    def test_validation_is_pyshield(self):
        assert issubclass(ValidationException, PyShieldException)

    def test_invalid_directive_is_validation(self):
        assert issubclass(InvalidDirectiveException, ValidationException)

    def test_configuration_is_pyshield(self):
        assert issubclass(ConfigurationException, PyShieldException)
