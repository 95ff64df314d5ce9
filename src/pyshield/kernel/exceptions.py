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
"""Unified exception hierarchy for PyShield.

All library exceptions inherit from PyShieldException so callers can catch
one type for every PyShield failure, or a subclass for targeted handling.

Categories:
- ValidationException: a value object refused its inputs at construction
- ConfigurationException: configuration could not be bound to header settings
"""

from __future__ import annotations

from typing import Any


class PyShieldException(Exception):
    """Base exception for all PyShield errors.

    Args:
        message: Human-readable error description.
        code: Machine-readable error code (e.g. "INVALID_DIRECTIVE").
        context: Arbitrary key-value pairs describing the failure.
    """

    def __init__(
        self,
        message: str,
        code: str | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.context: dict[str, Any] = context if context is not None else {}


class ValidationException(PyShieldException):
    """Input validation failures."""


class InvalidDirectiveException(ValidationException):
    """A header directive is missing, negative, or not a valid header token.

    Raised only while a header value object is being constructed; a value
    object that exists can always be serialized.
    """

    def __init__(self, message: str, *, header: str, field: str) -> None:
        super().__init__(message, code="INVALID_DIRECTIVE", context={"header": header, "field": field})
        self.header = header
        self.field = field


class ConfigurationException(PyShieldException):
    """Configuration values could not be bound or resolved."""
