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
"""Formatting and validation helpers shared by the header value objects."""

from __future__ import annotations

import math
import re
from datetime import timedelta
from enum import Enum
from typing import TypeVar
from urllib.parse import urlsplit

from pyshield.kernel.exceptions import InvalidDirectiveException

Duration = timedelta | int | float

E = TypeVar("E", bound=Enum)

# Anything but visible ASCII, and the double quote.
_UNSAFE_URI_CHARS = re.compile(r'[^\x21-\x7e]|"')


def to_seconds(value: Duration, *, header: str, field: str = "max_age") -> int:
    """Convert a duration to whole seconds, truncating toward zero.

    ``timedelta`` and plain numbers (seconds) are accepted. Negative, NaN,
    infinite and non-numeric values raise :class:`InvalidDirectiveException`.
    """
    if isinstance(value, timedelta):
        seconds = value.total_seconds()
    elif isinstance(value, (int, float)) and not isinstance(value, bool):
        seconds = value
    else:
        raise InvalidDirectiveException(
            f"{header} {field} must be a timedelta or a number of seconds, got {type(value).__name__}",
            header=header,
            field=field,
        )

    if isinstance(seconds, float) and not math.isfinite(seconds):
        raise InvalidDirectiveException(f"{header} {field} must be finite", header=header, field=field)
    if seconds < 0:
        raise InvalidDirectiveException(
            f"{header} {field} must be >= 0, got {seconds}", header=header, field=field
        )
    if isinstance(value, timedelta):
        # Exact integer arithmetic; total_seconds() is a float.
        return value.days * 86400 + value.seconds
    return int(seconds)


def require_absolute_uri(uri: str | None, *, header: str, field: str, separators: str = "") -> str:
    """Validate that *uri* is an absolute URI usable inside a header value.

    The URI is returned unchanged. It must have a scheme and a network
    location, and may only contain visible ASCII other than double quotes.
    Characters in *separators* are rejected too; unquoted URIs pass ``";,"``
    so they cannot be mistaken for the next directive.
    """
    if uri is None or not isinstance(uri, str) or not uri.strip():
        raise InvalidDirectiveException(f"{header} {field} is required", header=header, field=field)
    if _UNSAFE_URI_CHARS.search(uri):
        raise InvalidDirectiveException(
            f"{header} {field} contains characters not allowed in a header value: {uri!r}",
            header=header,
            field=field,
        )
    if any(char in uri for char in separators):
        raise InvalidDirectiveException(
            f"{header} {field} must not contain any of {separators!r}: {uri!r}", header=header, field=field
        )
    try:
        parts = urlsplit(uri)
    except ValueError as exc:
        raise InvalidDirectiveException(
            f"{header} {field} is not a valid URI: {uri!r}", header=header, field=field
        ) from exc
    if not parts.scheme or not parts.netloc:
        raise InvalidDirectiveException(
            f"{header} {field} must be an absolute URI, got {uri!r}", header=header, field=field
        )
    return uri


def reject_payload(value: object, *, header: str, field: str, variant: str) -> None:
    """Raise if a variant that takes no payload was given one."""
    if value is not None:
        raise InvalidDirectiveException(
            f"{header} {variant} does not take a {field}", header=header, field=field
        )


def coerce_choice(enum_cls: type[E], value: E | str, *, header: str, field: str) -> E:
    """Convert *value* to a member of *enum_cls*, accepting member values and names."""
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError:
        pass
    try:
        return enum_cls[str(value).upper().replace("-", "_")]
    except KeyError:
        choices = ", ".join(member.value for member in enum_cls)
        raise InvalidDirectiveException(
            f"{header} {field} must be one of {choices}, got {value!r}", header=header, field=field
        ) from None
