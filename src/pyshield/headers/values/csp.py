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
"""Content-Security-Policy header value."""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass

from pyshield.headers.names import HeaderNames
from pyshield.kernel.exceptions import InvalidDirectiveException

# Source keywords that must appear single-quoted on the wire.
SELF = "'self'"
NONE = "'none'"
UNSAFE_INLINE = "'unsafe-inline'"
UNSAFE_EVAL = "'unsafe-eval'"
STRICT_DYNAMIC = "'strict-dynamic'"

_DIRECTIVE_NAME_RE = re.compile(r"^[a-z]+(?:-[a-z]+)*$")
# Visible ASCII except "," (0x2c) and ";" (0x3b).
_SOURCE_RE = re.compile(r"^[\x21-\x2b\x2d-\x3a\x3c-\x7e]+$")

Sources = str | Iterable[str] | bool | None


def _normalize_sources(name: str, sources: Sources, header: str) -> tuple[str, ...]:
    """Turn a directive's sources into a tuple of validated tokens.

    ``True``/``None``/empty mean a bare directive such as
    ``upgrade-insecure-requests``; a string is split on whitespace.
    """
    if sources is None or sources is True:
        return ()
    if sources is False:
        raise InvalidDirectiveException(
            f"{header} directive '{name}' cannot be False; omit it instead", header=header, field=name
        )
    tokens = tuple(sources.split()) if isinstance(sources, str) else tuple(sources)
    for token in tokens:
        if not isinstance(token, str) or not _SOURCE_RE.match(token):
            raise InvalidDirectiveException(
                f"{header} directive '{name}' has an invalid source {token!r}", header=header, field=name
            )
    return tokens


@dataclass(frozen=True)
class ContentSecurityPolicyValue:
    """An ordered set of CSP directives, e.g. ``default-src 'self'; img-src 'self' data:``.

    Directives keep the order they were given in. ``report_only`` switches the
    header to ``Content-Security-Policy-Report-Only``.

    Usage::

        csp = ContentSecurityPolicyValue.of(
            {"default-src": SELF, "img-src": [SELF, "data:"], "upgrade-insecure-requests": True}
        )
    """

    directives: tuple[tuple[str, tuple[str, ...]], ...]
    report_only: bool = False

    def __post_init__(self) -> None:
        header = self.header_name
        if not self.directives:
            raise InvalidDirectiveException(
                f"{header} needs at least one directive", header=header, field="directives"
            )
        seen: set[str] = set()
        normalized = []
        for name, sources in self.directives:
            if not isinstance(name, str) or not _DIRECTIVE_NAME_RE.match(name):
                raise InvalidDirectiveException(
                    f"{header} directive name {name!r} is not valid", header=header, field="directives"
                )
            if name in seen:
                raise InvalidDirectiveException(
                    f"{header} directive '{name}' is given more than once", header=header, field=name
                )
            seen.add(name)
            normalized.append((name, _normalize_sources(name, sources, header)))
        object.__setattr__(self, "directives", tuple(normalized))

    @staticmethod
    def of(directives: Mapping[str, Sources], report_only: bool = False) -> ContentSecurityPolicyValue:
        """Build a policy from a mapping of directive name to sources."""
        return ContentSecurityPolicyValue(tuple(directives.items()), report_only=report_only)  # type: ignore[arg-type]

    @property
    def header_name(self) -> str:
        if self.report_only:
            return HeaderNames.CONTENT_SECURITY_POLICY_REPORT_ONLY
        return HeaderNames.CONTENT_SECURITY_POLICY

    def get(self, name: str) -> tuple[str, ...] | None:
        """Sources of directive *name*, or None if the policy lacks it."""
        for directive, sources in self.directives:
            if directive == name:
                return sources
        return None

    def with_directive(self, name: str, *sources: str) -> ContentSecurityPolicyValue:
        """Return a copy with *name* replaced in place, or appended if absent."""
        if self.get(name) is None:
            updated = [*self.directives, (name, sources)]
        else:
            updated = [(d, sources if d == name else s) for d, s in self.directives]
        return ContentSecurityPolicyValue(tuple(updated), report_only=self.report_only)

    def to_header_string(self) -> str:
        return "; ".join(" ".join((name, *sources)) for name, sources in self.directives)

    def __str__(self) -> str:
        return self.to_header_string()
