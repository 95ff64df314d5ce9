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
"""In-memory response headers — for tests and hosts without a header object."""

from __future__ import annotations

from collections.abc import Iterable, Iterator


class InMemoryResponseHeaders:
    """Case-insensitive, insertion-ordered multi-value header collection."""

    def __init__(self, headers: Iterable[tuple[str, str]] = ()) -> None:
        self._items: list[tuple[str, str]] = list(headers)

    def has_header(self, name: str) -> bool:
        key = name.lower()
        return any(existing.lower() == key for existing, _ in self._items)

    def set_header(self, name: str, value: str) -> None:
        """Replace every entry named *name* with a single entry at the first one's position."""
        key = name.lower()
        updated: list[tuple[str, str]] = []
        replaced = False
        for existing, existing_value in self._items:
            if existing.lower() != key:
                updated.append((existing, existing_value))
            elif not replaced:
                updated.append((existing, value))
                replaced = True
        if not replaced:
            updated.append((name, value))
        self._items = updated

    def append_header(self, name: str, value: str) -> None:
        self._items.append((name, value))

    def get(self, name: str, default: str | None = None) -> str | None:
        """First value of *name*, or *default*."""
        key = name.lower()
        for existing, value in self._items:
            if existing.lower() == key:
                return value
        return default

    def get_all(self, name: str) -> list[str]:
        key = name.lower()
        return [value for existing, value in self._items if existing.lower() == key]

    def items(self) -> list[tuple[str, str]]:
        return list(self._items)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.has_header(name)

    def __iter__(self) -> Iterator[str]:
        return (name for name, _ in self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"InMemoryResponseHeaders({self._items!r})"
