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
"""Security headers middleware for Starlette — pure ASGI."""

from __future__ import annotations

from starlette.datastructures import MutableHeaders
from starlette.middleware import Middleware
from starlette.types import ASGIApp, Message, Receive, Scope, Send

from pyshield.headers.adapters.starlette.headers import StarletteResponseHeaders
from pyshield.headers.apply import apply_security_headers
from pyshield.headers.config import SecurityHeadersConfig


class SecurityHeadersMiddleware:
    """Applies a :class:`SecurityHeadersConfig` to every HTTP response.

    Uses raw ASGI protocol instead of ``BaseHTTPMiddleware`` so streaming
    responses are not buffered. Headers the application already set under
    the same names are replaced.
    """

    def __init__(self, app: ASGIApp, config: SecurityHeadersConfig | None = None) -> None:
        self.app = app
        self._config = config or SecurityHeadersConfig()

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        async def send_with_headers(message: Message) -> None:
            if message["type"] == "http.response.start":
                apply_security_headers(StarletteResponseHeaders(MutableHeaders(scope=message)), self._config)
            await send(message)

        await self.app(scope, receive, send_with_headers)


def security_headers_middleware(config: SecurityHeadersConfig | None = None) -> Middleware:
    """``starlette.middleware.Middleware`` entry for ``Starlette(middleware=[...])``."""
    return Middleware(SecurityHeadersMiddleware, config=config)
