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
"""Tests for SecurityHeadersMiddleware and the Starlette headers adapter."""

from __future__ import annotations

from starlette.applications import Starlette
from starlette.datastructures import MutableHeaders
from starlette.middleware import Middleware
from starlette.responses import JSONResponse, Response
from starlette.routing import Route, WebSocketRoute
from starlette.testclient import TestClient
from starlette.websockets import WebSocket

from pyshield.headers.adapters.starlette import (
    SecurityHeadersMiddleware,
    StarletteResponseHeaders,
    security_headers_middleware,
)
from pyshield.headers.apply import set_x_frame_options
from pyshield.headers.config import SecurityHeadersConfig
from pyshield.headers.ports import ResponseHeadersPort
from pyshield.headers.values import ContentSecurityPolicyValue, ExpectCtValue, XFrameOptionsValue


async def _hello(request):  # noqa: ANN001
    return JSONResponse({"msg": "ok"})


async def _framed(request):  # noqa: ANN001
    return Response("ok", headers={"X-Frame-Options": "SAMEORIGIN"})


async def _ws(websocket: WebSocket) -> None:
    await websocket.accept()
    await websocket.send_text("hi")
    await websocket.close()


def _make_client(config: SecurityHeadersConfig | None = None) -> TestClient:
    if config:
        middleware = [Middleware(SecurityHeadersMiddleware, config=config)]
    else:
        middleware = [Middleware(SecurityHeadersMiddleware)]
    app = Starlette(
        routes=[Route("/hello", _hello), Route("/framed", _framed), WebSocketRoute("/ws", _ws)],
        middleware=middleware,
    )
    return TestClient(app)


class TestStarletteResponseHeaders:
    def test_implements_port(self):
        assert isinstance(StarletteResponseHeaders(MutableHeaders()), ResponseHeadersPort)

    def test_upsert_replaces_existing(self):
        response = Response("ok", headers={"X-Frame-Options": "DENY"})
        headers = StarletteResponseHeaders.from_response(response)
        set_x_frame_options(headers, XFrameOptionsValue.same_origin())
        assert response.headers.getlist("X-Frame-Options") == ["SAMEORIGIN"]

    def test_append_when_absent(self):
        headers = StarletteResponseHeaders(MutableHeaders())
        assert not headers.has_header("X-Frame-Options")
        headers.append_header("X-Frame-Options", "DENY")
        assert headers.headers["x-frame-options"] == "DENY"


class TestSecurityHeadersMiddleware:
    def test_default_headers_applied(self):
        resp = _make_client().get("/hello")

        assert resp.status_code == 200
        assert resp.headers["X-Content-Type-Options"] == "nosniff"
        assert resp.headers["X-Frame-Options"] == "DENY"
        assert resp.headers["Strict-Transport-Security"] == "max-age=31536000; includeSubDomains"
        assert resp.headers["X-XSS-Protection"] == "0"
        assert "Expect-CT" not in resp.headers
        assert "Content-Security-Policy" not in resp.headers

    def test_custom_config(self):
        config = SecurityHeadersConfig(
            expect_ct=ExpectCtValue(86400, enforce=True),
            x_frame_options=XFrameOptionsValue.same_origin(),
            content_security_policy=ContentSecurityPolicyValue.of({"default-src": "'self'"}),
        )
        resp = _make_client(config).get("/hello")

        assert resp.headers["Expect-CT"] == "max-age=86400, enforce"
        assert resp.headers["X-Frame-Options"] == "SAMEORIGIN"
        assert resp.headers["Content-Security-Policy"] == "default-src 'self'"

    def test_replaces_header_set_by_endpoint(self):
        resp = _make_client().get("/framed")
        assert resp.headers.get_list("X-Frame-Options") == ["DENY"]

    def test_disabled_header_keeps_endpoint_value(self):
        resp = _make_client(SecurityHeadersConfig(x_frame_options=None)).get("/framed")
        assert resp.headers.get_list("X-Frame-Options") == ["SAMEORIGIN"]

    def test_report_uri_header_is_written(self):
        config = SecurityHeadersConfig(expect_ct=ExpectCtValue(60, report_uri="https://r.example/ct"))
        resp = _make_client(config).get("/hello")
        assert resp.status_code == 200
        assert resp.headers["Expect-CT"] == 'max-age=60, report-uri="https://r.example/ct"'

    def test_websocket_passes_through(self):
        with _make_client().websocket_connect("/ws") as websocket:
            assert websocket.receive_text() == "hi"

    def test_middleware_factory(self):
        config = SecurityHeadersConfig(x_content_type_options=False)
        app = Starlette(routes=[Route("/hello", _hello)], middleware=[security_headers_middleware(config)])
        resp = TestClient(app).get("/hello")
        assert "X-Content-Type-Options" not in resp.headers
        assert resp.headers["X-Frame-Options"] == "DENY"
