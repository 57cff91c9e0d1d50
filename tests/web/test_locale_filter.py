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
"""Tests for LocaleFilter running inside WebFilterChainMiddleware."""

from __future__ import annotations

from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest
import structlog
from starlette.applications import Starlette
from starlette.middleware import Middleware
from starlette.requests import Request
from starlette.responses import JSONResponse, PlainTextResponse
from starlette.routing import Route
from starlette.testclient import TestClient

from langroute.context.request_context import RequestContext, current_language
from langroute.web.adapters.starlette import LocaleFilter, WebFilterChainMiddleware
from langroute.web.adapters.starlette.filters import locale_filter


async def locale_endpoint(request: Request) -> JSONResponse:
    ctx = RequestContext.current()
    return JSONResponse(
        {
            "language": current_language(),
            "source": ctx.locale.source.value if ctx else None,
            "request_id": ctx.request_id if ctx else None,
        }
    )


async def german_endpoint(request: Request) -> PlainTextResponse:
    return PlainTextResponse("Hallo", headers={"Content-Language": "de"})


@pytest.fixture
def app(engine):
    routes = [
        Route("/", locale_endpoint),
        Route("/{rest:path}", locale_endpoint),
    ]
    return Starlette(
        routes=[Route("/greeting", german_endpoint), *routes],
        middleware=[Middleware(WebFilterChainMiddleware, filters=[LocaleFilter(engine)])],
    )


@pytest.fixture
def client(app):
    return TestClient(app)


def _set_cookies(response) -> list[str]:
    return response.headers.get_list("set-cookie")


class TestResolution:
    def test_language_from_path(self, client):
        data = client.get("/bg/posts").json()
        assert data == {"language": "bg", "source": "path", "request_id": data["request_id"]}

    def test_language_from_query(self, client):
        assert client.get("/posts?lang=de").json()["language"] == "de"

    def test_language_from_cookie(self, client):
        client.cookies.set("lang", "fr")
        assert client.get("/posts").json()["source"] == "cookie"

    def test_language_from_header(self, client):
        response = client.get("/posts", headers={"Accept-Language": "ja-JP,ja;q=0.9"})
        assert response.json()["language"] == "ja"
        assert response.headers["content-language"] == "ja-JP"

    def test_fallback(self, client):
        data = client.get("/posts").json()
        assert (data["language"], data["source"]) == ("en", "fallback")

    def test_uses_x_request_id_header(self, client):
        response = client.get("/posts", headers={"X-Request-Id": "req-42"})
        assert response.json()["request_id"] == "req-42"

    def test_each_request_gets_unique_id(self, client):
        first = client.get("/posts").json()["request_id"]
        second = client.get("/posts").json()["request_id"]
        assert first != second


class TestResponse:
    def test_writes_primary_and_mirror_cookie(self, client):
        cookies = _set_cookies(client.get("/bg/posts"))
        assert len(cookies) == 2
        assert cookies[0].startswith("lang=bg;")
        assert cookies[1].startswith("site_lang=bg;")

    def test_cookie_attributes(self, client):
        cookie = _set_cookies(client.get("/bg/"))[0]
        assert "Max-Age=31536000" in cookie
        assert "Path=/" in cookie
        assert "SameSite=lax" in cookie
        assert "HttpOnly" not in cookie
        assert "Secure" not in cookie

    def test_secure_over_https(self, app):
        client = TestClient(app, base_url="https://testserver")
        cookies = _set_cookies(client.get("/bg/"))
        assert all("Secure" in cookie for cookie in cookies)

    def test_fallback_is_persisted_too(self, client):
        assert _set_cookies(client.get("/posts"))[0].startswith("lang=en;")

    def test_cookie_keeps_region(self, client):
        response = client.get("/US/en/docs")
        assert _set_cookies(response)[0].startswith("lang=en-US;")
        assert response.headers["content-language"] == "en-US"

    def test_content_language_set(self, client):
        assert client.get("/bg/posts").headers["content-language"] == "bg"

    def test_handler_content_language_kept(self, client):
        response = client.get("/greeting?lang=fr")
        assert response.text == "Hallo"
        assert response.headers["content-language"] == "de"
        assert _set_cookies(response)[0].startswith("lang=fr;")


class TestExclusions:
    @pytest.mark.parametrize("path", ["/static/app.css", "/favicon.ico", "/health"])
    def test_excluded_paths_untouched(self, client, path):
        response = client.get(path)
        assert response.json()["language"] is None
        assert _set_cookies(response) == []
        assert "content-language" not in response.headers

    def test_custom_exclusions(self, engine):
        app = Starlette(
            routes=[Route("/{rest:path}", locale_endpoint)],
            middleware=[
                Middleware(WebFilterChainMiddleware, filters=[LocaleFilter(engine, exclude_patterns=["/api/*"])])
            ],
        )
        client = TestClient(app)
        assert client.get("/api/items").json()["language"] is None
        assert client.get("/static/app.css").json()["language"] == "en"


class TestContextLifecycle:
    @staticmethod
    def _request(path: str = "/bg/"):
        return SimpleNamespace(
            url=SimpleNamespace(path=path, query="", scheme="http", hostname="localhost"),
            headers={},
            cookies={},
        )

    async def test_context_cleared_after_request(self, engine):
        seen = {}

        async def call_next(request):
            seen["language"] = current_language()
            return PlainTextResponse("ok")

        await LocaleFilter(engine).do_filter(self._request(), call_next)
        assert seen == {"language": "bg"}
        assert RequestContext.current() is None

    async def test_context_cleared_when_handler_raises(self, engine):
        async def call_next(request):
            raise RuntimeError("boom")

        with pytest.raises(RuntimeError):
            await LocaleFilter(engine).do_filter(self._request(), call_next)
        assert RequestContext.current() is None


class TestStructlogBinding:
    @staticmethod
    def _request(path: str = "/de-AT/news"):
        return SimpleNamespace(
            url=SimpleNamespace(path=path, query="", scheme="http", hostname="localhost"),
            headers={"x-request-id": "req-7"},
            cookies={},
        )

    async def test_downstream_sees_bound_fields(self, engine):
        seen = {}

        async def call_next(request):
            seen.update(structlog.contextvars.get_contextvars())
            return PlainTextResponse("ok")

        await LocaleFilter(engine).do_filter(self._request(), call_next)
        assert seen["locale"] == "de-AT"
        assert seen["request_id"] == "req-7"
        assert "locale" not in structlog.contextvars.get_contextvars()

    async def test_decision_logged(self, engine, monkeypatch):
        recorder = MagicMock()
        monkeypatch.setattr(locale_filter, "logger", recorder)

        async def call_next(request):
            return PlainTextResponse("ok")

        await LocaleFilter(engine).do_filter(self._request(), call_next)
        recorder.debug.assert_called_once_with(
            "locale_resolved",
            path="/de-AT/news",
            language="de",
            region="AT",
            source="path",
        )
