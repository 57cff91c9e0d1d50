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
"""LocaleFilter: resolves the request language once and persists it."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import structlog

from langroute.context.request_context import RequestContext
from langroute.locale.engine import LocaleEngine
from langroute.web.adapters.starlette.language import write_language_cookies
from langroute.web.filters import CallNext, OncePerRequestFilter

logger = structlog.get_logger("langroute.web")

DEFAULT_EXCLUDE_PATTERNS: tuple[str, ...] = (
    "/static/*",
    "/assets/*",
    "/favicon.ico",
    "/robots.txt",
    "/health",
    "/ready",
)


class LocaleFilter(OncePerRequestFilter):
    """Fulfils the per-request locale contract.

    1. Creates a fresh :class:`RequestContext` (``X-Request-Id`` honoured).
    2. Resolves the language exactly once and stores the result on the
       context, logs the decision through structlog and binds ``locale``
       and ``request_id`` into structlog context variables, so host
       application log lines emitted downstream carry them.
    3. After the downstream handler returns, writes the primary and mirror
       language cookies and a ``Content-Language`` header unless the
       handler already chose one.
    4. Clears the context, even when the handler raises.
    """

    def __init__(self, engine: LocaleEngine, exclude_patterns: Sequence[str] | None = None) -> None:
        self._engine = engine
        self.exclude_patterns = list(DEFAULT_EXCLUDE_PATTERNS if exclude_patterns is None else exclude_patterns)

    async def do_filter(self, request: Any, call_next: CallNext) -> Any:
        ctx = RequestContext.init(request_id=request.headers.get("x-request-id"))
        try:
            result = self._engine.resolve_request(request)
            ctx.locale = result
            with structlog.contextvars.bound_contextvars(locale=str(result), request_id=ctx.request_id):
                logger.debug(
                    "locale_resolved",
                    path=request.url.path,
                    language=result.language,
                    region=result.region,
                    source=result.source.value,
                )
                response = await call_next(request)

            write_language_cookies(response, self._engine.cookies, result.locale, secure=request.url.scheme == "https")
            if "content-language" not in response.headers:
                response.headers["Content-Language"] = str(result)
            return response
        finally:
            RequestContext.clear()
