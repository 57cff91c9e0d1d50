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
"""Locale resolution: the priority chain and the request adapter.

Sources are consulted in a fixed order and the first one yielding a
supported language wins::

    path -> query -> cookie (primary, then secondary names) -> Accept-Language
         -> host -> fallback

A source whose candidate is missing, malformed or unsupported is skipped.
The fallback always succeeds, so resolution never fails.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from typing import Any, Protocol, runtime_checkable

from langroute.locale.cookies import CookieCodec
from langroute.locale.patterns import (
    DEFAULT_DOMAIN_LANGUAGES,
    extract_from_domain,
    parse_cookie,
    parse_header,
    parse_header_weighted,
    parse_path,
    parse_query,
)
from langroute.locale.types import DetectionSource, Locale, RequestView, ResolutionResult
from langroute.locale.validator import Validator

logger = logging.getLogger(__name__)


@runtime_checkable
class LocaleResolver(Protocol):
    """Port for determining the language of an incoming request."""

    def resolve_locale(self, request: Any) -> str: ...


class PriorityResolver:
    """Walks the detection sources in precedence order."""

    def __init__(
        self,
        validator: Validator,
        codec: CookieCodec,
        header_strategy: str = "first",
        domain_languages: Mapping[str, str] = DEFAULT_DOMAIN_LANGUAGES,
    ) -> None:
        self._validator = validator
        self._codec = codec
        self._parse_header = parse_header_weighted if header_strategy == "quality" else parse_header
        self._domain_languages = domain_languages

    def resolve(self, view: RequestView) -> ResolutionResult:
        for source, locale in self._candidates(view):
            if locale is None:
                continue
            if self._validator.supported_language(locale.language):
                logger.debug("Resolved locale %s from %s for %s", locale, source.value, view.path)
                return ResolutionResult(locale.language, source, locale.region)
            logger.debug("Skipped unsupported %s candidate %s", source.value, locale)

        fallback = self._validator.fallback_language()
        logger.debug("No supported candidate for %s, using fallback %s", view.path, fallback)
        return ResolutionResult(fallback, DetectionSource.FALLBACK)

    def _candidates(self, view: RequestView) -> Iterator[tuple[DetectionSource, Locale | None]]:
        """Lazily yield one candidate per source, in precedence order."""
        yield DetectionSource.PATH, parse_path(view.path)
        yield DetectionSource.QUERY, parse_query(view.query_string)

        for name in self._codec.cookie_names():
            value = view.cookies.get(name)
            if value is not None:
                yield DetectionSource.COOKIE, parse_cookie(f"{name}={value}")

        yield DetectionSource.HEADER, self._parse_header(view.header_accept_language)

        language = extract_from_domain(view.host, self._domain_languages)
        yield DetectionSource.DOMAIN, Locale(language) if language else None


def request_view(request: Any) -> RequestView:
    """Snapshot a Starlette-style request as a :class:`RequestView`.

    Reads ``request.url`` (path, query, scheme, hostname), ``request.cookies``
    and ``request.headers`` through attribute access only.
    """
    url = getattr(request, "url", None)
    headers = getattr(request, "headers", None) or {}
    host = headers.get("host") or getattr(url, "hostname", None) or ""
    return RequestView(
        path=getattr(url, "path", None) or "/",
        query_string=getattr(url, "query", None) or "",
        cookies=dict(getattr(request, "cookies", None) or {}),
        header_accept_language=headers.get("accept-language"),
        host=host,
        scheme=getattr(url, "scheme", None) or "http",
    )


class RequestLocaleResolver:
    """:class:`LocaleResolver` for web requests, backed by a :class:`PriorityResolver`.

    Every request-facing entry point (filter, redirect helper) goes through
    this class so the chain is defined once.
    """

    def __init__(self, resolver: PriorityResolver) -> None:
        self._resolver = resolver

    def resolve(self, request: Any) -> ResolutionResult:
        return self._resolver.resolve(request_view(request))

    def resolve_locale(self, request: Any) -> str:
        return self.resolve(request).language
