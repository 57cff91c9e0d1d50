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
"""Response helpers: language cookies and the language-switch redirect."""

from __future__ import annotations

from typing import Any

from starlette.responses import RedirectResponse

from langroute.locale.cookies import CookieCodec
from langroute.locale.engine import LocaleEngine
from langroute.locale.types import Locale


def write_language_cookies(response: Any, codec: CookieCodec, locale: Locale, secure: bool = False) -> None:
    """Set the primary language cookie and its mirror on *response*."""
    value = codec.build_language_cookie(locale.language, locale.region)
    options = codec.cookie_options(secure)
    for name in codec.written_names():
        response.set_cookie(key=name, value=value, **options)


def clear_language_cookies(response: Any, codec: CookieCodec) -> None:
    """Expire every cookie name the resolver consults."""
    for name in codec.cookie_names():
        response.delete_cookie(name, path="/")


def language_redirect(
    request: Any,
    engine: LocaleEngine,
    language: str,
    region: str | None = None,
    status_code: int = 303,
) -> RedirectResponse:
    """Redirect to the current page in *language* and remember the choice.

    The path's language segment is swapped and the query string kept.
    An unsupported *language* redirects to the current URL unchanged and
    sets no cookies. A malformed *region* is dropped.
    """
    url = request.url
    if not engine.validator.supported_language(language):
        return RedirectResponse(str(url), status_code=status_code)

    base_url = f"{url.scheme}://{url.netloc}"
    target = engine.paths.language_url(base_url, url.path, language, url.query)
    response = RedirectResponse(target, status_code=status_code)

    if region is not None and not engine.validator.valid_region(region):
        region = None
    write_language_cookies(response, engine.cookies, Locale(language, region), secure=url.scheme == "https")
    return response
