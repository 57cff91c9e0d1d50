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
"""CookieCodec: the language cookie value and its attributes."""

from __future__ import annotations

from typing import Any

from langroute.locale.patterns import parse_cookie
from langroute.locale.properties import CookieProperties
from langroute.locale.types import Locale
from langroute.locale.validator import Validator


class CookieCodec:
    """Encodes ``(language, region?)`` as ``xx`` / ``xx-YY`` and back.

    Cookie names are consulted primary first, then each secondary name in
    configured order. Responses carry the primary cookie plus a mirror under
    the first secondary name.
    """

    def __init__(self, validator: Validator, props: CookieProperties | None = None) -> None:
        self._validator = validator
        self._props = props or CookieProperties()

    @property
    def primary_name(self) -> str:
        return self._props.primary

    @property
    def mirror_name(self) -> str | None:
        return self._props.secondary[0] if self._props.secondary else None

    def cookie_names(self) -> tuple[str, ...]:
        return (self._props.primary, *self._props.secondary)

    def written_names(self) -> tuple[str, ...]:
        """Names set on a response: the primary and its mirror."""
        mirror = self.mirror_name
        return (self._props.primary, mirror) if mirror else (self._props.primary,)

    @staticmethod
    def build_language_cookie(language: str, region: str | None = None) -> str:
        """Cookie value for *language*; *region* is expected to be pre-checked."""
        if region:
            return f"{language}-{region}"
        return language

    def parse_language_cookie(self, fragment: Any) -> Locale | None:
        """Parse ``<name>=<value>``; unsupported languages yield ``None``."""
        locale = parse_cookie(fragment)
        if locale is None or not self._validator.supported_language(locale.language):
            return None
        return locale

    def cookie_options(self, secure: bool = False) -> dict[str, Any]:
        """Keyword arguments for ``Response.set_cookie``.

        *secure* reports whether the request arrived over TLS; the
        ``cookie.secure`` setting may force the flag either way.
        """
        if self._props.secure == "always":
            secure = True
        elif self._props.secure == "never":
            secure = False
        return {
            "max_age": self._props.max_age,
            "path": "/",
            "secure": secure,
            "httponly": False,
            "samesite": "lax",
        }
