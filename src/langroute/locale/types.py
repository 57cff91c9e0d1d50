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
"""Value types shared by the locale engine."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import StrEnum
from types import MappingProxyType


@dataclass(frozen=True)
class Locale:
    """A language code with an optional region refinement."""

    language: str
    region: str | None = None

    def __str__(self) -> str:
        if self.region:
            return f"{self.language}-{self.region}"
        return self.language


@dataclass(frozen=True)
class LanguageInfo:
    """Display metadata for a supported language."""

    code: str
    name: str
    native_name: str
    direction: str = "ltr"
    script: str = "Latn"


class DetectionSource(StrEnum):
    """Where a resolved language came from, in precedence order."""

    PATH = "path"
    QUERY = "query"
    COOKIE = "cookie"
    HEADER = "header"
    DOMAIN = "domain"
    FALLBACK = "fallback"


def _frozen_cookies(cookies: Mapping[str, str] | None) -> Mapping[str, str]:
    return MappingProxyType(dict(cookies or {}))


@dataclass(frozen=True)
class RequestView:
    """Read-only snapshot of the request parts the resolver looks at.

    ``scheme`` only decides whether outgoing cookies are marked ``Secure``.
    """

    path: str = "/"
    query_string: str = ""
    cookies: Mapping[str, str] = field(default_factory=dict)
    header_accept_language: str | None = None
    host: str = ""
    scheme: str = "http"

    def __post_init__(self) -> None:
        object.__setattr__(self, "cookies", _frozen_cookies(self.cookies))

    @property
    def is_secure(self) -> bool:
        return self.scheme in ("https", "wss")


@dataclass(frozen=True)
class ResolutionResult:
    """The language chosen for a request and the source that produced it."""

    language: str
    source: DetectionSource
    region: str | None = None

    @property
    def locale(self) -> Locale:
        return Locale(self.language, self.region)

    @property
    def is_fallback(self) -> bool:
        return self.source is DetectionSource.FALLBACK

    def __str__(self) -> str:
        return str(self.locale)
