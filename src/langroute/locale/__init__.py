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
"""langroute Locale: detection, validation and URL localization.

Most applications only need :class:`LocaleEngine`; the pure extractors are
available from :mod:`langroute.locale.patterns`.
"""

from langroute.locale.cookies import CookieCodec
from langroute.locale.engine import LocaleEngine
from langroute.locale.paths import PathRewriter
from langroute.locale.properties import (
    CookieProperties,
    LanguageProperties,
    LocaleProperties,
    SupportedLanguageSet,
)
from langroute.locale.resolver import (
    LocaleResolver,
    PriorityResolver,
    RequestLocaleResolver,
    request_view,
)
from langroute.locale.types import (
    DetectionSource,
    LanguageInfo,
    Locale,
    RequestView,
    ResolutionResult,
)
from langroute.locale.validator import Validator

__all__ = [
    "CookieCodec",
    "CookieProperties",
    "DetectionSource",
    "LanguageInfo",
    "LanguageProperties",
    "Locale",
    "LocaleEngine",
    "LocaleProperties",
    "LocaleResolver",
    "PathRewriter",
    "PriorityResolver",
    "RequestLocaleResolver",
    "RequestView",
    "ResolutionResult",
    "SupportedLanguageSet",
    "Validator",
    "request_view",
]
