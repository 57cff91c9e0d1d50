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
"""LocaleEngine: assembles the locale components from configuration."""

from __future__ import annotations

import logging
from typing import Any

from langroute.core.config import Config
from langroute.locale.cookies import CookieCodec
from langroute.locale.paths import PathRewriter
from langroute.locale.properties import LocaleProperties, SupportedLanguageSet, domain_table
from langroute.locale.resolver import PriorityResolver, RequestLocaleResolver
from langroute.locale.types import RequestView, ResolutionResult
from langroute.locale.validator import Validator

logger = logging.getLogger(__name__)


class LocaleEngine:
    """The validated, immutable set of locale components an application keeps.

    Build it once at startup with :meth:`from_config` (or directly from
    :class:`LocaleProperties`) and share it across requests.
    """

    def __init__(self, props: LocaleProperties | None = None) -> None:
        self.properties = props or LocaleProperties()
        self.languages = SupportedLanguageSet.from_properties(self.properties)
        self.validator = Validator(self.languages)
        self.paths = PathRewriter(self.validator)
        self.cookies = CookieCodec(self.validator, self.properties.cookie)
        self.resolver = PriorityResolver(
            self.validator,
            self.cookies,
            header_strategy=self.properties.header_strategy,
            domain_languages=domain_table(self.properties),
        )
        self.request_resolver = RequestLocaleResolver(self.resolver)

    @classmethod
    def from_config(cls, config: Config) -> LocaleEngine:
        """Bind and validate ``langroute.locale``.

        Raises:
            ConfigurationException: The locale section is invalid.
        """
        props = config.bind(LocaleProperties)
        engine = cls(props)
        logger.info(
            "Locale engine configured: languages=%s fallback=%s header_strategy=%s",
            ",".join(engine.languages.codes),
            engine.languages.fallback,
            props.header_strategy,
        )
        return engine

    def resolve(self, view: RequestView) -> ResolutionResult:
        return self.resolver.resolve(view)

    def resolve_request(self, request: Any) -> ResolutionResult:
        return self.request_resolver.resolve(request)
