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
"""Locale configuration properties and the supported-language set.

``LocaleProperties`` is bound from the ``langroute.locale`` section and
validated once, when the engine is assembled. A configuration that could
produce an unsupported fallback, an ambiguous cookie layout or an unknown
header strategy is rejected there, never during request handling.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from langroute.core.config import config_properties
from langroute.locale.iso639 import is_iso639_1
from langroute.locale.patterns import DEFAULT_DOMAIN_LANGUAGES, is_language_token
from langroute.locale.types import LanguageInfo


def _kebab(name: str) -> str:
    return name.replace("_", "-")


class _Properties(BaseModel):
    model_config = ConfigDict(alias_generator=_kebab, populate_by_name=True, extra="forbid")


class LanguageProperties(_Properties):
    """One entry of ``langroute.locale.languages``."""

    name: str | None = None
    native_name: str | None = None
    direction: Literal["ltr", "rtl"] = "ltr"
    script: str = "Latn"


class CookieProperties(_Properties):
    """``langroute.locale.cookie``."""

    primary: str = "lang"
    secondary: list[str] = Field(default_factory=lambda: ["site_lang", "session_lang"])
    secure: Literal["auto", "always", "never"] = "auto"
    max_age: int = Field(default=365 * 24 * 60 * 60, gt=0)

    @field_validator("primary")
    @classmethod
    def _primary_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("primary cookie name must not be blank")
        return value.strip()

    @field_validator("secondary")
    @classmethod
    def _secondary_not_blank(cls, value: list[str]) -> list[str]:
        names = [name.strip() for name in value]
        if any(not name for name in names):
            raise ValueError("secondary cookie names must not be blank")
        if len(set(names)) != len(names):
            raise ValueError("secondary cookie names must be unique")
        return names

    @model_validator(mode="after")
    def _primary_is_not_secondary(self) -> CookieProperties:
        if self.primary in self.secondary:
            raise ValueError(f"cookie '{self.primary}' is both primary and secondary")
        return self


@config_properties(prefix="langroute.locale")
class LocaleProperties(_Properties):
    """``langroute.locale``: supported languages, fallback, cookies, hosts."""

    fallback: str = "en"
    languages: dict[str, LanguageProperties] = Field(
        default_factory=lambda: {"en": LanguageProperties(name="English", native_name="English")}
    )
    header_strategy: Literal["first", "quality"] = "first"
    cookie: CookieProperties = Field(default_factory=CookieProperties)
    domains: dict[str, str] = Field(default_factory=dict)

    @field_validator("languages")
    @classmethod
    def _languages_well_formed(cls, value: dict[str, LanguageProperties]) -> dict[str, LanguageProperties]:
        if not value:
            raise ValueError("at least one language must be configured")
        malformed = [code for code in value if not (is_language_token(code) and is_iso639_1(code))]
        if malformed:
            raise ValueError(f"language codes must be lowercase ISO 639-1 codes: {malformed}")
        return value

    @field_validator("domains")
    @classmethod
    def _domains_well_formed(cls, value: dict[str, str]) -> dict[str, str]:
        for tld, language in value.items():
            if not tld or "." in tld or tld != tld.lower():
                raise ValueError(f"domain key '{tld}' must be a lowercase top-level label without dots")
            if not (is_language_token(language) and is_iso639_1(language)):
                raise ValueError(f"domain '{tld}' maps to unknown language code '{language}'")
        return value

    @model_validator(mode="after")
    def _fallback_is_supported(self) -> LocaleProperties:
        if self.fallback not in self.languages:
            raise ValueError(f"fallback language '{self.fallback}' is not among the supported languages")
        return self


@dataclass(frozen=True)
class SupportedLanguageSet:
    """Immutable allow-list of languages with display metadata and a fallback."""

    codes: tuple[str, ...]
    infos: Mapping[str, LanguageInfo]
    fallback: str

    def __contains__(self, code: object) -> bool:
        return code in self.infos

    def __iter__(self):
        return iter(self.codes)

    def __len__(self) -> int:
        return len(self.codes)

    @classmethod
    def from_properties(cls, props: LocaleProperties) -> SupportedLanguageSet:
        infos = {
            code: LanguageInfo(
                code=code,
                name=entry.name or code,
                native_name=entry.native_name or entry.name or code,
                direction=entry.direction,
                script=entry.script,
            )
            for code, entry in props.languages.items()
        }
        return cls(
            codes=tuple(props.languages),
            infos=MappingProxyType(infos),
            fallback=props.fallback,
        )


def domain_table(props: LocaleProperties) -> Mapping[str, str]:
    """Built-in ccTLD table with configured entries layered on top."""
    return MappingProxyType({**DEFAULT_DOMAIN_LANGUAGES, **props.domains})
