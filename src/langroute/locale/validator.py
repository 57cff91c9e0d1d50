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
"""Validator: syntactic checks and supported-language membership."""

from __future__ import annotations

from typing import Any

from langroute.locale.iso639 import is_iso639_1
from langroute.locale.patterns import is_language_token, is_region_token, split_locale_token
from langroute.locale.properties import SupportedLanguageSet
from langroute.locale.types import LanguageInfo


class Validator:
    """Answers whether a candidate code may be used, and how to display it.

    The form checks are independent of configuration; membership and
    display lookups read the immutable :class:`SupportedLanguageSet`.
    """

    def __init__(self, languages: SupportedLanguageSet) -> None:
        self._languages = languages

    @property
    def languages(self) -> SupportedLanguageSet:
        return self._languages

    @staticmethod
    def valid_language(code: Any) -> bool:
        """``xx`` naming an ISO 639-1 language, supported or not."""
        return is_language_token(code) and is_iso639_1(code)

    @staticmethod
    def valid_region(code: Any) -> bool:
        """``YY`` form."""
        return is_region_token(code)

    @staticmethod
    def valid_language_region(code: Any) -> bool:
        """``xx-YY`` form with an ISO 639-1 language part."""
        locale = split_locale_token(code)
        return locale is not None and locale.region is not None and is_iso639_1(locale.language)

    def supported_language(self, code: Any) -> bool:
        return self.valid_language(code) and code in self._languages

    def supported_languages(self) -> tuple[str, ...]:
        return self._languages.codes

    def fallback_language(self) -> str:
        return self._languages.fallback

    def language_name(self, code: Any) -> Any:
        """Configured display name, or *code* unchanged when unknown."""
        info = self._languages.infos.get(code) if isinstance(code, str) else None
        return info.name if info else code

    def language_info(self, code: str) -> LanguageInfo:
        """Display metadata; unknown codes get a neutral left-to-right record."""
        info = self._languages.infos.get(code)
        if info is None:
            return LanguageInfo(code=code, name=code, native_name=code)
        return info
