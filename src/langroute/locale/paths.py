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
"""PathRewriter: add, remove and detect the language segment of a URL path."""

from __future__ import annotations

from typing import Any

from langroute.locale.patterns import split_path_locale
from langroute.locale.validator import Validator


class PathRewriter:
    """Moves URL paths between their language-neutral and localized forms.

    Recognized leading segments are ``/xx/``, ``/xx-YY/`` and ``/YY/xx/``.
    A rewritten path never carries more than one of them.
    """

    def __init__(self, validator: Validator) -> None:
        self._validator = validator

    @staticmethod
    def url_has_language(path: Any) -> bool:
        return split_path_locale(path)[0] is not None

    @staticmethod
    def remove_language_from_path(path: Any) -> Any:
        """Strip a leading language segment; ``/bg`` and ``/bg/`` become ``/``."""
        return split_path_locale(path)[1]

    def add_language_to_path(self, path: Any, language: Any) -> Any:
        """Prefix *path* with ``/<language>``.

        Unsupported languages leave *path* unchanged. A language segment
        already present is replaced rather than stacked.

        Any leading segment shaped like a language code counts as one, even
        when it is a real route: ``/my/account`` becomes ``/de/account``.
        Applications should not use two-letter lowercase route prefixes.
        """
        if not isinstance(path, str) or not self._validator.supported_language(language):
            return path
        path = self.remove_language_from_path(path)
        if not path:
            return f"/{language}/"
        if path.startswith("/"):
            return f"/{language}{path}"
        return f"/{language}/{path}"

    def language_url(self, base_url: str, path: str, language: str, query_string: str = "") -> str:
        """Absolute URL of the same page in *language*, query preserved.

        Unsupported languages keep the current path.
        """
        new_path = self.add_language_to_path(path, language)
        query = query_string.lstrip("?")
        return f"{base_url.rstrip('/')}{new_path}" + (f"?{query}" if query else "")
