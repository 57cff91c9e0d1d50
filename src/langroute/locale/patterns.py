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
"""Pattern library: syntactic extraction of language candidates.

Every extractor is a small tokenizer over one request part: it splits on the
part's delimiters and checks fixed-length tokens. Nothing here consults the
supported-language set and nothing raises; a part that does not carry a
well-formed candidate yields ``None``.

Grammars::

    path     /xx/...   |  /xx-YY/...  |  /YY/xx/...
    query    lang=xx | locale=xx | l=xx      (priority order, region=YY optional)
    cookie   <name>=xx | <name>=xx-YY
    header   xx[-YY][;q=w], ...
    host     <labels>.<tld>[:port]
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any
from urllib.parse import unquote_plus

from langroute.locale.types import Locale

QUERY_PARAMETERS: tuple[str, ...] = ("lang", "locale", "l")
REGION_PARAMETER = "region"

DEFAULT_DOMAIN_LANGUAGES: Mapping[str, str] = MappingProxyType(
    {
        "bg": "bg",
        "de": "de",
        "at": "de",
        "fr": "fr",
        "es": "es",
        "it": "it",
        "pt": "pt",
        "br": "pt",
        "ru": "ru",
        "jp": "ja",
        "kr": "ko",
        "cn": "zh",
        "tw": "zh",
        "sa": "ar",
        "eg": "ar",
        "tr": "tr",
        "pl": "pl",
        "nl": "nl",
        "se": "sv",
        "dk": "da",
        "no": "nb",
        "fi": "fi",
        "cz": "cs",
        "sk": "sk",
        "hu": "hu",
        "ro": "ro",
        "hr": "hr",
        "si": "sl",
        "ee": "et",
        "lv": "lv",
        "lt": "lt",
        "mt": "mt",
        "gr": "el",
    }
)

_LOWER = frozenset("abcdefghijklmnopqrstuvwxyz")
_UPPER = frozenset("ABCDEFGHIJKLMNOPQRSTUVWXYZ")


# ---------------------------------------------------------------------------
# Token checks
# ---------------------------------------------------------------------------


def is_language_token(token: Any) -> bool:
    """``xx``: exactly two lowercase ASCII letters."""
    return isinstance(token, str) and len(token) == 2 and all(c in _LOWER for c in token)


def is_region_token(token: Any) -> bool:
    """``YY``: exactly two uppercase ASCII letters."""
    return isinstance(token, str) and len(token) == 2 and all(c in _UPPER for c in token)


def split_locale_token(token: Any) -> Locale | None:
    """Split ``xx`` or ``xx-YY`` into a :class:`Locale`."""
    if is_language_token(token):
        return Locale(token)
    if isinstance(token, str) and len(token) == 5 and token[2] == "-":
        language, region = token[:2], token[3:]
        if is_language_token(language) and is_region_token(region):
            return Locale(language, region)
    return None


# ---------------------------------------------------------------------------
# Path
# ---------------------------------------------------------------------------


def split_path_locale(path: Any) -> tuple[Locale | None, Any]:
    """Split a leading language segment off *path*.

    Returns ``(locale, remainder)`` where *remainder* keeps a single leading
    slash. When no recognized segment leads the path the result is
    ``(None, path)``.
    """
    if not isinstance(path, str) or not path.startswith("/"):
        return None, path

    first, _, tail = path[1:].partition("/")

    # /xx/...
    if is_language_token(first):
        return Locale(first), "/" + tail

    # /xx-YY/...
    combined = split_locale_token(first)
    if combined is not None:
        return combined, "/" + tail

    # /YY/xx/...
    if is_region_token(first):
        second, _, rest = tail.partition("/")
        if is_language_token(second):
            return Locale(second, first), "/" + rest

    return None, path


def parse_path(path: Any) -> Locale | None:
    """Locale carried by the leading path segment(s), if any."""
    return split_path_locale(path)[0]


def extract_from_path(path: Any) -> str | None:
    """Language of the leading path segment(s), if any."""
    locale = parse_path(path)
    return locale.language if locale else None


# ---------------------------------------------------------------------------
# Query string
# ---------------------------------------------------------------------------


def _query_pairs(query_string: str) -> list[tuple[str, str]]:
    if query_string.startswith("?"):
        query_string = query_string[1:]
    pairs: list[tuple[str, str]] = []
    for chunk in query_string.split("&"):
        if not chunk:
            continue
        name, _, value = chunk.partition("=")
        pairs.append((unquote_plus(name), unquote_plus(value)))
    return pairs


def parse_query(query_string: Any) -> Locale | None:
    """Locale named by the first of ``lang``, ``locale``, ``l`` that is present.

    Parameter priority is independent of position in the string. A value may
    carry its own region (``lang=bg-BG``); otherwise a well-formed
    ``region=YY`` parameter refines it.
    """
    if not isinstance(query_string, str) or not query_string:
        return None

    pairs = _query_pairs(query_string)
    region = next(
        (value for name, value in pairs if name == REGION_PARAMETER and is_region_token(value)),
        None,
    )

    for parameter in QUERY_PARAMETERS:
        for name, value in pairs:
            if name != parameter:
                continue
            locale = split_locale_token(value)
            if locale is None:
                continue
            if locale.region is None and region is not None:
                return Locale(locale.language, region)
            return locale
    return None


def extract_from_query(query_string: Any) -> str | None:
    """Language named by the query string, if any."""
    locale = parse_query(query_string)
    return locale.language if locale else None


# ---------------------------------------------------------------------------
# Cookie
# ---------------------------------------------------------------------------


def parse_cookie(fragment: Any) -> Locale | None:
    """Locale encoded in a ``<name>=<value>`` cookie fragment."""
    if not isinstance(fragment, str):
        return None
    name, sep, value = fragment.strip().partition("=")
    if not sep or not name.strip():
        return None
    return split_locale_token(value.strip())


def extract_from_cookie(fragment: Any) -> str | None:
    """Language encoded in a ``<name>=<value>`` cookie fragment."""
    locale = parse_cookie(fragment)
    return locale.language if locale else None


# ---------------------------------------------------------------------------
# Accept-Language header
# ---------------------------------------------------------------------------


def _header_tag(tag: str) -> Locale | None:
    """Case-normalize an Accept-Language range and split it.

    Header ranges are case-insensitive, so ``EN-us`` reads as ``en-US``.
    """
    tag = tag.strip()
    if len(tag) == 2:
        return split_locale_token(tag.lower())
    if len(tag) == 5 and tag[2] == "-":
        return split_locale_token(f"{tag[:2].lower()}-{tag[3:].upper()}")
    return None


def _header_quality(params: list[str]) -> float | None:
    """Quality weight from ``;``-separated parameters; ``None`` if malformed."""
    for param in params:
        key, sep, value = param.strip().partition("=")
        if sep and key.strip().lower() == "q":
            try:
                quality = float(value.strip())
            except ValueError:
                return None
            if not 0.0 <= quality <= 1.0:
                return None
            return quality
    return 1.0


def _header_entries(value: str) -> list[tuple[Locale, float | None]]:
    entries: list[tuple[Locale, float | None]] = []
    for token in value.split(","):
        tag, *params = token.split(";")
        locale = _header_tag(tag)
        if locale is not None:
            entries.append((locale, _header_quality(params)))
    return entries


def parse_header(value: Any) -> Locale | None:
    """Locale of the first well-formed Accept-Language token.

    Quality weights are not consulted.
    """
    if not isinstance(value, str):
        return None
    entries = _header_entries(value)
    return entries[0][0] if entries else None


def parse_header_weighted(value: Any) -> Locale | None:
    """Locale of the Accept-Language token with the highest quality weight.

    Ties keep header order. Tokens with ``q=0`` or a malformed weight are
    not acceptable and are skipped.
    """
    if not isinstance(value, str):
        return None
    best: Locale | None = None
    best_quality = 0.0
    for locale, quality in _header_entries(value):
        if quality is not None and quality > best_quality:
            best, best_quality = locale, quality
    return best


def extract_from_header(value: Any) -> str | None:
    """Language of the first well-formed Accept-Language token."""
    locale = parse_header(value)
    return locale.language if locale else None


# ---------------------------------------------------------------------------
# Host
# ---------------------------------------------------------------------------


def extract_from_domain(
    host: Any,
    domain_languages: Mapping[str, str] = DEFAULT_DOMAIN_LANGUAGES,
) -> str | None:
    """Language mapped from the host's top-level domain.

    ``example.bg`` -> ``bg``. Ports and a trailing root dot are ignored;
    IP literals, single-label hosts and unknown TLDs yield ``None``.
    """
    if not isinstance(host, str):
        return None
    host = host.strip().lower()
    if not host or host.startswith("["):
        return None
    host = host.partition(":")[0].rstrip(".")
    labels = host.split(".")
    if len(labels) < 2 or not all(labels):
        return None
    return domain_languages.get(labels[-1])
