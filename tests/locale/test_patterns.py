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
"""Tests for the pattern library extractors."""

import pytest

from langroute.locale.patterns import (
    DEFAULT_DOMAIN_LANGUAGES,
    extract_from_cookie,
    extract_from_domain,
    extract_from_header,
    extract_from_path,
    extract_from_query,
    parse_cookie,
    parse_header,
    parse_header_weighted,
    parse_path,
    parse_query,
    split_locale_token,
    split_path_locale,
)
from langroute.locale.types import Locale


class TestTokens:
    @pytest.mark.parametrize("token", ["en", "bg", "xx"])
    def test_plain_language(self, token):
        assert split_locale_token(token) == Locale(token)

    def test_language_region(self):
        assert split_locale_token("en-US") == Locale("en", "US")

    @pytest.mark.parametrize("token", ["", "e", "EN", "eng", "en_US", "en-us", "EN-US", "en-USA", "é1", None, 42])
    def test_malformed(self, token):
        assert split_locale_token(token) is None


class TestExtractFromPath:
    @pytest.mark.parametrize(
        ("path", "expected"),
        [
            ("/bg/posts", "bg"),
            ("/bg", "bg"),
            ("/bg/", "bg"),
            ("/en-US/posts", "en"),
            ("/en-US", "en"),
            ("/US/en/posts", "en"),
            ("/US/en", "en"),
            ("/xx/posts", "xx"),
        ],
    )
    def test_recognized_forms(self, path, expected):
        assert extract_from_path(path) == expected

    @pytest.mark.parametrize(
        "path",
        ["/", "", "/posts", "/bgx/posts", "/BG/posts", "/US/", "/US/posts", "/US", "bg/posts", "//bg/x", "/en-us/x", None],
    )
    def test_no_match(self, path):
        assert extract_from_path(path) is None

    def test_region_surfaced(self):
        assert parse_path("/bg-BG/a") == Locale("bg", "BG")
        assert parse_path("/BG/bg/a") == Locale("bg", "BG")

    def test_split_returns_remainder(self):
        assert split_path_locale("/bg/posts/1") == (Locale("bg"), "/posts/1")
        assert split_path_locale("/US/en") == (Locale("en", "US"), "/")
        assert split_path_locale("/posts") == (None, "/posts")


class TestExtractFromQuery:
    def test_lang_parameter(self):
        assert extract_from_query("lang=de") == "de"

    def test_leading_question_mark(self):
        assert extract_from_query("?locale=fr") == "fr"

    def test_priority_beats_position(self):
        assert extract_from_query("l=es&locale=fr&lang=de") == "de"
        assert extract_from_query("l=es&locale=fr") == "fr"

    def test_short_parameter(self):
        assert extract_from_query("page=2&l=it") == "it"

    def test_malformed_value_falls_through(self):
        assert extract_from_query("lang=english&locale=bg") == "bg"

    def test_percent_encoded(self):
        assert extract_from_query("lang=%62%67") == "bg"

    @pytest.mark.parametrize("query", ["", "page=2", "language=de", "lang=", "slang=de", None])
    def test_no_match(self, query):
        assert extract_from_query(query) is None

    def test_region_in_value(self):
        assert parse_query("lang=bg-BG") == Locale("bg", "BG")

    def test_region_parameter(self):
        assert parse_query("lang=bg&region=BG") == Locale("bg", "BG")
        assert parse_query("region=BG&lang=bg") == Locale("bg", "BG")

    def test_malformed_region_parameter_ignored(self):
        assert parse_query("lang=bg&region=bulgaria") == Locale("bg")


class TestExtractFromCookie:
    def test_plain(self):
        assert extract_from_cookie("lang=fr") == "fr"

    def test_with_region(self):
        assert extract_from_cookie("lang=en-US") == "en"
        assert parse_cookie("site_lang=en-US") == Locale("en", "US")

    @pytest.mark.parametrize("fragment", ["lang=", "=fr", "fr", "lang=french", "lang=FR", "", None])
    def test_no_match(self, fragment):
        assert extract_from_cookie(fragment) is None


class TestExtractFromHeader:
    def test_first_token_wins(self):
        assert extract_from_header("bg;q=0.9, en;q=1.0") == "bg"

    def test_region_form(self):
        assert extract_from_header("de-DE,de;q=0.9") == "de"
        assert parse_header("de-DE,de;q=0.9") == Locale("de", "DE")

    def test_case_insensitive(self):
        assert parse_header("EN-us") == Locale("en", "US")

    def test_skips_wildcard_and_malformed(self):
        assert extract_from_header("*, en-GB-oxendict, fr") == "fr"

    @pytest.mark.parametrize("value", ["", "*", "english", None])
    def test_no_match(self, value):
        assert extract_from_header(value) is None

    def test_weighted_picks_highest_quality(self):
        assert parse_header_weighted("bg;q=0.9, en;q=1.0") == Locale("en")

    def test_weighted_ties_keep_order(self):
        assert parse_header_weighted("fr, de") == Locale("fr")

    def test_weighted_excludes_zero_and_malformed(self):
        assert parse_header_weighted("en;q=0, de;q=abc, fr;q=0.1") == Locale("fr")
        assert parse_header_weighted("en;q=0") is None


class TestExtractFromDomain:
    def test_known_tld(self):
        assert extract_from_domain("example.bg") == "bg"
        assert extract_from_domain("www.example.de") == "de"

    def test_unknown_tld(self):
        assert extract_from_domain("example.com") is None

    def test_port_and_trailing_dot(self):
        assert extract_from_domain("example.bg:8443") == "bg"
        assert extract_from_domain("Example.FR.") == "fr"

    def test_country_maps_to_its_language(self):
        assert extract_from_domain("example.jp") == "ja"

    @pytest.mark.parametrize("host", ["", "localhost", "bg", "127.0.0.1", "[::1]:8000", "example..bg", None])
    def test_no_match(self, host):
        assert extract_from_domain(host) is None

    def test_custom_table(self):
        table = {**DEFAULT_DOMAIN_LANGUAGES, "ch": "de"}
        assert extract_from_domain("example.ch", table) == "de"
        assert extract_from_domain("example.ch") is None
