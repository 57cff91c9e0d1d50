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
"""Tests for PathRewriter."""

import pytest


@pytest.fixture
def paths(engine):
    return engine.paths


NEUTRAL_PATHS = ["/", "/posts", "/posts/", "/posts/42/edit", "/a/b/c.html", "/search"]


class TestRemoveLanguage:
    @pytest.mark.parametrize(
        ("path", "expected"),
        [
            ("/bg/posts", "/posts"),
            ("/bg", "/"),
            ("/bg/", "/"),
            ("/en-US/posts/1", "/posts/1"),
            ("/US/en/posts", "/posts"),
            ("/US/en", "/"),
        ],
    )
    def test_strips_each_form(self, paths, path, expected):
        assert paths.remove_language_from_path(path) == expected

    @pytest.mark.parametrize("path", ["/", "/posts", "/posts/bg", "", "relative/path"])
    def test_unchanged_without_segment(self, paths, path):
        assert paths.remove_language_from_path(path) == path

    def test_none_passes_through(self, paths):
        assert paths.remove_language_from_path(None) is None


class TestAddLanguage:
    def test_prefixes_path(self, paths):
        assert paths.add_language_to_path("/posts", "bg") == "/bg/posts"

    def test_root_gets_trailing_slash(self, paths):
        assert paths.add_language_to_path("/", "bg") == "/bg/"

    def test_relative_and_empty(self, paths):
        assert paths.add_language_to_path("posts", "de") == "/de/posts"
        assert paths.add_language_to_path("", "de") == "/de/"

    @pytest.mark.parametrize("language", ["xx", "sw", "BG", "bg-BG", "", None])
    def test_unsupported_is_noop(self, paths, language):
        assert paths.add_language_to_path("/posts", language) == "/posts"

    @pytest.mark.parametrize("path", ["/bg/posts", "/bg-BG/posts", "/BG/bg/posts"])
    def test_never_stacks_segments(self, paths, path):
        assert paths.add_language_to_path(path, "de") == "/de/posts"

    @pytest.mark.parametrize("path", NEUTRAL_PATHS)
    @pytest.mark.parametrize("language", ["en", "bg", "ar"])
    def test_round_trip(self, paths, path, language):
        assert paths.remove_language_from_path(paths.add_language_to_path(path, language)) == path


class TestUrlHasLanguage:
    @pytest.mark.parametrize("path", ["/bg", "/bg/", "/bg/x", "/en-US/x", "/US/en/x"])
    def test_detects(self, paths, path):
        assert paths.url_has_language(path) is True

    @pytest.mark.parametrize("path", ["/", "/posts", "/US/posts", "/bgx", "", None])
    def test_rejects(self, paths, path):
        assert paths.url_has_language(path) is False


class TestLanguageUrl:
    def test_swaps_language_and_keeps_query(self, paths):
        url = paths.language_url("https://example.com/", "/bg/posts", "de", "page=2")
        assert url == "https://example.com/de/posts?page=2"

    def test_without_query(self, paths):
        assert paths.language_url("https://example.com", "/posts", "fr") == "https://example.com/fr/posts"

    def test_unsupported_keeps_path(self, paths):
        assert paths.language_url("https://example.com", "/bg/posts", "xx", "?a=1") == "https://example.com/bg/posts?a=1"


class TestLanguageShapedRoutes:
    def test_two_letter_route_prefix_is_read_as_language(self, paths):
        assert paths.url_has_language("/my/account") is True
        assert paths.add_language_to_path("/my/account", "de") == "/de/account"

    def test_longer_route_prefix_is_kept(self, paths):
        assert paths.add_language_to_path("/api/account", "de") == "/de/api/account"
