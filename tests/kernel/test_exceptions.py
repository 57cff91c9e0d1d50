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
"""Tests for the langroute exception hierarchy."""

from langroute.kernel.exceptions import ConfigurationException, LangRouteException


class TestLangRouteException:
    def test_basic_creation(self):
        exc = LangRouteException("something went wrong")
        assert str(exc) == "something went wrong"
        assert exc.code is None
        assert exc.context == {}

    def test_context_defaults_to_fresh_dict(self):
        exc = LangRouteException("test")
        exc.context["key"] = "value"
        assert LangRouteException("test2").context == {}


class TestConfigurationException:
    def test_is_langroute_exception(self):
        assert issubclass(ConfigurationException, LangRouteException)

    def test_carries_config_code_and_context(self):
        exc = ConfigurationException("bad fallback", context={"fallback": "xx"})
        assert exc.code == "CONFIG_INVALID"
        assert exc.context == {"fallback": "xx"}
