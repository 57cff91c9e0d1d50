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
"""langroute: locale resolution and URL localization for ASGI applications.

The engine is assembled from configuration once at startup::

    from langroute.core.config import Config
    from langroute.locale import LocaleEngine

    engine = LocaleEngine.from_config(Config.from_sources("."))
    result = engine.resolve(view)
"""

__version__ = "0.1.0"
