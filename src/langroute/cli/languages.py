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
"""'langroute languages': list the supported-language set."""

from __future__ import annotations

import click
from rich.table import Table

from langroute.cli.console import console
from langroute.locale.engine import LocaleEngine


@click.command()
@click.pass_obj
def languages_command(engine: LocaleEngine) -> None:
    """List supported languages in configured order."""
    table = Table(title="Supported languages", border_style="dim")
    table.add_column("Code", style="info")
    table.add_column("Name")
    table.add_column("Native")
    table.add_column("Direction", style="dim")
    table.add_column("Script", style="dim")
    table.add_column("Fallback")

    fallback = engine.validator.fallback_language()
    for code in engine.validator.supported_languages():
        info = engine.validator.language_info(code)
        marker = "[success]yes[/success]" if code == fallback else ""
        table.add_row(code, info.name, info.native_name, info.direction, info.script, marker)

    console.print(table)
