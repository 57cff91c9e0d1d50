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
"""'langroute resolve': run the priority chain over a described request."""

from __future__ import annotations

import click
from rich.table import Table

from langroute.cli.console import console
from langroute.locale.engine import LocaleEngine
from langroute.locale.types import RequestView


def _parse_cookies(values: tuple[str, ...]) -> dict[str, str]:
    cookies: dict[str, str] = {}
    for item in values:
        name, sep, value = item.partition("=")
        if not sep or not name:
            raise click.BadParameter(f"expected NAME=VALUE, got '{item}'", param_hint="--cookie")
        cookies[name] = value
    return cookies


@click.command()
@click.option("--path", default="/", show_default=True, help="Request path.")
@click.option("--query", default="", help="Raw query string.")
@click.option("--cookie", "cookies", multiple=True, metavar="NAME=VALUE", help="Request cookie (repeatable).")
@click.option("--header", "accept_language", default=None, help="Accept-Language header value.")
@click.option("--host", default="", help="Host header.")
@click.pass_obj
def resolve_command(
    engine: LocaleEngine,
    path: str,
    query: str,
    cookies: tuple[str, ...],
    accept_language: str | None,
    host: str,
) -> None:
    """Show which language a request would resolve to, and why."""
    view = RequestView(
        path=path,
        query_string=query,
        cookies=_parse_cookies(cookies),
        header_accept_language=accept_language,
        host=host,
    )
    result = engine.resolve(view)

    table = Table(show_header=False, border_style="dim")
    table.add_column("Key", style="info")
    table.add_column("Value")
    table.add_row("Language", f"{result.language} ({engine.validator.language_name(result.language)})")
    table.add_row("Region", result.region or "-")
    table.add_row("Source", result.source.value)
    table.add_row("Cookie", engine.cookies.build_language_cookie(result.language, result.region))
    console.print(table)
