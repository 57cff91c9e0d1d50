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
"""'langroute path': add, remove or detect a path's language segment."""

from __future__ import annotations

import click

from langroute.locale.engine import LocaleEngine


@click.group()
def path_group() -> None:
    """Rewrite URL paths."""


@path_group.command("add")
@click.argument("path")
@click.argument("language")
@click.pass_obj
def add_command(engine: LocaleEngine, path: str, language: str) -> None:
    """Prefix PATH with LANGUAGE (unsupported languages leave it unchanged)."""
    if not engine.validator.supported_language(language):
        click.secho(f"'{language}' is not supported; path unchanged", fg="yellow", err=True)
    click.echo(engine.paths.add_language_to_path(path, language))


@path_group.command("remove")
@click.argument("path")
@click.pass_obj
def remove_command(engine: LocaleEngine, path: str) -> None:
    """Strip the leading language segment from PATH."""
    click.echo(engine.paths.remove_language_from_path(path))


@path_group.command("check")
@click.argument("path")
@click.pass_obj
def check_command(engine: LocaleEngine, path: str) -> None:
    """Exit 0 if PATH carries a language segment, 1 otherwise."""
    if engine.paths.url_has_language(path):
        click.echo("yes")
        return
    click.echo("no")
    raise SystemExit(1)
