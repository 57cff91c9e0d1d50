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
"""'langroute' command group and configuration loading."""

from __future__ import annotations

from pathlib import Path

import click
from rich.markup import escape

from langroute.cli.console import console
from langroute.core.config import Config
from langroute.kernel.exceptions import ConfigurationException
from langroute.locale.engine import LocaleEngine
from langroute.logging.structlog_adapter import StructlogAdapter


def load_config(config_path: Path | None, profiles: tuple[str, ...]) -> Config:
    """Explicit file when given, otherwise the layered sources under the cwd."""
    if config_path is not None:
        return Config.from_file(config_path, active_profiles=list(profiles))
    return Config.from_sources(Path.cwd(), active_profiles=list(profiles))


@click.group()
@click.version_option(package_name="langroute")
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="YAML or TOML configuration file.",
)
@click.option("--profile", "profiles", multiple=True, help="Active profile overlay (repeatable).")
@click.option("--verbose", "-v", is_flag=True, help="Log resolution steps.")
@click.pass_context
def cli(ctx: click.Context, config_path: Path | None, profiles: tuple[str, ...], verbose: bool) -> None:
    """Locale resolution and URL localization."""
    try:
        config = load_config(config_path, profiles)
        adapter = StructlogAdapter()
        adapter.configure(config)
        adapter.set_level("langroute", "DEBUG" if verbose else "WARNING")
        ctx.obj = LocaleEngine.from_config(config)
    except ConfigurationException as exc:
        console.print(f"[error]Invalid configuration:[/error] {escape(str(exc))}")
        ctx.exit(2)


from langroute.cli.languages import languages_command  # noqa: E402
from langroute.cli.path import path_group  # noqa: E402
from langroute.cli.resolve import resolve_command  # noqa: E402

cli.add_command(languages_command, name="languages")
cli.add_command(resolve_command, name="resolve")
cli.add_command(path_group, name="path")
