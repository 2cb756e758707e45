"""
yarnenv — CLI entrypoint.

Usage:
    python -m yarnenv.main --help
    python -m yarnenv.main paths
    python -m yarnenv.main --platform windows path-key
    python -m yarnenv.main --host host.yml show --yaml
"""

from __future__ import annotations

import json
import os
import sys
from pathlib import Path

import click
import yaml

from yarnenv.core.observability.logging_config import setup_logging

from yarnenv import __version__

_PLATFORM_CHOICES = ("windows", "macos", "posix")


@click.group()
@click.version_option(version=__version__, prog_name="yarnenv")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.option(
    "--host",
    "host_path",
    type=click.Path(exists=False),
    default=None,
    help="Resolve against a saved host snapshot instead of this machine.",
)
@click.option(
    "--platform",
    "platform_name",
    type=click.Choice(_PLATFORM_CHOICES),
    default=None,
    help="Pretend the host runs on this platform.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    quiet: bool,
    debug: bool,
    host_path: str | None,
    platform_name: str | None,
) -> None:
    """yarnenv — inspect yarn's platform-dependent paths and constants."""
    ctx.ensure_object(dict)
    ctx.obj["quiet"] = quiet

    # ── Logging setup (once, at process start) ──────────────────
    if debug:
        level = "DEBUG"
    elif verbose:
        level = "INFO"
    elif quiet:
        level = "ERROR"
    else:
        level = os.environ.get("YARNENV_LOG_LEVEL", "WARNING")

    setup_logging(
        level=level,
        log_file=os.environ.get("YARNENV_LOG_FILE"),
        log_file_level=os.environ.get("YARNENV_LOG_FILE_LEVEL"),
    )

    # ── Host capture + runtime snapshot (once) ──────────────────
    from yarnenv.core.config.loader import ConfigError, capture_host_context, load_host_context
    from yarnenv.core.context import set_runtime_config
    from yarnenv.core.models.platform import PlatformTag
    from yarnenv.core.use_cases.resolve import build_runtime_config

    try:
        host = load_host_context(Path(host_path)) if host_path else capture_host_context()
    except ConfigError as e:
        click.secho(f"❌ {e}", fg="red", err=True)
        sys.exit(1)

    if platform_name:
        host = host.with_platform(PlatformTag(platform_name))

    runtime = build_runtime_config(host)
    set_runtime_config(runtime)

    ctx.obj["host"] = host
    ctx.obj["runtime"] = runtime


def _emit(data: dict, as_json: bool, as_yaml: bool) -> bool:
    """Print ``data`` as JSON or YAML if requested. Returns True if printed."""
    if as_json:
        click.echo(json.dumps(data, indent=2))
        return True
    if as_yaml:
        click.echo(yaml.safe_dump(data, sort_keys=False, default_flow_style=False), nl=False)
        return True
    return False


@cli.command()
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.option("--yaml", "as_yaml", is_flag=True, help="Output as YAML.")
@click.pass_context
def paths(ctx: click.Context, as_json: bool, as_yaml: bool) -> None:
    """Show resolved config, cache and global directories."""
    runtime = ctx.obj["runtime"]
    dirs = runtime.directories

    if _emit(dirs.to_dict(), as_json, as_yaml):
        return

    if not ctx.obj.get("quiet"):
        click.secho(f"\n📁 Directories ({runtime.platform.value})", fg="cyan", bold=True)
    click.echo(f"   config:          {dirs.config_directory}")
    click.echo(f"   link registry:   {dirs.link_registry_directory}")
    click.echo(f"   global modules:  {dirs.global_module_directory}")
    click.echo(f"   global prefix:   {dirs.fallback_global_prefix}")
    click.echo(f"   posix prefix:    {dirs.posix_global_prefix}")
    click.secho("   cache candidates:", fg="white", bold=True)
    for i, candidate in enumerate(dirs.cache_directory_candidates, 1):
        click.echo(f"     {i}. {candidate}")
    click.echo()


@cli.command("path-key")
@click.pass_context
def path_key(ctx: click.Context) -> None:
    """Show the name of the PATH environment variable."""
    click.echo(ctx.obj["runtime"].path_env_key)


@cli.command()
@click.argument("category")
def color(category: str) -> None:
    """Show the display color for a version bump CATEGORY."""
    from yarnenv.core.services.version_colors import color_for

    name = color_for(category)
    click.secho(name, fg=name)


@cli.command()
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
def constants(as_json: bool) -> None:
    """Show static tuning constants and file names."""
    from yarnenv.core.data.constants import constants_as_dict

    data = constants_as_dict()
    if _emit(data, as_json, False):
        return

    for group, values in data.items():
        click.secho(f"{group}:", fg="white", bold=True)
        for key, value in values.items():
            click.echo(f"   {key}: {value}")


@cli.command()
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.option("--yaml", "as_yaml", is_flag=True, help="Output as YAML.")
@click.pass_context
def show(ctx: click.Context, as_json: bool, as_yaml: bool) -> None:
    """Show the full runtime configuration snapshot."""
    runtime = ctx.obj["runtime"]

    if _emit(runtime.to_dict(), as_json, as_yaml):
        return

    click.secho(f"\n⚙️  yarn runtime ({runtime.platform.value})", fg="cyan", bold=True)
    click.echo(f"   PATH key:     {runtime.path_env_key}")
    click.echo(f"   node binary:  {runtime.node_bin_path}")
    click.echo(f"   yarn binary:  {runtime.tool_bin_path}")
    prod_color = "yellow" if runtime.production else "white"
    click.echo("   production:   ", nl=False)
    click.secho("yes" if runtime.production else "no", fg=prod_color)
    click.echo(f"   config dir:   {runtime.directories.config_directory}")
    click.echo(f"   cache dir:    {runtime.directories.preferred_cache_directory}")
    click.echo()


@cli.command()
@click.pass_context
def snapshot(ctx: click.Context) -> None:
    """Print the host snapshot as YAML (reusable with --host)."""
    from yarnenv.core.config.loader import dump_host_context

    click.echo(dump_host_context(ctx.obj["host"]), nl=False)


if __name__ == "__main__":
    cli()
