#!/usr/bin/env python3
"""
wirebox CLI - Command Line Interface

Usage:
    wirebox [OPTIONS] COMMAND [ARGS]...

Commands:
    info        Show bindings declared by modules
    boot        Build an injector and show its bindings
"""

import sys

import click

from cli import __version__
from wirebox.config import load_settings
from wirebox.exceptions import ConfigurationError
from wirebox.logging import setup_logging


class AliasedGroup(click.Group):
    """Custom Click group that supports command aliases."""

    def get_command(self, ctx: click.Context, cmd_name: str) -> click.Command | None:
        """Get command with alias support."""
        # Direct match
        rv = click.Group.get_command(self, ctx, cmd_name)
        if rv is not None:
            return rv

        # Alias mapping
        aliases = {
            'ls': 'info',
            'run': 'boot',
        }

        if cmd_name in aliases:
            return click.Group.get_command(self, ctx, aliases[cmd_name])

        return None


@click.group(cls=AliasedGroup, invoke_without_command=True)
@click.option('--version', '-v', is_flag=True, help='Show version and exit.')
@click.option('--debug', is_flag=True, help='Enable debug mode.')
@click.option('--log-file', is_flag=True, help='Also write logs under WIREBOX_LOG_DIR.')
@click.pass_context
def cli(ctx: click.Context, version: bool, debug: bool, log_file: bool) -> None:
    """wirebox - Dependency Injection Container CLI

    \b
    Quick Start:
        wirebox info myapp.boot:BootModule    List declared bindings
        wirebox boot myapp.boot:BootModule    Build the injector
    """
    ctx.ensure_object(dict)

    if version:
        click.echo(f"wirebox version {__version__}")
        ctx.exit(0)

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())
        return

    try:
        config = load_settings()
    except ConfigurationError as e:
        click.echo(f"Configuration error: {e}", err=True)
        ctx.exit(1)

    ctx.obj['settings'] = config
    ctx.obj['debug'] = debug or config.debug

    setup_logging(
        config,
        service_name=ctx.invoked_subcommand,
        debug=ctx.obj['debug'],
        log_file=log_file,
    )


# Import and register commands
from cli.commands.info import info  # noqa: E402
from cli.commands.boot import boot  # noqa: E402

cli.add_command(info)
cli.add_command(boot)


def main() -> None:
    """Main entry point for the CLI."""
    try:
        cli(obj={})
    except KeyboardInterrupt:
        click.echo("\nOperation cancelled.")
        sys.exit(130)
    except Exception as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
