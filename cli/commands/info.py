"""
Info command - 바인딩 구성 확인.

Usage:
    wirebox info TARGET...

모듈을 바인더에 설치하고 구성만 수행합니다. 인스턴스는 생성하지 않습니다.
"""

import sys
import click

from cli.commands.targets import load_modules


@click.command()
@click.argument('targets', nargs=-1, required=True)
@click.pass_context
def info(ctx: click.Context, targets: tuple) -> None:
    """Show the bindings declared by TARGET modules without constructing anything.

    \b
    Examples:
        wirebox info myapp.boot:BootModule
        wirebox info myapp.boot:BootModule myapp.audio:AudioModule
    """
    from wirebox.di import Binder

    debug = ctx.obj.get('debug', False)
    try:
        binder = Binder(debug)
        binder.install(load_modules(targets))
        binder.configure()
    except Exception as e:
        click.echo(f"Configuration failed: {e}", err=True)
        if debug:
            import traceback
            traceback.print_exc()
        sys.exit(1)

    for line in binder.describe():
        click.echo(line)
    click.echo()
    click.echo(f"{len(binder)} binding(s)")
