"""
Boot command - 인젝터 생성 및 바인딩 상태 출력.

Usage:
    wirebox boot TARGET...

인젝터를 생성하므로 EAGER_SINGLETON 바인딩이 rank 순서대로 생성됩니다.
"""

import sys
import click

from cli.commands.targets import load_modules


@click.command()
@click.argument('targets', nargs=-1, required=True)
@click.pass_context
def boot(ctx: click.Context, targets: tuple) -> None:
    """Build an injector from TARGET modules and show its bindings.

    \b
    Examples:
        wirebox boot myapp.boot:BootModule
        wirebox --debug boot myapp.boot:BootModule
    """
    from wirebox.di import Injector

    debug = ctx.obj.get('debug', False)
    try:
        injector = Injector.builder() \
            .modules(load_modules(targets)) \
            .debug(debug) \
            .settings(ctx.obj.get('settings')) \
            .build()
    except Exception as e:
        click.echo(f"Boot failed: {e}", err=True)
        if debug:
            import traceback
            traceback.print_exc()
        sys.exit(1)

    for line in injector.binder.describe():
        click.echo(line)
    click.echo()

    constructed = sum(1 for b in injector.binder.get_all_bindings() if b.has_instance)
    click.echo(click.style(
        f"{len(injector.binder)} binding(s), {constructed} instance(s) constructed", fg='green'
    ))
