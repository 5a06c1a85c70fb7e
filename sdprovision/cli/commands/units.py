from typing import BinaryIO

import click
from pydantic import ValidationError

from sdprovision.models import Unit
from sdprovision.system import UnitFileManager

pass_manager = click.make_pass_decorator(UnitFileManager)


def build_unit(name: str, **fields) -> Unit:
    """Build a Unit, turning validation failures into usage errors.
    """
    try:
        return Unit(name=name, **fields)
    except ValidationError as e:
        messages = '; '.join(error['msg'] for error in e.errors())
        raise click.BadParameter(messages, param_hint='NAME')


def unit_options(func):
    """Options shared by commands that resolve a unit path.
    """
    func = click.option(
        '--drop-in',
        is_flag=True,
        help='Treat the content as a drop-in override fragment.',
    )(func)
    func = click.option(
        '--runtime',
        is_flag=True,
        help='Place the unit under /run instead of /etc.',
    )(func)
    return click.argument('name')(func)


@click.command('destination')
@unit_options
@pass_manager
def destination(
    manager: UnitFileManager,
    name: str,
    runtime: bool,
    drop_in: bool,
) -> None:
    """Print the path a unit would be written to.
    """
    unit = build_unit(name, runtime=runtime, drop_in=drop_in)
    click.echo(manager.unit_destination(unit))


@click.command('place')
@unit_options
@click.option(
    '--content-file',
    type=click.File('rb'),
    default='-',
    help='File holding the unit content. Reads stdin when omitted.',
)
@pass_manager
def place(
    manager: UnitFileManager,
    name: str,
    runtime: bool,
    drop_in: bool,
    content_file: BinaryIO,
) -> None:
    """Write a unit file below the root.
    """
    try:
        content = content_file.read().decode('utf-8')
    except UnicodeDecodeError as e:
        raise click.ClickException(f'Unit content is not UTF-8: {e}')

    unit = build_unit(
        name,
        runtime=runtime,
        drop_in=drop_in,
        content=content,
    )

    try:
        path = manager.place_unit(unit, manager.unit_destination(unit))
    except OSError as e:
        raise click.ClickException(str(e))

    click.echo(path)


@click.command('mask')
@click.argument('name')
@pass_manager
def mask(manager: UnitFileManager, name: str) -> None:
    """Mask a unit by linking it to /dev/null.
    """
    build_unit(name)

    try:
        path = manager.mask_unit(name)
    except OSError as e:
        raise click.ClickException(str(e))

    click.echo(path)


@click.command('unmask')
@click.argument('name')
@pass_manager
def unmask(manager: UnitFileManager, name: str) -> None:
    """Remove the /dev/null link of a masked unit.
    """
    build_unit(name)

    try:
        removed = manager.unmask_unit(name)
    except OSError as e:
        raise click.ClickException(str(e))

    if removed:
        click.echo(manager.unit_destination(Unit(name=name)))
    else:
        click.echo(f'{name} is not masked', err=True)
