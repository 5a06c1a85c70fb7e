from pathlib import Path

import click

from sdprovision.cli.commands.machine import machine_id_command
from sdprovision.cli.commands.units import destination, mask, place, unmask
from sdprovision.config import setup_logger
from sdprovision.system import UnitFileManager


@click.group()
@click.option(
    '--root',
    type=click.Path(file_okay=False, path_type=Path),
    default=Path('/'),
    show_default=True,
    help='Root of the filesystem being provisioned.',
)
@click.option('--verbose', '-v', is_flag=True, help='Enable debug logging.')
@click.option(
    '--journal',
    is_flag=True,
    help='Log to the systemd journal (requires systemd-python).',
)
@click.pass_context
def cli(ctx: click.Context, root: Path, verbose: bool, journal: bool) -> None:
    """sdprovision - Lay out systemd units on a root filesystem.
    """
    setup_logger(verbose=verbose, journal=journal)
    ctx.obj = UnitFileManager(root)


for command in (destination, place, mask, unmask, machine_id_command):
    cli.add_command(command)


def run_cli() -> None:
    """Run the CLI interface.
    """
    cli()


__all__ = [
    'cli',
    'run_cli',
]
