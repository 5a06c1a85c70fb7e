import click

from sdprovision.system import UnitFileManager, machine_id


@click.command('machine-id')
@click.pass_obj
def machine_id_command(manager: UnitFileManager) -> None:
    """Print the machine id of the root, or an empty line.
    """
    click.echo(machine_id(manager.root))
