import sys

import click

from blctl.cli.account import account_command_group
from blctl.cli.auth.commands import auth_command_group
from blctl.cli.billing import billing_history_command_group, invoice_command_group
from blctl.cli.compute.commands import compute_command_group
from blctl.cli.helpers.command.decorator import command
from blctl.cli.helpers.command.group import AliasedGroup
from blctl.cli.vpcs import vpc_command_group
from blctl.common.logger import get_logger
from blctl.constants import __version__

APP_NAME = 'blctl'

__library_version = __version__
__python_version = str(sys.version).replace("\n", " ")
__app_signature = f'{APP_NAME} {__library_version} with Python {__python_version}'


@click.group(APP_NAME, cls=AliasedGroup)
@click.version_option(__version__, message="%(version)s")
def blctl():
    """
    BinaryLane CLI

    https://www.binarylane.com.au
    """
    get_logger(APP_NAME).debug(__app_signature)


@command(blctl)
def version():
    """ Show the version of CLI/library """
    click.echo(__app_signature)


# noinspection PyTypeChecker
blctl.add_command(auth_command_group)
# noinspection PyTypeChecker
blctl.add_command(account_command_group)
# noinspection PyTypeChecker
blctl.add_command(compute_command_group)
# noinspection PyTypeChecker
blctl.add_command(vpc_command_group)
# noinspection PyTypeChecker
blctl.add_command(invoice_command_group)
# noinspection PyTypeChecker
blctl.add_command(billing_history_command_group)

if __name__ == "__main__":
    blctl.main(prog_name=APP_NAME)
