from typing import Optional

import click
from imagination import container

from blctl.cli.helpers.client_factory import ConfigurationBasedClientFactory
from blctl.cli.helpers.command.decorator import command
from blctl.cli.helpers.command.group import AliasedGroup
from blctl.cli.helpers.command.spec import RESOURCE_OUTPUT_SPEC
from blctl.cli.helpers.iterator_printer import show_object
from blctl.client.account import AccountClient


def _get(context: Optional[str] = None,
         access_token: Optional[str] = None,
         api_url: Optional[str] = None) -> AccountClient:
    factory: ConfigurationBasedClientFactory = container.get(ConfigurationBasedClientFactory)
    return factory.get(AccountClient, context_name=context, access_token=access_token, api_url=api_url)


@click.group('account', cls=AliasedGroup)
def account_command_group():
    """ Show account information """


@command(account_command_group, 'get', specs=[RESOURCE_OUTPUT_SPEC])
def get_account(context: Optional[str] = None,
                access_token: Optional[str] = None,
                api_url: Optional[str] = None,
                output: Optional[str] = None):
    """ Get the account details """
    show_object(output, _get(context, access_token, api_url).get())


@command(account_command_group, 'balance', specs=[RESOURCE_OUTPUT_SPEC])
def get_balance(context: Optional[str] = None,
                access_token: Optional[str] = None,
                api_url: Optional[str] = None,
                output: Optional[str] = None):
    """ Get the balance of the account """
    show_object(output, _get(context, access_token, api_url).get_balance())
