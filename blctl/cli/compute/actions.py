from typing import Optional

import click
from imagination import container

from blctl.cli.helpers.client_factory import ConfigurationBasedClientFactory
from blctl.cli.helpers.command.decorator import command
from blctl.cli.helpers.command.group import AliasedGroup
from blctl.cli.helpers.command.spec import RESOURCE_OUTPUT_SPEC
from blctl.cli.helpers.iterator_printer import show_iterator, show_object
from blctl.client.actions import ActionsClient


def _get(context: Optional[str] = None,
         access_token: Optional[str] = None,
         api_url: Optional[str] = None) -> ActionsClient:
    factory: ConfigurationBasedClientFactory = container.get(ConfigurationBasedClientFactory)
    return factory.get(ActionsClient, context_name=context, access_token=access_token, api_url=api_url)


@click.group('action', cls=AliasedGroup, aliases=['actions', 'a'])
def action_command_group():
    """ Show the actions performed on the account's resources """


@command(action_command_group, 'list', specs=[RESOURCE_OUTPUT_SPEC], aliases=['ls'])
def list_actions(context: Optional[str] = None,
                 access_token: Optional[str] = None,
                 api_url: Optional[str] = None,
                 output: Optional[str] = None):
    """ List all actions """
    show_iterator(output, _get(context, access_token, api_url).list())


@command(action_command_group, 'get', specs=[RESOURCE_OUTPUT_SPEC])
def get_action(action_id: int,
               context: Optional[str] = None,
               access_token: Optional[str] = None,
               api_url: Optional[str] = None,
               output: Optional[str] = None):
    """ Get the details of the given action """
    show_object(output, _get(context, access_token, api_url).get(action_id))
