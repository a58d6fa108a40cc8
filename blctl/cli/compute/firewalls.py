from typing import List, Optional

import click
from imagination import container

from blctl.cli.helpers.client_factory import ConfigurationBasedClientFactory
from blctl.cli.helpers.command.decorator import command
from blctl.cli.helpers.command.group import AliasedGroup
from blctl.cli.helpers.command.spec import ArgumentSpec, FORCE_SPEC, RESOURCE_OUTPUT_SPEC
from blctl.cli.helpers.iterator_printer import show_iterator, show_object
from blctl.cli.helpers.printer import echo_result
from blctl.client.firewalls import FirewallsClient


def _get(context: Optional[str] = None,
         access_token: Optional[str] = None,
         api_url: Optional[str] = None) -> FirewallsClient:
    factory: ConfigurationBasedClientFactory = container.get(ConfigurationBasedClientFactory)
    return factory.get(FirewallsClient, context_name=context, access_token=access_token, api_url=api_url)


@click.group('firewall', cls=AliasedGroup, aliases=['firewalls', 'fw'])
def firewall_command_group():
    """ Manage firewalls """


@command(firewall_command_group,
         'list',
         specs=[
             RESOURCE_OUTPUT_SPEC,
             ArgumentSpec(
                 name='server_id',
                 arg_names=['--server-id'],
                 as_option=True,
                 help='Only list the firewalls applied to this server',
             ),
         ],
         aliases=['ls'])
def list_firewalls(server_id: Optional[int] = None,
                   context: Optional[str] = None,
                   access_token: Optional[str] = None,
                   api_url: Optional[str] = None,
                   output: Optional[str] = None):
    """ List all firewalls """
    client = _get(context, access_token, api_url)
    show_iterator(output, client.list_by_server(server_id) if server_id is not None else client.list())


@command(firewall_command_group, 'get', specs=[RESOURCE_OUTPUT_SPEC])
def get_firewall(firewall_id: str,
                 context: Optional[str] = None,
                 access_token: Optional[str] = None,
                 api_url: Optional[str] = None,
                 output: Optional[str] = None):
    """ Get the details of the given firewall """
    show_object(output, _get(context, access_token, api_url).get(firewall_id))


@command(firewall_command_group, 'delete', specs=[FORCE_SPEC], aliases=['rm'])
def delete_firewalls(firewall_ids: List[str],
                     force: bool = False,
                     context: Optional[str] = None,
                     access_token: Optional[str] = None,
                     api_url: Optional[str] = None):
    """ Delete the given firewalls """
    if not firewall_ids:
        raise ValueError('At least one firewall ID must be given')

    if not force:
        click.confirm(f'Delete {len(firewall_ids)} firewall(s)?', abort=True)

    client = _get(context, access_token, api_url)
    for firewall_id in firewall_ids:
        client.delete(firewall_id)
        echo_result('Firewall', 'red', 'deleted', firewall_id)
