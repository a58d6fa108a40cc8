from typing import List, Optional

import click
from imagination import container

from blctl.cli.helpers.client_factory import ConfigurationBasedClientFactory
from blctl.cli.helpers.command.decorator import command
from blctl.cli.helpers.command.group import AliasedGroup
from blctl.cli.helpers.command.spec import ArgumentSpec, FORCE_SPEC, RESOURCE_OUTPUT_SPEC
from blctl.cli.helpers.iterator_printer import show_iterator, show_object
from blctl.cli.helpers.printer import echo_result
from blctl.client.servers import ServersClient

TAG_SPEC = ArgumentSpec(
    name='tag',
    arg_names=['--tag'],
    as_option=True,
    help='Tag name',
)


def _get(context: Optional[str] = None,
         access_token: Optional[str] = None,
         api_url: Optional[str] = None) -> ServersClient:
    factory: ConfigurationBasedClientFactory = container.get(ConfigurationBasedClientFactory)
    return factory.get(ServersClient, context_name=context, access_token=access_token, api_url=api_url)


@click.group('server', cls=AliasedGroup, aliases=['servers', 's'])
def server_command_group():
    """ Manage servers """


@command(server_command_group, 'list', specs=[RESOURCE_OUTPUT_SPEC, TAG_SPEC], aliases=['ls'])
def list_servers(tag: Optional[str] = None,
                 context: Optional[str] = None,
                 access_token: Optional[str] = None,
                 api_url: Optional[str] = None,
                 output: Optional[str] = None):
    """ List all servers, optionally only the ones with the given tag """
    client = _get(context, access_token, api_url)
    show_iterator(output, client.list_by_tag(tag) if tag else client.list())


@command(server_command_group, 'get', specs=[RESOURCE_OUTPUT_SPEC])
def get_server(server_id: int,
               context: Optional[str] = None,
               access_token: Optional[str] = None,
               api_url: Optional[str] = None,
               output: Optional[str] = None):
    """ Get the details of the given server """
    show_object(output, _get(context, access_token, api_url).get(server_id))


@command(server_command_group, 'delete', specs=[TAG_SPEC, FORCE_SPEC], aliases=['rm'])
def delete_servers(server_ids: List[int],
                   tag: Optional[str] = None,
                   force: bool = False,
                   context: Optional[str] = None,
                   access_token: Optional[str] = None,
                   api_url: Optional[str] = None):
    """ Delete the given servers, or every server with the given tag """
    if bool(server_ids) == bool(tag):
        raise ValueError('Either server IDs or --tag must be given, but not both')

    client = _get(context, access_token, api_url)

    if tag:
        if not force:
            click.confirm(f'Delete every server tagged "{tag}"?', abort=True)
        client.delete_by_tag(tag)
        echo_result('Server', 'red', 'deleted', f'tag={tag}')
        return

    if not force:
        click.confirm(f'Delete {len(server_ids)} server(s)?', abort=True)

    for server_id in server_ids:
        client.delete(server_id)
        echo_result('Server', 'red', 'deleted', f'#{server_id}')


@command(server_command_group, 'kernels', specs=[RESOURCE_OUTPUT_SPEC])
def list_kernels(server_id: int,
                 context: Optional[str] = None,
                 access_token: Optional[str] = None,
                 api_url: Optional[str] = None,
                 output: Optional[str] = None):
    """ List the kernels available to the given server """
    show_iterator(output, _get(context, access_token, api_url).kernels(server_id))


@command(server_command_group, 'snapshots', specs=[RESOURCE_OUTPUT_SPEC])
def list_snapshots(server_id: int,
                   context: Optional[str] = None,
                   access_token: Optional[str] = None,
                   api_url: Optional[str] = None,
                   output: Optional[str] = None):
    """ List the snapshots of the given server """
    show_iterator(output, _get(context, access_token, api_url).snapshots(server_id))


@command(server_command_group, 'backups', specs=[RESOURCE_OUTPUT_SPEC])
def list_backups(server_id: int,
                 context: Optional[str] = None,
                 access_token: Optional[str] = None,
                 api_url: Optional[str] = None,
                 output: Optional[str] = None):
    """ List the backups of the given server """
    show_iterator(output, _get(context, access_token, api_url).backups(server_id))


@command(server_command_group, 'actions', specs=[RESOURCE_OUTPUT_SPEC])
def list_server_actions(server_id: int,
                        context: Optional[str] = None,
                        access_token: Optional[str] = None,
                        api_url: Optional[str] = None,
                        output: Optional[str] = None):
    """ List the actions performed on the given server """
    show_iterator(output, _get(context, access_token, api_url).actions(server_id))


@command(server_command_group, 'neighbors', specs=[RESOURCE_OUTPUT_SPEC])
def list_neighbors(server_id: int,
                   context: Optional[str] = None,
                   access_token: Optional[str] = None,
                   api_url: Optional[str] = None,
                   output: Optional[str] = None):
    """ List the servers running on the same physical host as the given server """
    show_iterator(output, _get(context, access_token, api_url).neighbors(server_id))
