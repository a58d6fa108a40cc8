from typing import List, Optional

import click
from imagination import container

from blctl.cli.helpers.client_factory import ConfigurationBasedClientFactory
from blctl.cli.helpers.command.decorator import command
from blctl.cli.helpers.command.group import AliasedGroup
from blctl.cli.helpers.command.spec import FORCE_SPEC, RESOURCE_OUTPUT_SPEC
from blctl.cli.helpers.iterator_printer import show_iterator, show_object
from blctl.cli.helpers.printer import echo_result
from blctl.client.vpcs import VPCsClient


def _get(context: Optional[str] = None,
         access_token: Optional[str] = None,
         api_url: Optional[str] = None) -> VPCsClient:
    factory: ConfigurationBasedClientFactory = container.get(ConfigurationBasedClientFactory)
    return factory.get(VPCsClient, context_name=context, access_token=access_token, api_url=api_url)


@click.group('vpcs', cls=AliasedGroup, aliases=['vpc'])
def vpc_command_group():
    """ Manage virtual private clouds """


@command(vpc_command_group, 'list', specs=[RESOURCE_OUTPUT_SPEC], aliases=['ls'])
def list_vpcs(context: Optional[str] = None,
              access_token: Optional[str] = None,
              api_url: Optional[str] = None,
              output: Optional[str] = None):
    """ List all VPCs """
    show_iterator(output, _get(context, access_token, api_url).list())


@command(vpc_command_group, 'get', specs=[RESOURCE_OUTPUT_SPEC])
def get_vpc(vpc_id: int,
            context: Optional[str] = None,
            access_token: Optional[str] = None,
            api_url: Optional[str] = None,
            output: Optional[str] = None):
    """ Get the details of the given VPC """
    show_object(output, _get(context, access_token, api_url).get(vpc_id))


@command(vpc_command_group, 'delete', specs=[FORCE_SPEC], aliases=['rm'])
def delete_vpcs(vpc_ids: List[int],
                force: bool = False,
                context: Optional[str] = None,
                access_token: Optional[str] = None,
                api_url: Optional[str] = None):
    """ Delete the given VPCs """
    if not vpc_ids:
        raise ValueError('At least one VPC ID must be given')

    if not force:
        click.confirm(f'Delete {len(vpc_ids)} VPC(s)?', abort=True)

    client = _get(context, access_token, api_url)
    for vpc_id in vpc_ids:
        client.delete(vpc_id)
        echo_result('VPC', 'red', 'deleted', f'#{vpc_id}')
