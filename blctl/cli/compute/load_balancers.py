from typing import List, Optional

import click
from imagination import container

from blctl.cli.helpers.client_factory import ConfigurationBasedClientFactory
from blctl.cli.helpers.command.decorator import command
from blctl.cli.helpers.command.group import AliasedGroup
from blctl.cli.helpers.command.spec import FORCE_SPEC, RESOURCE_OUTPUT_SPEC
from blctl.cli.helpers.iterator_printer import show_iterator, show_object
from blctl.cli.helpers.printer import echo_result
from blctl.client.load_balancers import LoadBalancersClient


def _get(context: Optional[str] = None,
         access_token: Optional[str] = None,
         api_url: Optional[str] = None) -> LoadBalancersClient:
    factory: ConfigurationBasedClientFactory = container.get(ConfigurationBasedClientFactory)
    return factory.get(LoadBalancersClient, context_name=context, access_token=access_token, api_url=api_url)


@click.group('load-balancer', cls=AliasedGroup, aliases=['lb'])
def load_balancer_command_group():
    """ Manage load balancers """


@command(load_balancer_command_group, 'list', specs=[RESOURCE_OUTPUT_SPEC], aliases=['ls'])
def list_load_balancers(context: Optional[str] = None,
                        access_token: Optional[str] = None,
                        api_url: Optional[str] = None,
                        output: Optional[str] = None):
    """ List all load balancers """
    show_iterator(output, _get(context, access_token, api_url).list())


@command(load_balancer_command_group, 'get', specs=[RESOURCE_OUTPUT_SPEC])
def get_load_balancer(load_balancer_id: int,
                      context: Optional[str] = None,
                      access_token: Optional[str] = None,
                      api_url: Optional[str] = None,
                      output: Optional[str] = None):
    """ Get the details of the given load balancer """
    show_object(output, _get(context, access_token, api_url).get(load_balancer_id))


@command(load_balancer_command_group, 'delete', specs=[FORCE_SPEC], aliases=['rm'])
def delete_load_balancers(load_balancer_ids: List[int],
                          force: bool = False,
                          context: Optional[str] = None,
                          access_token: Optional[str] = None,
                          api_url: Optional[str] = None):
    """ Delete the given load balancers """
    if not load_balancer_ids:
        raise ValueError('At least one load balancer ID must be given')

    if not force:
        click.confirm(f'Delete {len(load_balancer_ids)} load balancer(s)?', abort=True)

    client = _get(context, access_token, api_url)
    for load_balancer_id in load_balancer_ids:
        client.delete(load_balancer_id)
        echo_result('Load Balancer', 'red', 'deleted', f'#{load_balancer_id}')
