from typing import List, Optional

import click
from imagination import container

from blctl.cli.helpers.client_factory import ConfigurationBasedClientFactory
from blctl.cli.helpers.command.decorator import command
from blctl.cli.helpers.command.group import AliasedGroup
from blctl.cli.helpers.command.spec import FORCE_SPEC, RESOURCE_OUTPUT_SPEC
from blctl.cli.helpers.iterator_printer import show_iterator, show_object
from blctl.cli.helpers.printer import echo_result
from blctl.client.floating_ips import FloatingIPActionsClient, FloatingIPsClient


def _get(context: Optional[str] = None,
         access_token: Optional[str] = None,
         api_url: Optional[str] = None) -> FloatingIPsClient:
    factory: ConfigurationBasedClientFactory = container.get(ConfigurationBasedClientFactory)
    return factory.get(FloatingIPsClient, context_name=context, access_token=access_token, api_url=api_url)


def _get_action_client(context: Optional[str] = None,
                       access_token: Optional[str] = None,
                       api_url: Optional[str] = None) -> FloatingIPActionsClient:
    factory: ConfigurationBasedClientFactory = container.get(ConfigurationBasedClientFactory)
    return factory.get(FloatingIPActionsClient, context_name=context, access_token=access_token, api_url=api_url)


@click.group('floating-ip', cls=AliasedGroup, aliases=['fip'])
def floating_ip_command_group():
    """ Manage floating IPs """


@command(floating_ip_command_group, 'list', specs=[RESOURCE_OUTPUT_SPEC], aliases=['ls'])
def list_floating_ips(context: Optional[str] = None,
                      access_token: Optional[str] = None,
                      api_url: Optional[str] = None,
                      output: Optional[str] = None):
    """ List all floating IPs """
    show_iterator(output, _get(context, access_token, api_url).list())


@command(floating_ip_command_group, 'get', specs=[RESOURCE_OUTPUT_SPEC])
def get_floating_ip(ip: str,
                    context: Optional[str] = None,
                    access_token: Optional[str] = None,
                    api_url: Optional[str] = None,
                    output: Optional[str] = None):
    """ Get the details of the given floating IP """
    show_object(output, _get(context, access_token, api_url).get(ip))


@command(floating_ip_command_group, 'delete', specs=[FORCE_SPEC], aliases=['rm'])
def delete_floating_ips(ips: List[str],
                        force: bool = False,
                        context: Optional[str] = None,
                        access_token: Optional[str] = None,
                        api_url: Optional[str] = None):
    """ Release the given floating IPs """
    if not ips:
        raise ValueError('At least one floating IP must be given')

    if not force:
        click.confirm(f'Delete {len(ips)} floating IP(s)?', abort=True)

    client = _get(context, access_token, api_url)
    for ip in ips:
        client.delete(ip)
        echo_result('Floating IP', 'red', 'deleted', ip)


@click.group('floating-ip-action', cls=AliasedGroup, aliases=['fipa'])
def floating_ip_action_command_group():
    """ Show the actions performed on floating IPs """


@command(floating_ip_action_command_group, 'list', specs=[RESOURCE_OUTPUT_SPEC], aliases=['ls'])
def list_floating_ip_actions(ip: str,
                             context: Optional[str] = None,
                             access_token: Optional[str] = None,
                             api_url: Optional[str] = None,
                             output: Optional[str] = None):
    """ List the actions performed on the given floating IP """
    show_iterator(output, _get_action_client(context, access_token, api_url).list(ip))


@command(floating_ip_action_command_group, 'get', specs=[RESOURCE_OUTPUT_SPEC])
def get_floating_ip_action(ip: str,
                           action_id: int,
                           context: Optional[str] = None,
                           access_token: Optional[str] = None,
                           api_url: Optional[str] = None,
                           output: Optional[str] = None):
    """ Get the details of an action performed on the given floating IP """
    show_object(output, _get_action_client(context, access_token, api_url).get(ip, action_id))
