from typing import Optional

import click
from imagination import container

from blctl.cli.helpers.client_factory import ConfigurationBasedClientFactory
from blctl.cli.helpers.command.decorator import command
from blctl.cli.helpers.command.group import AliasedGroup
from blctl.cli.helpers.command.spec import RESOURCE_OUTPUT_SPEC
from blctl.cli.helpers.iterator_printer import show_iterator
from blctl.client.regions import RegionsClient
from blctl.client.sizes import SizesClient


def _get_factory() -> ConfigurationBasedClientFactory:
    return container.get(ConfigurationBasedClientFactory)


@click.group('region', cls=AliasedGroup, aliases=['regions', 'r'])
def region_command_group():
    """ Show the regions """


@command(region_command_group, 'list', specs=[RESOURCE_OUTPUT_SPEC], aliases=['ls'])
def list_regions(context: Optional[str] = None,
                 access_token: Optional[str] = None,
                 api_url: Optional[str] = None,
                 output: Optional[str] = None):
    """ List all regions """
    client = _get_factory().get(RegionsClient, context_name=context, access_token=access_token, api_url=api_url)
    show_iterator(output, client.list())


@click.group('size', cls=AliasedGroup, aliases=['sizes'])
def size_command_group():
    """ Show the server sizes """


@command(size_command_group, 'list', specs=[RESOURCE_OUTPUT_SPEC], aliases=['ls'])
def list_sizes(context: Optional[str] = None,
               access_token: Optional[str] = None,
               api_url: Optional[str] = None,
               output: Optional[str] = None):
    """ List all server sizes """
    client = _get_factory().get(SizesClient, context_name=context, access_token=access_token, api_url=api_url)
    show_iterator(output, client.list())
