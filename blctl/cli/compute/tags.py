from typing import List, Optional

import click
from imagination import container

from blctl.cli.helpers.client_factory import ConfigurationBasedClientFactory
from blctl.cli.helpers.command.decorator import command
from blctl.cli.helpers.command.group import AliasedGroup
from blctl.cli.helpers.command.spec import FORCE_SPEC, RESOURCE_OUTPUT_SPEC
from blctl.cli.helpers.iterator_printer import show_iterator, show_object
from blctl.cli.helpers.printer import echo_result
from blctl.client.tags import TagsClient


def _get(context: Optional[str] = None,
         access_token: Optional[str] = None,
         api_url: Optional[str] = None) -> TagsClient:
    factory: ConfigurationBasedClientFactory = container.get(ConfigurationBasedClientFactory)
    return factory.get(TagsClient, context_name=context, access_token=access_token, api_url=api_url)


@click.group('tag', cls=AliasedGroup, aliases=['tags'])
def tag_command_group():
    """ Manage tags """


@command(tag_command_group, 'list', specs=[RESOURCE_OUTPUT_SPEC], aliases=['ls'])
def list_tags(context: Optional[str] = None,
              access_token: Optional[str] = None,
              api_url: Optional[str] = None,
              output: Optional[str] = None):
    """ List all tags """
    show_iterator(output, _get(context, access_token, api_url).list())


@command(tag_command_group, 'get', specs=[RESOURCE_OUTPUT_SPEC])
def get_tag(name: str,
            context: Optional[str] = None,
            access_token: Optional[str] = None,
            api_url: Optional[str] = None,
            output: Optional[str] = None):
    """ Get the details of the given tag """
    show_object(output, _get(context, access_token, api_url).get(name))


@command(tag_command_group, 'delete', specs=[FORCE_SPEC], aliases=['rm'])
def delete_tags(names: List[str],
                force: bool = False,
                context: Optional[str] = None,
                access_token: Optional[str] = None,
                api_url: Optional[str] = None):
    """ Delete the given tags """
    if not names:
        raise ValueError('At least one tag name must be given')

    if not force:
        click.confirm(f'Delete {len(names)} tag(s)?', abort=True)

    client = _get(context, access_token, api_url)
    for name in names:
        client.delete(name)
        echo_result('Tag', 'red', 'deleted', name)
