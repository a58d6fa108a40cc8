from typing import List, Optional

import click
from imagination import container

from blctl.cli.helpers.client_factory import ConfigurationBasedClientFactory
from blctl.cli.helpers.command.decorator import command
from blctl.cli.helpers.command.group import AliasedGroup
from blctl.cli.helpers.command.spec import FORCE_SPEC, RESOURCE_OUTPUT_SPEC
from blctl.cli.helpers.iterator_printer import show_iterator, show_object
from blctl.cli.helpers.printer import echo_result
from blctl.client.keys import KeysClient


def _get(context: Optional[str] = None,
         access_token: Optional[str] = None,
         api_url: Optional[str] = None) -> KeysClient:
    factory: ConfigurationBasedClientFactory = container.get(ConfigurationBasedClientFactory)
    return factory.get(KeysClient, context_name=context, access_token=access_token, api_url=api_url)


@click.group('ssh-key', cls=AliasedGroup, aliases=['k'])
def ssh_key_command_group():
    """ Manage the SSH keys of the account """


@command(ssh_key_command_group, 'list', specs=[RESOURCE_OUTPUT_SPEC], aliases=['ls'])
def list_keys(context: Optional[str] = None,
              access_token: Optional[str] = None,
              api_url: Optional[str] = None,
              output: Optional[str] = None):
    show_iterator(output, _get(context, access_token, api_url).list())


@command(ssh_key_command_group, 'get', specs=[RESOURCE_OUTPUT_SPEC])
def get_key(id_or_fingerprint: str,
            context: Optional[str] = None,
            access_token: Optional[str] = None,
            api_url: Optional[str] = None,
            output: Optional[str] = None):
    """ Get the details of the given SSH key """
    show_object(output, _get(context, access_token, api_url).get(id_or_fingerprint))


@command(ssh_key_command_group, 'delete', specs=[FORCE_SPEC], aliases=['rm'])
def delete_keys(ids_or_fingerprints: List[str],
                force: bool = False,
                context: Optional[str] = None,
                access_token: Optional[str] = None,
                api_url: Optional[str] = None):
    """ Delete the given SSH keys """
    if not ids_or_fingerprints:
        raise ValueError('At least one key ID or fingerprint must be given')

    if not force:
        click.confirm(f'Delete {len(ids_or_fingerprints)} SSH key(s)?', abort=True)

    client = _get(context, access_token, api_url)
    for reference in ids_or_fingerprints:
        client.delete(reference)
        echo_result('SSH key', 'red', 'deleted', reference)
