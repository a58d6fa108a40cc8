from typing import List, Optional

import click
from imagination import container

from blctl.cli.helpers.client_factory import ConfigurationBasedClientFactory
from blctl.cli.helpers.command.decorator import command
from blctl.cli.helpers.command.group import AliasedGroup
from blctl.cli.helpers.command.spec import FORCE_SPEC, RESOURCE_OUTPUT_SPEC
from blctl.cli.helpers.iterator_printer import show_iterator, show_object
from blctl.cli.helpers.printer import echo_result
from blctl.client.images import ImagesClient


def _get(context: Optional[str] = None,
         access_token: Optional[str] = None,
         api_url: Optional[str] = None) -> ImagesClient:
    factory: ConfigurationBasedClientFactory = container.get(ConfigurationBasedClientFactory)
    return factory.get(ImagesClient, context_name=context, access_token=access_token, api_url=api_url)


@click.group('image', cls=AliasedGroup, aliases=['images', 'i'])
def image_command_group():
    """ Manage images """


@command(image_command_group, 'list', specs=[RESOURCE_OUTPUT_SPEC], aliases=['ls'])
def list_images(public: bool = False,
                context: Optional[str] = None,
                access_token: Optional[str] = None,
                api_url: Optional[str] = None,
                output: Optional[str] = None):
    """ List the private images of the account, or every image with --public """
    client = _get(context, access_token, api_url)
    show_iterator(output, client.list() if public else client.list_user())


@command(image_command_group, 'list-distribution', specs=[RESOURCE_OUTPUT_SPEC])
def list_distribution_images(context: Optional[str] = None,
                             access_token: Optional[str] = None,
                             api_url: Optional[str] = None,
                             output: Optional[str] = None):
    """ List the available distribution images """
    show_iterator(output, _get(context, access_token, api_url).list_distribution())


@command(image_command_group, 'list-application', specs=[RESOURCE_OUTPUT_SPEC])
def list_application_images(context: Optional[str] = None,
                            access_token: Optional[str] = None,
                            api_url: Optional[str] = None,
                            output: Optional[str] = None):
    """ List the available one-click applications """
    show_iterator(output, _get(context, access_token, api_url).list_application())


@command(image_command_group, 'list-user', specs=[RESOURCE_OUTPUT_SPEC])
def list_user_images(context: Optional[str] = None,
                     access_token: Optional[str] = None,
                     api_url: Optional[str] = None,
                     output: Optional[str] = None):
    """ List user-created images, e.g., snapshots and backups """
    show_iterator(output, _get(context, access_token, api_url).list_user())


@command(image_command_group, 'get', specs=[RESOURCE_OUTPUT_SPEC])
def get_image(id_or_slug: str,
              context: Optional[str] = None,
              access_token: Optional[str] = None,
              api_url: Optional[str] = None,
              output: Optional[str] = None):
    """ Get the details of the given image """
    show_object(output, _get(context, access_token, api_url).get(id_or_slug))


@command(image_command_group, 'delete', specs=[FORCE_SPEC], aliases=['rm'])
def delete_images(image_ids: List[int],
                  force: bool = False,
                  context: Optional[str] = None,
                  access_token: Optional[str] = None,
                  api_url: Optional[str] = None):
    """ Permanently delete the given images """
    if not image_ids:
        raise ValueError('At least one image ID must be given')

    if not force:
        click.confirm(f'Delete {len(image_ids)} image(s)?', abort=True)

    client = _get(context, access_token, api_url)
    for image_id in image_ids:
        client.delete(image_id)
        echo_result('Image', 'red', 'deleted', f'#{image_id}')
