from fnmatch import fnmatch
from typing import List, Optional

import click
from imagination import container

from blctl.cli.helpers.client_factory import ConfigurationBasedClientFactory
from blctl.cli.helpers.command.decorator import command
from blctl.cli.helpers.command.group import AliasedGroup
from blctl.cli.helpers.command.spec import ArgumentSpec, FORCE_SPEC, RESOURCE_OUTPUT_SPEC
from blctl.cli.helpers.iterator_printer import show_iterator, show_object
from blctl.cli.helpers.printer import echo_result
from blctl.client.snapshots import Snapshot, SnapshotResourceType, SnapshotsClient

RESOURCE_TYPE_SPEC = ArgumentSpec(
    name='resource_type',
    arg_names=['--resource-type'],
    as_option=True,
    choices=[SnapshotResourceType.SERVER, SnapshotResourceType.VOLUME],
    help='Only list the snapshots of this type of resource',
    required=False,
)

REGION_SPEC = ArgumentSpec(
    name='region',
    arg_names=['--region'],
    as_option=True,
    help='Only list the snapshots available in this region',
    required=False,
)


def _get(context: Optional[str] = None,
         access_token: Optional[str] = None,
         api_url: Optional[str] = None) -> SnapshotsClient:
    factory: ConfigurationBasedClientFactory = container.get(ConfigurationBasedClientFactory)
    return factory.get(SnapshotsClient, context_name=context, access_token=access_token, api_url=api_url)


def _matches(snapshot: Snapshot, patterns: List[str], region: Optional[str]) -> bool:
    if patterns and not any(fnmatch(str(snapshot.id), p) or fnmatch(snapshot.name or '', p) for p in patterns):
        return False

    if region and region not in (snapshot.regions or []):
        return False

    return True


@click.group('snapshot', cls=AliasedGroup, aliases=['snapshots'])
def snapshot_command_group():
    """ Manage server and volume snapshots """


@command(snapshot_command_group, 'list', specs=[RESOURCE_OUTPUT_SPEC, RESOURCE_TYPE_SPEC, REGION_SPEC], aliases=['ls'])
def list_snapshots(patterns: List[str],
                   resource_type: Optional[str] = None,
                   region: Optional[str] = None,
                   context: Optional[str] = None,
                   access_token: Optional[str] = None,
                   api_url: Optional[str] = None,
                   output: Optional[str] = None):
    """ List snapshots, optionally only the ones whose ID or name matches one of the given glob patterns """
    snapshots = _get(context, access_token, api_url).list(resource_type)
    show_iterator(output, [s for s in snapshots if _matches(s, list(patterns), region)])


@command(snapshot_command_group, 'get', specs=[RESOURCE_OUTPUT_SPEC])
def get_snapshot(snapshot_id: str,
                 context: Optional[str] = None,
                 access_token: Optional[str] = None,
                 api_url: Optional[str] = None,
                 output: Optional[str] = None):
    """ Get the details of the given snapshot """
    show_object(output, _get(context, access_token, api_url).get(snapshot_id))


@command(snapshot_command_group, 'delete', specs=[FORCE_SPEC], aliases=['rm'])
def delete_snapshots(snapshot_ids: List[str],
                     force: bool = False,
                     context: Optional[str] = None,
                     access_token: Optional[str] = None,
                     api_url: Optional[str] = None):
    """ Delete the given snapshots """
    if not snapshot_ids:
        raise ValueError('At least one snapshot ID must be given')

    if not force:
        click.confirm(f'Delete {len(snapshot_ids)} snapshot(s)?', abort=True)

    client = _get(context, access_token, api_url)
    for snapshot_id in snapshot_ids:
        client.delete(snapshot_id)
        echo_result('Snapshot', 'red', 'deleted', snapshot_id)
