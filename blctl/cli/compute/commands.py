import click

from blctl.cli.compute.actions import action_command_group
from blctl.cli.compute.firewalls import firewall_command_group
from blctl.cli.compute.floating_ips import floating_ip_command_group, floating_ip_action_command_group
from blctl.cli.compute.images import image_command_group
from blctl.cli.compute.keys import ssh_key_command_group
from blctl.cli.compute.load_balancers import load_balancer_command_group
from blctl.cli.compute.regions import region_command_group, size_command_group
from blctl.cli.compute.servers import server_command_group
from blctl.cli.compute.snapshots import snapshot_command_group
from blctl.cli.compute.tags import tag_command_group
from blctl.cli.helpers.command.group import AliasedGroup


@click.group('compute', cls=AliasedGroup, aliases=['c'])
def compute_command_group():
    """ Manage the compute resources """


# noinspection PyTypeChecker
compute_command_group.add_command(server_command_group)
# noinspection PyTypeChecker
compute_command_group.add_command(action_command_group)
# noinspection PyTypeChecker
compute_command_group.add_command(firewall_command_group)
# noinspection PyTypeChecker
compute_command_group.add_command(floating_ip_command_group)
# noinspection PyTypeChecker
compute_command_group.add_command(floating_ip_action_command_group)
# noinspection PyTypeChecker
compute_command_group.add_command(load_balancer_command_group)
# noinspection PyTypeChecker
compute_command_group.add_command(region_command_group)
# noinspection PyTypeChecker
compute_command_group.add_command(size_command_group)
# noinspection PyTypeChecker
compute_command_group.add_command(tag_command_group)
# noinspection PyTypeChecker
compute_command_group.add_command(image_command_group)
# noinspection PyTypeChecker
compute_command_group.add_command(snapshot_command_group)
# noinspection PyTypeChecker
compute_command_group.add_command(ssh_key_command_group)
