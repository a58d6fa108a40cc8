from typing import TypeVar

from blctl.client.account import AccountClient
from blctl.client.actions import ActionsClient
from blctl.client.base_client import BaseServiceClient
from blctl.client.billing_history import BillingHistoryClient
from blctl.client.firewalls import FirewallsClient
from blctl.client.floating_ips import FloatingIPActionsClient, FloatingIPsClient
from blctl.client.images import ImagesClient
from blctl.client.invoices import InvoicesClient
from blctl.client.keys import KeysClient
from blctl.client.load_balancers import LoadBalancersClient
from blctl.client.regions import RegionsClient
from blctl.client.servers import ServersClient
from blctl.client.sizes import SizesClient
from blctl.client.snapshots import SnapshotsClient
from blctl.client.tags import TagsClient
from blctl.client.vpcs import VPCsClient

# Type variable for the service client
SERVICE_CLIENT_CLASS = TypeVar('SERVICE_CLIENT_CLASS',
                               BaseServiceClient,
                               AccountClient,
                               ActionsClient,
                               BillingHistoryClient,
                               FirewallsClient,
                               FloatingIPsClient,
                               FloatingIPActionsClient,
                               ImagesClient,
                               InvoicesClient,
                               KeysClient,
                               LoadBalancersClient,
                               RegionsClient,
                               ServersClient,
                               SizesClient,
                               SnapshotsClient,
                               TagsClient,
                               VPCsClient)
