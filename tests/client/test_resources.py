from blctl.client.actions import ActionsClient
from blctl.client.firewalls import FirewallsClient
from blctl.client.floating_ips import FloatingIPsClient, FloatingIPActionsClient
from blctl.client.images import ImagesClient
from blctl.client.keys import KeysClient
from blctl.client.load_balancers import LoadBalancersClient
from blctl.client.sizes import SizesClient
from blctl.client.snapshots import SnapshotsClient
from blctl.client.tags import TagsClient
from blctl.client.vpcs import VPCsClient
from tests.mock_api import MockApiTestCase, paginated, respond


class TestResourceClients(MockApiTestCase):
    def test_actions(self):
        self.api.on('GET', '/v2/actions', paginated('actions', [[{'id': 1}, {'id': 2}], [{'id': 3}]]))
        self.api.on('GET', '/v2/actions/2', respond(200, {'action': {'id': 2, 'status': 'in-progress'}}))

        client = ActionsClient.make(self.endpoint)

        self.assertEqual([1, 2, 3], [a.id for a in client.list()])
        self.assertEqual('in-progress', client.get(2).status)

    def test_firewalls(self):
        self.api.on('GET', '/v2/firewalls', paginated('firewalls', [[{'id': 'fw-1'}], [{'id': 'fw-2'}]]))
        self.api.on('GET', '/v2/servers/9/firewalls', paginated('firewalls', [[{'id': 'fw-2', 'server_ids': [9]}]]))
        self.api.on('DELETE', '/v2/firewalls/fw-1', respond(204))

        client = FirewallsClient.make(self.endpoint)

        self.assertEqual(['fw-1', 'fw-2'], [f.id for f in client.list()])
        self.assertEqual([[9]], [f.server_ids for f in client.list_by_server(9)])
        client.delete('fw-1')

        with self.assertRaises(ValueError):
            client.list_by_server(0)

    def test_floating_ips(self):
        self.api.on('GET', '/v2/floating_ips', paginated('floating_ips', [[{'ip': '192.0.2.1'}], [{'ip': '192.0.2.2'}]]))
        self.api.on('GET', '/v2/floating_ips/192.0.2.1/actions', paginated('actions', [[{'id': 4}], [{'id': 5}]]))
        self.api.on('GET', '/v2/floating_ips/192.0.2.1/actions/5', respond(200, {'action': {'id': 5}}))

        self.assertEqual(['192.0.2.1', '192.0.2.2'], [f.ip for f in FloatingIPsClient.make(self.endpoint).list()])

        action_client = FloatingIPActionsClient.make(self.endpoint)
        self.assertEqual([4, 5], [a.id for a in action_client.list('192.0.2.1')])
        self.assertEqual(5, action_client.get('192.0.2.1', 5).id)

        with self.assertRaises(ValueError):
            action_client.list('')

    def test_load_balancers(self):
        self.api.on('GET', '/v2/load_balancers', paginated('load_balancers', [[{
            'id': 1,
            'name': 'lb',
            'forwarding_rules': [{'entry_protocol': 'http', 'entry_port': 80}],
            'health_check': {'protocol': 'http', 'path': '/'},
        }]]))

        load_balancers = LoadBalancersClient.make(self.endpoint).list()

        self.assertEqual(80, load_balancers[0].forwarding_rules[0].entry_port)

    def test_sizes(self):
        self.api.on('GET', '/v2/sizes', paginated('sizes', [[{'slug': 'std-min'}], [{'slug': 'std-1vcpu'}]]))

        self.assertEqual(['std-min', 'std-1vcpu'], [s.slug for s in SizesClient.make(self.endpoint).list()])

    def test_tags(self):
        self.api.on('GET', '/v2/tags', paginated('tags', [[{'name': 'web'}, {'name': 'db'}]]))
        self.api.on('GET', '/v2/tags/web', respond(200, {'tag': {'name': 'web', 'resources': {'count': 2}}}))

        client = TagsClient.make(self.endpoint)

        self.assertEqual(['web', 'db'], [t.name for t in client.list()])
        self.assertEqual({'count': 2}, client.get('web').resources)

    def test_vpcs(self):
        self.api.on('GET', '/v2/vpcs', paginated('vpcs', [[{'id': 1, 'name': 'default', 'default': True}], [{'id': 2}]]))
        self.api.on('GET', '/v2/vpcs/2', respond(200, {'vpc': {'id': 2, 'ip_range': '10.240.0.0/16'}}))

        client = VPCsClient.make(self.endpoint)

        self.assertEqual([1, 2], [v.id for v in client.list()])
        self.assertEqual('10.240.0.0/16', client.get(2).ip_range)

    def test_images(self):
        self.api.on('GET', '/v2/images', paginated('images', [
            [{'id': 1, 'slug': 'ubuntu-22.04', 'type': 'distribution'}],
            [{'id': 2, 'slug': 'wordpress', 'type': 'application'}],
        ]))
        self.api.on('GET', '/v2/images/ubuntu-22.04', respond(200, {'image': {'id': 1, 'slug': 'ubuntu-22.04'}}))
        self.api.on('GET', '/v2/images/2', respond(200, {'image': {'id': 2, 'slug': 'wordpress'}}))

        client = ImagesClient.make(self.endpoint)

        self.assertEqual([1, 2], [i.id for i in client.list()])
        self.assertNotIn('type', self.api.requests_to('/v2/images')[0].query)

        client.list_distribution()
        self.assertEqual('distribution', self.api.requests_to('/v2/images')[-1].query['type'])

        client.list_application()
        self.assertEqual('application', self.api.requests_to('/v2/images')[-1].query['type'])

        client.list_user()
        self.assertEqual('true', self.api.requests_to('/v2/images')[-1].query['private'])

        self.assertEqual(1, client.get('ubuntu-22.04').id)
        self.assertEqual('wordpress', client.get(2).slug)

        with self.assertRaises(ValueError):
            client.get('')

    def test_snapshots(self):
        self.api.on('GET', '/v2/snapshots', paginated('snapshots', [
            [{'id': '11', 'name': 'nightly', 'resource_type': 'server', 'resource_id': 5}],
            [{'id': '12', 'name': 'data', 'resource_type': 'volume'}],
        ]))

        client = SnapshotsClient.make(self.endpoint)

        snapshots = client.list()

        self.assertEqual(['11', '12'], [s.id for s in snapshots])
        self.assertEqual(5, snapshots[0].resource_id)
        self.assertEqual(['1', '2'], [r.query['page'] for r in self.api.requests_to('/v2/snapshots')])

        client.list_server()
        self.assertEqual('server', self.api.requests_to('/v2/snapshots')[-1].query['resource_type'])

        with self.assertRaises(ValueError):
            client.get('')

    def test_ssh_keys(self):
        self.api.on('GET', '/v2/account/keys', paginated('ssh_keys', [
            [{'id': 1, 'name': 'laptop', 'fingerprint': 'aa:bb'}],
            [{'id': 2, 'name': 'ci'}],
        ]))
        self.api.on('GET', '/v2/account/keys/aa:bb', respond(200, {'ssh_key': {'id': 1, 'fingerprint': 'aa:bb'}}))
        self.api.on('DELETE', '/v2/account/keys/2', respond(204))

        client = KeysClient.make(self.endpoint)

        self.assertEqual(['laptop', 'ci'], [k.name for k in client.list()])
        self.assertEqual(1, client.get('aa:bb').id)
        client.delete(2)

        with self.assertRaises(ValueError):
            client.delete(0)
