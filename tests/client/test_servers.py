from blctl.client.base_exceptions import InvalidApiResponseError
from blctl.client.servers import ServersClient, Server, Kernel
from tests.mock_api import MockApiTestCase, paginated, respond


def make_server(server_id: int, name: str = None, tags=None) -> dict:
    return {
        'id': server_id,
        'name': name or f'server-{server_id}',
        'memory': 1024,
        'vcpus': 1,
        'disk': 20,
        'status': 'active',
        'region': {'slug': 'syd', 'name': 'Sydney'},
        'networks': {
            'v4': [
                {'ip_address': f'10.0.0.{server_id}', 'netmask': '255.255.255.0', 'type': 'private'},
                {'ip_address': f'203.0.113.{server_id}', 'netmask': '255.255.255.0', 'type': 'public'},
            ],
            'v6': [],
        },
        'tags': tags or [],
    }


class TestServersClient(MockApiTestCase):
    def setUp(self) -> None:
        super().setUp()
        self.client = ServersClient.make(self.endpoint)

    def test_list_every_page(self):
        self.api.on('GET', '/v2/servers', paginated('servers', [
            [make_server(1), make_server(2)],
            [make_server(3)],
        ]))

        servers = self.client.list()

        self.assertEqual([1, 2, 3], [s.id for s in servers])
        self.assertTrue(all(isinstance(s, Server) for s in servers))
        self.assertEqual('203.0.113.1', servers[0].public_ipv4())
        self.assertEqual('10.0.0.1', servers[0].private_ipv4())
        self.assertIsNone(servers[0].public_ipv6())

        handled_requests = self.api.requests_to('/v2/servers')
        self.assertEqual(2, len(handled_requests))
        self.assertEqual(dict(page='1', per_page='200'), handled_requests[0].query)
        self.assertEqual(dict(page='2', per_page='200'), handled_requests[1].query)
        self.assertEqual('Bearer test-token', handled_requests[0].headers['Authorization'])

    def test_list_with_an_empty_page_in_the_middle(self):
        self.api.on('GET', '/v2/servers', paginated('servers', [
            [make_server(1)],
            [],
            [make_server(2)],
        ]))

        self.assertEqual([1, 2], [s.id for s in self.client.list()])
        self.assertEqual(3, len(self.api.requests_to('/v2/servers')))

    def test_list_with_null_items(self):
        self.api.on('GET', '/v2/servers', respond(200, {'servers': None, 'links': {}, 'meta': {'total': 0}}))

        self.assertEqual([], self.client.list())

    def test_list_by_tag(self):
        self.api.on('GET', '/v2/servers', paginated('servers', [[make_server(7, tags=['web'])]]))

        servers = self.client.list_by_tag('web')

        self.assertEqual([7], [s.id for s in servers])
        self.assertEqual(dict(tag_name='web', page='1', per_page='200'), self.api.requests_to('/v2/servers')[0].query)

    def test_list_fails_when_a_later_page_fails(self):
        self.api.on('GET', '/v2/servers', paginated('servers',
                                                     [[make_server(1)], [make_server(2)]],
                                                     failing_pages={2: (200, 'not json')}))

        with self.assertRaises(InvalidApiResponseError):
            self.client.list()

        self.assertEqual(2, len(self.api.requests_to('/v2/servers')))

    def test_malformed_item(self):
        self.api.on('GET', '/v2/servers', paginated('servers', [[make_server(1), 'not-a-server']]))

        with self.assertRaises(InvalidApiResponseError):
            self.client.list()

    def test_items_must_be_a_list(self):
        self.api.on('GET', '/v2/servers', respond(200, {'servers': {'id': 1}}))

        with self.assertRaisesRegex(InvalidApiResponseError, '"servers" is not a list'):
            self.client.list()

    def test_collection_details(self):
        self.api.on('GET', '/v2/servers/1/kernels', paginated('kernels', [[{'id': 1, 'name': 'linux'}], [{'id': 2}]]))

        collection = self.client._list('v2/servers/1/kernels', 'kernels', Kernel)

        self.assertEqual([1, 2], [k.id for k in collection.items])
        self.assertEqual(2, collection.total)
        self.assertEqual(2, collection.page_count)
        self.assertIsNone(collection.auxiliary)

    def test_get(self):
        self.api.on('GET', '/v2/servers/5', respond(200, {'server': make_server(5, name='db')}))

        server = self.client.get(5)

        self.assertEqual(5, server.id)
        self.assertEqual('db', server.name)
        self.assertEqual('syd', server.region.slug)

    def test_delete(self):
        self.api.on('DELETE', '/v2/servers/5', respond(204))

        self.client.delete(5)

        self.assertEqual(['DELETE'], [r.method for r in self.api.requests_to('/v2/servers/5')])

    def test_delete_by_tag(self):
        self.api.on('DELETE', '/v2/servers', respond(204))

        self.client.delete_by_tag('staging')

        self.assertEqual(dict(tag_name='staging'), self.api.requests_to('/v2/servers')[0].query)

    def test_sub_resources(self):
        self.api.on('GET', '/v2/servers/3/snapshots', paginated('snapshots', [[{'id': 11, 'name': 'snap'}]]))
        self.api.on('GET', '/v2/servers/3/backups', paginated('backups', [[{'id': 12}], [{'id': 13}]]))
        self.api.on('GET', '/v2/servers/3/actions', paginated('actions', [[{'id': 21, 'status': 'completed'}]]))

        self.assertEqual([11], [i.id for i in self.client.snapshots(3)])
        self.assertEqual([12, 13], [i.id for i in self.client.backups(3)])
        self.assertEqual(['completed'], [a.status for a in self.client.actions(3)])

    def test_neighbors_are_not_paginated(self):
        self.api.on('GET', '/v2/servers/3/neighbors', respond(200, {'servers': [make_server(4), make_server(5)]}))

        self.assertEqual([4, 5], [s.id for s in self.client.neighbors(3)])
        self.assertEqual({}, self.api.requests_to('/v2/servers/3/neighbors')[0].query)

    def test_invalid_arguments_are_rejected_before_any_request(self):
        with self.assertRaises(ValueError):
            self.client.get(0)
        with self.assertRaises(ValueError):
            self.client.delete(-1)
        with self.assertRaises(ValueError):
            self.client.list_by_tag('')
        with self.assertRaises(ValueError):
            self.client.delete_by_tag('')

        self.assertEqual([], self.api.handled_requests)
