from blctl.client.base_exceptions import UnauthenticatedApiAccessError, UnauthorizedApiAccessError, \
    MissingResourceError, ApiError, InvalidApiResponseError
from blctl.client.regions import RegionsClient
from tests.mock_api import MockApiTestCase, paginated, respond


class TestErrorMapping(MockApiTestCase):
    def setUp(self) -> None:
        super().setUp()
        self.client = RegionsClient.make(self.endpoint)

    def test_401(self):
        self.api.on('GET', '/v2/regions', respond(401, {'id': 'unauthorized', 'message': 'Unable to authenticate you'}))

        with self.assertRaisesRegex(UnauthenticatedApiAccessError, 'Unable to authenticate you'):
            self.client.list()

    def test_403(self):
        self.api.on('GET', '/v2/regions', respond(403, {'id': 'forbidden'}))

        with self.assertRaises(UnauthorizedApiAccessError):
            self.client.list()

    def test_404(self):
        with self.assertRaises(MissingResourceError):
            self.client.list()

    def test_500_on_a_later_page(self):
        self.api.on('GET', '/v2/regions', paginated('regions',
                                                     [[{'slug': 'syd'}], [{'slug': 'bne'}]],
                                                     failing_pages={2: (500, {'message': 'internal error'})}))

        with self.assertRaises(ApiError) as context:
            self.client.list()

        self.assertEqual(500, context.exception.status)
        self.assertIn('page=2', context.exception.url)
        self.assertIn('internal error', context.exception.details)
        self.assertEqual(2, len(context.exception.urls))
        self.assertIn('page=1', context.exception.urls[0])

    def test_non_json_body(self):
        self.api.on('GET', '/v2/regions', respond(200, '<html>maintenance</html>'))

        with self.assertRaisesRegex(InvalidApiResponseError, 'not a JSON document'):
            self.client.list()

    def test_json_body_that_is_not_an_object(self):
        self.api.on('GET', '/v2/regions', respond(200, [{'slug': 'syd'}]))

        with self.assertRaisesRegex(InvalidApiResponseError, 'expected a JSON object'):
            self.client.list()

    def test_malformed_links(self):
        self.api.on('GET', '/v2/regions', respond(200, {'regions': [], 'links': {'pages': 'nope'}}))

        with self.assertRaises(InvalidApiResponseError):
            self.client.list()
