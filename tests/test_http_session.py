from unittest import TestCase
from unittest.mock import MagicMock, Mock

from requests import Session

from blctl.http.authenticators import BearerTokenAuthenticator
from blctl.http.session import HttpSession, ClientError, ServerError
from tests.mock_api import MockApiTestCase, respond


def mock_response(status_code: int, text: str = '') -> Mock:
    response_mock = Mock()
    response_mock.status_code = status_code
    response_mock.ok = status_code < 400
    response_mock.text = text
    response_mock.content = text.encode('utf-8')
    response_mock.url = 'http://example-url.com'
    return response_mock


class TestHttpSession(TestCase):
    def test_submit_403_status_code(self):
        session_mock = MagicMock(Session)
        session_mock.get.return_value = mock_response(403, 'Test data')

        http_session = HttpSession(authenticator=BearerTokenAuthenticator('token'), session=session_mock)
        with self.assertRaises(ClientError) as e:
            http_session.submit(method="get", url="http://example-url.com")
        self.assertEqual(e.exception.response.status_code, 403)
        self.assertEqual('HTTP 403: Test data', str(e.exception))

    def test_submit_503_status_code(self):
        session_mock = MagicMock(Session)
        session_mock.get.return_value = mock_response(503)

        http_session = HttpSession(session=session_mock)
        with self.assertRaises(ServerError) as e:
            http_session.submit("get", "http://example-url.com")
        self.assertEqual('HTTP 503 (empty response)', str(e.exception))

    def test_suppressed_error(self):
        session_mock = MagicMock(Session)
        session_mock.delete.return_value = mock_response(404)

        http_session = HttpSession(session=session_mock, suppress_error=True)
        self.assertEqual(404, http_session.submit("delete", "http://example-url.com").status_code)

    def test_authenticator_is_applied(self):
        session_mock = MagicMock(Session)
        session_mock.get.return_value = mock_response(200, '{}')
        authenticator = BearerTokenAuthenticator('token')

        HttpSession(authenticator=authenticator, session=session_mock).submit("get", "http://example-url.com",
                                                                             params=dict(page=1))

        session_mock.get.assert_called_once_with("http://example-url.com", params=dict(page=1), auth=authenticator)

    def test_user_agent(self):
        user_agent = HttpSession.generate_http_user_agent(['Extra/1'])
        self.assertTrue(user_agent.startswith('blctl/'))
        self.assertIn('Extra/1', user_agent)


class TestHttpSessionWithServer(MockApiTestCase):
    def test_bearer_token_and_user_agent_headers(self):
        self.api.on('GET', '/v2/ping', respond(200, {'message': 'pong'}))

        with HttpSession(authenticator=BearerTokenAuthenticator('secret')) as session:
            response = session.submit('get', f'{self.api.url}v2/ping')

        self.assertEqual('pong', response.json()['message'])

        handled_request = self.api.requests_to('/v2/ping')[0]
        self.assertEqual('Bearer secret', handled_request.headers['Authorization'])
        self.assertTrue(handled_request.headers['User-Agent'].startswith('blctl/'))
