from requests import PreparedRequest
from requests.auth import AuthBase


class BearerTokenAuthenticator(AuthBase):
    """ Inject the personal access token into every request """

    def __init__(self, access_token: str):
        self.__access_token = access_token

    def __call__(self, r: PreparedRequest) -> PreparedRequest:
        r.headers['Authorization'] = f'Bearer {self.__access_token}'
        return r

    def __eq__(self, other):
        return isinstance(other, BearerTokenAuthenticator) and other.__access_token == self.__access_token

    def __ne__(self, other):
        return not self == other
