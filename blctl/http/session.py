import platform
import sys
from contextlib import AbstractContextManager
from typing import List, Optional
from uuid import uuid4

from requests import Session, Response
from requests.auth import AuthBase

from blctl.common.logger import get_logger
from blctl.constants import __version__


class HttpError(RuntimeError):
    def __init__(self, response: Response):
        super(HttpError, self).__init__(response)

    @property
    def response(self) -> Response:
        return self.args[0]

    def __str__(self):
        response: Response = self.response

        error_feedback = f'HTTP {response.status_code}'

        response_text = response.text.strip()
        if len(response_text) == 0:
            error_feedback = f'{error_feedback} (empty response)'
        else:
            error_feedback = f'{error_feedback}: {response_text}'

        return error_feedback


class ClientError(HttpError):
    pass


class ServerError(HttpError):
    pass


class HttpSession(AbstractContextManager):
    """ Thin wrapper around a requests session

        One instance is meant to serve one logical operation, e.g., all page fetches of a single list call.
    """

    def __init__(self,
                 uuid: Optional[str] = None,
                 authenticator: Optional[AuthBase] = None,
                 suppress_error: bool = False,
                 session: Optional[Session] = None):
        super().__init__()

        self.__id = uuid or str(uuid4())
        self.__logger = get_logger(f'{type(self).__name__}/{self.__id}')
        self.__authenticator = authenticator
        self.__session: Optional[Session] = session
        self.__suppress_error = suppress_error

        if not self.__authenticator:
            self.__logger.debug('No authenticator for this session.')

    @property
    def _session(self) -> Session:
        if not self.__session:
            self.__session = Session()
            self.__session.headers.update({
                'User-Agent': self.generate_http_user_agent()
            })

        return self.__session

    def __enter__(self):
        super().__enter__()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        super().__exit__(exc_type, exc_val, exc_tb)
        self.close()

    def submit(self, method: str, url: str, **kwargs) -> Response:
        params = kwargs.get('params', None)
        self.__logger.debug(f'{method.upper()} {url} {params} (AUTH: {"Enabled" if self.__authenticator else "Disabled"})')

        if self.__authenticator:
            kwargs['auth'] = self.__authenticator

        response = getattr(self._session, method.lower())(url, **kwargs)

        self.__logger.debug(f'Response/URL {response.url}')
        self.__logger.debug(f'Response/HTTP {response.status_code} ({len(response.content)}B)')

        if response.ok:
            return response

        if self.__suppress_error:
            self.__logger.debug('Error suppressed by the caller of this method.')
            return response

        self._raise_http_error(response)

    def close(self):
        if self.__session:
            self.__session.close()
            self.__session = None

    def _raise_http_error(self, response: Response):
        raise (ClientError if response.status_code < 500 else ServerError)(response)

    def __del__(self):
        self.close()

    @staticmethod
    def generate_http_user_agent(comments: Optional[List[str]] = None) -> str:
        # NOTE: https://developer.mozilla.org/en-US/docs/Web/HTTP/Headers/User-Agent
        interested_module_names = [
            'IPython',  # indicates that it is probably used in a notebook
            'unittest',  # indicates that it is used by a test code
        ]

        final_comments = [
            f'Platform/{platform.platform()}',  # OS information + CPU architecture
            'Python/{}.{}.{}'.format(*sys.version_info),  # Python version
            *(comments or list()),
            *[
                f'Module/{interested_module_name}'
                for interested_module_name in interested_module_names
                if interested_module_name in sys.modules
            ]
        ]

        return f'blctl/{__version__} {" ".join(final_comments)}'.strip()
