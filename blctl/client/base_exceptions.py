from typing import Any, List, Optional

from blctl.feature_flags import detailed_error, in_global_debug_mode


class UnauthenticatedApiAccessError(RuntimeError):
    """ Raised when the access to the API requires an authentication. """

    def __init__(self, message: str):
        super(UnauthenticatedApiAccessError, self).__init__(f'Unauthenticated Access: {message}')


class UnauthorizedApiAccessError(RuntimeError):
    """ Raised when the access to the API is denied. """

    def __init__(self, message: str):
        super(UnauthorizedApiAccessError, self).__init__(f'Unauthorized Access: {message}')


class MissingResourceError(RuntimeError):
    """ Raised when the requested resource is not found. """


class ApiError(RuntimeError):
    """ Raised when the server responds an error for unexpected reason. """

    def __init__(self, url: str, response_status: int, response_body: Any, urls: Optional[List[str]] = None):
        super(ApiError, self).__init__(f'HTTP {response_status} from {url}: {response_body}')

        self.__url = url
        self.__status = response_status
        self.__details = response_body
        self.__urls = [u for u in (urls or [url]) if u]

    @property
    def url(self):
        return self.__url

    @property
    def status(self):
        return self.__status

    @property
    def details(self):
        return self.__details

    @property
    def urls(self) -> List[str]:
        """ Every URL requested by the operation up to and including the failing one """
        return self.__urls

    def __str__(self):
        blocks = [f'HTTP {self.status} from {self.url}']

        if self.details:
            blocks.append(f': {self.details}')

        if (in_global_debug_mode or detailed_error) and len(self.urls) > 1:
            blocks.append('\nVisited URLs:')
            for url in self.urls:
                blocks.append(f'\n → {url}')

        return ''.join(blocks)


class InvalidApiResponseError(RuntimeError):
    """ Raised when the response body is not JSON or does not have the expected structure. """

    def __init__(self, url: str, reason: str):
        super(InvalidApiResponseError, self).__init__(f'Invalid response from {url}: {reason}')
        self.url = url


class UnexpectedValueError(RuntimeError):
    """ Raised when a list operation receives an element of an unexpected type. """

    def __init__(self, expected_type: type, actual_value: Any, index: int):
        super(UnexpectedValueError, self).__init__(
            f'unexpected value in response: item #{index} is {type(actual_value).__name__}, '
            f'expected {expected_type.__name__}'
        )
        self.expected_type = expected_type
        self.actual_value = actual_value
        self.index = index


class PaginationLimitExceededError(RuntimeError):
    """ Raised when the API keeps reporting another page after the maximum number of pages has been fetched. """

    def __init__(self, max_pages: int):
        super(PaginationLimitExceededError, self).__init__(
            f'The API still reports a next page after {max_pages} pages. The listing has been aborted.'
        )
        self.max_pages = max_pages
