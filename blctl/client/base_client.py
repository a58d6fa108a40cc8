from abc import ABC
from pprint import pformat
from typing import Any, Dict, List, Optional, Type, TypeVar
from urllib.parse import urlencode, urljoin
from uuid import uuid4

from pydantic import BaseModel, ValidationError
from requests import Response

from blctl.client.base_exceptions import UnauthenticatedApiAccessError, UnauthorizedApiAccessError, \
    MissingResourceError, ApiError, InvalidApiResponseError
from blctl.client.models import ApiEndpoint, Links, Meta
from blctl.client.pagination import AggregateCollection, Page, PageSelector, collect, expect_items
from blctl.common.logger import get_logger
from blctl.feature_flags import in_global_debug_mode
from blctl.http.authenticators import BearerTokenAuthenticator
from blctl.http.session import HttpSession, HttpError

M = TypeVar('M', bound=BaseModel)


class BaseServiceClient(ABC):
    """ The base class for all BinaryLane API clients """

    def __init__(self, endpoint: ApiEndpoint):
        if not endpoint.url.endswith(r'/'):
            endpoint = endpoint.model_copy(update=dict(url=endpoint.url + r'/'))

        self._uuid = str(uuid4())
        self._endpoint = endpoint
        self._logger = get_logger(f'{type(self).__name__}/{self._uuid}'
                                  if in_global_debug_mode
                                  else type(self).__name__)

    @property
    def endpoint(self) -> ApiEndpoint:
        return self._endpoint

    @property
    def url(self):
        """The base URL to the API"""
        return self._endpoint.url

    @classmethod
    def make(cls, endpoint: ApiEndpoint):
        """Create this class with the given `endpoint`."""
        return cls(endpoint)

    def create_http_session(self, suppress_error: bool = False) -> HttpSession:
        """Create HTTP session wrapper"""
        return HttpSession(self._uuid,
                           BearerTokenAuthenticator(self._endpoint.access_token)
                           if self._endpoint.access_token
                           else None,
                           suppress_error=suppress_error)

    def _get_url(self, path: str) -> str:
        return urljoin(self.url, path)

    def _request(self,
                 session: HttpSession,
                 method: str,
                 path: str,
                 params: Optional[Dict[str, Any]] = None,
                 **kwargs) -> Response:
        url = self._get_url(path)
        try:
            return session.submit(method, url, params=params, **kwargs)
        except HttpError as e:
            raise self._translate_http_error(url, e) from e

    def _request_json(self,
                      session: HttpSession,
                      method: str,
                      path: str,
                      params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        response = self._request(session, method, path, params=params)

        if not response.text:
            return dict()

        try:
            response_body = response.json()
        except ValueError as e:
            self._logger.debug(f'Unexpectedly non-JSON response body from {response.url}:\n{response.text}')
            raise InvalidApiResponseError(response.url, 'the body is not a JSON document') from e

        if not isinstance(response_body, dict):
            raise InvalidApiResponseError(response.url, f'expected a JSON object, got {type(response_body).__name__}')

        return response_body

    def _get_object(self, path: str, key: Optional[str], model_type: Type[M]) -> M:
        """ Get one object, wrapped in the envelope under the given key unless the key is None """
        with self.create_http_session() as session:
            response_body = self._request_json(session, 'get', path)
        return self._parse(path, response_body if key is None else response_body.get(key), model_type)

    def _get_list(self, path: str, key: str, model_type: Type[M]):
        """ Get a list that the API never paginates """
        with self.create_http_session() as session:
            response_body = self._request_json(session, 'get', path)
        return [self._parse(path, raw_item, model_type) for raw_item in (response_body.get(key) or [])]

    def _get_bytes(self, path: str) -> bytes:
        with self.create_http_session() as session:
            return self._request(session, 'get', path).content

    def _delete(self, path: str, params: Optional[Dict[str, Any]] = None):
        with self.create_http_session() as session:
            self._request(session, 'delete', path, params=params)

    def _list(self,
              path: str,
              key: str,
              item_type: Type[M],
              params: Optional[Dict[str, Any]] = None,
              auxiliary_key: Optional[str] = None,
              auxiliary_type: Optional[Type[BaseModel]] = None,
              per_page: Optional[int] = None) -> AggregateCollection:
        """
        List every item of a paginated endpoint

        :param path: the path of the list endpoint, relative to the base URL
        :param key: the property of the envelope holding the items
        :param item_type: the model of one item
        :param params: resource-specific query parameters, e.g., tag_name
        :param auxiliary_key: the property of the envelope holding non-item data to keep
        :param auxiliary_type: the model of the non-item data
        :param per_page: the page size
        """
        visited_urls: List[str] = []

        with self.create_http_session() as session:
            def fetch_page(selector: PageSelector) -> Page:
                query = dict(params or dict())
                query.update(selector.as_params())

                visited_urls.append(f'{self._get_url(path)}?{urlencode(query)}')

                try:
                    response_body = self._request_json(session, 'get', path, params=query)
                except ApiError as e:
                    raise ApiError(e.url, e.status, e.details, urls=list(visited_urls)) from e

                if in_global_debug_mode:
                    self._logger.debug(f'Response:\n{pformat(response_body, indent=2)}')

                raw_items = response_body.get(key) or []
                if not isinstance(raw_items, list):
                    raise InvalidApiResponseError(self._get_url(path), f'"{key}" is not a list')

                auxiliary = None
                if auxiliary_key and auxiliary_type and response_body.get(auxiliary_key) is not None:
                    auxiliary = self._parse(path, response_body[auxiliary_key], auxiliary_type)

                links = self._parse(path, response_body.get('links') or dict(), Links)
                meta = self._parse(path, response_body.get('meta') or dict(), Meta)

                return Page(items=[self._parse(path, raw_item, item_type) for raw_item in raw_items],
                            has_next=links.has_next_page(),
                            total=meta.total,
                            auxiliary=auxiliary)

            collection = collect(fetch_page, per_page=per_page)

        expect_items(collection.items, item_type)

        return collection

    def _parse(self, path: str, raw: Any, model_type: Type[M]) -> M:
        if not isinstance(raw, dict):
            raise InvalidApiResponseError(self._get_url(path),
                                          f'expected an object for {model_type.__name__}, got {type(raw).__name__}')
        try:
            return model_type(**raw)
        except ValidationError as e:
            raise InvalidApiResponseError(self._get_url(path), f'invalid {model_type.__name__}: {e}') from e

    @staticmethod
    def _translate_http_error(url: str, e: HttpError) -> Exception:
        status_code = e.response.status_code
        response_text = e.response.text

        if status_code == 401:
            return UnauthenticatedApiAccessError(f'{url} ({response_text})')
        elif status_code == 403:
            return UnauthorizedApiAccessError(f'{url} ({response_text})')
        elif status_code == 404:
            return MissingResourceError(f'Not found: {url}')
        else:
            return ApiError(e.response.url or url, status_code, response_text)


def require_id(name: str, value: int) -> int:
    """ Reject IDs the API would never accept before making any request """
    if value is None or int(value) < 1:
        raise ValueError(f'{name} cannot be less than 1')
    return int(value)


def require_text(name: str, value: str) -> str:
    if not value:
        raise ValueError(f'{name} cannot be empty')
    return value
