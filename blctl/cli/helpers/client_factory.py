from typing import Optional, Type

from imagination.decorator import service

from blctl.client.constants import SERVICE_CLIENT_CLASS
from blctl.client.models import ApiEndpoint
from blctl.common.environments import env
from blctl.common.logger import get_logger
from blctl.configuration.exceptions import MissingAccessTokenError, UnknownContextError
from blctl.configuration.manager import ConfigurationManager
from blctl.configuration.models import Context, DEFAULT_CONTEXT
from blctl.constants import DEFAULT_API_URL


@service.registered()
class ConfigurationBasedClientFactory:
    """
    Configuration-based Client Factory

    This class will provide a service client based on the CLI configuration.
    """

    def __init__(self, config_manager: ConfigurationManager):
        self._config_manager = config_manager
        self._logger = get_logger(type(self).__name__)

    def get(self,
            cls: Type[SERVICE_CLIENT_CLASS],
            context_name: Optional[str] = None,
            access_token: Optional[str] = None,
            api_url: Optional[str] = None) -> SERVICE_CLIENT_CLASS:
        """
        Instantiate a service client

        The credentials come from, in order of precedence, the given arguments, the environment variables
        (BLCTL_ACCESS_TOKEN and BLCTL_API_URL), the given (or current) context, and the default API URL.

        :param cls: The class (type) of the target service client, e.g., cls=ServersClient
        :param context_name: The name of the context
        :param access_token: The access token
        :param api_url: The base URL of the API
        :return: an instance of the given class
        """
        return cls.make(self.get_endpoint(context_name, access_token, api_url))

    def get_endpoint(self,
                     context_name: Optional[str] = None,
                     access_token: Optional[str] = None,
                     api_url: Optional[str] = None) -> ApiEndpoint:
        access_token = access_token or env('BLCTL_ACCESS_TOKEN',
                                           env_type='secret',
                                           description='API access token')
        api_url = api_url or env('BLCTL_API_URL', description='Base URL of the API')

        # The configuration file is only read when something is still missing.
        if not access_token or not api_url:
            context_name = context_name or self._config_manager.load().current_context or DEFAULT_CONTEXT
            context = self._get_context(context_name)

            access_token = access_token or context.access_token
            api_url = api_url or context.api_url

        if not access_token:
            raise MissingAccessTokenError(context_name or DEFAULT_CONTEXT)

        return ApiEndpoint(url=api_url or DEFAULT_API_URL, access_token=access_token)

    def _get_context(self, context_name: str) -> Context:
        config = self._config_manager.load()

        if context_name in config.contexts:
            return config.contexts[context_name]

        if context_name == DEFAULT_CONTEXT:
            # Without any configuration, the default context is implied.
            return Context()

        self._logger.debug(f'Known contexts: {", ".join(sorted(config.contexts.keys())) or "(none)"}')
        raise UnknownContextError(context_name)
