import os
import shutil

import yaml
from imagination.decorator import service, EnvironmentVariable
from pydantic import ValidationError

from blctl.common.logger import get_logger
from blctl.configuration.exceptions import InvalidExistingConfigurationError, UnsupportedModelVersionError
from blctl.configuration.models import Configuration
from blctl.constants import LOCAL_STORAGE_DIRECTORY


@service.registered(
    params=[
        EnvironmentVariable('BLCTL_CONFIG_FILE', default=os.path.join(LOCAL_STORAGE_DIRECTORY, 'config.yaml'),
                            allow_default=True)
    ]
)
class ConfigurationManager:
    def __init__(self, file_path: str):
        self.__logger = get_logger(f'{type(self).__name__}')
        self.__file_path = file_path
        self.__swap_file_path = f'{self.__file_path}.swp'

    @property
    def file_path(self) -> str:
        return self.__file_path

    def load_raw(self) -> str:
        """ Load the raw configuration content """
        if not os.path.exists(self.__file_path):
            return '{}'
        with open(self.__file_path, 'r') as f:
            return f.read()

    def load(self) -> Configuration:
        """ Load the configuration object """
        self.__logger.debug(f'Reading the configuration from {self.__file_path}...')
        raw_config = self.load_raw()
        if not raw_config:
            return Configuration()
        try:
            config = Configuration(**(yaml.load(raw_config, Loader=yaml.SafeLoader) or dict()))
        except (ValidationError, TypeError, yaml.YAMLError) as e:
            raise InvalidExistingConfigurationError(f'The existing configuration file at {self.__file_path} '
                                                    f'is invalid.') from e
        return self.migrate(config)

    def save(self, configuration: Configuration):
        """ Save the configuration object """
        # Write the new content to a swap file first, then copy it over the real file.
        self.__logger.debug(f'Saving the configuration to {self.__file_path}...')
        configuration = self.migrate(configuration)

        new_content = yaml.dump(configuration.model_dump(exclude_none=True), Dumper=yaml.SafeDumper)
        if not os.path.exists(os.path.dirname(self.__swap_file_path)):
            os.makedirs(os.path.dirname(self.__swap_file_path), exist_ok=True)
        with open(self.__swap_file_path, 'w') as f:
            f.write(new_content)
        shutil.copyfile(self.__swap_file_path, self.__file_path)
        os.unlink(self.__swap_file_path)

    @classmethod
    def migrate(cls, configuration: Configuration) -> Configuration:
        if configuration.version != 1:
            raise UnsupportedModelVersionError(f'{type(configuration).__name__}/{configuration.version}')
        return configuration
