class ConfigurationError(RuntimeError):
    """ General Error. """


class MissingAccessTokenError(ConfigurationError):
    """ Raised when no access token is given or configured. """

    def __init__(self, context_name: str):
        super(MissingAccessTokenError, self).__init__(
            f'No access token for the "{context_name}" context. Run "blctl auth init" or set BLCTL_ACCESS_TOKEN.'
        )


class UnknownContextError(ConfigurationError):
    """ Raised when the requested context is not configured. """

    def __init__(self, context_name: str):
        super(UnknownContextError, self).__init__(f'Unknown context: {context_name}')


class InvalidExistingConfigurationError(ConfigurationError):
    """ Raised when the configuration file cannot be read. """


class UnsupportedModelVersionError(ConfigurationError):
    pass
