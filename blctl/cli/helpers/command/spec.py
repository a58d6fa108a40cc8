import re

from typing import List, Optional, Union, Any, Type

from pydantic import BaseModel, Field

from blctl.cli.helpers.iterator_printer import OutputFormat


class ArgumentSpec(BaseModel):
    """
    Argument specification

    This is designed to use with @command where you want to customize how it automatically maps the callable's arguments
    as the command arguments/options.
    """
    name: str
    arg_names: Optional[List[str]] = Field(default_factory=list)
    as_option: Optional[bool] = None
    help: Optional[str] = None
    choices: Optional[List] = Field(default_factory=list)
    ignored: bool = False
    nargs: Optional[Union[int, str]] = None
    type: Optional[Type] = None  # WARNING: This will override the parameter reflection.
    default: Optional[Any] = None  # WARNING: This will override the parameter reflection.
    required: Optional[bool] = None  # WARNING: This will override the parameter reflection.

    def get_argument_names(self) -> List[str]:
        if not self.arg_names:
            return self.convert_param_name_to_argument_names(self.name, self.as_option)
        else:
            return [*self.arg_names, self.name]

    @staticmethod
    def convert_param_name_to_argument_names(param_name: str, as_option: bool = False) -> List[str]:
        if as_option:
            return [f"--{re.sub(r'_', '-', param_name)}", param_name]
        else:
            return [param_name]


CONTEXT_SPEC = ArgumentSpec(
    name='context',
    arg_names=['--context'],
    as_option=True,
    help='Context',
    required=False,
)

ACCESS_TOKEN_SPEC = ArgumentSpec(
    name='access_token',
    arg_names=['--access-token', '-t'],
    as_option=True,
    help='API access token (overrides BLCTL_ACCESS_TOKEN and the context)',
    required=False,
)

API_URL_SPEC = ArgumentSpec(
    name='api_url',
    arg_names=['--api-url', '-u'],
    as_option=True,
    help='Override the base URL of the API',
    required=False,
)

RESOURCE_OUTPUT_SPEC = ArgumentSpec(
    name='output',
    arg_names=['--output', '-o'],
    as_option=True,
    choices=[OutputFormat.JSON, OutputFormat.YAML],
    help='Output format',
    default=OutputFormat.DEFAULT_FOR_RESOURCE,
    required=False,
)

FORCE_SPEC = ArgumentSpec(
    name='force',
    arg_names=['--force', '-f'],
    as_option=True,
    help='Delete without confirmation',
)
