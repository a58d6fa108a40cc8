from typing import Optional

import click
from imagination import container

from blctl.cli.helpers.command.decorator import command
from blctl.cli.helpers.command.group import AliasedGroup
from blctl.cli.helpers.command.spec import ArgumentSpec, RESOURCE_OUTPUT_SPEC
from blctl.cli.helpers.iterator_printer import show_iterator
from blctl.cli.helpers.printer import echo_result
from blctl.client.account import AccountClient
from blctl.client.models import ApiEndpoint
from blctl.configuration.exceptions import UnknownContextError
from blctl.configuration.manager import ConfigurationManager
from blctl.configuration.models import Context, DEFAULT_CONTEXT
from blctl.constants import DEFAULT_API_URL


@click.group('auth', cls=AliasedGroup)
def auth_command_group():
    """ Manage the access tokens of BinaryLane accounts """


@command(auth_command_group,
         specs=[
             ArgumentSpec(
                 name='access_token',
                 arg_names=['--access-token', '-t'],
                 as_option=True,
                 help='API access token',
                 required=True,
             ),
             ArgumentSpec(
                 name='skip_verify',
                 arg_names=['--skip-verify'],
                 as_option=True,
                 help='Save the token without checking it against the API',
             ),
         ])
def init(access_token: str,
         context: Optional[str] = None,
         api_url: Optional[str] = None,
         skip_verify: bool = False):
    """ Save an access token to a context and switch to that context """
    context_name = context or DEFAULT_CONTEXT
    endpoint = ApiEndpoint(url=api_url or DEFAULT_API_URL, access_token=access_token)

    if not skip_verify:
        account = AccountClient.make(endpoint).get()
        echo_result('Auth', 'green', 'verified', f'{account.email or account.uuid or "(unknown account)"}')

    manager: ConfigurationManager = container.get(ConfigurationManager)
    config = manager.load()
    config.contexts[context_name] = Context(access_token=access_token, api_url=endpoint.url)
    config.current_context = context_name
    manager.save(config)

    echo_result('Auth', 'green', 'saved', f'Context "{context_name}"')


@command(auth_command_group, 'list', specs=[RESOURCE_OUTPUT_SPEC], aliases=['ls'])
def list_contexts(output: Optional[str] = None):
    """ List all contexts """
    manager: ConfigurationManager = container.get(ConfigurationManager)
    config = manager.load()
    show_iterator(output,
                  [
                      dict(name=name, api_url=context.api_url, current=(name == config.current_context))
                      for name, context in sorted(config.contexts.items())
                  ])


@command(auth_command_group)
def switch(context_name: str):
    """ Switch to the given context """
    manager: ConfigurationManager = container.get(ConfigurationManager)
    config = manager.load()

    if context_name not in config.contexts:
        raise UnknownContextError(context_name)

    config.current_context = context_name
    manager.save(config)

    echo_result('Auth', 'green', 'switched', f'Context "{context_name}"')


@command(auth_command_group, aliases=['rm'])
def remove(context_name: str):
    """ Remove the given context """
    manager: ConfigurationManager = container.get(ConfigurationManager)
    config = manager.load()

    if context_name not in config.contexts:
        raise UnknownContextError(context_name)

    del config.contexts[context_name]
    if config.current_context == context_name:
        config.current_context = DEFAULT_CONTEXT
    manager.save(config)

    echo_result('Auth', 'red', 'removed', f'Context "{context_name}"')
