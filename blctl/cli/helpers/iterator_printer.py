from json import dumps as to_json_string
from typing import Any, Iterable

import click
from yaml import dump as to_yaml_string, SafeDumper

from blctl.cli.helpers.exporter import normalize, to_json, to_yaml
from blctl.feature_flags import in_interactive_shell, cli_show_list_item_index


class OutputFormat:
    JSON = 'json'
    YAML = 'yaml'

    DEFAULT_FOR_RESOURCE = YAML


def show_iterator(output_format: str,
                  iterator: Iterable[Any],
                  sort_keys: bool = True) -> int:
    """ Display the result from the iterator """
    if output_format == OutputFormat.JSON:
        printer = JsonIteratorPrinter()
    elif output_format == OutputFormat.YAML:
        printer = YamlIteratorPrinter()
    else:
        raise ValueError(f'The given output format ({output_format}) is not available.')

    return printer.print(iterator, sort_keys=sort_keys)


def show_object(output_format: str, obj: Any):
    """ Display a single object """
    if output_format == OutputFormat.JSON:
        click.echo(to_json(normalize(obj)))
    elif output_format == OutputFormat.YAML:
        click.echo(to_yaml(normalize(obj)), nl=False)
    else:
        raise ValueError(f'The given output format ({output_format}) is not available.')


class BaseIteratorPrinter:
    def print(self,
              iterator: Iterable[Any],
              sort_keys: bool = True) -> int:
        raise NotImplementedError()


class JsonIteratorPrinter(BaseIteratorPrinter):
    def print(self,
              iterator: Iterable[Any],
              sort_keys: bool = True) -> int:
        row_count = 0

        for row in iterator:
            if row_count == 0:
                # First row
                click.echo('[')
            else:
                click.echo(',', nl=False)

                if in_interactive_shell and cli_show_list_item_index:
                    click.secho(f' # {row_count}', dim=True, err=True, nl=False)

                click.echo('')  # just a new line

            encoded = to_json_string(normalize(row, sort_keys=sort_keys), indent=2, sort_keys=False)

            click.echo(
                '\n'.join([
                    f'  {line}'
                    for line in encoded.split('\n')
                ]),
                nl=False
            )

            row_count += 1

        if row_count == 0:
            click.echo('[]')
        else:
            click.echo('\n]')

        return row_count


class YamlIteratorPrinter(BaseIteratorPrinter):
    def print(self,
              iterator: Iterable[Any],
              sort_keys: bool = True) -> int:
        row_count = 0

        for row in iterator:
            normalized = normalize(row, sort_keys=sort_keys)
            encoded = (
                normalized
                if isinstance(normalized, str)
                else to_yaml_string(normalized, Dumper=SafeDumper, sort_keys=False)
            )

            click.echo('- ', nl=False)
            click.echo(
                '\n'.join([
                    f'  {line}'
                    for line in encoded.split('\n')
                ]).strip(),
                nl=False
            )

            if in_interactive_shell and cli_show_list_item_index:
                click.secho(f' # {row_count}', dim=True, err=True, nl=False)

            click.echo()

            row_count += 1

        if row_count == 0:
            click.echo('[]')

        return row_count
