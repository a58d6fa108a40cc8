from typing import Optional

import click


def echo_result(prefix: Optional[str], result_color: str, result: str, message: str, emoji: Optional[str] = None,
                to_stderr: bool = True):
    """ Report the outcome of a command that does not produce any resource output, e.g., delete """
    if prefix:
        click.secho(f'[{prefix}]', dim=True, nl=False, err=to_stderr, bold=True)

    click.secho(f' {emoji} {result.upper()} ' if emoji else f' {result.upper()} ',
                fg=result_color,
                nl=False,
                err=to_stderr)
    click.secho(message, err=to_stderr)
