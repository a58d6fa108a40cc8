from typing import Optional

from click import Group, Command, Context, HelpFormatter


class AliasedGroup(Group):
    """
    A click Group with command aliases, e.g., "ls" for "list"

    A command or subgroup declares its aliases with the "aliases" attribute.
    """

    def __init__(self, *args, **kwargs):
        self.aliases = kwargs.pop('aliases', [])
        super(AliasedGroup, self).__init__(*args, **kwargs)
        self.sub_commands = {}
        self.sub_aliases = {}

    def add_command(self, cmd: Command, name: Optional[str] = None) -> None:
        super().add_command(cmd, name)
        aliases = getattr(cmd, 'aliases', None) or []
        self.sub_commands[cmd.name] = aliases
        for sub_alias in aliases:
            self.sub_aliases[sub_alias] = cmd.name

    def resolve_alias(self, cmd_name: str) -> str:
        return self.sub_aliases.get(cmd_name, cmd_name)

    def get_command(self, ctx: Context, cmd_name: str) -> Optional[Command]:
        return super(AliasedGroup, self).get_command(ctx, self.resolve_alias(cmd_name))

    def format_commands(self, ctx: Context, formatter: HelpFormatter) -> None:
        sub_commands = self.list_commands(ctx)
        if not sub_commands:
            return

        rows = []
        max_len = max(len(cmd) for cmd in sub_commands)
        limit = formatter.width - 6 - max_len

        for sub_command in sub_commands:
            cmd = self.get_command(ctx, sub_command)
            if cmd is None or cmd.hidden:
                continue
            aliases = self.sub_commands.get(sub_command)
            if aliases:
                sub_command = f'{sub_command} ({",".join(sorted(aliases))})'
            rows.append((sub_command, cmd.get_short_help_str(limit)))

        if rows:
            with formatter.section('Commands'):
                formatter.write_dl(rows)
