"""Base command for subcommands that read one serialized Result.

Every subcommand takes a ``SOURCE`` argument (a path, or ``-`` for stdin)
and may ship usage examples, shown by an eager ``--examples`` flag so
``--help`` stays short.
"""

from __future__ import annotations

from typing import Any

import click

RESULT_SOURCE = click.File("r", encoding="utf-8")


class ResultCommand(click.Command):
    """Click Command whose callback receives an open ``source`` stream."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        self.params.insert(0, click.Argument(["source"], type=RESULT_SOURCE, default="-"))
        if examples:
            self.params.append(
                click.Option(
                    ["--examples"],
                    is_flag=True,
                    expose_value=False,
                    is_eager=True,
                    callback=self._show_examples,
                    help="Show usage examples.",
                )
            )

    def _show_examples(self, ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value or ctx.resilient_parsing:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(self.examples)
        ctx.exit(0)
