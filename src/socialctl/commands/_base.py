"""Click classes whose commands carry an on-demand ``--examples`` page.

``--help`` stays short; ``--examples`` prints worked invocations and exits.
"""

from __future__ import annotations

from typing import Any

import click


class ExamplesMixin:
    """Turns an ``examples=`` keyword into an eager ``--examples`` flag."""

    params: list[click.Parameter]

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            self.params.append(
                click.Option(
                    ["--examples"],
                    is_flag=True,
                    expose_value=False,
                    is_eager=True,
                    callback=self._print_examples,
                    help="Show usage examples and exit.",
                )
            )

    def _print_examples(self, ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if value:
            click.echo(f"Examples for '{ctx.command_path}':\n\n{self.examples}")
            ctx.exit(0)


class SocialCommand(ExamplesMixin, click.Command):
    pass


class SocialGroup(ExamplesMixin, click.Group):
    """Group whose ``@group.command()`` subcommands are :class:`SocialCommand`."""

    command_class = SocialCommand
