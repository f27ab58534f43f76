"""Click command class that carries usage examples.

``staffctl <command> --examples`` prints the command's examples and exits
before the record file is loaded, so ``--help`` can stay short.
"""

from __future__ import annotations

from typing import Any

import click


class StaffCommand(click.Command):
    """Command accepting an ``examples=`` text, shown by ``--examples``."""

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
            ctx.exit()
