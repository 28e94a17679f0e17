"""Write rendered trees and errors to the terminal."""

from __future__ import annotations

import typer
from rich.console import Console
from rich.markup import escape

from kube_tree.core.errors import TreeError

err_console = Console(stderr=True, highlight=False, emoji=False)


def output_tree(lines: list[str]) -> None:
    # Tree lines are data: written verbatim, never styled or wrapped
    for line in lines:
        typer.echo(line)


def output_error(err: TreeError | Exception, subject: str = "") -> None:
    message = escape(str(err))
    if subject:
        message = f"{escape(subject)}: {message}"
    err_console.print(f"[red bold]error:[/red bold] {message}", soft_wrap=True)
