from __future__ import annotations

import typer
from rich.console import Console
from rich.markup import escape

# status lines go to stderr so stdout carries only entry values
console = Console(stderr=True)
out = Console()


def value(text: str) -> None:
    """Write an entry value to stdout exactly as received."""
    typer.echo(text)


def print_json(data) -> None:
    out.print_json(data=data)


def _status(tag: str, msg: str) -> None:
    console.print(f"{tag} {escape(msg)}")


def info(msg: str) -> None:
    _status("[bold cyan]•[/]", msg)


def ok(msg: str) -> None:
    _status("[bold green]OK[/]", msg)


def warn(msg: str) -> None:
    _status("[bold yellow]WARN[/]", msg)


def err(msg: str) -> None:
    _status("[bold red]ERR[/]", msg)
