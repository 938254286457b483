from __future__ import annotations

import typer

from .commands import demo_cmd, entries_cmd, settings_cmd
from .logging_ import setup_logging


def _build_app() -> typer.Typer:
    app = typer.Typer(
        name="ccm",
        help="ccm: read and write configuration entries",
        no_args_is_help=True,
    )

    app.command("get")(entries_cmd.get_entry)
    app.command("set")(entries_cmd.set_entry)
    app.command("demo")(demo_cmd.demo)
    app.add_typer(settings_cmd.app, name="settings")

    @app.callback()
    def _main(
            verbose: bool = typer.Option(False, "-v", "--verbose", help="Verbose logs."),
    ):
        setup_logging(verbose)

    return app


app = _build_app()
