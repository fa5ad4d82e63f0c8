"""CLI entrypoint: Typer app definition and command registration"""

import typer

from linediff.cli.commands import diff_cmd


app = typer.Typer(name="linediff", add_completion=False, help="Minimal line-by-line diff of two files")

app.command(name="diff")(diff_cmd)
