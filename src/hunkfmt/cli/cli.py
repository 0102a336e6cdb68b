"""CLI entrypoint: Typer app definition and command registration"""

import typer

from hunkfmt.cli.commands import patch_cmd, preview_cmd


app = typer.Typer(name="hunkfmt", no_args_is_help=True, help="Line-numbered diff hunks with word-level highlighting")

app.command(name="preview")(preview_cmd)
app.command(name="patch")(patch_cmd)
