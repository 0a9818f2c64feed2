"""CLI entrypoint: Typer app definition and command registration"""

import typer

from sysname.cli.commands import classify_cmd, config_cmd, generate_cmd


app = typer.Typer(name="sysname", no_args_is_help=True, help="Page field to system name generator")

app.command(name="generate")(generate_cmd)
app.command(name="classify")(classify_cmd)
app.command(name="config")(config_cmd)
