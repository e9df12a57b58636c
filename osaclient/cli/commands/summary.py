"""
Summary command implementation.

Thin wrapper around ScanService that handles CLI argument parsing
and delegates business logic to the service layer.
"""
import sys
from typing import Optional

import typer

from osaclient.cli.commands.options import (
    ConfigOption,
    PasswordOption,
    ServerUrlOption,
    UsernameOption,
    VerboseOption,
    connection_options,
)
from osaclient.core.scanner import ScanService


def summary_command(
    project_id: str = typer.Argument(..., help="Project identifier on the OSA server"),
    json_output: bool = typer.Option(False, "--json", help="Print the summary as JSON"),
    server_url: Optional[str] = ServerUrlOption,
    username: Optional[str] = UsernameOption,
    password: Optional[str] = PasswordOption,
    config_path: Optional[str] = ConfigOption,
    verbose: bool = VerboseOption,
):
    """Print the open-source summary of a project."""

    scan_service = ScanService()
    exit_code = scan_service.execute_summary(
        project_id=project_id,
        json_output=json_output,
        **connection_options(server_url, username, password, config_path, verbose)
    )

    if exit_code != 0:
        sys.exit(exit_code)
