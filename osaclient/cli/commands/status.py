"""
Status command implementation.
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


def status_command(
    scan_link: str = typer.Argument(..., help="Scan link returned when the scan was created"),
    server_url: Optional[str] = ServerUrlOption,
    username: Optional[str] = UsernameOption,
    password: Optional[str] = PasswordOption,
    config_path: Optional[str] = ConfigOption,
    verbose: bool = VerboseOption,
):
    """Query the status of a scan once."""

    scan_service = ScanService()
    exit_code = scan_service.execute_status(
        scan_link=scan_link,
        **connection_options(server_url, username, password, config_path, verbose)
    )

    if exit_code != 0:
        sys.exit(exit_code)
