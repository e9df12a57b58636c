"""
Scan command implementation.

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


def scan_command(
    project_id: str = typer.Argument(..., help="Project identifier on the OSA server"),
    archive: str = typer.Argument(..., help="Path to the zipped sources"),
    wait: bool = typer.Option(True, "--wait/--no-wait", help="Wait for the scan to finish and print the summary"),
    origin: Optional[int] = typer.Option(None, "--origin", help="Origin tag sent with the scan"),
    poll_interval: Optional[float] = typer.Option(None, "--poll-interval", help="Seconds between status checks"),
    max_attempts: Optional[int] = typer.Option(None, "--max-attempts", help="Give up after this many status checks"),
    json_output: bool = typer.Option(False, "--json", help="Print the summary as JSON"),
    server_url: Optional[str] = ServerUrlOption,
    username: Optional[str] = UsernameOption,
    password: Optional[str] = PasswordOption,
    config_path: Optional[str] = ConfigOption,
    verbose: bool = VerboseOption,
):
    """Upload a source archive, wait for the scan and print the summary."""

    # Delegate to service layer
    scan_service = ScanService()
    exit_code = scan_service.execute_scan(
        project_id=project_id,
        archive_path=archive,
        wait=wait,
        json_output=json_output,
        origin=origin,
        poll_interval=poll_interval,
        max_attempts=max_attempts,
        **connection_options(server_url, username, password, config_path, verbose)
    )

    # Exit with appropriate code
    if exit_code != 0:
        sys.exit(exit_code)
