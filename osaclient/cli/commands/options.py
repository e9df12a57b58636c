"""
Options shared by every command that talks to the OSA server.
"""
from typing import Optional

import typer

ServerUrlOption = typer.Option(None, "--server-url", help="OSA server URL (overrides OSA_SERVER_URL)")
UsernameOption = typer.Option(None, "--username", "-u", help="Login name (overrides OSA_USERNAME)")
PasswordOption = typer.Option(None, "--password", "-p", help="Password (overrides OSA_PASSWORD)", hide_input=True)
ConfigOption = typer.Option(None, "-c", "--config", help="Path to config YAML")
VerboseOption = typer.Option(False, "-v", "--verbose", help="Enable debug logging")


def connection_options(
    server_url: Optional[str],
    username: Optional[str],
    password: Optional[str],
    config_path: Optional[str],
    verbose: bool,
) -> dict:
    """Collect connection options as keyword arguments for the service layer."""
    return {
        "server_url": server_url,
        "username": username,
        "password": password,
        "config_path": config_path,
        "verbose": verbose,
    }
