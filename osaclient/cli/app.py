"""
Main CLI application for the OSA scan client.

Defines the Typer application structure and command routing, keeping the
CLI layer thin.
"""
import typer

from osaclient.cli.commands.scan import scan_command
from osaclient.cli.commands.status import status_command
from osaclient.cli.commands.summary import summary_command


# Initialize Typer app
app = typer.Typer(help="osa-scan - submit source archives to an OSA server and read the results")

# Register commands
app.command("scan", help="Upload a source archive, wait for the scan and print the summary.")(scan_command)
app.command("summary", help="Print the open-source summary of a project.")(summary_command)
app.command("status", help="Query the status of a scan once.")(status_command)
