"""
CLI module for the OSA scan client.

Provides the command-line interface; commands are thin wrappers around the
service layer.
"""
from osaclient.cli.app import app as _app

# Export app function for pyproject.toml entry point
def app():
    """Entry point function for pyproject.toml scripts."""
    _app()

__all__ = ['app']
