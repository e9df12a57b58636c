import os
import sys
from typing import Dict, Optional

from rich.console import Console
from rich.table import Table


def is_ci_environment():
    return (
        os.getenv('CI') is not None or
        os.getenv('JENKINS_URL') is not None or
        os.getenv('GITHUB_ACTIONS') is not None or
        not sys.stdout.isatty()
    )


def get_console() -> Console:
    """Detect environment and create console."""
    if is_ci_environment():
        # CI/automated environment - no colors, no interactive elements
        return Console(force_terminal=False, no_color=True)

    # Interactive terminal - full Rich capabilities
    return Console()


def summary_table(counters: Dict[str, Optional[int]], title: str = "Open Source Analysis Summary") -> Table:
    """Render summary counters as a two-column table."""
    table = Table(title=title, show_header=True, header_style="bold")
    table.add_column("Metric")
    table.add_column("Value", justify="right")

    for name, value in counters.items():
        if value is None:
            continue
        style = "red" if name.startswith("high") and value else None
        table.add_row(name, str(value), style=style)

    return table
