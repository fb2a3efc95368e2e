"""
Display utilities for job inputs and validation errors.
"""

from typing import List, Optional, Union

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from ..exceptions import BatchInferenceError, UnrecognizedEnumValueError
from ..models.job import JobInput, JobInputType

TYPE_STYLES = {
    JobInputType.UriFolder: "cyan",
    JobInputType.UriFile: "green",
}


def build_job_inputs_table(
    inputs: Union[JobInput, List[JobInput]],
    title: Optional[str] = "Job Inputs",
) -> Table:
    """Create a rich table with one row per job input."""
    if isinstance(inputs, JobInput):
        inputs = [inputs]

    table = Table(title=title, show_header=True, header_style="bold magenta")
    table.add_column("Type", no_wrap=True)
    table.add_column("URI", style="white")
    table.add_column("Mode", style="dim")

    for job_input in inputs:
        input_type = job_input.job_input_type
        table.add_row(
            Text(input_type.to_wire(), style=TYPE_STYLES[input_type]),
            Text(job_input.uri),
            Text(job_input.mode or "-"),
        )

    return table


def display_job_inputs(
    inputs: Union[JobInput, List[JobInput]],
    title: Optional[str] = "Job Inputs",
    console: Optional[Console] = None,
) -> None:
    """
    Display job inputs in a formatted table using rich.

    Args:
        inputs: Job input or list of job inputs to display
        title: Table title
        console: Console to print to, a new one by default
    """
    console = console or Console()

    if isinstance(inputs, list) and len(inputs) == 0:
        console.print("[yellow]No job inputs to display[/yellow]")
        return

    console.print(build_job_inputs_table(inputs, title=title))


def print_validation_error(
    error: BatchInferenceError, console: Optional[Console] = None
) -> None:
    """Print a validation error, listing the accepted names for enum errors."""
    console = console or Console()
    console.print(f"[red]✗ Error:[/red] {escape(str(error))}")
    if isinstance(error, UnrecognizedEnumValueError):
        console.print(f"[blue]ℹ Accepted values:[/blue] {', '.join(error.allowed)}")
