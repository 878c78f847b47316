"""Rich renderers for registry contents and errors."""

from typing import Optional

from rich.console import Console
from rich.table import Table

from ..di.container import Container
from ..errors import SmartDIError


def render_registry(container: Container) -> Table:
    """Build a table of the container's entries, in registration order."""
    table = Table(title=f"Injectables ({len(container)})")
    table.add_column("Name", style="cyan")
    table.add_column("Class")
    table.add_column("Scope")
    table.add_column("Default args")
    table.add_column("Cached", justify="center")

    for entry in container.entries():
        defaults = [repr(arg) for arg in entry.args]
        defaults += [f"{key}={value!r}" for key, value in entry.kwargs.items()]
        table.add_row(
            entry.name,
            f"{entry.cls.__module__}.{entry.cls.__qualname__}",
            entry.scope.value,
            ", ".join(defaults) or "-",
            "yes" if entry.constructed else "-",
        )

    return table


def print_error(
    error: SmartDIError,
    console: Optional[Console] = None,
    verbose: bool = False,
) -> None:
    """Print an error with its suggestions."""
    (console or Console(stderr=True)).print(error.format_for_cli(verbose=verbose))
