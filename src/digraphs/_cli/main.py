import json
import logging
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler

from digraphs._demo import run_demo
from digraphs._graph import Representation

from .config import ConfigError, get_config
from .render import render_stage_table, render_topological_order

app = typer.Typer()

logger = logging.getLogger(__name__)
# Console for stderr (info/errors)
err_console = Console(stderr=True)
# Console for stdout (results)
out_console = Console()


@app.callback()
def callback(
    *,
    verbose: bool = typer.Option(default=False, help="Enable verbose output"),
) -> None:
    """Digraphs CLI."""
    log_level = logging.DEBUG if verbose else logging.INFO

    # Configure rich logging handler to output to stderr
    logging.basicConfig(
        level=log_level,
        format="%(message)s",
        handlers=[
            RichHandler(
                console=err_console,
                show_time=False,
                show_path=verbose,
                rich_tracebacks=True,
            ),
        ],
    )


@app.command()
def demo(
    *,
    chain: Annotated[
        list[Representation] | None,
        typer.Option("-c", "--chain", help="Representation to convert into (repeat to build a chain)"),
    ] = None,
    as_json: Annotated[
        bool,
        typer.Option("--json", help="Print results as JSON instead of tables"),
    ] = False,
) -> None:
    """Traverse and sort the sample graph, converting it through a chain of representations."""
    if not chain:
        try:
            config = get_config()
        except ConfigError as e:
            err_console.print(f"[red]Error: {e}[/red]")
            raise typer.Exit(code=1) from e
        chain = list(config.chain)
        logger.debug(f"Using chain from config: {[str(r) for r in chain]}")

    result = run_demo(chain)

    if as_json:
        # Plain print keeps the output free of Rich markup and line wrapping
        print(json.dumps(result.to_dict(), indent=2))  # noqa: T201
        return

    err_console.print()
    err_console.print(f"[cyan]Conversion chain:[/cyan] list -> {' -> '.join(chain) if chain else '(none)'}")
    err_console.print()
    render_stage_table(result, out_console)
    render_topological_order(result, out_console)


def main() -> None:
    app()
