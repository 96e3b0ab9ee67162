from __future__ import annotations

import sys

from dotenv import load_dotenv
from loguru import logger
import typer

from funcdeck.core.config import FuncdeckConfig, load_config_from_env
from funcdeck.errors import ConfigError, DescriptorIndexError, TargetLoadError
from funcdeck.invocation.outcome import Cancelled, Failure, InvocationOutcome
from funcdeck.registry.catalog import FunctionCatalog, get_catalog
from funcdeck.ui.collector import PromptCollector
from funcdeck.ui.presenter import ResultPresenter
from funcdeck.ui.selection import run_selection

# Load environment variables from .env
load_dotenv()

app = typer.Typer(
    help="funcdeck: list and invoke device-management functions.",
    no_args_is_help=True,
)

_presenter = ResultPresenter()


def _configure_logging(config: FuncdeckConfig) -> None:
    logger.remove()
    logger.add(
        sys.stderr,
        format="{time:YYYY-MM-DD HH:mm:ss} [{level}] {name}: {message}",
        level=config.log_level,
    )


def _load_catalog() -> FunctionCatalog:
    try:
        config = load_config_from_env()
        _configure_logging(config)
        return get_catalog(config)
    except (ConfigError, TargetLoadError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=2) from e


def _print_listing(catalog: FunctionCatalog) -> None:
    for index, descriptor in enumerate(catalog.descriptors()):
        typer.echo(f"{index:>3}  {descriptor.signature}")
    for warning in catalog.warnings():
        typer.echo(f"excluded: {warning}", err=True)


def _exit_code(outcome: InvocationOutcome | Cancelled) -> int:
    return 1 if isinstance(outcome, Failure) else 0


@app.command("list")
def list_functions() -> None:
    """List invokable functions with their index and parameters."""
    catalog = _load_catalog()
    if not catalog.descriptors():
        typer.echo("No invokable functions registered.")
    _print_listing(catalog)


@app.command("call")
def call(
    index: int = typer.Argument(..., help="Function index as shown by 'list'"),
    args: list[str] | None = typer.Argument(  # noqa: B008
        None, help="Raw parameter values, in order"
    ),
    no_input: bool = typer.Option(
        False, "--no-input", help="Never prompt; use the given values as-is"
    ),
) -> None:
    """Invoke one function, prompting for parameters when none are given."""
    catalog = _load_catalog()
    outcome: InvocationOutcome | Cancelled
    try:
        if args or no_input:
            outcome = catalog.invoke(index, args or [])
        else:
            outcome = run_selection(catalog, index, PromptCollector())
    except DescriptorIndexError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=2) from e

    typer.echo(_presenter.render(outcome))
    raise typer.Exit(code=_exit_code(outcome))


@app.command("shell")
def shell() -> None:
    """Interactive loop: pick a function, enter parameters, see the result."""
    catalog = _load_catalog()
    collector = PromptCollector()

    while True:
        _print_listing(catalog)
        try:
            choice = typer.prompt("Select function (q to quit)").strip()
        except typer.Abort:
            break
        if choice.lower() in {"q", "quit", "exit"}:
            break
        if not choice.lstrip("-").isdigit():
            typer.echo(f"Not a function index: {choice}", err=True)
            continue

        try:
            outcome = run_selection(catalog, int(choice), collector)
        except DescriptorIndexError as e:
            typer.echo(f"Error: {e}", err=True)
            continue
        typer.echo(_presenter.render(outcome))


def main() -> None:
    app()


if __name__ == "__main__":
    main()
