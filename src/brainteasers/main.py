import typer
from typing import List, Optional

from brainteasers.config import LabConfig, get_lab_config
from brainteasers.exceptions import ConfigError
from brainteasers.lab import call, run, run_void
from brainteasers.logging_config import logger, setup_logging
from brainteasers.teasers import (
    DEFAULT_PRIME_CANDIDATES,
    divide_numbers,
    fibonacci_sequence,
    parse_parts,
    prime_checker,
)

app = typer.Typer(help="Run a brain teaser and print its execution analysis.")

BANNER = "=== Python Brain Teasers Collection ==="

# Config shared by all commands, set by the global callback
_state = {"config": None}


def _config() -> LabConfig:
    return _state["config"] or get_lab_config()


@app.callback(invoke_without_command=True)
def global_options(
    ctx: typer.Context,
    color: Optional[bool] = typer.Option(
        None,
        "--color/--no-color",
        help="Force colored reports on or off (default: auto-detect, also via BRAINTEASERS_COLOR)"
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Log lab state transitions to stderr"
    ),
):
    """
    Brain Teasers: run one call and see what happened.
    """
    if verbose:
        setup_logging(level="DEBUG", suppress_console=False, force=True)

    try:
        config = LabConfig()
    except ConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)
    if color is not None:
        config.color = color
    _state["config"] = config
    logger.debug(f"Lab config: {config.to_dict()}")

    typer.echo(BANNER)
    typer.echo()

    # No command: run the default teaser
    if ctx.invoked_subcommand is None:
        run_void(call(divide_numbers, 10, 2), config=config)


@app.command()
def divide(
    a: int = typer.Argument(10, help="Dividend"),
    b: int = typer.Argument(2, help="Divisor"),
):
    """Integer division of A by B."""
    run_void(call(divide_numbers, a, b), config=_config())


@app.command()
def fibonacci(
    count: int = typer.Option(10, "--count", "-n", help="How many Fibonacci numbers to print"),
):
    """Print the first N Fibonacci numbers."""
    run_void(call(fibonacci_sequence, count), config=_config())


@app.command()
def primes(
    numbers: Optional[List[int]] = typer.Argument(None, help="Numbers to check (default: 2 3 4 17 25 29 100)"),
):
    """Check which numbers are prime."""
    candidates = tuple(numbers) if numbers else DEFAULT_PRIME_CANDIDATES
    run_void(call(prime_checker, candidates), config=_config())


@app.command()
def parse(
    text: str = typer.Argument("", help="Text to split on ';' (empty input fails)"),
):
    """Split TEXT on ';' and show the parts."""
    run(call(parse_parts, text), config=_config())


if __name__ == "__main__":
    app()
