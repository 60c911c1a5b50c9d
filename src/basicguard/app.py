"""Typer application and CLI entry point for basicguard.

The CLI is a thin host around the guard: ``check`` feeds header values given
on the command line through :class:`~basicguard.guard.BasicAuthGuard`, and
``encode`` builds header values for testing servers.

:func:`main` is the console-script entry point declared in
``pyproject.toml``. It installs a SIGINT handler, invokes the Typer app and
maps :class:`~basicguard.exceptions.BasicGuardError` to its exit code.
"""

from __future__ import annotations

import logging
import signal
import sys
from typing import Any

import typer
from rich.logging import RichHandler

from basicguard import __version__
from basicguard.commands.check import check_command
from basicguard.commands.encode import encode_command
from basicguard.exit_codes import EXIT_GENERIC_FAILURE

app = typer.Typer(
    name="basicguard",
    help="Decode and build HTTP Basic Authorization headers.",
    no_args_is_help=True,
    add_completion=False,
    rich_markup_mode="rich",
)

app.command("check")(check_command)
app.command("encode")(encode_command)


def _version_callback(value: bool) -> None:
    """Print version and exit when --version is passed."""
    if value:
        typer.echo(f"basicguard {__version__}")
        raise typer.Exit()


def _configure_logging(verbose: bool, console: Any) -> None:
    """Route ``basicguard`` log records to stderr through Rich when verbose."""
    package_logger = logging.getLogger("basicguard")
    for handler in list(package_logger.handlers):
        if isinstance(handler, RichHandler):
            package_logger.removeHandler(handler)
    if not verbose:
        package_logger.setLevel(logging.NOTSET)
        return
    handler = RichHandler(console=console, show_time=False, show_path=False)
    package_logger.addHandler(handler)
    package_logger.setLevel(logging.DEBUG)


@app.callback()
def main_callback(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    json_output: bool = typer.Option(False, "--json", help="JSON output format."),
    plain_output: bool = typer.Option(False, "--plain", help="Plain text output."),
    no_color: bool = typer.Option(False, "--no-color", help="Disable color output."),
    quiet: bool = typer.Option(
        False, "--quiet", "-q", help="Suppress non-essential output."
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable debug output and decode tracing."
    ),
) -> None:
    """Root callback executed before every sub-command.

    Installs the global :class:`~basicguard.output.OutputManager` from the
    flags and stores ``verbose`` in ``ctx.obj`` for sub-commands.
    """
    from basicguard.output import OutputFormat, OutputManager, set_output

    fmt = OutputFormat.AUTO
    if json_output:
        fmt = OutputFormat.JSON
    elif plain_output:
        fmt = OutputFormat.PLAIN

    output = OutputManager(format=fmt, no_color=no_color, quiet=quiet, verbose=verbose)
    set_output(output)
    _configure_logging(verbose, output.stderr_console)

    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose


def _setup_signal_handlers() -> None:
    """Install a SIGINT handler so Ctrl-C exits cleanly."""

    def _handler(signum: int, frame: Any) -> None:  # noqa: ANN401
        sys.stderr.write("\nCancelled.\n")
        sys.exit(130)

    signal.signal(signal.SIGINT, _handler)


def main() -> None:
    """CLI entry point invoked by the ``basicguard`` console script.

    Raises:
        SystemExit: Always raised (either by Typer or explicitly).
    """
    _setup_signal_handlers()
    try:
        app()
    except SystemExit:
        raise
    except KeyboardInterrupt:
        sys.stderr.write("\nCancelled.\n")
        sys.exit(130)
    except Exception as exc:
        from basicguard.exceptions import BasicGuardError
        from basicguard.output import error

        if isinstance(exc, BasicGuardError):
            error(str(exc))
            sys.exit(exc.exit_code)
        error(f"Unexpected error: {exc}")
        sys.exit(EXIT_GENERIC_FAILURE)
