"""Check command -- run the Basic guard over header values.

Prints the resulting outcome as a record and exits with a code that shell
scripts can branch on:

* ``0`` -- authenticated
* ``3`` -- rejected (malformed or ambiguous headers)
* ``4`` -- not attempted (no header given)

A one-line summary goes to stderr; ``--quiet`` hides it except for
rejections, which are reported as warnings.

Example::

    basicguard check -H "Basic bmFtZTpwYXNzd29yZA=="
    basicguard --json check -H "Basic Og==" -H "Basic Og=="
"""

from __future__ import annotations

from typing import Any, Optional

import typer

from basicguard.exceptions import BasicGuardError
from basicguard.exit_codes import EXIT_NOT_ATTEMPTED, EXIT_REJECTED, EXIT_SUCCESS
from basicguard.models import Outcome, OutcomeKind
from basicguard.output import debug, error, info, print_record, warning

MASKED_PASSWORD = "********"

_EXIT_CODES = {
    OutcomeKind.AUTHENTICATED: EXIT_SUCCESS,
    OutcomeKind.REJECTED: EXIT_REJECTED,
    OutcomeKind.NOT_ATTEMPTED: EXIT_NOT_ATTEMPTED,
}


def outcome_record(
    outcome: Outcome, show_password: bool = False, rejection_status: int = 400
) -> dict[str, Any]:
    """Flatten *outcome* into a printable record.

    The password is masked unless *show_password* is set. An empty password
    is shown as an empty string either way.
    """
    record: dict[str, Any] = {
        "outcome": outcome.kind.value,
        "username": None,
        "password": None,
        "failure": None,
        "message": None,
        "status": outcome.status_code(rejection_status),
    }
    if outcome.credentials is not None:
        password = outcome.credentials.password
        record["username"] = outcome.credentials.username
        record["password"] = password if show_password or not password else MASKED_PASSWORD
    if outcome.failure is not None:
        record["failure"] = outcome.failure.value
        record["message"] = outcome.failure.description
    return record


def _summarize(outcome: Outcome) -> None:
    """Write a one-line summary of *outcome* to stderr."""
    if outcome.credentials is not None:
        info(f"Authenticated as '{outcome.credentials.username}'")
    elif outcome.failure is not None:
        warning(f"Rejected: {outcome.failure.description}")
    else:
        info("No Authorization header supplied; basic auth not attempted")


def check_command(
    ctx: typer.Context,
    header: Optional[list[str]] = typer.Option(
        None,
        "--header",
        "-H",
        help="Authorization header value. Repeat for multiple headers.",
    ),
    show_password: bool = typer.Option(
        False, "--show-password", help="Print the decoded password instead of a mask."
    ),
    trace_length: Optional[int] = typer.Option(
        None, "--trace-length", min=1, help="Username characters shown in --verbose traces."
    ),
) -> None:
    """Decode Authorization header values with the Basic guard.

    Args:
        ctx: Typer invocation context (reads ``verbose`` from ``ctx.obj``).
        header: Zero or more raw ``Authorization`` values.
        show_password: Reveal the password in the printed record.
        trace_length: Override for the traced username length.

    Raises:
        typer.Exit: With the outcome's exit code, or the configuration
            error's exit code.
    """
    from basicguard.config import build_guard, resolve_guard_config

    verbose = bool((ctx.obj or {}).get("verbose"))
    try:
        config = resolve_guard_config(
            cli_trace=True if verbose else None,
            cli_trace_length=trace_length,
        )
    except BasicGuardError as exc:
        error(str(exc))
        raise typer.Exit(code=exc.exit_code) from None

    values = list(header or [])
    debug(f"Resolving {len(values)} Authorization value(s)")
    outcome = build_guard(config).resolve(values)

    print_record(
        outcome_record(outcome, show_password, config.rejection_status),
        title="Basic auth outcome",
    )
    _summarize(outcome)
    raise typer.Exit(code=_EXIT_CODES[outcome.kind])
