"""Encode command -- build an ``Authorization: Basic`` header value.

Example::

    basicguard encode alice --password s3cret
    basicguard encode alice            # prompts for the password
"""

from __future__ import annotations

import typer

from basicguard.encoder import encode_header
from basicguard.exceptions import BasicGuardError
from basicguard.output import error, print_data


def encode_command(
    username: str = typer.Argument(help="User name (must not contain a colon)."),
    password: str = typer.Option(
        ...,
        "--password",
        "-p",
        prompt=True,
        hide_input=True,
        help="Password. Prompted for when omitted.",
    ),
) -> None:
    """Print the Authorization header value for USERNAME and the password."""
    try:
        value = encode_header(username, password)
    except BasicGuardError as exc:
        error(str(exc))
        raise typer.Exit(code=exc.exit_code) from None
    print_data(value)
