"""Building ``Authorization: Basic`` header values.

The inverse of :func:`basicguard.decoder.decode_header`: the
``username:password`` pair is UTF-8 encoded, Base64-encoded and prefixed with
``"Basic "`` per :rfc:`7617`. Used by HTTP clients, the ``basicguard encode``
command, and tests.
"""

from __future__ import annotations

import base64

from basicguard.decoder import BASIC_PREFIX
from basicguard.exceptions import InvalidUsageError


def encode_header(username: str, password: str) -> str:
    """Return the ``Authorization`` header value for *username* and *password*.

    Args:
        username: The user name. May be empty but must not contain a colon.
        password: The password. May be empty and may contain colons.

    Returns:
        A string of the form ``"Basic <base64>"``.

    Raises:
        InvalidUsageError: If *username* contains a colon, since the decoder
            splits at the first colon and could not recover it.
    """
    if ":" in username:
        raise InvalidUsageError(
            "Basic auth username must not contain a colon "
            "(the first colon separates username from password)"
        )
    raw = f"{username}:{password}"
    encoded = base64.b64encode(raw.encode("utf-8")).decode("ascii")
    return f"{BASIC_PREFIX}{encoded}"
