"""Decoding of a single ``Authorization: Basic`` header value.

Two pure functions make up the pipeline:

* :func:`split_credentials` -- split decoded text into username and password
  at the first colon.
* :func:`decode_header` -- validate the ``"Basic "`` prefix, base64-decode the
  payload, require UTF-8, and delegate to :func:`split_credentials`.

Failures are returned as :class:`~basicguard.models.DecodeFailure` values,
never raised. Per :rfc:`7617` a password may contain colons, so only the
first colon separates the two fields.
"""

from __future__ import annotations

import base64
import binascii
from typing import Optional, Union

from basicguard.models import Credentials, DecodeFailure
from basicguard.tracing import NullTracer, Tracer

BASIC_PREFIX = "Basic "

_NULL_TRACER = NullTracer()


def split_credentials(decoded_text: str) -> Optional[Credentials]:
    """Split ``username:password`` text at the first colon.

    Args:
        decoded_text: The base64-decoded header payload.

    Returns:
        The :class:`~basicguard.models.Credentials`, or ``None`` if the text
        has no colon. Empty usernames and passwords are kept as-is.

    Example::

        split_credentials("name:pass:word")  # username="name", password="pass:word"
        split_credentials(":")               # username="", password=""
        split_credentials("nocolon")         # None
    """
    username, sep, password = decoded_text.partition(":")
    if not sep:
        return None
    return Credentials(username=username, password=password)


def _b64decode(payload: str) -> bytes:
    """Decode standard-alphabet base64, tolerating missing ``=`` padding.

    Raises:
        ValueError: On characters outside the alphabet or an impossible length.
    """
    padded = payload + "=" * (-len(payload) % 4)
    return base64.b64decode(padded, validate=True)


def decode_header(
    header_value: str, tracer: Optional[Tracer] = None
) -> Union[Credentials, DecodeFailure]:
    """Decode one ``Authorization`` header value into credentials.

    Args:
        header_value: The literal value of a single ``Authorization`` header.
        tracer: Optional diagnostic sink. Receives the decoded username on
            success; never the password.

    Returns:
        :class:`~basicguard.models.Credentials` on success, otherwise
        :attr:`DecodeFailure.MALFORMED_ENCODING
        <basicguard.models.DecodeFailure.MALFORMED_ENCODING>`.
    """
    if len(header_value) <= len(BASIC_PREFIX) or not header_value.startswith(BASIC_PREFIX):
        return DecodeFailure.MALFORMED_ENCODING

    try:
        raw = _b64decode(header_value[len(BASIC_PREFIX):])
    except (binascii.Error, ValueError):
        return DecodeFailure.MALFORMED_ENCODING

    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError:
        return DecodeFailure.MALFORMED_ENCODING

    credentials = split_credentials(text)
    if credentials is None:
        return DecodeFailure.MALFORMED_ENCODING

    (tracer or _NULL_TRACER).on_decoded(credentials.username)
    return credentials
