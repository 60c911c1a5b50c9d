"""Injectable diagnostic tracing for the decoder and guard.

The decoder never writes logs directly. It reports through a
:class:`Tracer`, whose hooks are no-ops by default, so a host that does not
configure one pays nothing and sees nothing. :class:`LoggingTracer` forwards
the events to the standard :mod:`logging` module at ``DEBUG`` level.

Only a truncated username is ever reported. Passwords and raw header values
never reach a tracer.
"""

from __future__ import annotations

import logging

from basicguard.models import DecodeFailure

logger = logging.getLogger(__name__)

TRACE_IDENTIFIER_LENGTH = 64
"""Default number of username characters included in trace output."""


def truncate_identifier(identifier: str, length: int = TRACE_IDENTIFIER_LENGTH) -> str:
    """Return at most *length* characters of *identifier*, marking any cut with ``...``."""
    if len(identifier) <= length:
        return identifier
    return identifier[:length] + "..."


class Tracer:
    """Receives diagnostic events from the decoder and guard.

    All hooks are no-ops; subclasses override only the events they care
    about.
    """

    def on_decoded(self, username: str) -> None:
        """Called after a header decoded successfully.

        Args:
            username: The full decoded username. Implementations must
                truncate it before emitting it anywhere.
        """

    def on_rejected(self, failure: DecodeFailure, header_count: int) -> None:
        """Called when the guard rejects a request.

        Args:
            failure: The rejection reason.
            header_count: How many ``Authorization`` values were supplied.
        """

    def on_not_attempted(self) -> None:
        """Called when a request carried no ``Authorization`` header."""


class NullTracer(Tracer):
    """Tracer that discards every event."""


class LoggingTracer(Tracer):
    """Tracer that writes events to :mod:`logging` at ``DEBUG`` level.

    Args:
        identifier_length: Maximum number of username characters logged.
        log: Logger to write to. Defaults to this module's logger.
    """

    def __init__(
        self,
        identifier_length: int = TRACE_IDENTIFIER_LENGTH,
        log: logging.Logger | None = None,
    ) -> None:
        self._identifier_length = identifier_length
        self._log = log or logger

    def on_decoded(self, username: str) -> None:
        self._log.debug(
            "Decoded basic credentials for user '%s'",
            truncate_identifier(username, self._identifier_length),
        )

    def on_rejected(self, failure: DecodeFailure, header_count: int) -> None:
        self._log.debug(
            "Rejected basic auth (%s) with %d Authorization header(s)",
            failure.value,
            header_count,
        )

    def on_not_attempted(self) -> None:
        self._log.debug("No Authorization header; basic auth not attempted")
