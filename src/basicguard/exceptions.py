"""Exception hierarchy for basicguard.

Decoding failures are never raised: the guard reports them as
:class:`~basicguard.models.DecodeFailure` values inside an
:class:`~basicguard.models.Outcome`. The exceptions here cover programmer
and configuration errors, plus the opt-in :meth:`Outcome.require
<basicguard.models.Outcome.require>` path for hosts that prefer to unwind.

All exceptions inherit from :class:`BasicGuardError`, which carries an
``exit_code`` attribute mapped to a constant from
:mod:`basicguard.exit_codes`. The CLI entry point in :func:`basicguard.app.main`
catches ``BasicGuardError`` and exits with that code.

Subclass hierarchy::

    BasicGuardError (exit 1)
    +-- InvalidUsageError   (exit 2)
    +-- RejectedError       (exit 3)
    +-- NotAttemptedError   (exit 4)
    +-- ConfigError         (exit 1)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from basicguard.exit_codes import (
    EXIT_GENERIC_FAILURE,
    EXIT_INVALID_USAGE,
    EXIT_NOT_ATTEMPTED,
    EXIT_REJECTED,
)

if TYPE_CHECKING:
    from basicguard.models import DecodeFailure


class BasicGuardError(Exception):
    """Base exception for all basicguard errors.

    Every subclass sets a class-level ``exit_code`` corresponding to one of
    the constants in :mod:`basicguard.exit_codes`.

    Args:
        message: Human-readable error description printed to stderr.
        exit_code: Optional override for the class-level exit code.
    """

    exit_code: int = EXIT_GENERIC_FAILURE

    def __init__(self, message: str, exit_code: int | None = None):
        super().__init__(message)
        if exit_code is not None:
            self.exit_code = exit_code


class InvalidUsageError(BasicGuardError):
    """Raised for invalid CLI arguments or credentials that cannot be encoded."""

    exit_code = EXIT_INVALID_USAGE


class RejectedError(BasicGuardError):
    """Raised by ``Outcome.require()`` when the request's header was rejected.

    Args:
        failure: The reason the header could not be decoded.
    """

    exit_code = EXIT_REJECTED

    def __init__(self, failure: DecodeFailure):
        super().__init__(failure.description)
        self.failure = failure


class NotAttemptedError(BasicGuardError):
    """Raised by ``Outcome.require()`` when no ``Authorization`` header was sent."""

    exit_code = EXIT_NOT_ATTEMPTED


class ConfigError(BasicGuardError):
    """Raised for configuration problems (unparsable environment values, out-of-range settings)."""

    exit_code = EXIT_GENERIC_FAILURE
