"""Request guards -- turn a request's ``Authorization`` values into an Outcome.

This module defines the host-facing seam:

- :class:`RequestGuard` -- abstract capability implemented by anything that
  can produce an :class:`~basicguard.models.Outcome` from the header values
  a host collected for one request.
- :class:`BasicAuthGuard` -- the HTTP Basic implementation.
- :func:`resolve` -- convenience wrapper around a default, untraced
  :class:`BasicAuthGuard`.

Guards hold only immutable configuration and can be shared freely across
threads and tasks.

Typical usage::

    from basicguard import resolve

    outcome = resolve(request_headers.get_all("Authorization"))
    if outcome.is_authenticated:
        user = outcome.credentials.username
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from basicguard.decoder import decode_header
from basicguard.models import Credentials, DecodeFailure, Outcome
from basicguard.tracing import NullTracer, Tracer


class RequestGuard(ABC):
    """Abstract base class for request guards.

    A guard is invoked once per inbound request, before application logic,
    with every value the host found for the guard's header. It returns an
    :class:`~basicguard.models.Outcome` and never raises for bad input.
    """

    @property
    @abstractmethod
    def scheme(self) -> str:
        """Return the authentication scheme this guard handles (e.g. ``"basic"``)."""
        ...

    @abstractmethod
    def resolve(self, authorization_header_values: Sequence[str]) -> Outcome:
        """Map the request's ``Authorization`` values to an outcome.

        Args:
            authorization_header_values: Raw values, one per header
                occurrence, in the order the host received them.

        Returns:
            The request's :class:`~basicguard.models.Outcome`.
        """
        ...


class BasicAuthGuard(RequestGuard):
    """Guard for HTTP Basic access authentication (:rfc:`7617`).

    * No values -- :meth:`Outcome.not_attempted
      <basicguard.models.Outcome.not_attempted>`, so the host may fall
      through to another scheme.
    * One value -- decoded; success is ``AUTHENTICATED``, anything else is
      ``REJECTED(MALFORMED_ENCODING)``.
    * Two or more values -- ``REJECTED(AMBIGUOUS_HEADER_COUNT)`` even if each
      would decode on its own. Values are never merged or picked first-wins.

    Args:
        tracer: Diagnostic sink. Defaults to a no-op tracer.
    """

    def __init__(self, tracer: Optional[Tracer] = None) -> None:
        self._tracer = tracer or NullTracer()

    @property
    def scheme(self) -> str:
        return "basic"

    @property
    def tracer(self) -> Tracer:
        return self._tracer

    def resolve(self, authorization_header_values: Sequence[str]) -> Outcome:
        count = len(authorization_header_values)
        if count == 0:
            self._tracer.on_not_attempted()
            return Outcome.not_attempted()
        if count > 1:
            return self._reject(DecodeFailure.AMBIGUOUS_HEADER_COUNT, count)

        result = decode_header(authorization_header_values[0], self._tracer)
        if isinstance(result, Credentials):
            return Outcome.authenticated(result)
        return self._reject(DecodeFailure.MALFORMED_ENCODING, count)

    def _reject(self, failure: DecodeFailure, count: int) -> Outcome:
        self._tracer.on_rejected(failure, count)
        return Outcome.rejected(failure)


_default_guard = BasicAuthGuard()


def resolve(authorization_header_values: Sequence[str]) -> Outcome:
    """Resolve header values with a default, untraced :class:`BasicAuthGuard`."""
    return _default_guard.resolve(authorization_header_values)
