"""Canonical Pydantic models shared across all basicguard modules.

Every other module imports its data shapes from here:

* :class:`Credentials` -- the decoded ``(username, password)`` pair.
* :class:`DecodeFailure` -- the closed set of reasons a header was rejected.
* :class:`OutcomeKind` and :class:`Outcome` -- the tri-state result of
  applying the Basic scheme to one request.
* :class:`GuardConfig` -- runtime settings resolved by :mod:`basicguard.config`.

All result models are frozen. A :class:`Credentials` instance only ever exists for a
fully decoded header; there are no partially filled credentials.
"""

from __future__ import annotations

import enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class Credentials(BaseModel):
    """A username/password pair decoded from a Basic ``Authorization`` header.

    Either field may be empty. The password is excluded from ``repr`` and
    ``str`` so that credentials can be logged or printed without leaking it.

    Example::

        creds = Credentials(username="alice", password="s3cret")
        repr(creds)  # "Credentials(username='alice')"
    """

    model_config = ConfigDict(frozen=True)

    username: str
    password: str = Field(repr=False)


class DecodeFailure(str, enum.Enum):
    """Reasons a request's Basic credentials could not be produced."""

    AMBIGUOUS_HEADER_COUNT = "ambiguous_header_count"
    MALFORMED_ENCODING = "malformed_encoding"

    @property
    def description(self) -> str:
        """Human-readable explanation suitable for an error response body."""
        return _FAILURE_DESCRIPTIONS[self]


_FAILURE_DESCRIPTIONS = {
    DecodeFailure.AMBIGUOUS_HEADER_COUNT: "Multiple Authorization headers were supplied",
    DecodeFailure.MALFORMED_ENCODING: (
        "Authorization header is not a valid 'Basic <base64(username:password)>' value"
    ),
}


class OutcomeKind(str, enum.Enum):
    """The three terminal states of the guard."""

    AUTHENTICATED = "authenticated"
    NOT_ATTEMPTED = "not_attempted"
    REJECTED = "rejected"


class Outcome(BaseModel):
    """Result of resolving one request's ``Authorization`` header values.

    Build instances through :meth:`authenticated`, :meth:`not_attempted` and
    :meth:`rejected` rather than the constructor. Validation guarantees that
    ``credentials`` is present exactly for ``AUTHENTICATED`` and ``failure``
    exactly for ``REJECTED``.

    Hosts either branch on :attr:`kind` or call :meth:`require` to unwind
    with an exception.
    """

    model_config = ConfigDict(frozen=True)

    kind: OutcomeKind
    credentials: Optional[Credentials] = None
    failure: Optional[DecodeFailure] = None

    @model_validator(mode="after")
    def _check_consistency(self) -> Outcome:
        if (self.kind == OutcomeKind.AUTHENTICATED) != (self.credentials is not None):
            raise ValueError("credentials must be set if and only if kind is 'authenticated'")
        if (self.kind == OutcomeKind.REJECTED) != (self.failure is not None):
            raise ValueError("failure must be set if and only if kind is 'rejected'")
        return self

    @classmethod
    def authenticated(cls, credentials: Credentials) -> Outcome:
        return cls(kind=OutcomeKind.AUTHENTICATED, credentials=credentials)

    @classmethod
    def not_attempted(cls) -> Outcome:
        return cls(kind=OutcomeKind.NOT_ATTEMPTED)

    @classmethod
    def rejected(cls, failure: DecodeFailure) -> Outcome:
        return cls(kind=OutcomeKind.REJECTED, failure=failure)

    @property
    def is_authenticated(self) -> bool:
        return self.kind == OutcomeKind.AUTHENTICATED

    @property
    def is_not_attempted(self) -> bool:
        return self.kind == OutcomeKind.NOT_ATTEMPTED

    @property
    def is_rejected(self) -> bool:
        return self.kind == OutcomeKind.REJECTED

    def require(self) -> Credentials:
        """Return the credentials, or raise if the request did not authenticate.

        Returns:
            The decoded :class:`Credentials`.

        Raises:
            NotAttemptedError: If no ``Authorization`` header was present.
            RejectedError: If the header(s) could not be decoded.
        """
        from basicguard.exceptions import NotAttemptedError, RejectedError

        if self.failure is not None:
            raise RejectedError(self.failure)
        if self.credentials is None:
            raise NotAttemptedError("No Authorization header was supplied")
        return self.credentials

    def status_code(self, rejection_status: int = 400) -> Optional[int]:
        """Suggest an HTTP status for hosts that turn the outcome into a response.

        Args:
            rejection_status: Status to use for rejected headers.

        Returns:
            ``None`` when authenticated, ``401`` when basic auth was not
            attempted, and *rejection_status* when rejected.
        """
        if self.kind == OutcomeKind.AUTHENTICATED:
            return None
        if self.kind == OutcomeKind.NOT_ATTEMPTED:
            return 401
        return rejection_status


# --- Guard Config ---


class GuardConfig(BaseModel):
    """Runtime settings for a :class:`~basicguard.guard.BasicAuthGuard`.

    Resolved by :func:`~basicguard.config.resolve_guard_config` from CLI
    arguments, ``BASICGUARD_*`` environment variables, and these defaults.
    """

    trace: bool = Field(
        default=False, description="Report decode events through the logging tracer"
    )
    trace_identifier_length: int = Field(
        default=64, ge=1, description="Username characters included in trace output"
    )
    rejection_status: int = Field(
        default=400,
        ge=100,
        le=599,
        description="HTTP status hosts should send for rejected headers",
    )
