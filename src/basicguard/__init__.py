"""basicguard -- HTTP Basic access-authentication request guard.

Turns the ``Authorization`` header values of one inbound request into a
typed :class:`~basicguard.models.Outcome`: authenticated credentials, "not
attempted" (no header, so the host may try another scheme), or a rejection
with a :class:`~basicguard.models.DecodeFailure` reason. It never checks the
password against a user store and never builds HTTP responses.

Typical usage::

    from basicguard import resolve

    outcome = resolve(["Basic bmFtZTpwYXNzd29yZA=="])
    outcome.credentials.username  # "name"

Modules:
    models: Pydantic models (credentials, failures, outcomes, config).
    decoder: Header and credential decoding.
    guard: Request-guard interface and the Basic implementation.
    tracing: Injectable diagnostic tracing.
    config: Environment-aware configuration and guard construction.
    encoder: Building ``Basic`` header values.
    adapters: Collecting header values from host request objects.
    app: Typer CLI entry point.
"""

__version__ = "0.1.0"

from basicguard.decoder import decode_header, split_credentials  # noqa: E402
from basicguard.guard import BasicAuthGuard, RequestGuard, resolve  # noqa: E402
from basicguard.models import (  # noqa: E402
    Credentials,
    DecodeFailure,
    GuardConfig,
    Outcome,
    OutcomeKind,
)

__all__ = [
    "BasicAuthGuard",
    "Credentials",
    "DecodeFailure",
    "GuardConfig",
    "Outcome",
    "OutcomeKind",
    "RequestGuard",
    "decode_header",
    "resolve",
    "split_credentials",
]
