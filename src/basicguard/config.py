"""Configuration resolution and guard construction.

basicguard keeps no files and no persistent state. Its few settings live in
a :class:`~basicguard.models.GuardConfig` resolved with this precedence
(high to low):

1. Explicit arguments (CLI flags, or a host passing values directly)
2. Environment variables (``BASICGUARD_TRACE``, ``BASICGUARD_TRACE_LENGTH``,
   ``BASICGUARD_REJECTION_STATUS``)
3. Model defaults

:func:`build_guard` turns a resolved config into a ready
:class:`~basicguard.guard.BasicAuthGuard`.
"""

from __future__ import annotations

import os
from typing import Any, Optional

from pydantic import ValidationError

from basicguard.exceptions import ConfigError
from basicguard.guard import BasicAuthGuard
from basicguard.models import GuardConfig
from basicguard.tracing import LoggingTracer, NullTracer

ENV_TRACE = "BASICGUARD_TRACE"
ENV_TRACE_LENGTH = "BASICGUARD_TRACE_LENGTH"
ENV_REJECTION_STATUS = "BASICGUARD_REJECTION_STATUS"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


def _env_bool(name: str) -> Optional[bool]:
    """Read a boolean environment variable, returning ``None`` when unset."""
    raw = os.environ.get(name)
    if raw is None:
        return None
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ConfigError(f"Environment variable '{name}' must be a boolean, got '{raw}'")


def _env_int(name: str) -> Optional[int]:
    """Read an integer environment variable, returning ``None`` when unset."""
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return None
    try:
        return int(raw.strip())
    except ValueError as exc:
        raise ConfigError(
            f"Environment variable '{name}' must be an integer, got '{raw}'"
        ) from exc


def resolve_guard_config(
    cli_trace: Optional[bool] = None,
    cli_trace_length: Optional[int] = None,
    cli_rejection_status: Optional[int] = None,
) -> GuardConfig:
    """Resolve the effective :class:`~basicguard.models.GuardConfig`.

    Args:
        cli_trace: Overrides ``BASICGUARD_TRACE`` when not ``None``.
        cli_trace_length: Overrides ``BASICGUARD_TRACE_LENGTH`` when not ``None``.
        cli_rejection_status: Overrides ``BASICGUARD_REJECTION_STATUS`` when
            not ``None``.

    Returns:
        The validated configuration.

    Raises:
        ConfigError: If an environment value cannot be parsed or a setting is
            out of range.
    """
    layers: list[tuple[str, Optional[Any], Optional[Any]]] = [
        ("trace", cli_trace, _env_bool(ENV_TRACE)),
        ("trace_identifier_length", cli_trace_length, _env_int(ENV_TRACE_LENGTH)),
        ("rejection_status", cli_rejection_status, _env_int(ENV_REJECTION_STATUS)),
    ]

    values: dict[str, Any] = {}
    for field_name, cli_value, env_value in layers:
        if cli_value is not None:
            values[field_name] = cli_value
        elif env_value is not None:
            values[field_name] = env_value

    try:
        return GuardConfig.model_validate(values)
    except ValidationError as exc:
        raise ConfigError(f"Invalid basicguard configuration: {exc}") from exc


def build_guard(config: Optional[GuardConfig] = None) -> BasicAuthGuard:
    """Create a :class:`~basicguard.guard.BasicAuthGuard` from *config*.

    Args:
        config: Settings to apply. Resolved from the environment when omitted.

    Returns:
        A guard using a :class:`~basicguard.tracing.LoggingTracer` when
        ``config.trace`` is set, or a no-op tracer otherwise.
    """
    if config is None:
        config = resolve_guard_config()
    if config.trace:
        return BasicAuthGuard(
            tracer=LoggingTracer(identifier_length=config.trace_identifier_length)
        )
    return BasicAuthGuard(tracer=NullTracer())
