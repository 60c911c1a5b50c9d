"""Shared test fixtures for basicguard.

Provides fixtures for building header values, isolating ``BASICGUARD_*``
environment variables, and managing global output state. These fixtures are
discovered by pytest and available to all test modules without imports.
"""

from __future__ import annotations

import base64
import logging
from typing import Callable

import pytest

from basicguard.output import reset_output


# ---------------------------------------------------------------------------
# Auto-reset global output state between tests
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def _reset_output_between_tests() -> None:
    """Reset the global OutputManager after every test.

    The OutputManager caches references to sys.stdout/sys.stderr at
    creation time. When Typer's CliRunner redirects those streams and the
    test finishes, the cached references become stale. Resetting forces a
    fresh manager on next use.
    """
    yield
    reset_output()


@pytest.fixture(autouse=True)
def _reset_package_logger() -> None:
    """Drop handlers the CLI's ``--verbose`` flag attached to the package logger.

    Those handlers hold Rich consoles bound to CliRunner's temporary streams,
    which are closed once the invocation ends.
    """
    yield
    package_logger = logging.getLogger("basicguard")
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
    package_logger.setLevel(logging.NOTSET)


# ---------------------------------------------------------------------------
# Environment isolation
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Clear every BASICGUARD_* variable so the host environment never leaks in."""
    for var in [
        "BASICGUARD_TRACE",
        "BASICGUARD_TRACE_LENGTH",
        "BASICGUARD_REJECTION_STATUS",
    ]:
        monkeypatch.delenv(var, raising=False)


# ---------------------------------------------------------------------------
# Header helpers
# ---------------------------------------------------------------------------


@pytest.fixture
def basic_header() -> Callable[[str], str]:
    """Return a builder for ``"Basic " + base64(text)`` header values.

    Unlike :func:`basicguard.encoder.encode_header` this takes the raw
    payload text, so tests can build payloads the encoder would refuse.
    """

    def _build(payload: str) -> str:
        return "Basic " + base64.b64encode(payload.encode("utf-8")).decode("ascii")

    return _build
