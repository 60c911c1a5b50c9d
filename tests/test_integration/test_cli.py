"""Integration tests for the basicguard CLI (``check`` and ``encode``).

Commands are invoked through the real Typer app with ``CliRunner``; only
stdout carries the outcome record and stderr the diagnostics, so the two
are asserted separately.
"""

from __future__ import annotations

import io
import json
import logging

import pytest
from typer.testing import CliRunner

from basicguard import __version__
from basicguard.app import app
from basicguard.commands.check import MASKED_PASSWORD, outcome_record
from basicguard.exit_codes import (
    EXIT_GENERIC_FAILURE,
    EXIT_INVALID_USAGE,
    EXIT_NOT_ATTEMPTED,
    EXIT_REJECTED,
    EXIT_SUCCESS,
)
from basicguard.models import Credentials, DecodeFailure, Outcome

VALID = "Basic bmFtZTpwYXNzd29yZA=="


@pytest.fixture
def runner() -> CliRunner:
    # Click 8.2 always separates stderr; older releases need mix_stderr=False.
    try:
        return CliRunner(mix_stderr=False)
    except TypeError:
        return CliRunner()


def _json(runner: CliRunner, *args: str):
    result = runner.invoke(app, ["--json", *args])
    return result, json.loads(result.stdout)


class TestVersion:
    def test_version_flag(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert f"basicguard {__version__}" in result.stdout


class TestCheckCommand:
    def test_authenticated(self, runner: CliRunner) -> None:
        result, data = _json(runner, "check", "-H", VALID)
        assert result.exit_code == EXIT_SUCCESS
        assert data["outcome"] == "authenticated"
        assert data["username"] == "name"
        assert data["password"] == MASKED_PASSWORD
        assert data["status"] is None

    def test_show_password(self, runner: CliRunner) -> None:
        result, data = _json(runner, "check", "-H", VALID, "--show-password")
        assert result.exit_code == EXIT_SUCCESS
        assert data["password"] == "password"

    def test_not_attempted(self, runner: CliRunner) -> None:
        result, data = _json(runner, "check")
        assert result.exit_code == EXIT_NOT_ATTEMPTED
        assert data["outcome"] == "not_attempted"
        assert data["status"] == 401

    def test_malformed(self, runner: CliRunner) -> None:
        result, data = _json(runner, "check", "--header", "Basic bm9jb2xvbg==")
        assert result.exit_code == EXIT_REJECTED
        assert data["failure"] == "malformed_encoding"
        assert data["status"] == 400
        assert data["username"] is None

    def test_ambiguous(self, runner: CliRunner) -> None:
        result, data = _json(runner, "check", "-H", VALID, "-H", VALID)
        assert result.exit_code == EXIT_REJECTED
        assert data["failure"] == "ambiguous_header_count"

    def test_rejection_status_from_env(self, runner: CliRunner, monkeypatch) -> None:
        monkeypatch.setenv("BASICGUARD_REJECTION_STATUS", "422")
        result, data = _json(runner, "check", "-H", "Bearer x")
        assert result.exit_code == EXIT_REJECTED
        assert data["status"] == 422

    def test_invalid_env_config(self, runner: CliRunner, monkeypatch) -> None:
        monkeypatch.setenv("BASICGUARD_TRACE_LENGTH", "lots")
        result = runner.invoke(app, ["--plain", "--no-color", "check", "-H", VALID])
        assert result.exit_code == EXIT_GENERIC_FAILURE
        assert "BASICGUARD_TRACE_LENGTH" in result.stderr

    def test_summary_on_stderr(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["--plain", "--no-color", "check", "-H", VALID])
        assert result.exit_code == EXIT_SUCCESS
        assert "Authenticated as 'name'" in result.stderr
        assert "Authenticated" not in result.stdout

    def test_quiet_suppresses_summary(self, runner: CliRunner) -> None:
        args = ["--plain", "--no-color", "check", "-H", "Basic Og=="]
        loud = runner.invoke(app, args)
        quiet = runner.invoke(app, ["--quiet", *args])
        assert quiet.exit_code == EXIT_SUCCESS
        assert quiet.stdout == loud.stdout
        assert "Authenticated" in loud.stderr
        assert quiet.stderr == ""

    def test_quiet_keeps_not_attempted_silent(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["--plain", "--no-color", "--quiet", "check"])
        assert result.exit_code == EXIT_NOT_ATTEMPTED
        assert result.stderr == ""

    def test_quiet_still_warns_on_rejection(self, runner: CliRunner) -> None:
        result = runner.invoke(
            app, ["--plain", "--no-color", "--quiet", "check", "-H", "Bearer x"]
        )
        assert result.exit_code == EXIT_REJECTED
        assert "Warning: Rejected:" in result.stderr

    def test_trace_length_must_be_positive(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["check", "-H", VALID, "--trace-length", "0"])
        assert result.exit_code == EXIT_INVALID_USAGE

    def test_plain_output(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["--plain", "check", "-H", "Basic Og=="])
        assert result.exit_code == EXIT_SUCCESS
        lines = result.stdout.splitlines()
        assert "outcome\tauthenticated" in lines
        assert "username\t" in lines
        assert "password\t" in lines

    def test_verbose_traces_username_not_password(self, runner: CliRunner) -> None:
        header = "Basic " + "YWxpY2U6aHVudGVyMg=="  # alice:hunter2
        result = runner.invoke(
            app, ["--plain", "--no-color", "--verbose", "check", "-H", header]
        )
        assert result.exit_code == EXIT_SUCCESS
        assert "Decoded basic credentials" in result.stderr
        assert "alice" in result.stderr
        assert "hunter2" not in result.stdout + result.stderr


class TestEncodeCommand:
    def test_encode_with_password_option(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["encode", "name", "--password", "password"])
        assert result.exit_code == EXIT_SUCCESS
        assert result.stdout.strip() == VALID

    def test_encode_prompts_for_password(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["encode", "name"], input="password\n")
        assert result.exit_code == EXIT_SUCCESS
        assert VALID in result.stdout

    def test_encode_colon_username(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["--no-color", "encode", "a:b", "-p", "pw"])
        assert result.exit_code == EXIT_INVALID_USAGE
        assert "colon" in result.stderr

    def test_encode_then_check(self, runner: CliRunner) -> None:
        encoded = runner.invoke(app, ["encode", "émile", "-p", "mot:de:passe"])
        header = encoded.stdout.strip()
        result, data = _json(runner, "check", "-H", header, "--show-password")
        assert result.exit_code == EXIT_SUCCESS
        assert data["username"] == "émile"
        assert data["password"] == "mot:de:passe"


class TestOutcomeRecord:
    def test_empty_password_not_masked(self) -> None:
        record = outcome_record(Outcome.authenticated(Credentials(username="u", password="")))
        assert record["password"] == ""

    def test_rejected_message(self) -> None:
        record = outcome_record(Outcome.rejected(DecodeFailure.MALFORMED_ENCODING))
        assert record["message"] == DecodeFailure.MALFORMED_ENCODING.description


class TestConfigureLogging:
    def test_verbose_then_quiet_run_resets_level(self) -> None:
        from rich.console import Console

        from basicguard.app import _configure_logging

        package_logger = logging.getLogger("basicguard")
        _configure_logging(True, Console(file=io.StringIO()))
        assert package_logger.level == logging.DEBUG
        assert package_logger.handlers

        _configure_logging(False, Console(file=io.StringIO()))
        assert package_logger.level == logging.NOTSET
        assert package_logger.handlers == []
