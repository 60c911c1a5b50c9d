"""Numeric process exit codes for the ``basicguard`` CLI.

Each constant maps to a guard outcome or an error category and is referenced
by the corresponding :class:`~basicguard.exceptions.BasicGuardError`
subclass. Shell wrappers can branch on the exit code without parsing output.

Example::

    $ basicguard check -H "Basic Og=="
    $ echo $?
    0   # EXIT_SUCCESS -- credentials decoded
"""

EXIT_SUCCESS = 0
"""The header decoded into credentials."""

EXIT_GENERIC_FAILURE = 1
"""An unclassified error occurred (including invalid configuration)."""

EXIT_INVALID_USAGE = 2
"""The command was invoked with invalid arguments."""

EXIT_REJECTED = 3
"""Basic authentication was attempted but the header was rejected."""

EXIT_NOT_ATTEMPTED = 4
"""No ``Authorization`` header was supplied."""
