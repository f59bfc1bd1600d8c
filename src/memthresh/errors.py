"""Exception hierarchy for memthresh.

Every error carries the diagnostic shown to the user. Only the entry point
turns an error into an exit status.
"""

import json


def _quote(value: str) -> str:
    """Double-quote user input, escaping control characters."""
    return json.dumps(value, ensure_ascii=False)


class MemthreshError(Exception):
    """Base class for all memthresh failures."""

    @property
    def message(self) -> str:
        return str(self)


class InputError(MemthreshError):
    """The caller supplied arguments the tool cannot act on."""


class HelpRequested(InputError):
    """A help flag was given or the argument count is wrong."""

    def __init__(self) -> None:
        super().__init__("usage requested")


class InvalidModeError(InputError):
    """The comparison mode is not one of RAM, SWAP or COMB."""

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(
            f'The comparison should be "RAM", "SWAP" or "COMB", not {_quote(value)}'
        )


class InvalidThresholdError(InputError):
    """The threshold is not a number strictly between 0 and 100."""

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(
            "The usage ratio should be a decimal larger than zero "
            f"and smaller than 100, not {_quote(value)}"
        )


class HostEnvironmentError(MemthreshError):
    """The host cannot support the tool's contract."""


class StatisticsUnavailableError(HostEnvironmentError):
    """The memory statistics file is missing or unreadable."""

    def __init__(self, path: str, reason: OSError) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"could not read {path}: {reason.strerror or reason}")


class UserLookupError(HostEnvironmentError):
    """No passwd entry exists for the current uid."""

    def __init__(self, uid: int) -> None:
        self.uid = uid
        super().__init__(f"could not retrieve user from current uid ({uid})")


class SpawnError(HostEnvironmentError):
    """The shell could not be started."""

    def __init__(self, shell: str, reason: OSError) -> None:
        self.shell = shell
        self.reason = reason
        super().__init__(f"while spawning shell {shell!r}: {reason}")


class WaitError(HostEnvironmentError):
    """Waiting for the child process failed."""

    def __init__(self, reason: Exception) -> None:
        self.reason = reason
        super().__init__(f"while waiting for process: {reason}")


class NoExitCodeError(HostEnvironmentError):
    """The child ended without an exit code, e.g. killed by a signal."""

    def __init__(self, signal_number: int | None = None) -> None:
        self.signal_number = signal_number
        detail = f" (terminated by signal {signal_number})" if signal_number else ""
        super().__init__(f"no value found while retrieving return code{detail}")
