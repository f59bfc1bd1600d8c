"""Decision and execution engine for memthresh."""

import logging
import os
import pwd

import psutil

from memthresh.config import FALLBACK_SHELL
from memthresh.errors import NoExitCodeError, SpawnError, UserLookupError, WaitError
from memthresh.models import Invocation, UsageRatios

logger = logging.getLogger(__name__)


def should_run(ratios: UsageRatios, invocation: Invocation) -> bool:
    """Check whether the measured ratio reached the threshold (inclusive)."""
    measured = ratios.select(invocation.mode)
    triggered = measured >= invocation.threshold
    logger.debug(
        "%s usage %.4f vs threshold %.4f: %s",
        invocation.mode.value,
        measured,
        invocation.threshold,
        "run" if triggered else "skip",
    )
    return triggered


def resolve_login_shell() -> str:
    """
    Look up the login shell of the user running this process.

    Raises:
        UserLookupError: If the current uid has no passwd entry.
    """
    uid = os.getuid()
    try:
        entry = pwd.getpwuid(uid)
    except KeyError:
        raise UserLookupError(uid) from None
    return entry.pw_shell or FALLBACK_SHELL


def run_command(command: str, shell: str | None = None) -> int:
    """
    Run `command` through `<shell> -c` and wait for it to finish.

    The child inherits stdin, stdout and stderr. There is no timeout.

    Args:
        command: Command string handed to the shell verbatim.
        shell: Shell binary. Defaults to the caller's login shell.

    Returns:
        The child's exit code.

    Raises:
        UserLookupError: If no shell was given and the user cannot be resolved.
        SpawnError: If the shell could not be started.
        WaitError: If waiting for the child failed.
        NoExitCodeError: If the child was terminated by a signal.
    """
    if shell is None:
        shell = resolve_login_shell()

    logger.debug("Spawning %s -c %r", shell, command)
    try:
        proc = psutil.Popen([shell, "-c", command])
    except OSError as exc:
        raise SpawnError(shell, exc) from exc

    try:
        returncode = proc.wait()
    except (OSError, psutil.Error) as exc:
        raise WaitError(exc) from exc

    # subprocess reports death by signal N as -N
    if returncode is None or returncode < 0:
        raise NoExitCodeError(-returncode if returncode else None)

    logger.debug("Child %d exited with %d", proc.pid, returncode)
    return returncode
