"""memthresh - run a shell command when memory usage crosses a threshold."""

import re
import sys
from collections.abc import Sequence

from memthresh.config import HELP_FLAGS, Settings
from memthresh.console import configure_logging, err_console, fatal
from memthresh.errors import (
    HelpRequested,
    InvalidThresholdError,
    MemthreshError,
)
from memthresh.models import ComparisonMode, Invocation, UsageRatios
from memthresh.monitor import collect_ratios
from memthresh.runner import run_command, should_run

PROG = "memthresh"

# Decimal or scientific notation; no whitespace, underscores, inf or nan.
_NUMBER_RE = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)


def wants_help(args: Sequence[str]) -> bool:
    """Check whether any argument is a help flag."""
    return any(arg in HELP_FLAGS for arg in args)


def parse_threshold(raw: str) -> float:
    """
    Parse a percentage in the open interval (0, 100) into a fraction.

    Raises:
        InvalidThresholdError: If `raw` is not a number or is out of range.
    """
    if not _NUMBER_RE.fullmatch(raw):
        raise InvalidThresholdError(raw)
    value = float(raw)
    if not 0.0 < value < 100.0:
        raise InvalidThresholdError(raw)
    return value / 100.0


def parse_invocation(args: Sequence[str]) -> Invocation:
    """
    Validate the user arguments (program name excluded).

    Raises:
        HelpRequested: On a help flag or when there are not exactly 3 arguments.
        InvalidModeError: If the mode is not RAM, SWAP or COMB.
        InvalidThresholdError: If the threshold is unusable.
    """
    if wants_help(args) or len(args) != 3:
        raise HelpRequested()

    mode_arg, threshold_arg, command = args
    return Invocation(
        mode=ComparisonMode.parse(mode_arg),
        threshold=parse_threshold(threshold_arg),
        command=command,
    )


def render_usage(prog: str, ratios: UsageRatios) -> str:
    """Build the usage synopsis followed by the live usage figures."""
    lines = [
        "Usage:",
        f"  {prog} <RAM|SWAP|COMB> <percentage> <command>",
        "    Example:",
        f"      {prog} SWAP 80 reboot",
        '        will issue "reboot" command if over 80% of SWAP usage',
        "    Example:",
        f"      {prog} RAM 60 true",
        "        will return fail state for a shell script if over 60% of RAM usage",
        "    Current status:",
        f"      RAM:      {ratios.ram_ratio * 100:6.2f}%",
        f"      SWAP:     {ratios.swap_ratio * 100:6.2f}%",
        f"      Combined: {ratios.comb_ratio * 100:6.2f}%",
    ]
    return "\n".join(lines)


def main(argv: Sequence[str] | None = None) -> int:
    """
    Entry point for memthresh.

    Args:
        argv: Full argument vector including the program name.
            Defaults to sys.argv.

    Returns:
        0 if the condition was not met, 1 on any error or usage request,
        otherwise the exit code of the executed command.
    """
    if argv is None:
        argv = sys.argv
    prog = argv[0] if argv else PROG
    args = list(argv[1:])

    settings = Settings.from_env()
    configure_logging(settings.log_level)

    try:
        ratios = collect_ratios(settings.meminfo_path)
    except MemthreshError as exc:
        fatal(exc.message)
        return 1

    try:
        invocation = parse_invocation(args)
        if not should_run(ratios, invocation):
            return 0
        return run_command(invocation.command)
    except HelpRequested:
        err_console.print(render_usage(prog, ratios), markup=False)
        return 1
    except MemthreshError as exc:
        fatal(exc.message)
        return 1


if __name__ == "__main__":
    sys.exit(main())
