"""Thin subprocess helpers for launching notification tools.

Commands are run without a shell. A command given as a string is tokenized
with shlex; an argv list is passed through untouched.
"""

from __future__ import annotations

import logging
import shlex
import subprocess

import structlog

# Bound to stdlib logging so an unconfigured library logs to stderr, never stdout
logger = structlog.wrap_logger(logging.getLogger(__name__))


def _argv(command: str | list[str]) -> list[str]:
    if isinstance(command, str):
        return shlex.split(command)
    return list(command)


def command_exists(command: str | list[str]) -> bool:
    """Return True if the command can be launched.

    The command is run to completion with its output discarded. Only the
    ability to launch matters: a nonzero exit from e.g. a help flag still
    counts as the tool being present.
    """
    args = _argv(command)
    try:
        subprocess.run(
            args,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            check=False,
        )
    except OSError as e:
        logger.debug("command_probe_failed", command=args[0] if args else "", error=str(e))
        return False
    return True


def execute_command(command: str | list[str], wait: bool = True) -> subprocess.Popen | None:
    """Run a command in the foreground (wait=True) or detached.

    A detached process is returned to the caller, who owns reaping it.
    """
    args = _argv(command)
    if not wait:
        proc = subprocess.Popen(args)
        logger.debug("command_spawned", command=args[0], pid=proc.pid)
        return proc

    result = subprocess.run(args, check=False)
    logger.debug("command_finished", command=args[0], returncode=result.returncode)
    return None
