"""Native desktop notifications through an external command-line tool.

  darwin:     terminal-notifier  — title, subtitle, message, sound, click-to-open
  all others: notify-send        — "title (subtitle)" and message only

Each send probes the tool first. A missing tool raises ToolUnavailableError from
dispatch(); Notification.notify() and the CLI turn that into a one-line
diagnostic on stdout and exit status 1.
"""

from __future__ import annotations

import logging
import sys
from abc import ABC, abstractmethod

import structlog

from desknotify.command_line import command_exists, execute_command
from desknotify.config import DesknotifyConfig, load_config
from desknotify.models import Notification, NotificationBuilder

logger = structlog.wrap_logger(logging.getLogger(__name__))

TERMINAL_NOTIFIER_UNSAFE_CHARS = ("[", "]")


class ToolUnavailableError(RuntimeError):
    """The platform's notification tool did not respond to its probe."""

    def __init__(self, tool: str) -> None:
        self.tool = tool
        super().__init__(f"{tool} is not available. Is it installed?")


class NotifierTool(ABC):
    """A notification tool invoked as `<name> <arguments>`."""

    name: str = ""

    def __init__(self, config: DesknotifyConfig | None = None) -> None:
        self.config = config or load_config()

    @property
    def probe_command(self) -> str:
        return f"{self.name} -h"

    def is_available(self) -> bool:
        """Check the tool responds to its help invocation."""
        return command_exists(self.probe_command)

    @abstractmethod
    def arguments(self, notification: Notification) -> list[tuple[str, str]]:
        """(flag, value) pairs for this tool; an empty flag is a positional argument."""

    def argv(self, notification: Notification) -> list[str]:
        """The argument vector actually executed. Values are never re-tokenized."""
        args = [self.name]
        for flag, value in self.arguments(notification):
            if flag:
                args.append(flag)
            args.append(value)
        return args

    def format_arguments(self, notification: Notification) -> str:
        """Render the arguments as the tool's documented quoted command line."""
        return " ".join(
            f'{flag} "{value}"' if flag else f'"{value}"'
            for flag, value in self.arguments(notification)
        )

    def command_line(self, notification: Notification) -> str:
        return f"{self.name} {self.format_arguments(notification)}"

    def send(self, notification: Notification) -> None:
        """Probe the tool, then run it in the foreground until it exits."""
        if not self.is_available():
            logger.warning("tool_probe_failed", tool=self.name)
            raise ToolUnavailableError(self.name)

        execute_command(self.argv(notification), wait=True)
        logger.debug("notification_dispatched", tool=self.name, title=notification.title)


class TerminalNotifier(NotifierTool):
    """macOS terminal-notifier: supports sound and an on-click target."""

    name = "terminal-notifier"

    @staticmethod
    def sanitize_message(message: str) -> str:
        """Strip the characters terminal-notifier cannot take in a message."""
        for c in TERMINAL_NOTIFIER_UNSAFE_CHARS:
            message = message.replace(c, "")
        return message

    def arguments(self, notification: Notification) -> list[tuple[str, str]]:
        # Only the message is sanitized; the other fields go through as given.
        sound = notification.sound if notification.sound is not None else self.config.default_sound
        open_target = notification.open or ""

        args = [
            ("-title", notification.title),
            ("-subtitle", notification.subtitle),
            ("-message", self.sanitize_message(notification.message)),
            ("-sound", sound),
        ]
        if open_target:
            args.append(("-open", open_target))
        return args


class NotifySend(NotifierTool):
    """libnotify's notify-send. No sound, no on-click actions."""

    name = "notify-send"

    def arguments(self, notification: Notification) -> list[tuple[str, str]]:
        return [
            ("", f"{notification.title} ({notification.subtitle})"),
            ("", notification.message),
        ]


def select_tool(config: DesknotifyConfig | None = None) -> NotifierTool:
    """Pick terminal-notifier on macOS and notify-send everywhere else."""
    config = config or load_config()
    if config.is_macos:
        return TerminalNotifier(config)
    return NotifySend(config)


def dispatch(notification: Notification, config: DesknotifyConfig | None = None) -> None:
    """Send a notification with the host's tool.

    Raises:
        ToolUnavailableError: the tool did not respond to its probe. Nothing
            was sent.
    """
    select_tool(config).send(notification)


def notify_or_exit(notification: Notification, config: DesknotifyConfig | None = None) -> None:
    """dispatch(), but a missing tool prints a diagnostic and exits with status 1."""
    try:
        dispatch(notification, config)
    except ToolUnavailableError as e:
        print(e)
        sys.exit(1)


def notify(
    title: str,
    subtitle: str,
    message: str,
    sound: str | None = None,
    open: str | None = None,
) -> None:
    """Build and send a notification in one call.

    Args:
        title:    Bold header line.
        subtitle: Second line (folded into the title on notify-send).
        message:  Body text.
        sound:    terminal-notifier sound name, e.g. "Pop".
        open:     URI or path opened when the notification is clicked.
    """
    builder = NotificationBuilder().title(title).subtitle(subtitle).message(message)
    if sound is not None:
        builder.sound(sound)
    if open is not None:
        builder.open(open)
    builder.build().notify()
