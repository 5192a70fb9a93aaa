"""Core domain models for desknotify."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

REQUIRED_FIELDS = ("title", "subtitle", "message")


class UninitializedFieldError(ValueError):
    """Raised by NotificationBuilder.build() when a required field was never set."""

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"`{field}` must be initialized")


class Notification(BaseModel):
    """A desktop notification, ready to hand to the host's notification tool."""

    model_config = ConfigDict(frozen=True)

    title: str
    subtitle: str
    message: str
    sound: str | None = None  # terminal-notifier only
    open: str | None = None  # URI or path opened on click, terminal-notifier only

    def notify(self) -> None:
        """Send this notification, exiting the process if the tool is missing."""
        from desknotify.notifications import notify_or_exit

        notify_or_exit(self)


class NotificationBuilder:
    """Staged construction of a Notification.

    Setters chain in any order and the last write wins. Nothing is validated
    until build().
    """

    def __init__(self) -> None:
        self._fields: dict[str, str] = {}

    def title(self, value: str) -> NotificationBuilder:
        self._fields["title"] = value
        return self

    def subtitle(self, value: str) -> NotificationBuilder:
        self._fields["subtitle"] = value
        return self

    def message(self, value: str) -> NotificationBuilder:
        self._fields["message"] = value
        return self

    def sound(self, value: str) -> NotificationBuilder:
        self._fields["sound"] = value
        return self

    def open(self, value: str) -> NotificationBuilder:
        self._fields["open"] = value
        return self

    def build(self) -> Notification:
        for field in REQUIRED_FIELDS:
            if field not in self._fields:
                raise UninitializedFieldError(field)
        return Notification(**self._fields)
