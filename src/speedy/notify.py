"""Desktop notifications for finished searches."""

from __future__ import annotations

import logging
import shutil
import subprocess
import sys

from speedy.errors import NotificationError

LOGGER = logging.getLogger(__name__)

APP_TITLE = "Speedy Search"


def _applescript_quote(text: str) -> str:
    return '"' + text.replace("\\", "\\\\").replace('"', '\\"') + '"'


def _notification_command(title: str, body: str) -> list[str]:
    if sys.platform == "darwin":
        script = f"display notification {_applescript_quote(body)} with title {_applescript_quote(title)}"
        return ["osascript", "-e", script]
    if sys.platform == "win32":
        raise NotificationError("Desktop notifications are not supported on Windows")
    notifier = shutil.which("notify-send")
    if notifier is None:
        raise NotificationError("notify-send is not installed")
    return [notifier, title, body]


def send_notification(body: str, *, title: str = APP_TITLE) -> None:
    """Show a desktop notification, raising NotificationError on any failure."""
    command = _notification_command(title, body)
    LOGGER.debug("Sending notification: %s", body)
    try:
        subprocess.run(command, check=True, capture_output=True, timeout=10)
    except (OSError, subprocess.SubprocessError) as exc:
        raise NotificationError(f"Unable to show notification: {exc}") from exc


def notify_found(name: str, path: object) -> None:
    send_notification(f"Found {name}: {path}")
