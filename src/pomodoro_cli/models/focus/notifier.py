"""Desktop notifications for phase transitions."""

from plyer import notification
from rich.console import Console

from pomodoro_cli.config import NotificationConfig
from pomodoro_cli.utils.logger import get_logger
from pomodoro_cli.utils.ui.console import get_console


class DesktopNotifier:
    """Fire-and-forget OS notification. Delivery failures never reach the caller."""

    def __init__(
        self,
        title: str = "Pomodoro Timer",
        icon: str = "",
        app_name: str = "Pomodoro CLI",
        sound: bool = True,
        enabled: bool = True,
        timeout: int = 10,
        console: Console | None = None,
    ):
        self.title = title
        self.icon = icon
        self.app_name = app_name
        self.sound = sound
        self.enabled = enabled
        self.timeout = timeout
        self.console = console or get_console()

    @classmethod
    def from_config(
        cls, config: NotificationConfig, console: Console | None = None
    ) -> "DesktopNotifier":
        return cls(
            title=config.title,
            icon=config.icon,
            app_name=config.app_name,
            sound=config.sound,
            enabled=config.enabled,
            timeout=config.timeout,
            console=console,
        )

    def notify(self, message: str) -> None:
        if not self.enabled:
            return

        if self.sound:
            self.console.bell()

        try:
            notification.notify(
                title=self.title,
                message=message,
                app_name=self.app_name,
                app_icon=self.icon,
                timeout=self.timeout,
            )
        except Exception as e:
            # No notification backend (headless, missing dbus, ...)
            get_logger().debug("Notification not delivered: %s", e)
