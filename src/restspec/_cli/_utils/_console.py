from contextlib import contextmanager
from enum import Enum
from typing import Iterator, Optional, Type, TypeVar

import click
from rich.console import Console
from rich.live import Live
from rich.spinner import Spinner as RichSpinner
from rich.text import Text


class LogLevel(Enum):
    INFO = ""
    SUCCESS = click.style("✓ ", fg="green", bold=True)
    WARNING = "⚠️"
    ERROR = "❌"


T = TypeVar("T", bound="ConsoleLogger")


class ConsoleLogger:
    """A singleton wrapper class for terminal output with spinners."""

    _instance: Optional["ConsoleLogger"] = None

    def __new__(cls: Type[T]) -> T:
        if cls._instance is None:
            cls._instance = super(ConsoleLogger, cls).__new__(cls)
            cls._instance._initialized = False
        return cls._instance  # type: ignore

    def __init__(self) -> None:
        if not getattr(self, "_initialized", False):
            self._console = Console(stderr=True)
            self._spinner_live: Optional[Live] = None
            self._spinner = RichSpinner("dots")
            self._initialized = True

    def _stop_spinner_if_active(self) -> None:
        if self._spinner_live and self._spinner_live.is_started:
            self._spinner_live.stop()
            self._spinner_live = None

    def log(
        self, message: str, level: LogLevel = LogLevel.INFO, fg: Optional[str] = None
    ) -> None:
        self._stop_spinner_if_active()

        if level != LogLevel.INFO:
            text = click.style(message, fg=fg) if fg else message
            formatted_message = f"{level.value} {text}"
        else:
            formatted_message = message

        click.echo(formatted_message, err=level == LogLevel.ERROR)

    def success(self, message: str) -> None:
        self.log(message, LogLevel.SUCCESS)

    def info(self, message: str) -> None:
        self.log(message, LogLevel.INFO)

    def warning(self, message: str) -> None:
        self.log(message, LogLevel.WARNING, "yellow")

    def error(self, message: str) -> None:
        """Log an error message and exit with status 1."""
        self.log(message, LogLevel.ERROR, "red")
        click.get_current_context().exit(1)

    @contextmanager
    def spinner(self, message: str = "") -> Iterator[None]:
        try:
            self._stop_spinner_if_active()

            self._spinner.text = Text(message)
            self._spinner_live = Live(
                self._spinner,
                console=self._console,
                refresh_per_second=10,
                transient=True,
                auto_refresh=True,
            )
            self._spinner_live.start()
            yield
        finally:
            self._stop_spinner_if_active()
