"""Command execution and interactive input.

Actions never call ``subprocess`` or ``input`` directly; they go through a
``CommandRunner`` and a ``LineReader`` so tests can substitute fakes.
"""

import shutil
import subprocess
from abc import ABC, abstractmethod

from loguru import logger
from rich.console import Console
from rich.prompt import Prompt

from .errors import ToolError


class CommandRunner(ABC):
    """Runs external commands."""

    @abstractmethod
    def run(
        self,
        args: list[str],
        *,
        capture_output: bool = True,
    ) -> subprocess.CompletedProcess[str]:
        """Run a command and return the completed process.

        A non-zero exit status is not an error here; callers inspect
        ``returncode``. With ``capture_output=False`` the command inherits the
        terminal, which interactive flows such as ``gh auth login`` need.

        Raises:
            ToolError: If the executable cannot be started
        """

    @abstractmethod
    def which(self, tool: str) -> str | None:
        """Return the path of ``tool`` on PATH, or None."""

    def has(self, tool: str) -> bool:
        return self.which(tool) is not None


class SubprocessRunner(CommandRunner):
    """``subprocess``-backed runner."""

    def __init__(self) -> None:
        self.logger = logger.bind(component="SubprocessRunner")

    def run(
        self,
        args: list[str],
        *,
        capture_output: bool = True,
    ) -> subprocess.CompletedProcess[str]:
        self.logger.debug(f"Running: {' '.join(args)}")
        try:
            result = subprocess.run(
                args,
                check=False,
                capture_output=capture_output,
                text=True,
                encoding="utf-8",
                errors="replace",
            )
        except OSError as e:
            raise ToolError(args[0], args, str(e)) from e

        self.logger.debug(f"Exit status {result.returncode}: {args[0]}")
        return result

    def which(self, tool: str) -> str | None:
        return shutil.which(tool)


class LineReader(ABC):
    """Reads a line of interactive input."""

    @abstractmethod
    def read_line(self, prompt: str) -> str:
        """Prompt the user and return the raw line (possibly empty)."""


class ConsoleLineReader(LineReader):
    """Rich prompt on the terminal."""

    def __init__(self, console: Console) -> None:
        self.console = console

    def read_line(self, prompt: str) -> str:
        try:
            return Prompt.ask(prompt, default="", show_default=False, console=self.console)
        except EOFError:
            # Closed stdin reads as an empty answer so defaults apply.
            self.console.print()
            return ""
