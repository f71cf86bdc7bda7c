"""Global Git configuration store."""

from abc import ABC, abstractmethod

from loguru import logger

from .errors import ToolError
from .runner import CommandRunner


class GitConfigStore(ABC):
    """Key-value view of Git's user-wide configuration."""

    @abstractmethod
    def get(self, key: str) -> str | None:
        """Return the value of ``key``, or None when unset."""

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Set ``key`` to ``value``.

        Raises:
            ToolError: If the backend rejects the write
        """

    def exists(self, key: str) -> bool:
        return self.get(key) is not None


class GlobalGitConfig(GitConfigStore):
    """``git config --global`` backend."""

    def __init__(self, runner: CommandRunner) -> None:
        self.runner = runner
        self.logger = logger.bind(component="GlobalGitConfig")

    def get(self, key: str) -> str | None:
        result = self._run_command(["--get", key])
        # git config exits 1 for a missing key
        if result.returncode != 0:
            return None
        return result.stdout.rstrip("\n")

    def set(self, key: str, value: str) -> None:
        command = self._command([key, value])
        result = self.runner.run(command)
        if result.returncode != 0:
            message = result.stderr.strip() or f"exit status {result.returncode}"
            raise ToolError("git", command, f"failed to set {key}: {message}")
        self.logger.debug(f"Set {key}")

    def _command(self, args: list[str]) -> list[str]:
        return ["git", "config", "--global"] + args

    def _run_command(self, args: list[str]):
        return self.runner.run(self._command(args))
