"""Shared fixtures and in-memory fakes for gitenv tests."""

import io
import subprocess
from pathlib import Path
from typing import Callable

import pytest
from rich.console import Console

from gitenv.core.config import SetupConfig
from gitenv.core.context import SetupContext
from gitenv.core.downloader import Downloader
from gitenv.core.errors import DownloadError, ToolError
from gitenv.core.git_config import GitConfigStore
from gitenv.core.runner import CommandRunner, LineReader


class FakeRunner(CommandRunner):
    """Records commands and answers them from canned responses.

    Responses are matched on the longest registered command prefix; anything
    unregistered succeeds with empty output.
    """

    def __init__(self) -> None:
        self.calls: list[list[str]] = []
        self.tools: set[str] = set()
        self._responses: dict[tuple[str, ...], tuple[int, str, str, Callable[[], None] | None]] = {}

    def respond(
        self,
        args: list[str],
        stdout: str = "",
        returncode: int = 0,
        stderr: str = "",
        effect: Callable[[], None] | None = None,
    ) -> None:
        self._responses[tuple(args)] = (returncode, stdout, stderr, effect)

    def run(self, args, *, capture_output=True):
        self.calls.append(list(args))
        key = tuple(args)
        match = None
        for prefix in self._responses:
            if key[: len(prefix)] == prefix and (match is None or len(prefix) > len(match)):
                match = prefix
        if match is None:
            return subprocess.CompletedProcess(list(args), 0, "", "")

        returncode, stdout, stderr, effect = self._responses[match]
        if effect is not None:
            effect()
        return subprocess.CompletedProcess(list(args), returncode, stdout, stderr)

    def which(self, tool):
        return f"/usr/bin/{tool}" if tool in self.tools else None

    def ran(self, *prefix: str) -> bool:
        return any(call[: len(prefix)] == list(prefix) for call in self.calls)


class FakeReader(LineReader):
    """Returns queued answers in order."""

    def __init__(self, answers: list[str] | None = None) -> None:
        self.answers = list(answers or [])
        self.prompts: list[str] = []

    def read_line(self, prompt):
        self.prompts.append(prompt)
        return self.answers.pop(0)


class FakeDownloader(Downloader):
    """Serves URLs from a dict; unknown URLs fail."""

    def __init__(self, files: dict[str, bytes] | None = None) -> None:
        self.files = dict(files or {})
        self.requests: list[str] = []
        self.modes: list[int] = []

    def download(self, url, destination, mode=0o644):
        self.requests.append(url)
        self.modes.append(mode)
        if url not in self.files:
            raise DownloadError(url, "404 Not Found")
        destination.write_bytes(self.files[url])
        destination.chmod(mode)
        return destination


class InMemoryGitConfig(GitConfigStore):
    """Dict-backed global config; keys in ``fail_on`` reject writes."""

    def __init__(self, values: dict[str, str] | None = None) -> None:
        self.values = dict(values or {})
        self.fail_on: set[str] = set()
        self.writes: list[tuple[str, str]] = []

    def get(self, key):
        return self.values.get(key)

    def set(self, key, value):
        if key in self.fail_on:
            raise ToolError("git", ["git", "config", "--global", key, value], f"failed to set {key}")
        self.writes.append((key, value))
        self.values[key] = value


@pytest.fixture
def home(tmp_path) -> Path:
    """Isolated home directory."""
    path = tmp_path / "home"
    path.mkdir()
    return path


@pytest.fixture
def config(home) -> SetupConfig:
    """Test configuration rooted at the isolated home."""
    return SetupConfig(
        home=home,
        hook_url="https://example.test/hooks/commit-msg",
        signing_key_url="https://example.test/gpg/private.key",
    )


@pytest.fixture
def console() -> Console:
    return Console(file=io.StringIO(), width=200, color_system=None)


@pytest.fixture
def runner() -> FakeRunner:
    return FakeRunner()


@pytest.fixture
def git() -> InMemoryGitConfig:
    return InMemoryGitConfig()


@pytest.fixture
def reader() -> FakeReader:
    return FakeReader()


@pytest.fixture
def downloader() -> FakeDownloader:
    return FakeDownloader()


@pytest.fixture
def context(config, runner, git, reader, downloader, console) -> SetupContext:
    """Context wired entirely to fakes, on a Linux host."""
    return SetupContext(
        config=config,
        runner=runner,
        git=git,
        reader=reader,
        downloader=downloader,
        console=console,
        platform="linux",
    )


@pytest.fixture
def output(console) -> Callable[[], str]:
    """Return a reader for everything printed to the test console."""
    return lambda: console.file.getvalue()
