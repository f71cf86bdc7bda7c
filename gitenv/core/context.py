"""Collaborators shared by all actions."""

import sys
from dataclasses import dataclass, field

from rich.console import Console

from .config import SetupConfig
from .downloader import Downloader, HttpDownloader
from .git_config import GitConfigStore, GlobalGitConfig
from .runner import CommandRunner, ConsoleLineReader, LineReader, SubprocessRunner


@dataclass
class SetupContext:
    """Everything an action touches outside its own process memory."""

    config: SetupConfig
    runner: CommandRunner
    git: GitConfigStore
    reader: LineReader
    downloader: Downloader
    console: Console
    platform: str = field(default=sys.platform)

    @classmethod
    def create(cls, config: SetupConfig, console: Console) -> "SetupContext":
        """Build a context backed by the real tools."""
        runner = SubprocessRunner()
        return cls(
            config=config,
            runner=runner,
            git=GlobalGitConfig(runner),
            reader=ConsoleLineReader(console),
            downloader=HttpDownloader(timeout=config.download_timeout),
            console=console,
        )
