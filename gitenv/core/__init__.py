"""Core gitenv functionality."""

from .config import LoggingConfig, SetupConfig
from .context import SetupContext
from .downloader import Downloader, HttpDownloader
from .errors import (
    DownloadError,
    GitEnvError,
    MissingValueError,
    ToolError,
    ToolMissingError,
    UnsupportedEnvironmentError,
)
from .git_config import GitConfigStore, GlobalGitConfig
from .runner import CommandRunner, ConsoleLineReader, LineReader, SubprocessRunner

__all__ = [
    # Configuration
    "SetupConfig",
    "LoggingConfig",
    "SetupContext",

    # Capabilities
    "CommandRunner",
    "SubprocessRunner",
    "LineReader",
    "ConsoleLineReader",
    "GitConfigStore",
    "GlobalGitConfig",
    "Downloader",
    "HttpDownloader",

    # Errors
    "GitEnvError",
    "ToolError",
    "ToolMissingError",
    "UnsupportedEnvironmentError",
    "DownloadError",
    "MissingValueError",
]
