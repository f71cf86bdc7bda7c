"""Error hierarchy shared by every gitenv action."""


class GitEnvError(Exception):
    """Base class for all fatal gitenv conditions."""


class ToolError(GitEnvError):
    """An external tool failed or could not be executed."""

    def __init__(self, tool_name: str, command: list[str], message: str) -> None:
        self.tool_name = tool_name
        self.command = command
        self.message = message
        super().__init__(f"{tool_name}: {message}")


class ToolMissingError(ToolError):
    """A tool is still absent after an install attempt."""

    def __init__(self, tool_name: str) -> None:
        super().__init__(tool_name, [], "not found on PATH after installation")


class UnsupportedEnvironmentError(GitEnvError):
    """The host OS or package manager is not supported."""

    def __init__(self, message: str, guidance: str = "") -> None:
        self.message = message
        self.guidance = guidance
        super().__init__(f"{message}. {guidance}" if guidance else message)


class DownloadError(GitEnvError):
    """A remote artifact could not be fetched."""

    def __init__(self, url: str, message: str) -> None:
        self.url = url
        self.message = message
        super().__init__(f"Failed to download {url}: {message}")


class MissingValueError(GitEnvError):
    """A required value came back empty."""

    def __init__(self, field: str, source: str = "") -> None:
        self.field = field
        self.source = source
        suffix = f" (from {source})" if source else ""
        super().__init__(f"Could not determine {field}{suffix}")


__all__ = [
    "GitEnvError",
    "ToolError",
    "ToolMissingError",
    "UnsupportedEnvironmentError",
    "DownloadError",
    "MissingValueError",
]
