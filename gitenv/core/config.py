"""Configuration management for gitenv."""

import sys
import tomllib
from pathlib import Path

from loguru import logger
from pydantic import BaseModel, Field, ValidationError, field_validator

from .errors import GitEnvError

CONFIG_FILE_NAME = ".gitenv.toml"
RAW_BASE_URL = "https://raw.githubusercontent.com/gitenv-dev/gitenv/main"


class LoggingConfig(BaseModel):
    """Centralized logging configuration using Loguru."""

    level: str = Field(default="WARNING", description="Logging level")
    format_string: str = Field(
        default="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>",
        description="Log format string",
    )
    log_file: Path | None = Field(default=None, description="Optional log file path")
    rotation: str = Field(default="10 MB", description="Log file rotation size")
    retention: str = Field(default="7 days", description="Log retention period")
    compression: str = Field(default="gz", description="Log compression format")

    def configure(self) -> None:
        """Configure Loguru with the specified settings."""
        logger.remove()
        logger.add(
            sink=sys.stderr,
            level=self.level,
            format=self.format_string,
            colorize=True,
        )
        if self.log_file is not None:
            logger.add(
                sink=str(self.log_file),
                level=self.level,
                format=self.format_string,
                rotation=self.rotation,
                retention=self.retention,
                compression=self.compression,
                colorize=False,
            )


class SetupConfig(BaseModel):
    """Main configuration for gitenv."""

    home: Path = Field(
        default_factory=Path.home,
        description="Home directory holding hooks, shell startup files and the key directory",
    )
    hook_url: str = Field(
        default=f"{RAW_BASE_URL}/hooks/commit-msg",
        description="Remote commit-msg hook script",
    )
    signing_key_url: str = Field(
        default=f"{RAW_BASE_URL}/gpg/private.key",
        description="Remote private signing key",
    )
    default_name: str = Field(default="Developer", description="Fallback user.name")
    default_email: str = Field(
        default="developer@example.com",
        description="Fallback user.email",
    )
    shell_rc_files: list[str] = Field(
        default_factory=lambda: [".bashrc", ".zshrc"],
        description="Shell startup files, relative to home",
    )
    download_timeout: float = Field(default=30.0, description="HTTP timeout in seconds")
    logging: LoggingConfig = Field(
        default_factory=LoggingConfig,
        description="Logging configuration",
    )

    @field_validator("home")
    @classmethod
    def validate_home(cls, v: Path) -> Path:
        """Validate that home exists and is a directory."""
        if not v.exists():
            raise ValueError(f"Home directory does not exist: {v}")
        if not v.is_dir():
            raise ValueError(f"Home is not a directory: {v}")
        return v.resolve()

    @field_validator("default_name", "default_email")
    @classmethod
    def validate_not_empty(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Default identity fields must not be empty")
        return v.strip()

    @property
    def hooks_dir(self) -> Path:
        return self.home / ".git" / "hooks"

    @property
    def key_dir(self) -> Path:
        return self.home / "gpg"

    @property
    def rc_paths(self) -> list[Path]:
        return [self.home / name for name in self.shell_rc_files]

    @classmethod
    def from_file(cls, config_file: Path | None = None) -> "SetupConfig":
        """Load configuration from a TOML file.

        Without an explicit path, ``~/.gitenv.toml`` is used when it exists and
        defaults apply otherwise. An explicit path must exist.
        """
        if config_file is None:
            candidate = Path.home() / CONFIG_FILE_NAME
            if not candidate.exists():
                return cls()
            config_file = candidate
        elif not config_file.exists():
            raise GitEnvError(f"Config file does not exist: {config_file}")

        try:
            with config_file.open("rb") as f:
                config_data = tomllib.load(f)
            return cls(**config_data)
        except (tomllib.TOMLDecodeError, ValidationError) as e:
            raise GitEnvError(f"Invalid config file {config_file}: {e}") from e
