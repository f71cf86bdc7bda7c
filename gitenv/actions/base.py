"""Abstract base class for all setup actions."""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any

from loguru import logger
from pydantic import BaseModel

from ..core.context import SetupContext


class ActionResult(BaseModel):
    """Outcome of a completed action."""

    action: str
    success: bool
    message: str
    details: dict[str, Any] | None = None


class ActionType(Enum):
    """Supported setup actions."""
    ALIAS = "alias"
    CREDENTIALS = "creds"
    GPG = "gpg"
    CHANGE_ID = "change-id"
    SYNC = "sync"


class BaseAction(ABC):
    """A single, independently invokable setup step.

    Actions are fail-fast: any fatal condition is raised as a ``GitEnvError``
    and the dispatcher stops.
    """

    def __init__(self, context: SetupContext) -> None:
        """Initialize action with the shared context."""
        self.context = context
        self.config = context.config
        self.console = context.console
        self.logger = logger.bind(action=self.action_type.value)

    @property
    @abstractmethod
    def action_type(self) -> ActionType:
        """Return the action type."""

    @abstractmethod
    def run(self) -> ActionResult:
        """Apply the action."""

    def _result(self, message: str, **details: Any) -> ActionResult:
        return ActionResult(
            action=self.action_type.value,
            success=True,
            message=message,
            details=details or None,
        )
