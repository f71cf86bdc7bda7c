"""Setup action implementations for gitenv."""

from .aliases import ALIASES, AliasAction
from .base import ActionResult, ActionType, BaseAction
from .credentials import CredentialsAction
from .hooks import ChangeIdHookAction
from .identity import IdentityAction
from .signing import SigningKeyAction, parse_secret_key_id

ACTIONS: dict[ActionType, type[BaseAction]] = {
    ActionType.ALIAS: AliasAction,
    ActionType.CREDENTIALS: CredentialsAction,
    ActionType.GPG: SigningKeyAction,
    ActionType.CHANGE_ID: ChangeIdHookAction,
    ActionType.SYNC: IdentityAction,
}

__all__ = [
    "ACTIONS",
    "ALIASES",
    "ActionResult",
    "ActionType",
    "BaseAction",
    "AliasAction",
    "CredentialsAction",
    "ChangeIdHookAction",
    "IdentityAction",
    "SigningKeyAction",
    "parse_secret_key_id",
]
