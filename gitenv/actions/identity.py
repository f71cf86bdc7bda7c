"""Interactive commit identity setup."""

from rich.markup import escape

from .base import ActionResult, ActionType, BaseAction


class IdentityAction(BaseAction):
    """Prompt for user.name and user.email, falling back to configured defaults."""

    @property
    def action_type(self) -> ActionType:
        return ActionType.SYNC

    def run(self) -> ActionResult:
        reader = self.context.reader
        name = reader.read_line(f"Name (default: {self.config.default_name})").strip()
        email = reader.read_line(f"Email (default: {self.config.default_email})").strip()

        name = name or self.config.default_name
        email = email or self.config.default_email

        # No rollback: a name that was set stays set if the email write fails.
        self.context.git.set("user.name", name)
        self.context.git.set("user.email", email)

        self.console.print(f"[green]Git identity set to {escape(name)} <{escape(email)}>[/green]")
        return self._result("Identity updated", name=name, email=email)
