"""Global Git alias installer."""

from .base import ActionResult, ActionType, BaseAction

ALIASES: dict[str, str] = {
    "a": "add",
    "aa": "add --all",
    "b": "branch",
    "c": "commit -s",
    "ca": "commit -s --amend",
    "cm": "commit -s -m",
    "co": "checkout",
    "cp": "cherry-pick",
    "d": "diff",
    "ds": "diff --staged",
    "f": "fetch --all --prune",
    "l": "log --oneline --graph --decorate",
    "p": "push",
    "pl": "pull --rebase",
    "r": "rebase",
    "rs": "restore --staged",
    "s": "status -sb",
    "st": "stash",
    "sw": "switch",
}


class AliasAction(BaseAction):
    """Register ``ALIASES`` as global aliases, never overwriting existing ones."""

    @property
    def action_type(self) -> ActionType:
        return ActionType.ALIAS

    def run(self) -> ActionResult:
        git = self.context.git
        added: list[str] = []
        skipped: list[str] = []

        for name, command in ALIASES.items():
            key = f"alias.{name}"
            if git.exists(key):
                self.console.print(f"[yellow]Alias '{name}' already exists, skipping[/yellow]")
                skipped.append(name)
                continue

            git.set(key, command)
            self.logger.debug(f"Alias {name} -> {command}")
            added.append(name)

        self.console.print("[green]Git aliases configured[/green]")
        return self._result(
            f"{len(added)} aliases added, {len(skipped)} skipped",
            added=added,
            skipped=skipped,
        )
