"""commit-msg hook installer."""

import stat

from .base import ActionResult, ActionType, BaseAction

HOOK_NAME = "commit-msg"
EXECUTE_ALL = stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH


class ChangeIdHookAction(BaseAction):
    """Install the Change-Id commit-msg hook into a global hooks directory."""

    @property
    def action_type(self) -> ActionType:
        return ActionType.CHANGE_ID

    def run(self) -> ActionResult:
        hooks_dir = self.config.hooks_dir
        hooks_dir.mkdir(parents=True, exist_ok=True)
        self.context.git.set("core.hooksPath", str(hooks_dir))

        hook_path = hooks_dir / HOOK_NAME
        self.context.downloader.download(self.config.hook_url, hook_path)
        hook_path.chmod(hook_path.stat().st_mode | EXECUTE_ALL)

        self.console.print(f"[green]Installed {HOOK_NAME} hook at {hook_path}[/green]")
        return self._result("Hook installed", path=str(hook_path))
