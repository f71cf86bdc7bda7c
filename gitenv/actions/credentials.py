"""GitHub CLI credential setup.

Installs ``gh`` when it is missing, authenticates, and derives the global
identity from the authenticated account.
"""

from rich.markup import escape

from ..core.errors import MissingValueError, ToolMissingError, UnsupportedEnvironmentError
from .base import ActionResult, ActionType, BaseAction

GH = "gh"

# Tried in order; the first manager found on PATH is used.
LINUX_PACKAGE_MANAGERS: list[tuple[str, list[str]]] = [
    ("apt", ["sudo", "apt", "install", "-y", "gh"]),
    ("dnf", ["sudo", "dnf", "install", "-y", "gh"]),
    ("pacman", ["sudo", "pacman", "-S", "--noconfirm", "github-cli"]),
]
BSD_PACKAGE_MANAGERS: list[tuple[str, list[str]]] = [
    ("brew", ["brew", "install", "gh"]),
]

# macOS and the BSDs; Homebrew is the only manager tried there.
BSD_PLATFORMS = ("darwin", "freebsd", "openbsd", "netbsd")

INSTALL_GUIDANCE = "Install the GitHub CLI manually: https://cli.github.com/"

LOGIN_QUERY = ["gh", "api", "user", "--jq", ".login"]
EMAIL_QUERY = ["gh", "api", "user/emails", "--jq", ".[] | select(.primary) | .email"]


class CredentialsAction(BaseAction):
    """Configure Git to authenticate through the GitHub CLI."""

    @property
    def action_type(self) -> ActionType:
        return ActionType.CREDENTIALS

    def run(self) -> ActionResult:
        self.ensure_installed()
        self.ensure_authenticated()

        login = self._query(LOGIN_QUERY)
        email = self._query(EMAIL_QUERY)
        if not login:
            raise MissingValueError("GitHub login", "gh api user")
        if not email:
            raise MissingValueError("GitHub primary email", "gh api user/emails")

        gh_path = self.context.runner.which(GH) or GH
        git = self.context.git
        git.set("user.name", login)
        git.set("user.email", email)
        git.set("credential.helper", f"!{gh_path} auth git-credential")

        self.console.print(
            f"[green]Credentials configured for {escape(login)} <{escape(email)}>[/green]"
        )
        return self._result("Credentials configured", login=login, email=email)

    def ensure_installed(self) -> None:
        """Install ``gh`` with the host's package manager if it is missing."""
        runner = self.context.runner
        if runner.has(GH):
            self.logger.debug("gh already installed")
            return

        command = self._install_command()
        self.console.print(f"[cyan]Installing GitHub CLI: {' '.join(command)}[/cyan]")
        result = runner.run(command, capture_output=False)
        self.logger.info(f"Install exited with status {result.returncode}")

        if not runner.has(GH):
            raise ToolMissingError(GH)

    def ensure_authenticated(self) -> None:
        runner = self.context.runner
        status = runner.run(["gh", "auth", "status"])
        if status.returncode == 0:
            self.console.print("[yellow]Already authenticated with GitHub, skipping login[/yellow]")
            return

        self.console.print("[cyan]Starting GitHub login[/cyan]")
        runner.run(["gh", "auth", "login"], capture_output=False)

    def _install_command(self) -> list[str]:
        platform = self.context.platform
        if platform.startswith("linux"):
            candidates = LINUX_PACKAGE_MANAGERS
        elif platform.startswith(BSD_PLATFORMS):
            candidates = BSD_PACKAGE_MANAGERS
        else:
            raise UnsupportedEnvironmentError(f"Unsupported OS: {platform}", INSTALL_GUIDANCE)

        for manager, command in candidates:
            if self.context.runner.has(manager):
                self.logger.debug(f"Using package manager {manager}")
                return command

        names = ", ".join(manager for manager, _ in candidates)
        raise UnsupportedEnvironmentError(
            f"No supported package manager found (tried {names})",
            INSTALL_GUIDANCE,
        )

    def _query(self, command: list[str]) -> str:
        result = self.context.runner.run(command)
        if result.returncode != 0:
            self.logger.warning(f"{' '.join(command[:3])} failed: {result.stderr.strip()}")
            return ""
        lines = result.stdout.strip().splitlines()
        return lines[0].strip() if lines else ""
