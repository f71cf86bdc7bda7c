"""GPG commit signing setup.

Downloads a private key into a temporary directory under home, imports it into
the local keyring, and points Git at the imported key. The key directory is
always removed before the action returns.
"""

import os
import shutil
import sys
from pathlib import Path

from ..core.errors import MissingValueError, ToolError
from .base import ActionResult, ActionType, BaseAction

KEY_FILE_NAME = "private.key"
GPG_TTY_VAR = "GPG_TTY"
GPG_TTY_EXPORT = 'export GPG_TTY=$(tty)'

LIST_SECRET_KEYS = ["gpg", "--list-secret-keys", "--keyid-format", "LONG"]


def parse_secret_key_id(listing: str) -> str | None:
    """Return the long key ID of the first ``sec`` record in a gpg listing.

    A record looks like ``sec   rsa4096/3AA5C34371567BD2 2016-03-10 [SC]``;
    the ID is the part after ``/``. Stub (``sec#``) and card (``sec>``) markers
    are accepted.
    """
    for line in listing.splitlines():
        fields = line.split()
        if len(fields) < 2 or not fields[0].startswith("sec"):
            continue
        _, sep, key_id = fields[1].partition("/")
        if sep and key_id:
            return key_id
    return None


class SigningKeyAction(BaseAction):
    """Import the shared signing key and enable signed commits."""

    @property
    def action_type(self) -> ActionType:
        return ActionType.GPG

    def run(self) -> ActionResult:
        key_dir = self.config.key_dir
        key_dir.mkdir(parents=True, exist_ok=True)
        try:
            key_id = self._import_key(key_dir / KEY_FILE_NAME)
        finally:
            shutil.rmtree(key_dir, ignore_errors=True)
            self.logger.debug(f"Removed {key_dir}")

        git = self.context.git
        git.set("user.signingkey", key_id)
        git.set("commit.gpgsign", "true")

        updated = self.persist_gpg_tty()
        tty = _current_tty()
        if tty:
            os.environ[GPG_TTY_VAR] = tty

        self.console.print(f"[green]Commit signing enabled with key {key_id}[/green]")
        return self._result(
            "Signing configured",
            key_id=key_id,
            rc_files=[str(path) for path in updated],
        )

    def _import_key(self, key_file: Path) -> str:
        runner = self.context.runner
        if not key_file.exists():
            self.context.downloader.download(self.config.signing_key_url, key_file, mode=0o600)

        command = ["gpg", "--batch", "--import", str(key_file)]
        result = runner.run(command)
        if result.returncode != 0:
            key_file.unlink(missing_ok=True)
            message = result.stderr.strip() or f"exit status {result.returncode}"
            raise ToolError("gpg", command, f"key import failed: {message}")

        listing = runner.run(LIST_SECRET_KEYS)
        key_id = parse_secret_key_id(listing.stdout) if listing.returncode == 0 else None
        if not key_id:
            raise MissingValueError("signing key ID", "gpg --list-secret-keys")
        return key_id

    def persist_gpg_tty(self) -> list[Path]:
        """Append the GPG_TTY export to existing shell startup files that lack it."""
        updated: list[Path] = []
        for rc_path in self.config.rc_paths:
            if not rc_path.is_file():
                continue
            content = rc_path.read_text(encoding="utf-8", errors="replace")
            if GPG_TTY_VAR in content:
                self.logger.debug(f"{rc_path} already sets {GPG_TTY_VAR}")
                continue

            prefix = "" if not content or content.endswith("\n") else "\n"
            with rc_path.open("a", encoding="utf-8") as f:
                f.write(f"{prefix}{GPG_TTY_EXPORT}\n")
            updated.append(rc_path)
            self.console.print(f"[green]Added {GPG_TTY_VAR} to {rc_path}[/green]")
        return updated


def _current_tty() -> str | None:
    try:
        if sys.stdin is None or not sys.stdin.isatty():
            return None
        return os.ttyname(sys.stdin.fileno())
    except (OSError, ValueError):
        return None
