#!/usr/bin/env python3
"""gitenv CLI - Git developer-environment setup.

Action flags are processed strictly left to right; each one runs its action
immediately, so ``gitenv -A -Z`` installs aliases before rejecting ``-Z``.
"""

from pathlib import Path
from typing import Optional

import typer
from loguru import logger
from rich.console import Console
from rich.markup import escape

from gitenv import __version__
from gitenv.actions import ACTIONS, ActionType
from gitenv.core.config import SetupConfig
from gitenv.core.context import SetupContext
from gitenv.core.errors import GitEnvError

console = Console()
app = typer.Typer(
    name="gitenv",
    help="Configure local Git tooling: aliases, identity, credentials, hooks and signing",
    add_completion=False,
    rich_markup_mode="rich",
)

HELP_FLAGS = ("-H", "--help")

FLAGS: dict[str, ActionType] = {
    "-A": ActionType.ALIAS,
    "--alias": ActionType.ALIAS,
    "-C": ActionType.CREDENTIALS,
    "--creds": ActionType.CREDENTIALS,
    "-G": ActionType.GPG,
    "--gpg": ActionType.GPG,
    "-I": ActionType.CHANGE_ID,
    "--change-id": ActionType.CHANGE_ID,
    "-S": ActionType.SYNC,
    "--sync": ActionType.SYNC,
}

USAGE = """Usage: gitenv [--config PATH] [--verbose] [OPTIONS...]

Options are applied in the order given.

  -A, --alias       Install global Git aliases
  -C, --creds       Configure credentials through the GitHub CLI
  -G, --gpg         Configure GPG commit signing
  -I, --change-id   Install the Change-Id commit-msg hook
  -S, --sync        Set user.name and user.email interactively
  -H, --help        Show this message and exit

  --config PATH     Read settings from PATH (default: ~/.gitenv.toml)
  --verbose         Enable debug logging
  --version         Show the version and exit
"""


class Dispatcher:
    """Runs action flags in order, stopping at the first fatal condition."""

    def __init__(self, context: SetupContext) -> None:
        self.context = context
        self.console = context.console
        self.logger = logger.bind(component="Dispatcher")

    def print_usage(self) -> None:
        self.console.print(USAGE, markup=False, highlight=False)

    def dispatch(self, tokens: list[str]) -> int:
        """Process ``tokens`` left to right and return the exit status."""
        for token in tokens:
            if token in HELP_FLAGS:
                self.print_usage()
                return 0

            action_type = FLAGS.get(token)
            if action_type is None:
                self.console.print(f"[red]Unknown option: {escape(token)}[/red]")
                self.print_usage()
                return 1

            action = ACTIONS[action_type](self.context)
            try:
                result = action.run()
            except GitEnvError as e:
                self.logger.opt(exception=True).debug(f"{action_type.value} failed")
                self.console.print(f"[red]Error: {escape(str(e))}[/red]")
                return 1

            self.logger.info(f"{result.action}: {result.message}")

        return 0


def build_context(config: SetupConfig) -> SetupContext:
    return SetupContext.create(config, console)


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"gitenv {__version__}")
        raise typer.Exit()


@app.command(
    context_settings={
        "allow_extra_args": True,
        "ignore_unknown_options": True,
        "help_option_names": [],
    }
)
def main(
    ctx: typer.Context,
    config_path: Optional[Path] = typer.Option(None, "--config", help="Path to a gitenv TOML file"),
    verbose: bool = typer.Option(False, "--verbose", help="Enable debug logging"),
    version: bool = typer.Option(
        False, "--version", callback=_version_callback, is_eager=True, help="Show the version"
    ),
) -> None:
    """Apply the requested setup actions in order."""
    try:
        config = SetupConfig.from_file(config_path)
    except GitEnvError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    if verbose:
        config.logging.level = "DEBUG"
    config.logging.configure()

    dispatcher = Dispatcher(build_context(config))
    raise typer.Exit(dispatcher.dispatch(list(ctx.args)))


def run() -> None:
    app()


if __name__ == "__main__":
    run()
