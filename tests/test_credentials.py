"""Tests for GitHub CLI credential setup."""

import pytest

from gitenv.actions.credentials import EMAIL_QUERY, LOGIN_QUERY, CredentialsAction
from gitenv.core.errors import MissingValueError, ToolMissingError, UnsupportedEnvironmentError


@pytest.fixture
def action(context):
    return CredentialsAction(context)


@pytest.fixture
def account(runner):
    """An authenticated gh returning a complete account."""
    runner.tools.add("gh")
    runner.respond(LOGIN_QUERY, stdout="octocat\n")
    runner.respond(EMAIL_QUERY, stdout="octocat@github.com\n")
    return runner


class TestInstall:
    """Installation of gh when it is missing."""

    def _installs_gh(self, runner):
        return lambda: runner.tools.add("gh")

    def test_skips_install_when_present(self, action, account):
        action.run()

        assert not account.ran("sudo")
        assert not account.ran("brew")

    def test_prefers_apt_over_dnf_and_pacman(self, action, runner):
        runner.tools.update({"apt", "dnf", "pacman"})
        runner.respond(["sudo", "apt"], effect=self._installs_gh(runner))

        action.ensure_installed()

        assert runner.ran("sudo", "apt", "install", "-y", "gh")
        assert not runner.ran("sudo", "dnf")
        assert not runner.ran("sudo", "pacman")

    def test_falls_back_to_dnf(self, action, runner):
        runner.tools.update({"dnf", "pacman"})
        runner.respond(["sudo", "dnf"], effect=self._installs_gh(runner))

        action.ensure_installed()

        assert runner.ran("sudo", "dnf", "install", "-y", "gh")
        assert not runner.ran("sudo", "pacman")

    def test_falls_back_to_pacman(self, action, runner):
        runner.tools.add("pacman")
        runner.respond(["sudo", "pacman"], effect=self._installs_gh(runner))

        action.ensure_installed()

        assert runner.ran("sudo", "pacman", "-S", "--noconfirm", "github-cli")

    def test_macos_uses_brew(self, action, context, runner):
        context.platform = "darwin"
        runner.tools.add("brew")
        runner.respond(["brew"], effect=self._installs_gh(runner))

        action.ensure_installed()

        assert runner.ran("brew", "install", "gh")

    @pytest.mark.parametrize("platform", ["freebsd14", "openbsd7"])
    def test_bsd_uses_brew(self, action, context, runner, platform):
        context.platform = platform
        runner.tools.add("brew")
        runner.respond(["brew"], effect=self._installs_gh(runner))

        action.ensure_installed()

        assert runner.ran("brew", "install", "gh")

    def test_macos_without_brew_is_fatal(self, action, context):
        context.platform = "darwin"

        with pytest.raises(UnsupportedEnvironmentError, match="brew"):
            action.ensure_installed()

    def test_linux_without_package_manager_is_fatal(self, action, runner):
        with pytest.raises(UnsupportedEnvironmentError, match="apt, dnf, pacman"):
            action.ensure_installed()

        assert runner.calls == []

    def test_unknown_os_is_fatal(self, action, context):
        context.platform = "win32"

        with pytest.raises(UnsupportedEnvironmentError, match="win32"):
            action.ensure_installed()

    def test_missing_after_install_is_fatal(self, action, runner):
        runner.tools.add("apt")

        with pytest.raises(ToolMissingError, match="gh"):
            action.ensure_installed()

        assert runner.ran("sudo", "apt")


class TestAuthentication:
    """Login flow."""

    def test_logs_in_when_not_authenticated(self, action, account):
        account.respond(["gh", "auth", "status"], returncode=1)

        action.run()

        assert account.ran("gh", "auth", "login")

    def test_skips_login_when_authenticated(self, action, account, output):
        action.run()

        assert not account.ran("gh", "auth", "login")
        assert "Already authenticated" in output()


class TestIdentity:
    """Identity derived from the GitHub account."""

    def test_sets_identity_and_credential_helper(self, action, account, git):
        result = action.run()

        assert git.values["user.name"] == "octocat"
        assert git.values["user.email"] == "octocat@github.com"
        assert git.values["credential.helper"] == "!/usr/bin/gh auth git-credential"
        assert result.details == {"login": "octocat", "email": "octocat@github.com"}

    def test_empty_login_is_fatal(self, action, account, git):
        account.respond(LOGIN_QUERY, stdout="")

        with pytest.raises(MissingValueError, match="login"):
            action.run()

        assert git.values == {}

    def test_empty_email_is_fatal(self, action, account, git):
        account.respond(EMAIL_QUERY, stdout="\n")

        with pytest.raises(MissingValueError, match="email"):
            action.run()

        assert git.values == {}

    def test_failed_api_call_is_fatal(self, action, account, git):
        account.respond(LOGIN_QUERY, returncode=1, stderr="HTTP 401")

        with pytest.raises(MissingValueError):
            action.run()

        assert "user.name" not in git.values

    def test_only_first_email_line_is_used(self, action, account, git):
        account.respond(EMAIL_QUERY, stdout="primary@example.org\nother@example.org\n")

        action.run()

        assert git.values["user.email"] == "primary@example.org"
