"""Tests for package.json diffing and the package manager invocation."""

from pathlib import Path

from suiflow.core.config import ProjectConfig
from suiflow.core.context import SuiflowContext
from suiflow.core.packages import (
    ensure_packages_installed,
    find_missing_packages,
    read_declared_dependencies,
)
from tests.fakes.shell import FakeShell
from tests.fakes.user_feedback import FakeUserFeedback


def write_manifest(project: Path, text: str) -> None:
    (project / "package.json").write_text(text, encoding="utf-8")


def test_read_declared_dependencies_merges_dev_dependencies(tmp_path: Path) -> None:
    write_manifest(
        tmp_path,
        '{"dependencies": {"next": "14"}, "devDependencies": {"typescript": "5"},'
        ' "peerDependencies": {"react": "18"}}',
    )

    assert read_declared_dependencies(tmp_path) == {"next", "typescript"}


def test_read_declared_dependencies_without_sections(tmp_path: Path) -> None:
    write_manifest(tmp_path, '{"name": "empty"}')

    assert read_declared_dependencies(tmp_path) == set()


def test_read_declared_dependencies_missing_file(tmp_path: Path) -> None:
    assert read_declared_dependencies(tmp_path) is None


def test_read_declared_dependencies_invalid_json(tmp_path: Path) -> None:
    write_manifest(tmp_path, "{not json")

    assert read_declared_dependencies(tmp_path) is None


def test_find_missing_packages_is_sorted_difference() -> None:
    missing = find_missing_packages({"lucide-react", "date-fns", "next"}, {"next"})

    assert missing == ["date-fns", "lucide-react"]


def test_find_missing_packages_without_manifest() -> None:
    assert find_missing_packages(["b", "a"], None) == ["a", "b"]


def test_ensure_packages_installed_runs_one_command(tmp_path: Path) -> None:
    write_manifest(tmp_path, '{"dependencies": {"clsx": "2"}}')
    shell = FakeShell()
    ctx = SuiflowContext.for_test(shell=shell, cwd=tmp_path)

    installed = ensure_packages_installed(ctx, {"clsx", "date-fns", "@mysten/dapp-kit"})

    assert installed == ["@mysten/dapp-kit", "date-fns"]
    assert shell.command_calls == [
        (["npm", "install", "@mysten/dapp-kit", "date-fns", "--save"], tmp_path)
    ]


def test_ensure_packages_installed_uses_configured_package_manager(tmp_path: Path) -> None:
    write_manifest(tmp_path, "{}")
    shell = FakeShell()
    ctx = SuiflowContext.for_test(
        shell=shell, cwd=tmp_path, config=ProjectConfig(package_manager="pnpm")
    )

    ensure_packages_installed(ctx, {"date-fns"})

    assert shell.command_calls == [(["pnpm", "add", "date-fns"], tmp_path)]


def test_ensure_packages_installed_nothing_to_do(tmp_path: Path) -> None:
    write_manifest(tmp_path, '{"dependencies": {"date-fns": "3"}}')
    shell = FakeShell()
    feedback = FakeUserFeedback()
    ctx = SuiflowContext.for_test(shell=shell, feedback=feedback, cwd=tmp_path)

    assert ensure_packages_installed(ctx, {"date-fns"}) == []
    assert ensure_packages_installed(ctx, set()) == []
    assert shell.command_calls == []
    assert feedback.messages == []


def test_ensure_packages_installed_missing_manifest_reports_once(tmp_path: Path) -> None:
    shell = FakeShell()
    feedback = FakeUserFeedback()
    ctx = SuiflowContext.for_test(shell=shell, feedback=feedback, cwd=tmp_path)

    installed = ensure_packages_installed(ctx, {"react-hot-toast"})

    assert installed == ["react-hot-toast"]
    assert feedback.texts("error") == ["package.json not found in the project directory."]


def test_ensure_packages_installed_reports_failure(tmp_path: Path) -> None:
    write_manifest(tmp_path, "{}")
    shell = FakeShell(command_error="npm ERR! code E404")
    feedback = FakeUserFeedback()
    ctx = SuiflowContext.for_test(shell=shell, feedback=feedback, cwd=tmp_path)

    installed = ensure_packages_installed(ctx, {"not-a-real-package"})

    assert installed == []
    assert len(shell.command_calls) == 1
    errors = feedback.texts("error")
    assert len(errors) == 1
    assert "npm ERR! code E404" in errors[0]


def test_read_declared_dependencies_limited_to_sections(tmp_path: Path) -> None:
    write_manifest(
        tmp_path, '{"dependencies": {"react": "18"}, "devDependencies": {"next": "14"}}'
    )

    assert read_declared_dependencies(tmp_path, sections=("dependencies",)) == {"react"}


def test_ensure_packages_installed_without_packages_skips_manifest(tmp_path: Path) -> None:
    """Test that a missing package.json is not reported when nothing is required."""
    shell = FakeShell()
    feedback = FakeUserFeedback()
    ctx = SuiflowContext.for_test(shell=shell, feedback=feedback, cwd=tmp_path)

    assert ensure_packages_installed(ctx, []) == []
    assert shell.command_calls == []
    assert feedback.messages == []
