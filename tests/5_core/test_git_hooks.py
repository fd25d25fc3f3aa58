# tests/5_core/test_git_hooks.py

import os
import stat
from pathlib import Path

import pytest

import convene.resources as mod_resources
from convene.errors import ConfigurationError


def test_hooks_dir_for_regular_checkout(tmp_path: Path) -> None:
    (tmp_path / ".git").mkdir()

    assert mod_resources.resolve_hooks_dir(tmp_path) == tmp_path / ".git" / "hooks"


def test_hooks_dir_none_without_git(tmp_path: Path) -> None:
    assert mod_resources.resolve_hooks_dir(tmp_path) is None


def test_hooks_dir_follows_relative_pointer_file(tmp_path: Path) -> None:
    # --- setup ---
    (tmp_path / ".git-worktree").mkdir()
    (tmp_path / ".git").write_text("gitdir: .git-worktree\n")

    # --- execute ---
    result = mod_resources.resolve_hooks_dir(tmp_path)

    # --- verify ---
    assert result == (tmp_path / ".git-worktree" / "hooks").resolve()


def test_hooks_dir_uses_commondir_of_linked_worktree(tmp_path: Path) -> None:
    # --- setup ---
    main_git = tmp_path / "main" / ".git"
    worktree_git = main_git / "worktrees" / "feature"
    worktree_git.mkdir(parents=True)
    (worktree_git / "commondir").write_text("../..\n")
    checkout = tmp_path / "feature"
    checkout.mkdir()
    (checkout / ".git").write_text(f"gitdir: {worktree_git}\n")

    # --- execute ---
    result = mod_resources.resolve_hooks_dir(checkout)

    # --- verify ---
    assert result == (main_git / "hooks").resolve()


def test_hooks_dir_rejects_pointer_without_gitdir(tmp_path: Path) -> None:
    (tmp_path / ".git").write_text("something else\n")

    with pytest.raises(ConfigurationError, match="gitdir:"):
        mod_resources.resolve_hooks_dir(tmp_path)


def test_install_git_hooks_writes_executable_bundled_hook(tmp_path: Path) -> None:
    # --- setup ---
    (tmp_path / ".git").mkdir()

    # --- execute ---
    installed = mod_resources.install_git_hooks(tmp_path)

    # --- verify ---
    assert installed == tmp_path / ".git" / "hooks" / "pre-commit"
    assert installed.read_bytes() == mod_resources.load_bundled_resource(
        "git-hooks/pre-commit"
    )
    if os.name == "posix":
        assert stat.S_IMODE(installed.stat().st_mode) == 0o755


def test_install_git_hooks_prefers_project_script(tmp_path: Path) -> None:
    # --- setup ---
    (tmp_path / ".git-worktree").mkdir()
    (tmp_path / ".git").write_text("gitdir: .git-worktree\n")
    script = tmp_path / "scripts" / "git-hooks" / "pre-commit"
    script.parent.mkdir(parents=True)
    script.write_text("#!/bin/sh\necho custom\n")

    # --- execute ---
    installed = mod_resources.install_git_hooks(tmp_path)

    # --- verify ---
    assert installed is not None
    assert installed == (tmp_path / ".git-worktree" / "hooks" / "pre-commit").resolve()
    assert installed.read_text() == "#!/bin/sh\necho custom\n"


def test_install_git_hooks_skips_outside_checkout(
    tmp_path: Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    # --- execute ---
    result = mod_resources.install_git_hooks(tmp_path)

    # --- verify ---
    assert result is None
    assert "skipping hook installation" in capsys.readouterr().out
    assert not (tmp_path / ".git").exists()
