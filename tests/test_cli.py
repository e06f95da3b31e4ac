"""
命令行入口 set_env_cli 的测试。
"""

import sys
from pathlib import Path

import pytest

import set_env_cli

pytestmark = pytest.mark.skipif(sys.platform == "win32", reason="POSIX only")


@pytest.fixture
def zsh(fake_home: Path, monkeypatch) -> Path:
    monkeypatch.setenv("SHELL", "/bin/zsh")
    monkeypatch.delenv("DUMMY", raising=False)
    return fake_home


class TestCli:
    def test_set(self, zsh: Path, capsys):
        assert set_env_cli.main(["set", "DUMMY", "1"]) == 0
        assert (zsh / ".zprofile").read_text() == "export DUMMY=1\n"
        out = capsys.readouterr().out
        assert f"source {zsh / '.zprofile'}" in out

    def test_append(self, zsh: Path):
        assert set_env_cli.main(["append", "PATH", "$HOME/bin"]) == 0
        assert (zsh / ".zprofile").read_text() == 'export PATH="$HOME/bin:$PATH"\n'

    def test_check_or_set_existing(self, zsh: Path, monkeypatch, capsys):
        monkeypatch.setenv("DUMMY", "x")
        assert set_env_cli.main(["check-or-set", "DUMMY", "1"]) == 0
        assert not (zsh / ".zprofile").exists()
        assert "已存在" in capsys.readouterr().out

    def test_get_missing(self, zsh: Path, capsys):
        assert set_env_cli.main(["get", "DUMMY"]) == 1
        assert "[Error]" in capsys.readouterr().err

    def test_get_present(self, zsh: Path, monkeypatch, capsys):
        monkeypatch.setenv("DUMMY", "abc")
        assert set_env_cli.main(["get", "DUMMY"]) == 0
        assert capsys.readouterr().out.strip() == "abc"

    def test_profile(self, zsh: Path, capsys):
        (zsh / ".zshrc").write_text("")
        assert set_env_cli.main(["profile"]) == 0
        assert capsys.readouterr().out.strip() == str(zsh / ".zshrc")

    def test_config_overrides_shell(self, zsh: Path, tmp_path: Path):
        config = tmp_path / "settings.toml"
        config.write_text('shell = "/bin/bash"\n')
        assert set_env_cli.main(["--config", str(config), "set", "DUMMY", "1"]) == 0
        assert (zsh / ".bash_profile").read_text() == "export DUMMY=1\n"

    def test_bad_config(self, zsh: Path, tmp_path: Path, capsys):
        config = tmp_path / "settings.toml"
        config.write_text('shell = "unterminated\n')
        assert set_env_cli.main(["--config", str(config), "set", "DUMMY", "1"]) == 1
        assert "[Error]" in capsys.readouterr().err

    def test_write_failure_reported(self, zsh: Path, capsys):
        (zsh / ".zprofile").mkdir()
        assert set_env_cli.main(["set", "DUMMY", "1"]) == 1
        assert "[Error]" in capsys.readouterr().err

    def test_profile_on_windows_shows_script_path(self, zsh: Path, tmp_path: Path, monkeypatch, capsys):
        """Windows 下显示真实的 Profile.ps1 路径，不创建文件。"""
        docs = tmp_path / "Docs"
        config = tmp_path / "settings.toml"
        config.write_text(f'documents_dir = "{docs.as_posix()}"\n')
        monkeypatch.setattr(set_env_cli.env_service.platform, "system", lambda: "Windows")

        assert set_env_cli.main(["--config", str(config), "profile"]) == 0
        assert capsys.readouterr().out.strip() == str(docs / "WindowsPowerShell" / "Profile.ps1")
        assert not docs.exists()

    def test_profile_help_lists_shells(self, capsys):
        with pytest.raises(SystemExit):
            set_env_cli.main(["--help"])
        out = capsys.readouterr().out
        for name in ("zsh", "fish", "bash"):
            assert name in out
