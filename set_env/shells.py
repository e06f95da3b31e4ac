#!/usr/bin/env python3
"""已知 shell 及其配置文件列表。

顺序有意义：每个 shell 的候选文件按优先级排列，第一个优先。
"""

from __future__ import annotations

from typing import List, NamedTuple, Tuple

from set_env.errors import UnsupportedShellError


class ShellDescriptor(NamedTuple):
    name: str
    config_files: Tuple[str, ...]


SHELLS: Tuple[ShellDescriptor, ...] = (
    ShellDescriptor("zsh", (".zprofile", ".zshrc", ".zlogin")),
    ShellDescriptor("fish", (".config/fish/config.fish",)),
    ShellDescriptor("tcsh", (".tcshrc", ".cshrc", ".login")),
    ShellDescriptor("csh", (".tcshrc", ".cshrc", ".login")),
    ShellDescriptor("ksh", (".profile", ".kshrc")),
    ShellDescriptor("bash", (".bash_profile", ".bash_login", ".bashrc")),
)


def resolve_shell(shell_env: str) -> ShellDescriptor:
    """按表顺序返回第一个名字出现在 ``shell_env`` 中的 shell。"""
    for shell in SHELLS:
        if shell.name in shell_env:
            return shell
    raise UnsupportedShellError(f"不支持的 shell: {shell_env or '<未设置>'}")


def shell_names() -> List[str]:
    return [s.name for s in SHELLS]
