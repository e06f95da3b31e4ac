#!/usr/bin/env python3
"""Unix shell 配置文件的定位与追加写入。"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional

from set_env.errors import NoHomeDirectoryError, UnsupportedShellError
from set_env.shells import resolve_shell

logger = logging.getLogger(__name__)

FALLBACK_PROFILE = ".profile"


def home_dir() -> Path:
    """返回用户主目录，无法确定时抛出 NoHomeDirectoryError。"""
    try:
        return Path.home()
    except (KeyError, RuntimeError) as exc:
        raise NoHomeDirectoryError("无法确定用户主目录") from exc


def find_profile(home: Path, shell_env: Optional[str] = None) -> Path:
    """找到当前 shell 应写入的配置文件路径。

    - 已存在的候选文件优先，按表中顺序取第一个
    - 位于子目录的候选（如 fish）不存在时，创建其父目录后直接返回
    - 都不存在时返回第一个候选；不认识的 shell 退回 ``~/.profile``
    """
    if shell_env is None:
        shell_env = os.environ.get("SHELL", "")

    try:
        shell = resolve_shell(shell_env)
    except UnsupportedShellError:
        logger.debug("SHELL=%r 不在已知列表中，使用 %s", shell_env, FALLBACK_PROFILE)
        return home / FALLBACK_PROFILE

    for config_file in shell.config_files:
        config_path = home.joinpath(*config_file.split("/"))
        if config_path.is_file():
            logger.debug("使用已存在的配置文件 %s", config_path)
            return config_path

        if "/" in config_file:
            # 文件本身交给写入时创建
            config_path.parent.mkdir(parents=True, exist_ok=True)
            logger.debug("已创建目录 %s", config_path.parent)
            return config_path

    default = home / shell.config_files[0]
    logger.debug("没有已存在的 %s 配置文件，默认使用 %s", shell.name, default)
    return default


def append_line(path: Path, line: str) -> None:
    """以追加模式写入一行，文件不存在时创建，不做去重。"""
    needs_separator = False
    if path.is_file() and path.stat().st_size > 0:
        with path.open("rb") as f:
            f.seek(-1, os.SEEK_END)
            needs_separator = f.read(1) != b"\n"

    with path.open("a", encoding="utf-8") as f:
        if needs_separator:
            f.write("\n")  # 保证不和用户最后一行粘连
        f.write(line + "\n")
        f.flush()
    logger.debug("已写入 %s: %s", path, line)
