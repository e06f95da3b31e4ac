#!/usr/bin/env python3
"""Windows PowerShell 配置脚本的维护与注入。

配置脚本位于 ``<文档>/WindowsPowerShell/Profile.ps1``，内容是带版本号的模板。
每次写入前先确认模板存在且版本一致，然后把 ``setenv_*`` 语句插到结束标记之前。
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import List, Optional

from set_env.errors import CorruptProfileError, NoHomeDirectoryError
from set_env.version import VERSION

logger = logging.getLogger(__name__)

# PyInstaller 打包后 __file__ 指向临时解压目录，需要用 sys.executable 获取真实路径
if getattr(sys, 'frozen', False):
    _BASE_DIR = Path(sys.executable).resolve().parent
else:
    _BASE_DIR = Path(__file__).resolve().parent

TEMPLATE_FILE = _BASE_DIR / "profile.ps1"
VERSION_PLACEHOLDER = "${VER}"

VERSION_PREFIX = "# ----------------------------------VER"
DEFS_END = "# ----------------------------------SET_ENV_DEFS_END"
LINE_SEP = "\r\n"

PROFILE_DIR = "WindowsPowerShell"
PROFILE_NAME = "Profile.ps1"


def documents_dir() -> Path:
    """返回用户的“文档”目录。"""
    try:
        return Path.home() / "Documents"
    except (KeyError, RuntimeError) as exc:
        raise NoHomeDirectoryError("无法确定文档目录") from exc


def profile_path(documents: Optional[Path] = None) -> Path:
    """返回配置脚本路径，不创建任何文件。"""
    if documents is None:
        documents = documents_dir()
    return documents / PROFILE_DIR / PROFILE_NAME


def render_template(version: str = VERSION) -> str:
    """读取模板并填入版本号，换行统一为 CRLF。"""
    raw = TEMPLATE_FILE.read_text(encoding="utf-8")
    body = raw.replace(VERSION_PLACEHOLDER, version)
    return LINE_SEP.join(body.splitlines()) + LINE_SEP


def read_version(content: str) -> Optional[str]:
    """返回版本行中的版本号，没有版本行时返回 None。"""
    for line in content.splitlines():
        if line.startswith(VERSION_PREFIX):
            return line[len(VERSION_PREFIX):].strip()
    return None


def _read(path: Path) -> str:
    with path.open("r", encoding="utf-8", newline="") as f:
        return f.read()


def _write(path: Path, content: str) -> None:
    with path.open("w", encoding="utf-8", newline="") as f:
        f.write(content)


def ensure_profile(documents: Path, version: str = VERSION) -> Path:
    """保证配置脚本存在且模板版本与当前版本一致，返回脚本路径。"""
    profile_dir = documents / PROFILE_DIR
    if not profile_dir.exists():
        profile_dir.mkdir(parents=True)
        logger.debug("已创建目录 %s", profile_dir)

    script_path = profile_dir / PROFILE_NAME
    if not script_path.exists():
        _write(script_path, render_template(version))
        logger.debug("已写入模板 %s (VER%s)", script_path, version)
        return script_path

    try:
        current = read_version(_read(script_path))
    except UnicodeDecodeError:
        # 不是本工具写出的 UTF-8 文件，按缺少版本行处理
        logger.debug("%s 不是 UTF-8 编码，重新写入模板", script_path)
        current = None
    if current != version:
        # 版本行缺失或版本不同，整个文件换成新模板
        _write(script_path, render_template(version))
        logger.info("模板已从 %s 更新到 %s: %s", current, version, script_path)
    return script_path


def do_prerequisites(documents: Optional[Path] = None, version: str = VERSION) -> Path:
    """准备配置脚本，失败时直接退出进程。"""
    try:
        if documents is None:
            documents = documents_dir()
        return ensure_profile(documents, version)
    except (NoHomeDirectoryError, OSError) as exc:
        print(f"[Error] 无法准备 PowerShell 配置脚本: {exc}", file=sys.stderr)
        sys.exit(1)


def insert_before_end(content: str, line: str) -> str:
    """在结束标记之前插入一行，找不到结束标记时抛出 CorruptProfileError。"""
    parts: List[str] = content.split(LINE_SEP)
    try:
        idx = parts.index(DEFS_END)
    except ValueError:
        raise CorruptProfileError(f"配置脚本缺少结束标记: {DEFS_END}") from None
    parts.insert(idx, line)
    return LINE_SEP.join(parts)


def inject(line: str, documents: Optional[Path] = None, version: str = VERSION) -> Path:
    """把一条 ``setenv_*`` 语句注入配置脚本，返回脚本路径。"""
    script_path = do_prerequisites(documents, version)
    content = _read(script_path)
    _write(script_path, insert_before_end(content, line))
    logger.debug("已注入 %s: %s", script_path, line)
    return script_path
