#!/usr/bin/env python3
"""环境变量处理与持久化模块。

对外提供 get / check_or_set / set / append / prepend。
Unix 下追加 export 行到 shell 配置文件，Windows 下注入 PowerShell 配置脚本。
``set`` 不检查变量是否已存在，重复调用会留下多条赋值，除非确定变量不存在，
请使用 ``check_or_set``。
"""

from __future__ import annotations

import logging
import os
import platform
from enum import Enum
from pathlib import Path
from typing import Any, Dict, NamedTuple, Optional

from set_env import profile, windows
from set_env.config_loader import load_settings
from set_env.errors import UnsupportedValueError, VariableNotFoundError
from set_env.version import VERSION

logger = logging.getLogger(__name__)


class Operation(str, Enum):
    SET = "set"
    APPEND = "append"
    PREPEND = "prepend"


class VariableAssignment(NamedTuple):
    name: str
    operation: Operation
    value: str

    def export_line(self) -> str:
        """构造 shell 的 export 行。"""
        if self.operation is Operation.APPEND:
            return f'export {self.name}="{self.value}:${self.name}"'
        if self.operation is Operation.PREPEND:
            return f'export {self.name}="${self.name}:{self.value}"'
        return f"export {self.name}={self.value}"

    def powershell_line(self) -> str:
        """构造模板中 setenv_* 函数的调用语句。"""
        return f"setenv_{self.operation.value} {self.name} {self.value}"


class PersistBackend:
    """把一条赋值写入持久化位置，返回被修改的文件。"""

    def profile_path(self) -> Path:
        raise NotImplementedError

    def persist(self, assignment: VariableAssignment) -> Path:
        raise NotImplementedError


class UnixProfileBackend(PersistBackend):
    def __init__(self, home: Optional[Path] = None, shell_env: Optional[str] = None) -> None:
        self.home = home
        self.shell_env = shell_env

    def profile_path(self) -> Path:
        home = self.home if self.home is not None else profile.home_dir()
        return profile.find_profile(home, self.shell_env)

    def persist(self, assignment: VariableAssignment) -> Path:
        path = self.profile_path()
        profile.append_line(path, assignment.export_line())
        return path


class WindowsProfileBackend(PersistBackend):
    def __init__(self, documents: Optional[Path] = None, version: str = VERSION) -> None:
        self.documents = documents
        self.version = version

    def profile_path(self) -> Path:
        return windows.profile_path(self.documents)

    def persist(self, assignment: VariableAssignment) -> Path:
        return windows.inject(assignment.powershell_line(), self.documents, self.version)


def _optional_path(value: Optional[str]) -> Optional[Path]:
    return Path(value).expanduser() if value else None


def select_backend(
    settings: Optional[Dict[str, Any]] = None,
    system: Optional[str] = None,
) -> PersistBackend:
    """按平台选择持久化方式。"""
    settings = settings or {}
    system = system or platform.system()
    if system == "Windows":
        return WindowsProfileBackend(_optional_path(settings.get("documents_dir")))
    return UnixProfileBackend(_optional_path(settings.get("home")), settings.get("shell"))


_backend: Optional[PersistBackend] = None


def get_backend() -> PersistBackend:
    """返回当前进程使用的持久化方式，首次调用时按设置文件选择。"""
    global _backend
    if _backend is None:
        _backend = select_backend(load_settings())
        logger.debug("持久化方式: %s", type(_backend).__name__)
    return _backend


def use_backend(backend: Optional[PersistBackend]) -> None:
    """替换持久化方式；传 None 则下次调用时重新选择。"""
    global _backend
    _backend = backend


def get(var: str) -> str:
    """读取当前进程中的环境变量。"""
    value = os.environ.get(var)
    if value is None:
        raise VariableNotFoundError(f"环境变量不存在: {var}")
    try:
        value.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise UnsupportedValueError(f"环境变量 {var} 的编码不受支持") from exc
    return value


def _persist(var: str, operation: Operation, value: Any) -> Path:
    assignment = VariableAssignment(str(var), operation, str(value))
    return get_backend().persist(assignment)


def check_or_set(var: str, value: Any) -> Optional[Path]:
    """变量已存在时什么也不做，否则写入配置。"""
    try:
        get(var)
    except (VariableNotFoundError, UnsupportedValueError):
        return set(var, value)
    logger.debug("%s 已存在，跳过写入", var)
    return None


def set(var: str, value: Any) -> Path:
    """不检查是否已存在，直接写入赋值。"""
    return _persist(var, Operation.SET, value)


def append(var: str, value: Any) -> Path:
    """把值加到变量已有内容之前，常用于 PATH。"""
    return _persist(var, Operation.APPEND, value)


def prepend(var: str, value: Any) -> Path:
    """把已有内容放在值之前。"""
    return _persist(var, Operation.PREPEND, value)
