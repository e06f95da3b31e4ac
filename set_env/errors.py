#!/usr/bin/env python3
"""统一的异常类型。

文件读写失败直接抛出 ``OSError``，这里只定义本项目特有的错误。
"""

from __future__ import annotations


class SetEnvError(RuntimeError):
    """所有 set_env 错误的基类。"""


class VariableNotFoundError(SetEnvError):
    """当前进程中不存在该环境变量。"""


class UnsupportedValueError(SetEnvError):
    """环境变量的值不是合法文本（编码不支持）。"""


class UnsupportedShellError(SetEnvError):
    """SHELL 不在已知 shell 列表中。"""


class NoHomeDirectoryError(SetEnvError):
    """无法确定用户主目录。"""


class CorruptProfileError(SetEnvError):
    """PowerShell 配置脚本缺少结束标记，无法注入。"""
