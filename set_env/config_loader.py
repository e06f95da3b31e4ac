#!/usr/bin/env python3
"""用户设置读取模块。

- 设置文件为 TOML，默认位于 ``~/.config/set_env/config.toml``
- 可通过环境变量 ``SET_ENV_CONFIG`` 指定其他路径
- 文件不存在时全部使用默认值
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

import toml

from set_env.errors import SetEnvError

logger = logging.getLogger(__name__)

CONFIG_ENV = "SET_ENV_CONFIG"

# 允许的设置项；值为 None 表示使用自动探测
DEFAULT_SETTINGS: Dict[str, Optional[str]] = {
    "shell": None,          # 代替 $SHELL 选择配置文件
    "home": None,           # 代替主目录探测
    "documents_dir": None,  # 代替 Windows 文档目录探测
}


class ConfigLoadError(SetEnvError):
    """用于统一抛出设置加载相关错误。"""


def default_config_path() -> Path:
    override = os.environ.get(CONFIG_ENV)
    if override:
        return Path(override).expanduser()
    try:
        return Path.home() / ".config" / "set_env" / "config.toml"
    except (KeyError, RuntimeError) as exc:
        raise ConfigLoadError("无法确定用户主目录，请用 SET_ENV_CONFIG 指定设置文件") from exc


def load_settings(path: Optional[Path] = None) -> Dict[str, Any]:
    """读取设置文件，返回合并默认值后的字典。"""
    settings: Dict[str, Any] = dict(DEFAULT_SETTINGS)
    cfg_path = path if path is not None else default_config_path()
    if not cfg_path.exists():
        logger.debug("设置文件不存在，使用默认值: %s", cfg_path)
        return settings

    try:
        with cfg_path.open("r", encoding="utf-8") as f:
            data = toml.load(f)
    except (OSError, toml.TomlDecodeError) as exc:
        raise ConfigLoadError(f"读取设置失败: {exc}") from exc

    for key in DEFAULT_SETTINGS:
        if key not in data:
            continue
        value = data[key]
        if not isinstance(value, str):
            raise ConfigLoadError(f"设置项 {key} 必须是字符串: {cfg_path}")
        settings[key] = value

    logger.debug("已加载设置 %s", cfg_path)
    return settings
