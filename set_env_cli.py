#!/usr/bin/env python3
"""永久设置环境变量的命令行工具。

- Unix: 追加 export 行到当前 shell 的配置文件
- Windows: 注入到 Documents/WindowsPowerShell/Profile.ps1
- 示例: ``python set_env_cli.py append PATH '$HOME/bin'``
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from set_env import env_service
from set_env.config_loader import ConfigLoadError, load_settings
from set_env.errors import SetEnvError
from set_env.shells import shell_names
from set_env.version import VERSION

WRITE_COMMANDS = {
    "set": env_service.set,
    "append": env_service.append,
    "prepend": env_service.prepend,
    "check-or-set": env_service.check_or_set,
}


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="永久设置环境变量")
    parser.add_argument("--version", action="version", version=f"%(prog)s {VERSION}")
    parser.add_argument("--config", type=Path, help="设置文件路径 (TOML)")
    parser.add_argument("-v", "--verbose", action="store_true", help="输出调试日志")
    sub = parser.add_subparsers(dest="command", required=True)

    p_get = sub.add_parser("get", help="读取当前进程中的变量")
    p_get.add_argument("var")

    for name, help_text in (
        ("set", "直接写入赋值 (可能重复)"),
        ("append", '写入 export VAR="VALUE:$VAR"'),
        ("prepend", '写入 export VAR="$VAR:VALUE"'),
        ("check-or-set", "变量不存在时才写入"),
    ):
        p = sub.add_parser(name, help=help_text)
        p.add_argument("var")
        p.add_argument("value")

    sub.add_parser(
        "profile",
        help="显示将被写入的配置文件 (支持的 shell: {})".format(", ".join(shell_names())),
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        settings = load_settings(args.config)
    except ConfigLoadError as exc:
        print(f"[Error] {exc}", file=sys.stderr)
        return 1
    env_service.use_backend(env_service.select_backend(settings))

    try:
        if args.command == "get":
            print(env_service.get(args.var))
            return 0

        if args.command == "profile":
            print(env_service.get_backend().profile_path())
            return 0

        target = WRITE_COMMANDS[args.command](args.var, args.value)
    except (SetEnvError, OSError) as exc:
        print(f"[Error] {exc}", file=sys.stderr)
        return 1

    if target is None:
        print(f"# {args.var} 已存在，未写入")
        return 0

    print(f"已写入配置: {args.var}")
    print(f"目标文件: {target}")
    if isinstance(env_service.get_backend(), env_service.WindowsProfileBackend):
        print("请重新打开 PowerShell 使其生效")
    else:
        print(f"请执行: source {target}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
