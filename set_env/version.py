"""版本号，写入 Windows 配置模板，用于判断是否需要刷新模板。"""

VERSION = "0.3.0"
