"""
测试共用的 fixture。
"""

from pathlib import Path

import pytest

from set_env import env_service


@pytest.fixture
def fake_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """临时主目录，HOME 指向它。"""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("USERPROFILE", str(home))
    monkeypatch.setenv("SET_ENV_CONFIG", str(tmp_path / "no-such-config.toml"))
    return home


@pytest.fixture
def documents(tmp_path: Path) -> Path:
    """尚不存在的文档目录。"""
    return tmp_path / "Documents"


@pytest.fixture(autouse=True)
def reset_backend():
    """每个测试结束后清掉缓存的持久化方式。"""
    yield
    env_service.use_backend(None)
