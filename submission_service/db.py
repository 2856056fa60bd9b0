from __future__ import annotations

# submission_service/db.py
import os
import sqlite3
from contextlib import contextmanager
from typing import Callable, ContextManager, Iterator

from .config import get_config
from .errors import DuplicateKeyError, StorageError, ValidationError

# DB 路径解析顺序：
# 1) 环境变量 SUBMISSION_DB_PATH（最高优先级，由 get_config 合并）
# 2) config.yaml 的 test_db_path（当检测到测试环境时）
# 3) config.yaml 的 db_path（生产默认）
# 4) 兜底：项目根 submission_service.db
_PROJECT_ROOT = os.path.dirname(os.path.dirname(__file__))
_ROOT_DB = os.path.join(_PROJECT_ROOT, "submission_service.db")

ConnFactory = Callable[[], ContextManager[sqlite3.Connection]]


def get_db_path(_: str | None = None) -> str:
    env_path = os.environ.get("SUBMISSION_DB_PATH")
    cfg = get_config()
    is_test = (os.environ.get("APP_ENV") == "test") or (os.environ.get("PYTEST_CURRENT_TEST") is not None)

    if env_path:
        path = env_path
    elif is_test and cfg["test_db_path"]:
        path = cfg["test_db_path"]
    elif cfg["db_path"]:
        path = cfg["db_path"]
    else:
        path = _ROOT_DB

    # 确保目录存在
    dirn = os.path.dirname(path) or "."
    os.makedirs(dirn, exist_ok=True)
    return path


@contextmanager
def get_conn(db_path: str | None = None) -> Iterator[sqlite3.Connection]:
    """
    获取 SQLite 连接。优先使用显式传入的 db_path，否则走 get_db_path()。
    打开 foreign_keys，设置 row_factory 为 Row。每次调用一个连接，不做池化。
    """
    path = db_path or get_db_path()
    try:
        conn = sqlite3.connect(
            path,
            check_same_thread=False,
            isolation_level=None,
        )
    except sqlite3.Error as e:
        raise StorageError(f"cannot open store {path}: {e}") from e
    try:
        conn.execute("PRAGMA foreign_keys = ON;")
        conn.row_factory = sqlite3.Row
        yield conn
    finally:
        conn.close()


@contextmanager
def storage_errors(action: str) -> Iterator[None]:
    """Translate sqlite3 exceptions raised inside the block into service errors."""
    try:
        yield
    except sqlite3.IntegrityError as e:
        msg = str(e)
        if msg.startswith("UNIQUE") or "PRIMARY KEY" in msg:
            # "UNIQUE constraint failed: participants.email"
            cols = msg.split(":", 1)[1].strip() if ":" in msg else msg
            raise DuplicateKeyError(f"{action}: duplicate key ({cols})") from e
        if msg.startswith(("FOREIGN KEY", "NOT NULL", "CHECK")):
            raise ValidationError(f"{action}: {msg}") from e
        raise StorageError(f"{action}: {msg}") from e
    except sqlite3.Error as e:
        raise StorageError(f"{action}: {e}") from e
    except OverflowError as e:
        # 绑定参数超出 SQLite 64 位整数范围
        raise ValidationError(f"{action}: {e}") from e
