from __future__ import annotations

import logging

from ..db import ConnFactory, get_conn
from ..repository import schema_repo

logger = logging.getLogger(__name__)


def initialize(connect: ConnFactory = get_conn):
    """建表（幂等）。调用前由边界层完成 owner 校验。"""
    with connect() as conn:
        schema_repo.ensure_schema(conn)
        conn.commit()
    logger.info("schema initialized")


def reset(connect: ConnFactory = get_conn):
    """删除全部业务表（含 submission_team），不可恢复。"""
    with connect() as conn:
        schema_repo.drop_schema(conn)
        conn.commit()
    logger.warning("schema reset: all service tables dropped")


def schema_tables(connect: ConnFactory = get_conn) -> list[str]:
    with connect() as conn:
        return schema_repo.existing_tables(conn)
