from __future__ import annotations

from .config import get_config

NOT_OWNER_MSG = "You are not the owner!"


def is_owner(caller_id: str | None) -> bool:
    """Caller identity is authenticated upstream; only compare it to the configured owner."""
    owner = get_config()["owner_id"]
    if not owner or not caller_id:
        return False
    return caller_id.strip() == owner
