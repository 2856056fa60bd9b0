from __future__ import annotations

# submission_service/config.py
import os
import yaml

# 配置来源：
# 1) 环境变量（最高优先级）
# 2) SUBMISSION_CONFIG 指向的 YAML，缺省为项目根 config.yaml
# 3) DEFAULTS
_PROJECT_ROOT = os.path.dirname(os.path.dirname(__file__))

UPDATE_POLICIES = ("silent", "conflict")

DEFAULTS = {
    "db_path": None,
    "test_db_path": None,
    "owner_id": "",
    # Submitted 之后的 update：silent 静默返回原记录；conflict 抛 ConflictError
    "submission_update_policy": "silent",
    "allow_drafts_on_closed_events": True,
    "log_level": "INFO",
}

_ENV_OVERRIDES = {
    "db_path": "SUBMISSION_DB_PATH",
    "owner_id": "SUBMISSION_OWNER_ID",
    "submission_update_policy": "SUBMISSION_UPDATE_POLICY",
    "log_level": "SUBMISSION_LOG_LEVEL",
}


def config_path() -> str:
    return os.environ.get("SUBMISSION_CONFIG") or os.path.join(_PROJECT_ROOT, "config.yaml")


def read_config_yaml() -> dict:
    cfg_path = config_path()
    if not os.path.exists(cfg_path):
        return {}
    try:
        with open(cfg_path, "r", encoding="utf-8") as f:
            cfg = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError):
        return {}
    if not isinstance(cfg, dict):
        return {}
    return {k: v for k, v in cfg.items() if k in DEFAULTS}


def _to_bool(v, default: bool) -> bool:
    if isinstance(v, bool):
        return v
    if isinstance(v, str):
        s = v.strip().lower()
        if s in ("1", "true", "yes", "on"):
            return True
        if s in ("0", "false", "no", "off"):
            return False
    return default


def get_config() -> dict:
    cfg = read_config_yaml()
    for key, env in _ENV_OVERRIDES.items():
        v = os.environ.get(env)
        if v:
            cfg[key] = v

    def _str_or_none(k):
        v = cfg.get(k)
        return v.strip() if isinstance(v, str) and v.strip() else None

    policy = str(cfg.get("submission_update_policy") or DEFAULTS["submission_update_policy"]).strip().lower()
    if policy not in UPDATE_POLICIES:
        policy = DEFAULTS["submission_update_policy"]

    return {
        "db_path": _str_or_none("db_path"),
        "test_db_path": _str_or_none("test_db_path"),
        "owner_id": str(cfg.get("owner_id") or DEFAULTS["owner_id"]).strip(),
        "submission_update_policy": policy,
        "allow_drafts_on_closed_events": _to_bool(
            cfg.get("allow_drafts_on_closed_events"), DEFAULTS["allow_drafts_on_closed_events"]
        ),
        "log_level": str(cfg.get("log_level") or DEFAULTS["log_level"]).strip().upper(),
    }
