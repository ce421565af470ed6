from __future__ import annotations

# catalog/config.py
import os
from dataclasses import dataclass

import yaml

# Resolution order for every key:
# 1) environment variable CATALOG_<KEY> (highest priority)
# 2) config.yaml (path overridable via CATALOG_CONFIG)
# 3) built-in defaults below
_PROJECT_ROOT = os.path.dirname(os.path.dirname(__file__))

DEFAULTS = {
    "racing_db_path": os.path.join("db", "racing.db"),
    "sporting_db_path": os.path.join("db", "sporting.db"),
    "racing_endpoint": "localhost:9000",
    "sporting_endpoint": "localhost:9001",
    "api_endpoint": "localhost:8000",
    "log_level": "INFO",
    "rpc_timeout_seconds": "5.0",
}

ENV_VARS = {
    "racing_db_path": "CATALOG_RACING_DB_PATH",
    "sporting_db_path": "CATALOG_SPORTING_DB_PATH",
    "racing_endpoint": "CATALOG_RACING_ENDPOINT",
    "sporting_endpoint": "CATALOG_SPORTING_ENDPOINT",
    "api_endpoint": "CATALOG_API_ENDPOINT",
    "log_level": "CATALOG_LOG_LEVEL",
    "rpc_timeout_seconds": "CATALOG_RPC_TIMEOUT",
}


@dataclass(frozen=True)
class Settings:
    racing_db_path: str
    sporting_db_path: str
    racing_endpoint: str
    sporting_endpoint: str
    api_endpoint: str
    log_level: str
    rpc_timeout_seconds: float

    def db_path_for(self, kind_name: str) -> str:
        return self.racing_db_path if kind_name == "races" else self.sporting_db_path

    def endpoint_for(self, kind_name: str) -> str:
        return self.racing_endpoint if kind_name == "races" else self.sporting_endpoint


def config_path() -> str:
    return os.environ.get("CATALOG_CONFIG") or os.path.join(_PROJECT_ROOT, "config.yaml")


def _read_config_yaml(path: str | None = None) -> dict:
    cfg_path = path or config_path()
    if not os.path.exists(cfg_path):
        return {}
    try:
        with open(cfg_path, "r", encoding="utf-8") as f:
            cfg = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError):
        return {}
    if not isinstance(cfg, dict):
        return {}
    out = {}
    for k in DEFAULTS:
        v = cfg.get(k)
        if v is None:
            continue
        v = str(v).strip()
        if v:
            out[k] = v
    return out


def load_settings(path: str | None = None) -> Settings:
    """Merge defaults, config.yaml and CATALOG_* environment variables."""
    values = dict(DEFAULTS)
    values.update(_read_config_yaml(path))
    for key, env in ENV_VARS.items():
        v = os.environ.get(env)
        if v:
            values[key] = v
    try:
        timeout = float(values["rpc_timeout_seconds"])
    except ValueError:
        timeout = float(DEFAULTS["rpc_timeout_seconds"])
    return Settings(
        racing_db_path=values["racing_db_path"],
        sporting_db_path=values["sporting_db_path"],
        racing_endpoint=values["racing_endpoint"],
        sporting_endpoint=values["sporting_endpoint"],
        api_endpoint=values["api_endpoint"],
        log_level=values["log_level"].upper(),
        rpc_timeout_seconds=timeout,
    )


def split_endpoint(endpoint: str) -> tuple[str, int]:
    """'localhost:9000' -> ('localhost', 9000)."""
    host, _, port = endpoint.rpartition(":")
    return (host or "127.0.0.1"), int(port)
