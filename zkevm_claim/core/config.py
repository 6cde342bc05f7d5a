import json
import os
from pathlib import Path
from typing import Any

from zkevm_claim.core.constants.base import (
    DEFAULT_BRIDGE_API_BASE_URL,
    DEFAULT_HTTP_TIMEOUT,
)

_CONFIG_ENV_KEYS = ("ZKEVM_CLAIM_CONFIG_PATH", "ZKEVM_CLAIM_CONFIG")
_DEFAULT_CONFIG_FILENAME = "config.json"
_BRIDGE_API_URL_ENV = "ZKEVM_BRIDGE_API_URL"
_VERBOSE_ENV = "VERBOSE"


def _find_project_root(start: Path) -> Path | None:
    cur = start.resolve()
    for parent in [cur, *cur.parents]:
        if (parent / "pyproject.toml").exists():
            return parent
    return None


def _project_root() -> Path | None:
    return _find_project_root(Path.cwd()) or _find_project_root(Path(__file__).parent)


def resolve_config_path(path: str | Path | None = None) -> Path:
    if path is not None:
        return Path(path).expanduser()

    env_path = next(
        (os.getenv(k, "").strip() for k in _CONFIG_ENV_KEYS if os.getenv(k)), ""
    )
    if env_path:
        p = Path(env_path).expanduser()
        if p.is_absolute():
            return p
        root = _project_root()
        return (root / p) if root else p

    root = _project_root()
    return (root / _DEFAULT_CONFIG_FILENAME) if root else Path(_DEFAULT_CONFIG_FILENAME)


def load_config_json(
    path: str | Path | None = None, *, require_exists: bool = False
) -> dict[str, Any]:
    cfg_path = resolve_config_path(path)
    if not cfg_path.exists():
        if require_exists:
            raise FileNotFoundError(f"Config file not found: {cfg_path}")
        return {}
    parsed = json.loads(cfg_path.read_text())
    if not isinstance(parsed, dict):
        raise ValueError(f"{cfg_path} must be a JSON object at the top level.")
    return parsed


CONFIG: dict[str, Any] = {}


def set_config(config: dict[str, Any]) -> None:
    """Replace the global CONFIG dict in-place.

    This allows code that imported CONFIG at module import time to see updates.
    """
    CONFIG.clear()
    CONFIG.update(config)


def load_config(
    path: str | Path | None = None, *, require_exists: bool = False
) -> None:
    """Load config from disk into the global CONFIG dict."""
    set_config(load_config_json(path, require_exists=require_exists))


def get_bridge_api_base_url() -> str:
    env_url = os.environ.get(_BRIDGE_API_URL_ENV, "").strip()
    if env_url:
        return env_url.rstrip("/")
    bridge = CONFIG.get("bridge") or {}
    api_url = bridge.get("api_base_url")
    if api_url:
        return str(api_url).strip().rstrip("/")
    return DEFAULT_BRIDGE_API_BASE_URL


def get_http_timeout() -> float:
    bridge = CONFIG.get("bridge") or {}
    timeout = bridge.get("http_timeout")
    if timeout is None:
        return DEFAULT_HTTP_TIMEOUT
    return float(timeout)


def verbose_from_env() -> bool:
    return bool(os.environ.get(_VERBOSE_ENV))
