from __future__ import annotations

import os
import yaml
from pathlib import Path
from typing import Dict, Any, List

DEFAULT_LISTS: List[str] = ["inbox", "next", "done"]


def user_config_path() -> Path:
    env_path = os.environ.get("GTD_CONFIG_FILE")
    if env_path:
        return Path(env_path).expanduser()
    return Path.home() / ".gtd_config.yaml"


def _load_config() -> Dict[str, Any]:
    path = user_config_path()
    if not path.exists():
        return {}
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except (OSError, yaml.YAMLError):
        return {}
    return data if isinstance(data, dict) else {}


def _save_config(data: Dict[str, Any]) -> None:
    path = user_config_path()
    if not data:
        if path.exists():
            path.unlink()
        return
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(yaml.safe_dump(data, allow_unicode=True), encoding="utf-8")


def get_user_lang() -> str:
    return str(_load_config().get("lang", "") or "").strip()


def set_user_lang(value: str) -> None:
    data = _load_config()
    value = (value or "").strip()
    if value:
        data["lang"] = value
    else:
        data.pop("lang", None)
    _save_config(data)


def get_user_theme() -> str:
    return str(_load_config().get("theme", "") or "").strip()


def set_user_theme(value: str) -> None:
    data = _load_config()
    value = (value or "").strip()
    if value:
        data["theme"] = value
    else:
        data.pop("theme", None)
    _save_config(data)


def get_use_global() -> bool:
    return bool(_load_config().get("use_global", False))


def set_use_global(value: bool) -> None:
    data = _load_config()
    if value:
        data["use_global"] = True
    else:
        data.pop("use_global", None)
    _save_config(data)


def get_default_lists() -> List[str]:
    """List names created by ``gtd init`` / ``gtd reset``."""
    raw = _load_config().get("default_lists")
    if not isinstance(raw, list):
        return list(DEFAULT_LISTS)
    names: List[str] = []
    for item in raw:
        name = str(item).strip().lower()
        if name and name not in names:
            names.append(name)
    return names or list(DEFAULT_LISTS)


def set_default_lists(names: List[str]) -> None:
    """Store the lists for ``gtd init``; an empty list restores DEFAULT_LISTS."""
    data = _load_config()
    cleaned: List[str] = []
    for item in names:
        name = str(item).strip().lower()
        if name and name not in cleaned:
            cleaned.append(name)
    if cleaned:
        data["default_lists"] = cleaned
    else:
        data.pop("default_lists", None)
    _save_config(data)
