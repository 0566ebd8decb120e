"""Message lookup for CLI and TUI text."""

import os
from collections import ChainMap
from typing import List, Mapping, Optional

from config import get_user_lang
from core.desktop.devtools.interface.constants import LANG_PACK

BASE_LANG = "en"


def available_languages() -> List[str]:
    return sorted(LANG_PACK)


def effective_lang(preferred: Optional[str] = None) -> str:
    """GTD_LANG wins, tests always get English, then ``preferred``, then the user config."""
    env_lang = os.getenv("GTD_LANG")
    if env_lang:
        return env_lang
    if os.getenv("PYTEST_CURRENT_TEST"):
        return BASE_LANG
    candidate = preferred or get_user_lang()
    return candidate if candidate in LANG_PACK else BASE_LANG


def catalogue(lang: Optional[str] = None) -> Mapping[str, str]:
    """Messages for the active language; English fills the gaps."""
    return ChainMap(LANG_PACK.get(effective_lang(lang), {}), LANG_PACK[BASE_LANG])


def translate(key: str, lang: Optional[str] = None, **kwargs) -> str:
    template = catalogue(lang).get(key, key)
    try:
        return template.format(**kwargs)
    except (KeyError, IndexError):
        return template


__all__ = ["available_languages", "catalogue", "effective_lang", "translate"]
