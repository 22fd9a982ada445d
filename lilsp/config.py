from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional

# Defaults
_DEFAULT_PROMPT = "lilsp> "
_DEFAULT_LOG_LEVEL = "WARNING"
_DEFAULT_RECURSION_LIMIT = 10000
_MIN_RECURSION_LIMIT = 1000


def get_prompt() -> str:
    return os.environ.get("LILSP_PROMPT", _DEFAULT_PROMPT)


def get_log_level() -> int:
    raw = os.environ.get("LILSP_LOG_LEVEL", _DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(raw)
    # getLevelName maps unknown names to the string "Level <name>"
    return level if isinstance(level, int) else logging.WARNING


def get_prelude_path() -> Optional[Path]:
    raw = os.environ.get("LILSP_PRELUDE_PATH")
    if not raw or not raw.strip():
        return None
    return Path(raw.strip())


def read_prelude() -> Optional[str]:
    path = get_prelude_path()
    if path is None:
        return None
    return path.read_text(encoding="utf-8")


def get_recursion_limit() -> int:
    raw = os.environ.get("LILSP_RECURSION_LIMIT", "").strip()
    if not raw.isdigit():
        return _DEFAULT_RECURSION_LIMIT
    return max(int(raw), _MIN_RECURSION_LIMIT)
