"""Prompt templates for tool generation, stored as YAML profiles beside this module."""
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict

import yaml


@lru_cache(maxsize=None)
def _read_profile(path: Path) -> Dict[str, Any]:
    if not path.exists():
        raise FileNotFoundError(f"Prompt file not found: {path}")
    data = yaml.safe_load(path.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise TypeError(f"YAML root must be a mapping: {path}")
    return data


def load_prompts(profile: str, required_prompts: list[str]) -> dict[str, str]:
    """Load ``<profile>.yaml`` and check every required prompt is a non-empty string.

    The file is parsed once per process; callers get their own copy.
    """
    path = Path(__file__).parent / f"{profile}.yaml"
    data = _read_profile(path)
    missing = [k for k in required_prompts if not isinstance(data.get(k), str) or not data[k].strip()]
    if missing:
        raise KeyError(f"Missing/empty prompt keys in {path}: {missing}")
    return dict(data)


def escape_braces(text: str) -> str:
    """Double ``{`` and ``}`` so ``str.format`` renders them literally."""
    return text.replace("{", "{{").replace("}", "}}")
