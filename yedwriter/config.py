"""Configuration helpers for loading environment variables.

Variables defined in a project-level ``.env`` file are loaded before they are
looked up.  Consumers should rely on :func:`get_env` instead of calling
:func:`os.getenv` directly so that the file is read in a single, well-defined
place.
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

CREATOR_ENV = "YEDWRITER_CREATOR"
DEFAULT_CREATOR = "Created by yedwriter"


@lru_cache(maxsize=1)
def _load_environment() -> None:
    """Load environment variables from the project's ``.env`` file.

    The loader first attempts to read ``.env`` from the repository root.  If the
    file does not exist we still call :func:`load_dotenv` so the default
    discovery mechanism runs.  Subsequent calls are cached so the file is only
    read once per process.
    """

    project_root = Path(__file__).resolve().parents[1]
    env_path = project_root / ".env"

    if env_path.exists():
        load_dotenv(env_path, override=False)
    else:
        load_dotenv(override=False)


def get_env(key: str, default: Optional[str] = None) -> Optional[str]:
    """Return the value for ``key`` from the environment.

    Parameters
    ----------
    key:
        The name of the environment variable to look up.
    default:
        The value to return when ``key`` is not present.
    """

    _load_environment()
    return os.environ.get(key, default)


def get_creator() -> str:
    """Return the text written into the header comment of every document."""

    return get_env(CREATOR_ENV, DEFAULT_CREATOR) or DEFAULT_CREATOR


__all__ = ["CREATOR_ENV", "DEFAULT_CREATOR", "get_creator", "get_env"]
