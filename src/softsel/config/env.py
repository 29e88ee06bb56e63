"""Environment variable access shared by the configuration loaders."""

from __future__ import annotations

import os


def env_value(name: str) -> str | None:
    """Return the stripped value of ``name``; unset and blank variables give None."""

    value = os.getenv(name)
    if value is None:
        return None
    return value.strip() or None
