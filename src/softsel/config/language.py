"""Language used for license texts when the caller does not pass one."""

from __future__ import annotations

import re
from typing import Final

from .env import env_value
from .errors import InvalidConfigurationError

DEFAULT_LANGUAGE: Final[str] = "en_US"
LANGUAGE_VAR: Final[str] = "SOFTSEL_LANGUAGE"

_LANGUAGE_RE: Final = re.compile(r"[a-z]{2,3}(_[A-Z]{2})?")


def get_language() -> str:
    """Return ``SOFTSEL_LANGUAGE``, else the language part of ``LANG``, else en_US.

    An explicit ``SOFTSEL_LANGUAGE`` must look like ``de`` or ``de_DE``; a
    ``LANG`` that does not (``C``, ``POSIX``) falls back to the default.
    """

    explicit = env_value(LANGUAGE_VAR)
    if explicit is not None:
        if not _LANGUAGE_RE.fullmatch(explicit):
            raise InvalidConfigurationError(LANGUAGE_VAR, explicit, "expected e.g. de or de_DE")
        return explicit

    # de_DE.UTF-8 / de_DE@euro -> de_DE
    language = (env_value("LANG") or "").split(".", 1)[0].split("@", 1)[0]
    if _LANGUAGE_RE.fullmatch(language):
        return language
    return DEFAULT_LANGUAGE
