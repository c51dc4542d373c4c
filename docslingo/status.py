"""Status reporting hook shared by the pipeline stages."""

from __future__ import annotations

from typing import Callable

# (level, message) where level is one of "info", "ok", "warn"
StatusCallback = Callable[[str, str], None]


def silent(level: str, message: str) -> None:
    pass
