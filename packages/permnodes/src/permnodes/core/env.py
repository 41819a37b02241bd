"""Centralized environment variable helpers."""

from __future__ import annotations

import os


def getenv(name: str, default: str | None = None) -> str | None:
    value = os.environ.get(name)
    if value is None or not value.strip():
        return default
    return value
