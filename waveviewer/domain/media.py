"""Descriptors for opened media sources."""

from __future__ import annotations

from dataclasses import dataclass

UNKNOWN_LENGTH = -1


@dataclass(frozen=True)
class AssetHandle:
    """An opened asset or user-picked file."""

    title: str
    path: str
    byte_length: int = UNKNOWN_LENGTH
