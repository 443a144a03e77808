"""File-system backed asset access."""

from __future__ import annotations

from pathlib import Path

from ..domain.media import AssetHandle
from ..domain.errors import SourceUnavailableError


class FileAssetSource:
    """Opens bundled assets by name or user-picked files by path."""

    def __init__(self, assets_dir: str, logger) -> None:
        self.assets_dir = Path(assets_dir)
        self.logger = logger

    def resolve(self, name_or_path: str) -> Path:
        candidate = Path(name_or_path).expanduser()
        if candidate.is_absolute():
            return candidate
        bundled = self.assets_dir / candidate
        if bundled.is_file():
            return bundled
        return candidate

    def open(self, name_or_path: str, title: str | None = None) -> AssetHandle:
        if not str(name_or_path or "").strip():
            raise SourceUnavailableError("No media file selected")
        path = self.resolve(name_or_path)
        if not path.is_file():
            raise SourceUnavailableError(f"Media file not found: {name_or_path}")
        try:
            byte_length = path.stat().st_size
        except OSError as exc:
            raise SourceUnavailableError(f"Cannot read media file {path}: {exc}") from exc
        handle = AssetHandle(title=title or path.name, path=str(path.resolve()), byte_length=byte_length)
        self.logger.debug("Opened asset %s (%s bytes)", handle.path, handle.byte_length)
        return handle

    def close(self, handle: AssetHandle) -> None:
        self.logger.debug("Closed asset %s", handle.path)

    def list_assets(self) -> list[str]:
        if not self.assets_dir.is_dir():
            return []
        return sorted(path.name for path in self.assets_dir.glob("*.wav") if path.is_file())
