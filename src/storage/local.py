from __future__ import annotations
from pathlib import Path
from typing import Callable, List, Optional
import os
import re
import time
from loguru import logger
from pydantic import BaseModel

ALLOWED_MIME_TYPES = ("image/png", "image/jpeg", "image/svg+xml")
MAX_FILE_BYTES = 50 * 1024 * 1024
MAX_FILES_PER_UPLOAD = 30

_TIMESTAMP_PREFIX = re.compile(r"^\d+-")
_EXTENSION = re.compile(r"\.[^.]+$")


class LocalAssetMissing(FileNotFoundError):
    def __init__(self, asset_id: str):
        super().__init__(f"File not found: {asset_id}")
        self.asset_id = asset_id


class StoredAsset(BaseModel):
    id: str
    path: str
    design_name: str
    original_name: Optional[str] = None
    size: Optional[int] = None


def design_name_from(filename: str) -> str:
    """'summer-vibes_2.png' -> 'summer vibes 2'"""
    return re.sub(r"[-_]", " ", _EXTENSION.sub("", filename))


def mime_type_for(asset_id: str) -> str:
    lower = asset_id.lower()
    if lower.endswith(".png"):
        return "image/png"
    if lower.endswith(".svg"):
        return "image/svg+xml"
    return "image/jpeg"


class LocalAssetStore:
    """Design files on local disk, addressed by their stored file name."""

    def __init__(self, root: Path, clock_ms: Callable[[], int] = lambda: int(time.time() * 1000)):
        self.root = Path(root)
        self.root.mkdir(parents=True, exist_ok=True)
        self._clock_ms = clock_ms

    @classmethod
    def from_env(cls) -> "LocalAssetStore":
        return cls(Path(os.getenv("UPLOADS_DIR", "uploads")))

    def _path(self, asset_id: str) -> Path:
        # ids are bare file names; anything with a directory part is unknown
        name = Path(asset_id).name
        if not asset_id or name != asset_id or name in {".", ".."}:
            raise LocalAssetMissing(asset_id)
        return self.root / name

    def exists(self, asset_id: str) -> bool:
        try:
            return self._path(asset_id).is_file()
        except LocalAssetMissing:
            return False

    def read_bytes(self, asset_id: str) -> bytes:
        p = self._path(asset_id)
        if not p.is_file():
            raise LocalAssetMissing(asset_id)
        return p.read_bytes()

    def save(self, original_name: str, data: bytes) -> StoredAsset:
        safe_name = Path(original_name).name or "design"
        asset_id = f"{self._clock_ms()}-{safe_name}"
        (self.root / asset_id).write_bytes(data)
        logger.info(f"Stored upload {asset_id} ({len(data)} bytes)")
        return StoredAsset(
            id=asset_id,
            path=f"/uploads/{asset_id}",
            design_name=design_name_from(safe_name),
            original_name=original_name,
            size=len(data),
        )

    def list(self) -> List[StoredAsset]:
        out: List[StoredAsset] = []
        for p in sorted(self.root.iterdir()):
            if not p.is_file():
                continue
            out.append(StoredAsset(
                id=p.name,
                path=f"/uploads/{p.name}",
                design_name=design_name_from(_TIMESTAMP_PREFIX.sub("", p.name)),
            ))
        return out

    def delete(self, asset_id: str) -> None:
        p = self._path(asset_id)
        if not p.is_file():
            raise LocalAssetMissing(asset_id)
        p.unlink()
        logger.info(f"Deleted upload {asset_id}")
