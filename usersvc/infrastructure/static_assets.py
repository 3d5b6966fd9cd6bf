"""Static Assets: fixed page files loaded once at startup, images read per request.

Invariants:
    - index.html, index.css and index.js are read at startup; a missing one raises
      StaticAssetMissingError and aborts the lifespan
    - Images resolve strictly inside <static_dir>/image/ (single path segment)
    - A missing or unreadable image returns None, never raises

Design Decisions:
    - Text assets cached in memory: they are fixed for the life of the process
    - Image bytes not cached: directory contents may change while running
"""

import logging
from dataclasses import dataclass
from pathlib import Path

from fastapi import Request

from usersvc.core.errors import StaticAssetMissingError

logger = logging.getLogger(__name__)

INDEX_HTML = Path("html") / "index.html"
INDEX_CSS = Path("css") / "index.css"
INDEX_JS = Path("js") / "index.js"
IMAGE_DIR = "image"


@dataclass(frozen=True)
class StaticAssets:
    """In-memory fixed assets plus the image directory."""
    html: str
    css: str
    js: str
    image_dir: Path

    @classmethod
    def load(cls, static_dir: Path) -> "StaticAssets":
        """Read the fixed text assets. Raises StaticAssetMissingError."""
        static_dir = Path(static_dir)
        assets = cls(
            html=_read_fixed(static_dir / INDEX_HTML),
            css=_read_fixed(static_dir / INDEX_CSS),
            js=_read_fixed(static_dir / INDEX_JS),
            image_dir=static_dir / IMAGE_DIR,
        )
        logger.info(f"Static assets loaded from {static_dir}")
        return assets

    def read_image(self, name: str) -> bytes | None:
        """Return image bytes, or None when absent or outside image_dir."""
        if not name or name in (".", ".."):
            return None
        if any(sep in name for sep in ("/", "\\", "\x00")):
            return None
        path = self.image_dir / name
        try:
            return path.read_bytes()
        except (OSError, ValueError):
            return None


def _read_fixed(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except OSError as e:
        logger.critical(f"Missing static asset {path}: {e}")
        raise StaticAssetMissingError(str(path)) from e


def get_static_assets(request: Request) -> StaticAssets:
    """FastAPI dependency: assets loaded by the lifespan."""
    assets = getattr(request.app.state, "assets", None)
    if assets is None:
        raise RuntimeError("Static assets not loaded")
    return assets
