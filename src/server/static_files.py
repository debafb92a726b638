"""Safe static-asset lookup for files shipped next to the UI index page."""

from __future__ import annotations

import mimetypes
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

_TEXT_MIME_TYPES = {
    "application/javascript",
    "application/json",
    "application/xml",
    "image/svg+xml",
}


@dataclass(frozen=True)
class StaticAsset:
    """File body plus the content type it is served with."""
    path: Path
    body: bytes
    content_type: str


def resolve_static_file(ui_root: Path, request_path: str) -> Optional[Path]:
    """Map a request path to a visible file inside `ui_root`, or None."""
    relative = request_path.lstrip("/")
    if not relative:
        return None

    root = ui_root.resolve()
    candidate = (root / relative).resolve()
    if candidate == root or root not in candidate.parents:
        return None
    if any(part.startswith(".") for part in candidate.relative_to(root).parts):
        return None
    if not candidate.is_file():
        return None
    return candidate


def guess_content_type(path: Path) -> str:
    mime_type, _ = mimetypes.guess_type(path.name)
    if not mime_type:
        return "application/octet-stream"
    if mime_type.startswith("text/") or mime_type in _TEXT_MIME_TYPES:
        return f"{mime_type}; charset=utf-8"
    return mime_type


def load_static_asset(ui_root: Path, request_path: str) -> Optional[StaticAsset]:
    path = resolve_static_file(ui_root, request_path)
    if path is None:
        return None
    return StaticAsset(
        path=path,
        body=path.read_bytes(),
        content_type=guess_content_type(path),
    )
