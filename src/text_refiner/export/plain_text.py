"""Plain-text export of refined text."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PlainTextExport:
    """Encoded text payload with its MIME type."""

    data: bytes
    mime_type: str


def export_plain_text(text: str, encoding: str = "utf-8") -> PlainTextExport:
    """Encode ``text`` as a ``text/plain`` payload."""
    return PlainTextExport(
        data=text.encode(encoding),
        mime_type=f"text/plain;charset={encoding}",
    )


def save_plain_text(text: str, path: str | Path, encoding: str = "utf-8") -> Path:
    """Write ``text`` to ``path`` as plain text, creating parent directories."""
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    payload = export_plain_text(text, encoding)
    out.write_bytes(payload.data)
    logger.info("Saved %d bytes of plain text to %s", len(payload.data), out)
    return out
