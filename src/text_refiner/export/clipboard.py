"""Host clipboard access."""

from __future__ import annotations

import asyncio
import logging

import pyperclip

logger = logging.getLogger(__name__)


class ClipboardDeniedError(RuntimeError):
    """Raised when the host platform refuses or lacks clipboard access."""


async def copy_to_clipboard(text: str) -> None:
    """Copy ``text`` to the host clipboard.

    Raises ClipboardDeniedError if the host has no usable clipboard or
    denies access. Failures are not retried.
    """
    try:
        await asyncio.to_thread(pyperclip.copy, text)
    except pyperclip.PyperclipException as exc:
        logger.warning("Clipboard access denied: %s", exc)
        raise ClipboardDeniedError(f"Clipboard access denied: {exc}") from exc
