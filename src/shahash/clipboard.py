# src/shahash/clipboard.py
from __future__ import annotations
import logging
from typing import Optional, Protocol

import pyperclip

logger = logging.getLogger(__name__)


class ClipboardWriter(Protocol):
    def __call__(self, text: str) -> None: ...


def pyperclip_writer(text: str) -> None:
    """
    Place text on the system clipboard using pyperclip.
    """
    pyperclip.copy(text)


def copy_to_clipboard(text: str, writer: Optional[ClipboardWriter] = None) -> bool:
    """
    Best-effort clipboard write. Returns False instead of raising when no
    clipboard is available (e.g. headless session).
    """
    writer = writer or pyperclip_writer
    try:
        writer(text)
    except (pyperclip.PyperclipException, OSError) as e:
        logger.warning(f"Could not copy to clipboard: {e}")
        return False
    logger.info("Hash copied to clipboard")
    return True
