from __future__ import annotations

import pyperclip

from lens_ocr.domain.errors import ClipboardError
from lens_ocr.ports.clipboard_port import ClipboardPort


class PyperclipClipboardAdapter(ClipboardPort):
    def copy_text(self, text: str) -> None:
        try:
            pyperclip.copy(text)
        except pyperclip.PyperclipException as exc:
            raise ClipboardError(f"Could not set clipboard contents: {exc}") from exc
