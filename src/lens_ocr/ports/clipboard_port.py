from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class ClipboardPort(Protocol):
    def copy_text(self, text: str) -> None:
        """Replace the clipboard contents with text."""
