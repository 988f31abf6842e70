from __future__ import annotations

from typing import Any

from lens_ocr.adapters.clipboard_pyperclip import PyperclipClipboardAdapter
from lens_ocr.adapters.lens_http_adapter import LensHTTPAdapter
from lens_ocr.services.ocr_service import OCRService
from lens_ocr.settings import (
    LENS_CONSENT_COOKIE,
    LENS_HANDSHAKE,
    LENS_HANDSHAKE_URL,
    LENS_TIMEOUT_SECONDS,
    LENS_UPLOAD_URL,
    LENS_USER_AGENT,
)


def build_services() -> dict[str, Any]:
    transport = LensHTTPAdapter(
        upload_url=LENS_UPLOAD_URL,
        user_agent=LENS_USER_AGENT,
        consent_cookie=LENS_CONSENT_COOKIE,
        timeout=LENS_TIMEOUT_SECONDS,
        handshake_url=LENS_HANDSHAKE_URL if LENS_HANDSHAKE else None,
    )
    return {
        "ocr_service": OCRService(transport),
        "clipboard": PyperclipClipboardAdapter(),
        "transport": transport,
    }
