from __future__ import annotations

import logging
from time import perf_counter

from lens_ocr.domain.errors import LensOCRError
from lens_ocr.domain.models import ImagePayload, OcrResult
from lens_ocr.domain.response_parser import parse_response
from lens_ocr.ports.transport_port import LensTransportPort

logger = logging.getLogger(__name__)


class OCRService:
    def __init__(self, transport: LensTransportPort) -> None:
        self._transport = transport

    def recognize(self, image: ImagePayload) -> OcrResult:
        started = perf_counter()
        try:
            raw = self._transport.submit(image)
            result = parse_response(raw)
        except LensOCRError as exc:
            logger.warning("OCR failed at stage %s: %s", exc.stage, exc)
            raise
        elapsed_ms = int((perf_counter() - started) * 1000)
        logger.info("OCR recognized %d line(s) in %d ms", len(result.lines), elapsed_ms)
        return result
