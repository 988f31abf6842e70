from __future__ import annotations

from typing import Protocol, runtime_checkable

from lens_ocr.domain.models import ImagePayload, RawResponse


@runtime_checkable
class LensTransportPort(Protocol):
    def submit(self, image: ImagePayload) -> RawResponse:
        """Upload one image and return the unparsed response."""
