from __future__ import annotations

from pathlib import Path

from lens_ocr.domain.errors import ImageLoadError
from lens_ocr.domain.models import ImagePayload


def load_image(path: str | Path, mime_type: str | None = None) -> ImagePayload:
    image_path = Path(path)
    try:
        data = image_path.read_bytes()
    except OSError as exc:
        raise ImageLoadError(f"Could not open image {str(image_path)!r}: {exc}") from exc
    return ImagePayload.from_bytes(data, mime_type=mime_type, filename=image_path.name)
