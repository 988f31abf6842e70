from __future__ import annotations

import io
from dataclasses import dataclass, field

from lens_ocr.domain.errors import ImageLoadError

_EXTENSIONS = {
    "image/png": "png",
    "image/jpeg": "jpg",
    "image/webp": "webp",
    "image/gif": "gif",
    "image/bmp": "bmp",
    "image/tiff": "tiff",
}
# Multi-picture camera JPEGs are plain JPEG to the service.
_FORMAT_MIME_TYPES = {
    "PNG": "image/png",
    "JPEG": "image/jpeg",
    "MPO": "image/jpeg",
    "WEBP": "image/webp",
    "GIF": "image/gif",
    "BMP": "image/bmp",
    "TIFF": "image/tiff",
}


@dataclass(frozen=True)
class ImagePayload:
    data: bytes
    mime_type: str
    filename: str | None = None

    @classmethod
    def from_bytes(
        cls, data: bytes, mime_type: str | None = None, filename: str | None = None
    ) -> ImagePayload:
        if not data:
            raise ImageLoadError("Image is empty.")
        if mime_type:
            if not mime_type.startswith("image/"):
                raise ImageLoadError(f"Unsupported content type {mime_type!r}.")
            return cls(data=data, mime_type=mime_type, filename=filename)
        return cls(data=data, mime_type=detect_mime_type(data), filename=filename)

    @property
    def extension(self) -> str:
        known = _EXTENSIONS.get(self.mime_type)
        if known:
            return known
        return self.mime_type.split("/", 1)[-1] or "bin"


@dataclass(frozen=True)
class SessionToken:
    cookies: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class UploadRequest:
    url: str
    headers: dict[str, str]
    field_name: str
    filename: str
    image: ImagePayload

    def files(self) -> dict[str, tuple[str, bytes, str]]:
        return {self.field_name: (self.filename, self.image.data, self.image.mime_type)}


@dataclass(frozen=True)
class RawResponse:
    status_code: int
    body: str
    url: str = ""


@dataclass(frozen=True)
class OcrResult:
    text: str
    lines: list[str] = field(default_factory=list)


def detect_mime_type(data: bytes) -> str:
    from PIL import Image, UnidentifiedImageError

    try:
        with Image.open(io.BytesIO(data)) as image:
            image_format = image.format
    except Image.DecompressionBombError as exc:
        raise ImageLoadError(f"Image is too large to upload: {exc}") from exc
    except (UnidentifiedImageError, OSError) as exc:
        raise ImageLoadError("Could not identify image format.") from exc
    mime_type = _FORMAT_MIME_TYPES.get(image_format or "")
    if not mime_type:
        raise ImageLoadError(f"Unsupported image format {image_format!r}.")
    return mime_type
