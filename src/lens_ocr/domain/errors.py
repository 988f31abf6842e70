from __future__ import annotations


class LensOCRError(RuntimeError):
    stage = "unknown"

    def __init__(self, message: str, stage: str | None = None) -> None:
        super().__init__(message)
        if stage is not None:
            self.stage = stage


class TransportError(LensOCRError):
    stage = "upload"


class AuthenticationError(LensOCRError):
    stage = "handshake"

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class ServiceError(LensOCRError):
    stage = "upload"

    def __init__(self, message: str, status_code: int, body: str = "") -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class UnrecognizedFormatError(LensOCRError):
    """The response does not have the shape the parser knows how to read."""

    stage = "parse"

    def __init__(self, message: str, path: str = "") -> None:
        super().__init__(message)
        self.path = path


class NoTextFoundError(LensOCRError):
    """The response was understood but carries no recognized text."""

    stage = "parse"


class ImageLoadError(LensOCRError):
    stage = "image"


class ClipboardError(LensOCRError):
    stage = "clipboard"


class ConfigurationError(LensOCRError):
    stage = "config"
