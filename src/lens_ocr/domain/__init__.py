from .errors import (
    AuthenticationError,
    ClipboardError,
    ConfigurationError,
    ImageLoadError,
    LensOCRError,
    NoTextFoundError,
    ServiceError,
    TransportError,
    UnrecognizedFormatError,
)
from .models import ImagePayload, OcrResult, RawResponse, SessionToken, UploadRequest
from .response_parser import parse_response

__all__ = [
    "AuthenticationError",
    "ClipboardError",
    "ConfigurationError",
    "ImageLoadError",
    "ImagePayload",
    "LensOCRError",
    "NoTextFoundError",
    "OcrResult",
    "RawResponse",
    "ServiceError",
    "SessionToken",
    "TransportError",
    "UnrecognizedFormatError",
    "UploadRequest",
    "parse_response",
]
