from __future__ import annotations

import re

import json5

from lens_ocr.domain.document_tree import DocumentNode
from lens_ocr.domain.errors import NoTextFoundError, UnrecognizedFormatError
from lens_ocr.domain.models import OcrResult, RawResponse

_CALLBACK_PATTERN = re.compile(r">AF_initDataCallback\((\{key: 'ds:1'.*?)\);</script>")
# Recognized lines live in the first entry of this array.
TEXT_BLOCKS_POINTER = "/data/3/4/0"


def parse_response(raw: RawResponse | str) -> OcrResult:
    body = raw.body if isinstance(raw, RawResponse) else raw
    document = _decode_callback_data(body)
    blocks = document.pointer(TEXT_BLOCKS_POINTER)
    if not blocks.is_list():
        raise UnrecognizedFormatError(
            f"Expected array of text blocks at {blocks.path}.", blocks.path
        )
    first_block = blocks.first()
    if first_block is None or first_block.value is None:
        raise NoTextFoundError("No text found in image.")
    items = first_block.as_list()
    lines = [item for item in items if isinstance(item, str)]
    if items and not lines:
        raise UnrecognizedFormatError(
            f"Expected text lines at {first_block.path}, found no strings.", first_block.path
        )
    text = "\n".join(lines).rstrip()
    if not text:
        raise NoTextFoundError("No text found in image.")
    return OcrResult(text=text, lines=lines)


def _decode_callback_data(body: str) -> DocumentNode:
    match = _CALLBACK_PATTERN.search(body or "")
    if match is None:
        raise UnrecognizedFormatError("Could not find OCR data callback in response.")
    try:
        value = json5.loads(match.group(1))
    except ValueError as exc:
        raise UnrecognizedFormatError(f"Could not decode OCR data callback: {exc}") from exc
    return DocumentNode(value)
