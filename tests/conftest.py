import io
import struct
import zlib
from pathlib import Path

import pytest
import requests
from PIL import Image, ImageDraw

FIXTURES_DIR = Path(__file__).parent / "fixtures"


def read_fixture(name: str) -> str:
    return (FIXTURES_DIR / name).read_text(encoding="utf-8")


def make_response(
    status_code: int = 200,
    text: str = "",
    cookies: dict[str, str] | None = None,
    url: str = "https://lens.google.com/search",
) -> requests.Response:
    response = requests.Response()
    response.status_code = status_code
    response._content = text.encode("utf-8")
    response.encoding = "utf-8"
    response.url = url
    for name, value in (cookies or {}).items():
        response.cookies.set(name, value)
    return response


def _png_chunk(kind: bytes, payload: bytes) -> bytes:
    crc = zlib.crc32(kind + payload) & 0xFFFFFFFF
    return struct.pack(">I", len(payload)) + kind + payload + struct.pack(">I", crc)


def oversized_png_bytes(width: int = 20000, height: int = 20000) -> bytes:
    header = struct.pack(">IIBBBBB", width, height, 8, 2, 0, 0, 0)
    return (
        b"\x89PNG\r\n\x1a\n"
        + _png_chunk(b"IHDR", header)
        + _png_chunk(b"IDAT", zlib.compress(b"\x00"))
        + _png_chunk(b"IEND", b"")
    )


def _png_bytes(draw_text: bool) -> bytes:
    image = Image.new("RGB", (120, 40), "white")
    if draw_text:
        ImageDraw.Draw(image).text((5, 10), "Hello World", fill="black")
    buffer = io.BytesIO()
    image.save(buffer, format="PNG")
    return buffer.getvalue()


@pytest.fixture
def hello_png(tmp_path: Path) -> Path:
    path = tmp_path / "hello.png"
    path.write_bytes(_png_bytes(draw_text=True))
    return path


@pytest.fixture
def blank_png(tmp_path: Path) -> Path:
    path = tmp_path / "blank.png"
    path.write_bytes(_png_bytes(draw_text=False))
    return path
