from lens_ocr.adapters.clipboard_pyperclip import PyperclipClipboardAdapter
from lens_ocr.adapters.lens_http_adapter import LensHTTPAdapter
from lens_ocr.domain.models import ImagePayload, RawResponse
from lens_ocr.ports import ClipboardPort, LensTransportPort


class DummyTransport:
    def submit(self, image: ImagePayload) -> RawResponse:
        return RawResponse(status_code=200, body="")


class DummyClipboard:
    def copy_text(self, text: str) -> None:
        return None


def test_transport_port_runtime_checkable() -> None:
    assert isinstance(DummyTransport(), LensTransportPort)
    adapter = LensHTTPAdapter(
        upload_url="https://lens.example/upload", user_agent="ua", consent_cookie=""
    )
    assert isinstance(adapter, LensTransportPort)


def test_clipboard_port_runtime_checkable() -> None:
    assert isinstance(DummyClipboard(), ClipboardPort)
    assert isinstance(PyperclipClipboardAdapter(), ClipboardPort)
