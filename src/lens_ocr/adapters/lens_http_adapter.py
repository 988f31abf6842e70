from __future__ import annotations

import logging
import time
from urllib.parse import urlsplit

import requests

from lens_ocr.domain.errors import AuthenticationError, ServiceError, TransportError
from lens_ocr.domain.models import ImagePayload, RawResponse, SessionToken, UploadRequest
from lens_ocr.ports.transport_port import LensTransportPort

logger = logging.getLogger(__name__)


class LensHTTPAdapter(LensTransportPort):
    """Uploads images to the Google Lens web endpoint the way a mobile browser does.

    The endpoint is undocumented. Every request is built fresh: the upload URL and
    filename carry a millisecond timestamp, and the optional handshake cookies
    only live for the duration of one ``submit`` call.
    """

    FIELD_NAME = "encoded_image"

    def __init__(
        self,
        upload_url: str,
        user_agent: str,
        consent_cookie: str,
        timeout: float = 20.0,
        handshake_url: str | None = None,
    ) -> None:
        self._upload_url = upload_url
        self._user_agent = user_agent
        self._consent_cookie = consent_cookie.strip()
        self._timeout = timeout
        self._handshake_url = handshake_url

    def submit(self, image: ImagePayload) -> RawResponse:
        token = self._handshake() if self._handshake_url else None
        request = self.build_upload_request(image, token)
        return self._upload(request)

    def build_upload_request(
        self, image: ImagePayload, token: SessionToken | None = None
    ) -> UploadRequest:
        timestamp = _timestamp_ms()
        separator = "&" if "?" in self._upload_url else "?"
        headers = self._browser_headers()
        cookie = self._cookie_header(token)
        if cookie:
            headers["Cookie"] = cookie
        return UploadRequest(
            url=f"{self._upload_url}{separator}stcs={timestamp}",
            headers=headers,
            field_name=self.FIELD_NAME,
            filename=f"{timestamp}.{image.extension}",
            image=image,
        )

    def _handshake(self) -> SessionToken:
        logger.debug("Lens handshake GET %s", self._handshake_url)
        try:
            response = requests.get(
                self._handshake_url,
                headers=self._browser_headers(),
                timeout=self._timeout,
            )
        except requests.RequestException as exc:
            raise TransportError(f"Handshake request failed: {exc}", stage="handshake") from exc
        if not response.ok:
            raise AuthenticationError(
                f"Handshake rejected with HTTP {response.status_code}.",
                status_code=response.status_code,
            )
        cookies: dict[str, str] = {}
        for step in [*response.history, response]:
            cookies.update(step.cookies.get_dict())
        if not cookies:
            raise AuthenticationError(
                "Handshake did not issue a session cookie.", status_code=response.status_code
            )
        logger.debug("Lens handshake issued %d cookie(s)", len(cookies))
        return SessionToken(cookies=cookies)

    def _upload(self, request: UploadRequest) -> RawResponse:
        logger.debug(
            "Lens upload POST %s (%s, %d bytes)",
            request.url,
            request.image.mime_type,
            len(request.image.data),
        )
        try:
            response = requests.post(
                request.url,
                headers=request.headers,
                files=request.files(),
                timeout=self._timeout,
            )
        except requests.RequestException as exc:
            raise TransportError(f"Upload request failed: {exc}") from exc
        self._raise_for_status(response)
        body = _decode_body(response)
        logger.debug("Lens upload returned %d characters", len(body))
        return RawResponse(status_code=response.status_code, body=body, url=response.url)

    def _browser_headers(self) -> dict[str, str]:
        headers = {"User-Agent": self._user_agent}
        origin = _origin(self._upload_url)
        if origin:
            headers["Origin"] = origin
            headers["Referer"] = f"{origin}/"
        return headers

    def _cookie_header(self, token: SessionToken | None) -> str:
        parts = [self._consent_cookie] if self._consent_cookie else []
        consent_names = {part.split("=", 1)[0].strip() for part in parts}
        if token is not None:
            for name, value in token.cookies.items():
                if name in consent_names:
                    continue
                parts.append(f"{name}={value}")
        return "; ".join(parts)

    @staticmethod
    def _raise_for_status(response: requests.Response) -> None:
        if response.status_code != 200:
            raise ServiceError(
                f"Google Lens responded with HTTP {response.status_code}.",
                status_code=response.status_code,
                body=_decode_body(response),
            )


def _timestamp_ms() -> int:
    return int(time.time() * 1000)


def _decode_body(response: requests.Response) -> str:
    content_type = response.headers.get("Content-Type", "")
    encoding = response.encoding if "charset" in content_type.lower() else None
    try:
        return response.content.decode(encoding or "utf-8", errors="replace")
    except LookupError:
        return response.content.decode("utf-8", errors="replace")


def _origin(url: str) -> str:
    parts = urlsplit(url)
    if not parts.scheme or not parts.netloc:
        return ""
    return f"{parts.scheme}://{parts.netloc}"
