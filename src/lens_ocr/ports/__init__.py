from .clipboard_port import ClipboardPort
from .transport_port import LensTransportPort

__all__ = ["ClipboardPort", "LensTransportPort"]
