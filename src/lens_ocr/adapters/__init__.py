from .clipboard_pyperclip import PyperclipClipboardAdapter
from .lens_http_adapter import LensHTTPAdapter

__all__ = ["LensHTTPAdapter", "PyperclipClipboardAdapter"]
