from .image_loader import load_image
from .ocr_service import OCRService

__all__ = ["OCRService", "load_image"]
