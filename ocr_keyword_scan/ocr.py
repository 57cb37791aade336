from abc import ABC, abstractmethod

import cv2
import pytesseract  # type: ignore[import]
from cv2.typing import MatLike
from PIL import Image

from .config import OCRConfig
from .errors import RecognitionError
from .preprocessing import load_image, preprocess_for_ocr


# Typed wrapper for pytesseract to satisfy type checker
def _image_to_string(image: Image.Image, lang: str, config: str, timeout: float) -> str:
    """Typed wrapper for pytesseract.image_to_string."""
    result = pytesseract.image_to_string(image, lang=lang, config=config, timeout=timeout)  # type: ignore[attr-defined]
    if isinstance(result, str):
        return result
    return str(result)  # type: ignore[arg-type]


class OCREngine(ABC):
    """Abstract base class for OCR engines."""

    @abstractmethod
    def recognize(self, image_path: str, config: OCRConfig) -> str:
        """
        Recognize the text in an image file.

        Args:
            image_path: Path to the image file
            config: OCR options for the current run

        Returns:
            Recognized text (may be empty)

        Raises:
            RecognitionError: On any failure to read or recognize the image
        """
        pass


class TesseractOCR(OCREngine):
    """Tesseract OCR implementation."""

    def __init__(self,
                 tesseract_cmd: str | None = None,
                 preprocess: bool = False):
        """
        Initialize Tesseract OCR.

        Args:
            tesseract_cmd: Path to tesseract executable (None = use default)
            preprocess: Grayscale, denoise and binarize images before OCR
        """
        self.preprocess = preprocess

        if tesseract_cmd:
            pytesseract.pytesseract.tesseract_cmd = tesseract_cmd

    def recognize(self, image_path: str, config: OCRConfig) -> str:
        """Recognize text using Tesseract."""
        try:
            if self.preprocess:
                image: MatLike = preprocess_for_ocr(image_path)
            else:
                image = load_image(image_path)

            pil_image = self._cv2_to_pil(image)

            return _image_to_string(
                pil_image,
                config.lang,
                config.to_tesseract_config(),
                config.timeout
            )
        except (OSError, ValueError, RuntimeError, cv2.error) as e:
            # TesseractNotFoundError is an OSError; TesseractError and timeouts are RuntimeError.
            # cv2.error (e.g. failed allocation on a huge image) derives from Exception only.
            raise RecognitionError(str(e) or type(e).__name__) from e

    def _cv2_to_pil(self, image: MatLike) -> Image.Image:
        """Convert OpenCV image to PIL Image."""
        if len(image.shape) == 2:  # Grayscale
            return Image.fromarray(image)
        elif len(image.shape) == 3:  # Color
            # OpenCV is BGR, PIL expects RGB
            rgb_image = cv2.cvtColor(image, cv2.COLOR_BGR2RGB)
            return Image.fromarray(rgb_image)
        else:
            raise ValueError(f"Unsupported image shape: {image.shape}")
