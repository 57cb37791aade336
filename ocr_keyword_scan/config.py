"""
Run configuration for a keyword scan.

A ScanConfig is built once (by the CLI or by a caller) and handed to
the batch processor; nothing here is mutated during a run.
"""

from dataclasses import dataclass, field

DEFAULT_IMAGE_DIR = "./images"
DEFAULT_OUTPUT_FILE = "results.csv"
DEFAULT_KEYWORDS: tuple[str, ...] = ("Selamat",)

SUPPORTED_EXTENSIONS: tuple[str, ...] = (".jpg", ".jpeg", ".png", ".tiff", ".tif")


@dataclass(frozen=True)
class OCRConfig:
    """
    Options forwarded unchanged to every Tesseract call in a run.

    Attributes:
        lang: Tesseract language code (e.g. "eng", "ind", "eng+ind")
        oem: OCR engine mode (0-3)
        psm: Page segmentation mode (0-13)
        timeout: Seconds before Tesseract is killed (0 = no timeout)
    """
    lang: str = "eng"
    oem: int = 1
    psm: int = 3
    timeout: float = 0

    def __post_init__(self) -> None:
        if not self.lang:
            raise ValueError("OCR language code must not be empty")
        if not 0 <= self.oem <= 3:
            raise ValueError(f"Invalid OCR engine mode: {self.oem}")
        if not 0 <= self.psm <= 13:
            raise ValueError(f"Invalid page segmentation mode: {self.psm}")
        if self.timeout < 0:
            raise ValueError(f"Timeout must be >= 0, got {self.timeout}")

    def to_tesseract_config(self) -> str:
        """Build the Tesseract command-line config string."""
        return f"--oem {self.oem} --psm {self.psm}"


@dataclass(frozen=True)
class ScanConfig:
    """
    Everything a batch run needs.

    Keywords define the CSV columns in their given order and should not
    contain duplicates.
    """
    image_dir: str = DEFAULT_IMAGE_DIR
    output_file: str = DEFAULT_OUTPUT_FILE
    keywords: tuple[str, ...] = DEFAULT_KEYWORDS
    ocr: OCRConfig = field(default_factory=OCRConfig)
