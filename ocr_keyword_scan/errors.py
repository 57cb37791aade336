class ScanError(Exception):
    """Base class for keyword scan failures."""


class RecognitionError(ScanError):
    """OCR failed for a single image. The batch skips the image and continues."""


class FatalError(ScanError):
    """The run cannot continue (input directory unreadable, output unwritable)."""
