"""
Batch keyword scan over a folder of images.

Images are processed one at a time, in name order. A failure on one
image is reported and skipped; only an unreadable input directory or
an unwritable output file ends the run early.
"""

import os
from pathlib import Path

from .config import SUPPORTED_EXTENSIONS, ScanConfig
from .errors import FatalError, RecognitionError
from .matcher import check_keywords, count_matches
from .ocr import OCREngine
from .report import ImageResult, RunSummary, convert_to_csv, print_summary, write_csv


def is_supported_image(filename: str) -> bool:
    """Check the file extension against SUPPORTED_EXTENSIONS (case-insensitive)."""
    return Path(filename).suffix.lower() in SUPPORTED_EXTENSIONS


def list_image_files(image_dir: str) -> list[str]:
    """
    List supported image file names in a directory.

    Returns:
        Sorted file names (not full paths)

    Raises:
        FatalError: If the directory cannot be listed
    """
    try:
        entries: list[str] = sorted(os.listdir(image_dir))
    except OSError as e:
        raise FatalError(f"Could not list {image_dir}: {e}") from e

    return [name for name in entries if is_supported_image(name)]


def _run(config: ScanConfig, ocr_engine: OCREngine) -> RunSummary:
    image_files = list_image_files(config.image_dir)

    if not image_files:
        print(
            f"\nNo supported images ({', '.join(SUPPORTED_EXTENSIONS)}) "
            f"found in {config.image_dir}."
        )
        return RunSummary(images_processed=0, total_checks=0, total_matches=0, output_file=None)

    num_images: int = len(image_files)
    num_keywords: int = len(config.keywords)

    print(f"Found {num_images} image(s) to process.")
    print("-" * 40)

    results: list[ImageResult] = []
    total_matches: int = 0

    for file_name in image_files:
        image_path = os.path.join(config.image_dir, file_name)

        try:
            text: str = ocr_engine.recognize(image_path, config.ocr)
        except RecognitionError as e:
            print(f"❌ Error processing {file_name}: {e}")
            continue

        keyword_status = check_keywords(text, config.keywords)
        results.append(ImageResult(file_name=file_name, keyword_status=keyword_status))

        found_count: int = count_matches(keyword_status)
        total_matches += found_count

        print(f"✅ Processed: {file_name} ({found_count} matches out of {num_keywords} keywords)")

    # Possible checks count every attempted image, including failed ones
    summary = RunSummary(
        images_processed=num_images,
        total_checks=num_images * num_keywords,
        total_matches=total_matches,
        output_file=config.output_file,
    )

    write_csv(convert_to_csv(results, config.keywords), config.output_file)
    print_summary(summary)

    return summary


def process_images(config: ScanConfig, ocr_engine: OCREngine) -> RunSummary | None:
    """
    Scan every supported image in config.image_dir and write the CSV report.

    Failures are reported on the console and never raised.

    Args:
        config: Run configuration
        ocr_engine: Engine used to recognize each image

    Returns:
        Run totals (output_file is None when no images were found),
        or None if the run hit a fatal error
    """
    print(f"🔍 Starting OCR process for images in: {config.image_dir}")

    try:
        return _run(config, ocr_engine)
    except FatalError as e:
        print(f"\n❌ Fatal Error: {e}")
        return None
