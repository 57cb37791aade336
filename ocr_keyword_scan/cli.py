"""
Command-line entry point for the keyword scan.

Every option has a default, so running with no arguments scans
./images for "Selamat" and writes results.csv.
"""

import argparse
import os
import sys

from dotenv import load_dotenv

from .batch import process_images
from .config import (
    DEFAULT_IMAGE_DIR,
    DEFAULT_KEYWORDS,
    DEFAULT_OUTPUT_FILE,
    OCRConfig,
    ScanConfig,
)
from .ocr import TesseractOCR


def print_header() -> None:
    """Print CLI header."""
    print("\n" + "=" * 40)
    print("📄 OCR Keyword Scan")
    print("=" * 40 + "\n")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="OCR a folder of images and report which keywords each one contains"
    )
    parser.add_argument(
        "--images",
        default=DEFAULT_IMAGE_DIR,
        help=f"Folder of images to scan (default: {DEFAULT_IMAGE_DIR})"
    )
    parser.add_argument(
        "--output",
        default=DEFAULT_OUTPUT_FILE,
        help=f"CSV file to write, overwritten each run (default: {DEFAULT_OUTPUT_FILE})"
    )
    parser.add_argument(
        "--keyword",
        dest="keywords",
        action="append",
        metavar="KEYWORD",
        help="Keyword to look for; repeat for several. Column order follows flag order "
             f"(default: {', '.join(DEFAULT_KEYWORDS)})"
    )
    parser.add_argument(
        "--lang",
        default="eng",
        help="Tesseract language code (default: eng)"
    )
    parser.add_argument(
        "--oem",
        type=int,
        default=1,
        help="Tesseract OCR engine mode (default: 1)"
    )
    parser.add_argument(
        "--psm",
        type=int,
        default=3,
        help="Tesseract page segmentation mode (default: 3)"
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=0,
        help="Seconds before a single Tesseract call is aborted (default: 0, no limit)"
    )
    parser.add_argument(
        "--tesseract-cmd",
        default=None,
        help="Path to the tesseract binary (default: $TESSERACT_CMD or PATH lookup)"
    )
    parser.add_argument(
        "--preprocess",
        action="store_true",
        help="Grayscale, denoise and binarize images before OCR"
    )
    return parser


def config_from_args(parser: argparse.ArgumentParser, args: argparse.Namespace) -> ScanConfig:
    """Build a ScanConfig from parsed arguments, reporting bad OCR options via the parser."""
    try:
        ocr_config = OCRConfig(
            lang=args.lang,
            oem=args.oem,
            psm=args.psm,
            timeout=args.timeout
        )
    except ValueError as e:
        parser.error(str(e))

    keywords: tuple[str, ...] = tuple(args.keywords) if args.keywords else DEFAULT_KEYWORDS

    return ScanConfig(
        image_dir=args.images,
        output_file=args.output,
        keywords=keywords,
        ocr=ocr_config
    )


def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point."""
    # Load environment variables from .env file if it exists
    load_dotenv()

    parser = build_parser()
    args = parser.parse_args(argv)
    config = config_from_args(parser, args)

    tesseract_cmd: str | None = args.tesseract_cmd or os.getenv("TESSERACT_CMD")
    ocr_engine = TesseractOCR(tesseract_cmd=tesseract_cmd, preprocess=args.preprocess)

    print_header()

    summary = process_images(config, ocr_engine)
    # None only on a fatal error; an empty folder still returns a summary
    sys.exit(0 if summary is not None else 1)


if __name__ == "__main__":
    main()
