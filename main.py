#!/usr/bin/env python3
"""
Entry point for the OCR Keyword Scan CLI.

Usage:
    python main.py                                  # Scan ./images for the default keyword
    python main.py --images scans --output out.csv  # Custom folders
    python main.py --keyword Selamat --keyword Terima --lang ind
"""

from ocr_keyword_scan.cli import main

if __name__ == "__main__":
    main()
