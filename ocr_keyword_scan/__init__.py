"""
OCR Keyword Scan package.

This package runs a folder of document images through Tesseract OCR,
checks the recognized text for a list of keywords, and writes a
found / not found matrix as CSV.
"""

__version__ = "0.1.0"
