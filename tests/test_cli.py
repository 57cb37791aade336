"""
Tests for the command-line entry point.
"""

from unittest.mock import Mock, patch

import pytest

from ocr_keyword_scan import cli
from ocr_keyword_scan.config import OCRConfig, ScanConfig
from ocr_keyword_scan.report import RunSummary


# ============================================================================
# Argument Parsing Tests
# ============================================================================

def test_config_from_args_defaults():
    """Test no arguments gives the default scan configuration."""
    parser = cli.build_parser()
    config = cli.config_from_args(parser, parser.parse_args([]))

    assert config == ScanConfig()


def test_config_from_args_custom():
    """Test every flag lands in the configuration, keywords in flag order."""
    parser = cli.build_parser()
    args = parser.parse_args([
        "--images", "scans",
        "--output", "out/report.csv",
        "--keyword", "Terima kasih",
        "--keyword", "Selamat",
        "--lang", "ind",
        "--oem", "3",
        "--psm", "6",
        "--timeout", "15",
    ])

    config = cli.config_from_args(parser, args)

    assert config.image_dir == "scans"
    assert config.output_file == "out/report.csv"
    assert config.keywords == ("Terima kasih", "Selamat")
    assert config.ocr == OCRConfig(lang="ind", oem=3, psm=6, timeout=15)


def test_config_from_args_invalid_psm():
    """Test invalid OCR options exit with a usage error."""
    parser = cli.build_parser()
    args = parser.parse_args(["--psm", "42"])

    with pytest.raises(SystemExit) as exc_info:
        cli.config_from_args(parser, args)

    assert exc_info.value.code == 2


# ============================================================================
# main() Tests
# ============================================================================

@patch('ocr_keyword_scan.cli.load_dotenv')
@patch('ocr_keyword_scan.cli.TesseractOCR')
@patch('ocr_keyword_scan.cli.process_images')
def test_main_success(mock_process: Mock, mock_engine_cls: Mock, mock_dotenv: Mock,
                      monkeypatch: pytest.MonkeyPatch):
    """Test a successful run exits 0 and wires the engine options."""
    monkeypatch.delenv("TESSERACT_CMD", raising=False)
    mock_process.return_value = RunSummary(1, 1, 1, "results.csv")

    with pytest.raises(SystemExit) as exc_info:
        cli.main(["--images", "scans", "--preprocess"])

    assert exc_info.value.code == 0
    mock_engine_cls.assert_called_once_with(tesseract_cmd=None, preprocess=True)
    config, engine = mock_process.call_args.args
    assert config.image_dir == "scans"
    assert engine is mock_engine_cls.return_value


@patch('ocr_keyword_scan.cli.load_dotenv')
@patch('ocr_keyword_scan.cli.TesseractOCR')
@patch('ocr_keyword_scan.cli.process_images')
def test_main_fatal_error_exits_1(mock_process: Mock, mock_engine_cls: Mock, mock_dotenv: Mock):
    """Test a run that hit a fatal error exits 1."""
    mock_process.return_value = None

    with pytest.raises(SystemExit) as exc_info:
        cli.main([])

    assert exc_info.value.code == 1


@patch('ocr_keyword_scan.cli.load_dotenv')
@patch('ocr_keyword_scan.cli.TesseractOCR')
@patch('ocr_keyword_scan.cli.process_images')
def test_main_no_images_exits_0(mock_process: Mock, mock_engine_cls: Mock, mock_dotenv: Mock):
    """Test a folder with no supported images is a normal run and exits 0."""
    mock_process.return_value = RunSummary(0, 0, 0, None)

    with pytest.raises(SystemExit) as exc_info:
        cli.main([])

    assert exc_info.value.code == 0


@patch('ocr_keyword_scan.cli.load_dotenv')
@patch('ocr_keyword_scan.cli.TesseractOCR')
@patch('ocr_keyword_scan.cli.process_images')
def test_main_tesseract_cmd_from_env(mock_process: Mock, mock_engine_cls: Mock, mock_dotenv: Mock,
                                     monkeypatch: pytest.MonkeyPatch):
    """Test TESSERACT_CMD is used when the flag is absent."""
    monkeypatch.setenv("TESSERACT_CMD", "/usr/local/bin/tesseract")
    mock_process.return_value = None

    with pytest.raises(SystemExit):
        cli.main([])

    mock_engine_cls.assert_called_once_with(tesseract_cmd="/usr/local/bin/tesseract", preprocess=False)


@patch('ocr_keyword_scan.cli.load_dotenv')
@patch('ocr_keyword_scan.cli.TesseractOCR')
@patch('ocr_keyword_scan.cli.process_images')
def test_main_tesseract_cmd_flag_wins(mock_process: Mock, mock_engine_cls: Mock, mock_dotenv: Mock,
                                      monkeypatch: pytest.MonkeyPatch):
    """Test the flag overrides TESSERACT_CMD."""
    monkeypatch.setenv("TESSERACT_CMD", "/usr/local/bin/tesseract")
    mock_process.return_value = None

    with pytest.raises(SystemExit):
        cli.main(["--tesseract-cmd", "/opt/tess"])

    mock_engine_cls.assert_called_once_with(tesseract_cmd="/opt/tess", preprocess=False)
