"""
Result types and report output.

The CSV is a plain comma-joined matrix:

    Case,Selamat,Terima kasih
    scan_01.png,found,not found
    scan_02.png,not found,not found

Fields are not quoted, so file names and keywords containing commas or
newlines produce rows with extra columns.
"""

from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path

from .errors import FatalError

FOUND = "found"
NOT_FOUND = "not found"


@dataclass
class ImageResult:
    """Keyword status for one successfully recognized image."""
    file_name: str
    keyword_status: dict[str, bool] = field(default_factory=dict)


@dataclass(frozen=True)
class RunSummary:
    """Totals for a finished run. output_file is None when no report was written."""
    images_processed: int
    total_checks: int
    total_matches: int
    output_file: str | None

    @property
    def average_match_percentage(self) -> float:
        if self.total_checks == 0:
            return 0.0
        return 100.0 * self.total_matches / self.total_checks


def convert_to_csv(results: Sequence[ImageResult], keywords: Sequence[str]) -> str:
    """
    Convert image results into the keyword matrix CSV.

    Args:
        results: Per-image results, in row order
        keywords: Keywords, in column order

    Returns:
        CSV text: header line plus one line per result, no trailing newline
    """
    lines: list[str] = [",".join(["Case", *keywords])]

    for result in results:
        row: list[str] = [result.file_name]
        for keyword in keywords:
            found: bool = result.keyword_status.get(keyword, False)
            row.append(FOUND if found else NOT_FOUND)
        lines.append(",".join(row))

    return "\n".join(lines)


def write_csv(csv_data: str, output_file: str | Path) -> None:
    """
    Overwrite output_file with csv_data.

    Raises:
        FatalError: If the file cannot be written
    """
    try:
        Path(output_file).write_text(csv_data, encoding="utf-8")
    except OSError as e:
        raise FatalError(f"Could not write results to {output_file}: {e}") from e


def print_summary(summary: RunSummary) -> None:
    """Print the end-of-run statistics block."""
    print("\n" + "=" * 40)
    print("📊 OCR Processing Summary")
    print("=" * 40)
    print(f"Total Images Processed: {summary.images_processed}")
    print(f"Total Keywords Checked: {summary.total_checks}")
    print(f"Total Successful Matches: {summary.total_matches}")
    print(f"Average Match Percentage: {summary.average_match_percentage:.2f}%")
    print(f"Results written to: {summary.output_file}")
    print("=" * 40)
