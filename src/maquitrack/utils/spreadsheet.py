"""Spreadsheet reading and writing on top of openpyxl."""

import logging
import zipfile
from io import BytesIO
from pathlib import Path
from typing import Any, BinaryIO, Iterable, Optional, Sequence

from openpyxl import Workbook, load_workbook
from openpyxl.utils.exceptions import InvalidFileException

from maquitrack.domain.errors import SpreadsheetError

logger = logging.getLogger(__name__)

WorkbookSource = str | Path | bytes | BinaryIO


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _header_labels(header: Sequence[Any]) -> list[Optional[str]]:
    """Turn a header row into column labels, suffixing repeated labels with _1, _2..."""
    labels: list[Optional[str]] = []
    seen: dict[str, int] = {}
    for cell in header:
        if _is_blank(cell):
            labels.append(None)
            continue
        label = str(cell).strip()
        if label in seen:
            seen[label] += 1
            label = f"{label}_{seen[label]}"
        else:
            seen[label] = 0
        labels.append(label)
    return labels


class SpreadsheetReader:
    """Read-only view over an .xlsx workbook.

    Can be used as a context manager; the workbook is closed on exit.
    """

    def __init__(self, source: WorkbookSource):
        """Open a workbook.

        Args:
            source: Path to the file, raw bytes, or a binary file object

        Raises:
            SpreadsheetError: If the workbook cannot be opened
        """
        if isinstance(source, bytes):
            source = BytesIO(source)
        try:
            self._workbook = load_workbook(source, read_only=True, data_only=True)
        except (InvalidFileException, zipfile.BadZipFile, KeyError, OSError, ValueError) as e:
            raise SpreadsheetError(f"Could not read workbook: {e}") from e

    def __enter__(self) -> "SpreadsheetReader":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def close(self) -> None:
        """Release the underlying workbook."""
        self._workbook.close()

    @property
    def sheet_names(self) -> list[str]:
        """Sheet names in workbook order."""
        return list(self._workbook.sheetnames)

    def has_sheet(self, sheet_name: str) -> bool:
        """Check whether the workbook contains a sheet."""
        return sheet_name in self._workbook.sheetnames

    def rows(self, sheet_name: Optional[str] = None, header_offset: int = 0) -> list[dict[str, Any]]:
        """Read a sheet as a list of row mappings keyed by header label.

        Args:
            sheet_name: Sheet to read; None reads the first sheet
            header_offset: Number of rows above the header row (title or legend rows)

        Returns:
            Row mappings in sheet order. Blank rows are dropped and blank
            cells are left out of their row. A missing sheet yields an empty list.
        """
        return [record for _, record in self.numbered_rows(sheet_name, header_offset)]

    def numbered_rows(
        self, sheet_name: Optional[str] = None, header_offset: int = 0
    ) -> list[tuple[int, dict[str, Any]]]:
        """Like rows(), paired with the 1-based sheet row number of each record."""
        if header_offset < 0:
            raise ValueError("header_offset must not be negative")

        if sheet_name is None:
            if not self._workbook.worksheets:
                return []
            worksheet = self._workbook.worksheets[0]
        elif sheet_name not in self._workbook.sheetnames:
            logger.debug("Sheet %r not present in workbook", sheet_name)
            return []
        else:
            worksheet = self._workbook[sheet_name]

        iterator = worksheet.iter_rows(min_row=header_offset + 1, values_only=True)
        header = next(iterator, None)
        if header is None:
            return []
        labels = _header_labels(header)

        records = []
        for row_num, values in enumerate(iterator, start=header_offset + 2):
            record = {}
            for label, value in zip(labels, values):
                if label is None or _is_blank(value):
                    continue
                record[label] = value
            if record:
                records.append((row_num, record))
        return records


def write_workbook(
    destination: str | Path | BinaryIO,
    sheet_name: str,
    headers: Sequence[str],
    rows: Iterable[Sequence[Any]] = (),
) -> None:
    """Write a single-sheet workbook with one header row.

    Args:
        destination: Output path or binary file object
        sheet_name: Title of the sheet
        headers: Header labels for the first row
        rows: Optional data rows written below the header
    """
    workbook = Workbook()
    worksheet = workbook.active
    worksheet.title = sheet_name
    worksheet.append(list(headers))
    for row in rows:
        worksheet.append(list(row))
    workbook.save(destination)
