"""
CSV exporter for scraped company data
"""
import csv
import logging
from pathlib import Path
from typing import Iterable, List, Union

from ..config.schema import CompanyData
from ..core.exceptions import DataFileError

logger = logging.getLogger(__name__)

HEADERS = ['Stock Symbol', 'Shareholding Details', 'Company Ratios']

class CSVExporter:
    """Write company data rows to a CSV file as they are produced"""

    def __init__(self, filepath: Union[str, Path]):
        self.filepath = Path(filepath)
        self._file = None
        self._writer = None
        self.rows_written = 0

    def open(self):
        """Create the output file and write the header"""
        try:
            self.filepath.parent.mkdir(parents=True, exist_ok=True)
            self._file = open(self.filepath, 'w', newline='', encoding='utf-8')
            self._writer = csv.writer(self._file)
            self._writer.writerow(HEADERS)
        except OSError as e:
            raise DataFileError(f"Failed to create output CSV file {self.filepath}: {e}") from e

        logger.debug(f"Writing company data to {self.filepath}")
        return self

    def write(self, data: CompanyData):
        """Append one company row"""
        try:
            self._writer.writerow(data.to_row())
        except OSError as e:
            raise DataFileError(f"Failed to write to {self.filepath}: {e}") from e

        self.rows_written += 1

    def close(self):
        if self._file:
            self._file.close()
            self._file = None
            logger.info(f"Exported {self.rows_written} company rows to {self.filepath}")

    def __enter__(self):
        return self.open()

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

def export_failed_symbols(symbols: Iterable[str], filepath: Union[str, Path]) -> str:
    """
    Write failed symbols one per row so the file can be fed back as input

    Returns:
        Path to the created CSV file
    """
    filepath = Path(filepath)
    failed: List[str] = list(symbols)

    try:
        filepath.parent.mkdir(parents=True, exist_ok=True)
        with open(filepath, 'w', newline='', encoding='utf-8') as f:
            writer = csv.writer(f)
            for symbol in failed:
                writer.writerow([symbol])
    except OSError as e:
        raise DataFileError(f"Failed to write failed symbols to {filepath}: {e}") from e

    logger.info(f"Wrote {len(failed)} failed symbols to {filepath}")
    return str(filepath)
