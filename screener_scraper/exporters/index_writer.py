"""
Text writer for grouped index stanzas
"""
import logging
from pathlib import Path
from typing import Union

from ..config.schema import IndexEntry
from ..core.exceptions import DataFileError

logger = logging.getLogger(__name__)

class IndexWriter:
    """Write rendered index lines and group separators to a text file"""

    def __init__(self, filepath: Union[str, Path], line_template: str, echo: bool = False):
        self.filepath = Path(filepath)
        self.line_template = line_template
        self.echo = echo
        self._file = None
        self.lines_written = 0

    def open(self):
        try:
            self.filepath.parent.mkdir(parents=True, exist_ok=True)
            self._file = open(self.filepath, 'w', encoding='utf-8')
        except OSError as e:
            raise DataFileError(f"Failed to create output file {self.filepath}: {e}") from e
        return self

    def _emit(self, text: str):
        try:
            self._file.write(text + "\n")
        except OSError as e:
            raise DataFileError(f"Failed to write to file {self.filepath}: {e}") from e

        if self.echo:
            print(text)

    def write_entry(self, entry: IndexEntry):
        self._emit(entry.render(self.line_template))
        self.lines_written += 1

    def write_separator(self):
        self._emit("")

    def close(self):
        if self._file:
            self._file.close()
            self._file = None
            logger.info(f"Wrote {self.lines_written} index lines to {self.filepath}")

    def __enter__(self):
        return self.open()

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
