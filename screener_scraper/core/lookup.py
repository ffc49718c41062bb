"""
Secondary lookup table joined against symbol rows
"""
import logging
from pathlib import Path
from typing import Dict, Sequence, Tuple, Union

from .utils import read_csv_rows

logger = logging.getLogger(__name__)

class LookupTable:
    """
    Read-only table of rows keyed by their first column

    Keys match exactly (case-sensitive, stored key is not trimmed). When a
    key appears more than once the first row wins. Rows shorter than three
    columns never match.
    """

    def __init__(self, rows: Sequence[Sequence[str]], sentinel: str = "NA"):
        self.rows: Tuple[Tuple[str, ...], ...] = tuple(tuple(row) for row in rows)
        self.sentinel = sentinel
        self._index: Dict[str, Tuple[str, str]] = {}

        for row in self.rows:
            if len(row) > 2 and row[0] not in self._index:
                self._index[row[0]] = (row[1], row[2])

    @classmethod
    def load(cls, path: Union[str, Path], sentinel: str = "NA") -> "LookupTable":
        """Read the whole CSV file once"""
        table = cls(read_csv_rows(path), sentinel=sentinel)

        logger.info(f"Loaded {len(table)} lookup rows from {path}")
        return table

    def find(self, key: str) -> Tuple[str, str]:
        """Return the second and third columns of the first matching row"""
        values = self._index.get(key)
        if values is None:
            logger.debug(f"No lookup match for {key}")
            return (self.sentinel, self.sentinel)
        return values

    def scan(self, key: str) -> Tuple[str, str]:
        """
        Reference first-match scan over the raw rows

        find() answers from the index built in __init__ and must always agree
        with this.
        """
        for row in self.rows:
            if len(row) > 2 and row[0] == key:
                return (row[1], row[2])
        return (self.sentinel, self.sentinel)

    def __len__(self) -> int:
        return len(self.rows)
