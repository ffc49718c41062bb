"""
Utility functions for text cleanup and symbol handling
"""
import csv
import re
import logging
from pathlib import Path
from typing import List, Iterable, Union
from ..config.enums import SuffixMode
from ..config.schema import IndexConfig
from .exceptions import DataFileError

logger = logging.getLogger(__name__)

NON_ALNUM = re.compile(r'[^a-zA-Z0-9]')

def read_csv_rows(path: Union[str, Path]) -> List[List[str]]:
    """
    Read every row of a CSV file

    Raises:
        DataFileError: if the file cannot be opened or parsed
    """
    try:
        with open(path, 'r', newline='', encoding='utf-8') as f:
            rows = list(csv.reader(f))
    except (OSError, csv.Error, UnicodeDecodeError) as e:
        raise DataFileError(f"Failed to read CSV file {path}: {e}") from e

    logger.debug(f"Read {len(rows)} rows from {path}")
    return rows

def clean_text(text: str) -> str:
    """Collapse runs of whitespace and strip the ends"""
    if not text:
        return ""

    return re.sub(r'\s+', ' ', str(text)).strip()

def clean_number(text: str) -> str:
    """
    Remove thousands separators from a number as displayed on the page

    Examples:
    - "1,23,456" -> "123456"
    - " 45.2 " -> "45.2"
    """
    if not text:
        return ""

    return clean_text(text).replace(',', '')

def trim_trailing(text: str, chars: str = ",; ") -> str:
    """
    Strip trailing separator characters only

    Examples:
    - "MktCap:100, ; BV:50; " -> "MktCap:100, ; BV:50"
    - "P/E:20" -> "P/E:20"
    """
    return text.rstrip(chars)

def pad_values(values: Iterable[str], min_count: int, default: str) -> List[str]:
    """
    Pad a value list with a default until it holds at least min_count entries

    Examples:
    - (["50.1%"], 4, "0.0%") -> ["50.1%", "0.0%", "0.0%", "0.0%"]
    """
    padded = list(values)
    while len(padded) < min_count:
        padded.append(default)
    return padded

def strip_suffixes(symbol: str, suffixes: Iterable[str], mode: SuffixMode = SuffixMode.END) -> str:
    """
    Remove exchange series suffixes from a symbol

    With SuffixMode.END only a trailing suffix is removed. SuffixMode.ANYWHERE
    removes every occurrence, which also rewrites symbols that merely contain
    the token (e.g. "AB-BEL" -> "ABL").

    Examples:
    - "RELIANCE-EQ" -> "RELIANCE"
    - "TATA-BE" -> "TATA"
    """
    cleaned = symbol
    for suffix in suffixes:
        if not suffix:
            continue
        if mode is SuffixMode.ANYWHERE:
            cleaned = cleaned.replace(suffix, "")
        elif cleaned.endswith(suffix):
            cleaned = cleaned[:-len(suffix)]
    return cleaned

def sanitize_symbol(symbol: str, config: IndexConfig) -> str:
    """
    Build the output identifier for a (suffix-stripped) symbol

    Every non-alphanumeric character becomes the placeholder, the prefix is
    prepended and strip tokens are removed.

    Examples:
    - "RELIANCE" -> "NSE:RELIANCE"
    - "M&M" -> "NSE:M_M"
    """
    identifier = NON_ALNUM.sub(config.placeholder, symbol.strip())
    for token in config.strip_tokens:
        identifier = identifier.replace(token, "")
    return f"{config.prefix}{identifier}".strip()
