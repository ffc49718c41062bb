"""
Index builder: join symbol rows against scraped company data and write
grouped index stanzas
"""
import argparse
import logging
import sys
from typing import List, Optional, Sequence

from .core.logger import setup_logger
from .core.exceptions import ScreenerScraperError
from .core.lookup import LookupTable
from .core.sequencer import SequenceCounter
from .core.utils import read_csv_rows, strip_suffixes, sanitize_symbol
from .config.loader import load_config
from .config.schema import AppConfig, IndexEntry
from .exporters.index_writer import IndexWriter

logger = logging.getLogger(__name__)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]

class IndexBuilder:
    """Turn symbol rows into index stanzas, 19 to a block"""

    def __init__(self, config: AppConfig, lookup: LookupTable):
        self.config = config
        self.index_config = config.index
        self.lookup = lookup
        self.counter = SequenceCounter(self.index_config.modulus)
        self.skipped_rows: List[int] = []

    def build_entry(self, row: Sequence[str], sequence: int) -> IndexEntry:
        """
        Build the stanza for one input row

        The join key and the output identifier both come from the
        trimmed, suffix-stripped symbol.
        """
        cfg = self.index_config
        symbol = strip_suffixes(row[0].strip(), cfg.suffixes, cfg.suffix_mode)

        return IndexEntry(
            sequence=sequence,
            symbol=sanitize_symbol(symbol, cfg),
            fields=(row[1], row[2]),
            lookup=self.lookup.find(symbol),
        )

    def process(self, rows: Sequence[Sequence[str]], writer: IndexWriter):
        """
        Write one line per data row and a blank line every modulus rows

        Rows too short to format are logged and skipped. They still use up
        their sequence slot.
        """
        self.counter.reset()
        start = 1 if self.index_config.skip_header else 0

        for line_number, row in enumerate(rows[start:], start=start + 1):
            # Blank lines are not data rows
            if not row:
                continue

            if len(row) >= self.index_config.min_columns:
                writer.write_entry(self.build_entry(row, self.counter.value))
            else:
                logger.warning(f"Skipping malformed row {line_number} ({row[0]!r}): "
                               f"expected {self.index_config.min_columns} columns, got {len(row)}")
                self.skipped_rows.append(line_number)

            if self.counter.advance():
                writer.write_separator()

    def run(self, input_path: str, output_path: str, echo: bool = False):
        """Main execution method"""
        rows = read_csv_rows(input_path)

        with IndexWriter(output_path, self.index_config.line_template, echo=echo) as writer:
            self.process(rows, writer)

        if self.skipped_rows:
            logger.info(f"Skipped rows: {', '.join(str(n) for n in self.skipped_rows)}")
        logger.info(f"Processing complete, output written to: {output_path}")

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Build grouped index stanzas from a symbol CSV",
    )
    parser.add_argument("input", help="CSV file with a header row and symbol, value, value columns")
    parser.add_argument("output", help="Text file to write index stanzas to")
    parser.add_argument("--lookup", required=True, help="Company data CSV to join against")
    parser.add_argument("--config", help="YAML configuration file")
    parser.add_argument("--echo", action="store_true", help="Also print each line to stdout")
    parser.add_argument("--log-level", type=str.upper, choices=LOG_LEVELS, help="Console log level")
    return parser

def cli(argv: Optional[List[str]] = None) -> int:
    """Entry point"""
    args = build_parser().parse_args(argv)

    try:
        config = load_config(args.config)
        setup_logger(log_level=args.log_level or config.settings.log_level)

        lookup = LookupTable.load(args.lookup, sentinel=config.index.sentinel)
        IndexBuilder(config, lookup).run(args.input, args.output, echo=args.echo)

    except ScreenerScraperError as e:
        setup_logger(log_level=args.log_level or "INFO").error(f"Index build failed: {e}")
        return 1

    return 0

if __name__ == "__main__":
    sys.exit(cli())
