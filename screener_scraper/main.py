"""
Main execution script for the screener.in ratios scraper
"""
import argparse
import asyncio
import logging
import sys
from dataclasses import replace
from typing import List, Optional

from .core.logger import setup_logger
from .core.browser import BrowserManager
from .core.website_loader import WebsiteLoader
from .core.exceptions import FetchError, FetchTimeoutError, FetcherStartError, ScreenerScraperError
from .core.utils import read_csv_rows
from .config.loader import load_config
from .config.schema import AppConfig, CompanyData
from .config.enums import Status, FetcherType
from .extractors.screener import ScreenerExtractor
from .exporters.csv_exporter import CSVExporter, export_failed_symbols

logger = logging.getLogger(__name__)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]

class ScreenerScraper:
    """Main scraper orchestrator"""

    def __init__(self, config: AppConfig, fetcher=None):
        self.config = config
        self.extractor = ScreenerExtractor(config)
        self.fetcher = fetcher
        self.results: List[CompanyData] = []

    def create_fetcher(self):
        """Build the page fetcher selected in settings"""
        settings = self.config.settings
        if settings.fetcher is FetcherType.HTTP:
            return WebsiteLoader(timeout=settings.timeout)
        return BrowserManager(
            headless=settings.headless,
            timeout=settings.timeout,
            settle_delay=settings.settle_delay,
        )

    def load_symbols(self, input_path: str) -> List[str]:
        """Read stock symbols from the first column of the input CSV"""
        symbols = []
        for index, record in enumerate(read_csv_rows(input_path)):
            if not record or not record[0].strip():
                logger.debug(f"Skipping empty input row {index + 1}")
                continue
            symbols.append(record[0].strip())

        logger.info(f"Loaded {len(symbols)} symbols from {input_path}")
        return symbols

    async def scrape_symbol(self, symbol: str) -> CompanyData:
        """Fetch and transform company data for one symbol"""
        url = self.config.site.url_for(symbol)

        try:
            html = await self.fetcher.fetch_page(symbol, url, self.config.site.ready_selector)
            return self.extractor.extract(symbol, html)

        except FetchTimeoutError as e:
            logger.warning(f"Timeout fetching data for {symbol}: {e}")
            return CompanyData(stock_symbol=symbol, status=Status.TIMEOUT, error=str(e))

        except FetchError as e:
            logger.error(f"Error fetching data for {symbol}: {e}")
            return CompanyData(stock_symbol=symbol, status=Status.FAILED, error=str(e))

        except Exception as e:
            logger.error(f"Failed to extract data for {symbol}: {e}")
            return CompanyData(stock_symbol=symbol, status=Status.FAILED, error=str(e))

    async def scrape_all(self, symbols: List[str], exporter: CSVExporter):
        """Scrape symbols one at a time, writing each success as it completes"""
        own_fetcher = self.fetcher is None
        if own_fetcher:
            self.fetcher = self.create_fetcher()
            try:
                await self.fetcher.start()
            except ScreenerScraperError:
                self.fetcher = None
                raise
            except Exception as e:
                self.fetcher = None
                raise FetcherStartError(f"failed to start page fetcher: {e}") from e

        try:
            for position, symbol in enumerate(symbols, start=1):
                logger.info(f"[{position}/{len(symbols)}] Fetching data for stock: {symbol}")

                data = await self.scrape_symbol(symbol)
                self.results.append(data)

                if data.status is Status.OK:
                    exporter.write(data)

                if self.config.settings.request_delay and position < len(symbols):
                    await asyncio.sleep(self.config.settings.request_delay)
        finally:
            if own_fetcher:
                await self.fetcher.close()
                self.fetcher = None

    @property
    def failed_symbols(self) -> List[str]:
        return [data.stock_symbol for data in self.results if data.status is not Status.OK]

    def print_summary(self):
        """Log summary of results"""
        status_counts = {}
        for data in self.results:
            status = data.status.value
            status_counts[status] = status_counts.get(status, 0) + 1

        logger.info("=== SCRAPING SUMMARY ===")
        logger.info(f"Total symbols processed: {len(self.results)}")
        for status, count in status_counts.items():
            logger.info(f"  {status}: {count}")

        if self.failed_symbols:
            logger.info(f"Failed symbols (re-run these): {', '.join(self.failed_symbols)}")

    async def run(self, input_path: str, output_path: str, failed_output: Optional[str] = None) -> List[CompanyData]:
        """Main execution method"""
        logger.info("=== SCREENER SCRAPER STARTED ===")

        symbols = self.load_symbols(input_path)

        with CSVExporter(output_path) as exporter:
            await self.scrape_all(symbols, exporter)

        self.print_summary()

        if failed_output and self.failed_symbols:
            export_failed_symbols(self.failed_symbols, failed_output)

        logger.info(f"Data fetching and transformation complete. Output written to {output_path}")
        return self.results

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Scrape shareholding and company ratios from screener.in",
    )
    parser.add_argument("input", help="CSV file with stock symbols in the first column")
    parser.add_argument("output", help="CSV file to write company data to")
    parser.add_argument("--config", help="YAML configuration file")
    parser.add_argument("--failed-output", help="CSV file to write failed symbols to")
    parser.add_argument("--fetcher", choices=[f.value for f in FetcherType], help="Override the page fetcher")
    parser.add_argument("--headed", action="store_true", help="Show the browser window")
    parser.add_argument("--log-level", type=str.upper, choices=LOG_LEVELS, help="Console log level")
    return parser

def cli(argv: Optional[List[str]] = None) -> int:
    """Entry point"""
    args = build_parser().parse_args(argv)

    try:
        config = load_config(args.config)
    except ScreenerScraperError as e:
        setup_logger(log_level=args.log_level or "INFO").error(str(e))
        return 1

    setup_logger(log_level=args.log_level or config.settings.log_level)

    overrides = {}
    if args.fetcher:
        overrides['fetcher'] = FetcherType(args.fetcher)
    if args.headed:
        overrides['headless'] = False
    if overrides:
        config = replace(config, settings=replace(config.settings, **overrides))

    scraper = ScreenerScraper(config)
    try:
        asyncio.run(scraper.run(args.input, args.output, args.failed_output))
    except ScreenerScraperError as e:
        logger.error(f"Scraper failed: {e}")
        return 1

    return 0

if __name__ == "__main__":
    sys.exit(cli())
