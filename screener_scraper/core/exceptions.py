"""
Exception types raised by the scraper and index builder
"""

class ScreenerScraperError(Exception):
    """Base class for all scraper errors"""

class FetchError(ScreenerScraperError):
    """The source page could not be retrieved"""

    def __init__(self, symbol: str, message: str):
        self.symbol = symbol
        super().__init__(f"error fetching company data for {symbol}: {message}")

class FetchTimeoutError(FetchError):
    """The source page did not become ready within the timeout"""

class DataFileError(ScreenerScraperError):
    """A required input or output file could not be opened, read or written"""

class ConfigError(ScreenerScraperError):
    """The configuration file is missing or invalid"""

class FetcherStartError(ScreenerScraperError):
    """The page fetcher (browser or HTTP session) could not be started"""
