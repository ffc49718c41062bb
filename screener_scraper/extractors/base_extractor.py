"""
Base extractor class for company page extractors
"""
import logging
from abc import ABC, abstractmethod
from typing import List

from bs4 import BeautifulSoup

from ..config.schema import AppConfig, CompanyData, RawField
from ..config.enums import Status
from ..core.normalizer import KeyNormalizer, format_shareholding
from ..core.utils import pad_values

logger = logging.getLogger(__name__)

class BaseExtractor(ABC):
    """Abstract base class for all company page extractors"""

    def __init__(self, config: AppConfig):
        self.config = config
        self.site = config.site
        self.normalizer = KeyNormalizer(config.ratios)

    @abstractmethod
    def extract_ratios(self, soup: BeautifulSoup, symbol: str) -> List[RawField]:
        """
        Extract the labeled company ratio fields in page order

        Malformed entries are skipped individually.
        """
        pass

    @abstractmethod
    def extract_shareholding(self, soup: BeautifulSoup, symbol: str) -> List[str]:
        """
        Extract the latest shareholding percentages

        Returns:
            List of percentage strings in promoter, FII, DII, others order
        """
        pass

    def extract(self, symbol: str, html: str) -> CompanyData:
        """
        Turn a company page into normalized CompanyData

        This is the main method that orchestrates extraction, normalization
        and formatting for one symbol.
        """
        soup = self.parse_html_content(html)

        fields = self.extract_ratios(soup, symbol)
        shareholding = pad_values(
            self.extract_shareholding(soup, symbol),
            self.config.shareholding.min_count,
            self.config.shareholding.default,
        )

        data = CompanyData(
            stock_symbol=symbol,
            company_ratios=self.normalizer.transform(fields, symbol),
            shareholding=shareholding,
            shareholding_details=format_shareholding(shareholding, self.config.shareholding),
            status=Status.OK,
        )

        logger.debug(f"[{symbol}] Extracted {len(fields)} ratio fields")
        return data

    def parse_html_content(self, html: str) -> BeautifulSoup:
        """Parse page HTML using BeautifulSoup with built-in parser"""
        return BeautifulSoup(html or "", 'html.parser')
