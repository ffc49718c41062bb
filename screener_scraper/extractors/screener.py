"""
screener.in company page extractor
"""
import logging
from typing import List

from bs4 import BeautifulSoup

from .base_extractor import BaseExtractor
from ..config.schema import RawField
from ..core.utils import clean_text, clean_number

logger = logging.getLogger(__name__)

class ScreenerExtractor(BaseExtractor):
    """Extractor for screener.in consolidated company pages"""

    def extract_ratios(self, soup: BeautifulSoup, symbol: str) -> List[RawField]:
        fields = []

        for li in soup.select(self.site.ratios_selector):
            name_span = li.select_one(self.site.name_selector)

            if name_span is not None:
                label = clean_text(name_span.get_text())
                values = [clean_number(span.get_text()) for span in li.select(self.site.number_selector)]
                field = RawField(label=label, values=values)
            else:
                # No name span, fall back to "Label: value" text
                field = RawField.from_text(clean_text(li.get_text(" ")))

            if field is None or not field.label.strip():
                logger.warning(f"[{symbol}] Skipping malformed ratio entry: {clean_text(li.get_text(' '))!r}")
                continue

            fields.append(field)

        if not fields:
            logger.warning(f"[{symbol}] No company ratios found")

        return fields

    def extract_shareholding(self, soup: BeautifulSoup, symbol: str) -> List[str]:
        rows = soup.select(self.site.shareholding_selector)
        min_count = self.config.shareholding.min_count
        default = self.config.shareholding.default

        if not rows:
            logger.warning(f"[{symbol}] No shareholding table found, using {default}")
            return []

        values = []
        for row in rows[:min_count]:
            cells = row.find_all('td')

            # Prefer the latest quarter column, older layouts only carry one
            if len(cells) > self.site.shareholding_column:
                values.append(clean_text(cells[self.site.shareholding_column].get_text()))
            elif len(cells) > self.site.shareholding_fallback_column:
                values.append(clean_text(cells[self.site.shareholding_fallback_column].get_text()))
            else:
                values.append(default)

        return values
