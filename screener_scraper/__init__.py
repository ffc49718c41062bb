"""
Screener Scraper

A Playwright-based scraper that collects shareholding and company ratio data
from screener.in, plus an index builder that joins symbol lists against the
scraped ratios and writes grouped index stanzas.
"""

__version__ = "1.0.0"
__author__ = "Screener Scraper Team"
