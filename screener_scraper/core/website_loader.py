"""
Website Loader - fetches server-rendered company pages over plain HTTP
"""
import logging
import requests
from bs4 import BeautifulSoup

from .exceptions import FetchError, FetchTimeoutError

logger = logging.getLogger(__name__)

class WebsiteLoader:
    """Load page HTML with requests, same contract as BrowserManager.fetch_page"""

    def __init__(self, timeout: float = 15.0, session: requests.Session = None):
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({
            'User-Agent': 'Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36'
        })

    async def start(self):
        pass

    async def fetch_page(self, symbol: str, url: str, ready_selector: str) -> str:
        """
        GET the page and return its HTML

        Raises FetchError when the ready selector is absent from the markup.
        """
        try:
            logger.debug(f"Attempting HTTP request to {url}")

            response = self.session.get(url, timeout=self.timeout)
            response.raise_for_status()

            logger.debug(f"HTTP request successful ({len(response.text)} chars)")
            html = response.text

        except requests.Timeout as e:
            raise FetchTimeoutError(symbol, f"timed out after {self.timeout:.0f}s loading {url}") from e
        except requests.RequestException as e:
            raise FetchError(symbol, str(e)) from e

        if ready_selector and BeautifulSoup(html, "html.parser").select_one(ready_selector) is None:
            raise FetchError(symbol, f"{ready_selector} not found on {url}")

        return html

    async def close(self):
        self.session.close()

    async def __aenter__(self):
        await self.start()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()
