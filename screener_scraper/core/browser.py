"""
Browser management using Playwright
"""
import asyncio
import logging
from typing import Optional
from playwright.async_api import async_playwright, Browser, BrowserContext, Page
from playwright.async_api import TimeoutError as PlaywrightTimeoutError
from playwright.async_api import Error as PlaywrightError

from .exceptions import FetchError, FetchTimeoutError, FetcherStartError

logger = logging.getLogger(__name__)

class BrowserManager:
    """Manage a Playwright browser and fetch rendered company pages"""

    def __init__(self, headless: bool = True, timeout: float = 15.0, settle_delay: float = 2.0):
        self.headless = headless
        self.timeout = timeout
        self.settle_delay = settle_delay
        self.playwright = None
        self.browser: Optional[Browser] = None
        self.context: Optional[BrowserContext] = None

    async def start(self):
        """Start the browser"""
        try:
            self.playwright = await async_playwright().start()

            # Launch browser with options
            self.browser = await self.playwright.chromium.launch(
                headless=self.headless,
                args=[
                    '--no-sandbox',
                    '--disable-dev-shm-usage',
                    '--disable-blink-features=AutomationControlled',
                    '--disable-extensions',
                ]
            )

            # Create context with realistic settings
            self.context = await self.browser.new_context(
                viewport={'width': 1920, 'height': 1080},
                user_agent='Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36'
            )

            # Playwright timeouts are in milliseconds
            self.context.set_default_timeout(self.timeout * 1000)

            logger.info("Browser started successfully")

        except (PlaywrightError, OSError) as e:
            logger.error(f"Failed to start browser: {e}")
            await self.close()
            raise FetcherStartError(f"failed to start browser: {e}") from e

    async def new_page(self) -> Page:
        """Create a new page"""
        if not self.context:
            await self.start()

        page = await self.context.new_page()

        await page.add_init_script("""
            Object.defineProperty(navigator, 'webdriver', {
                get: () => undefined,
            });
        """)

        return page

    async def _load(self, page: Page, url: str, ready_selector: str) -> str:
        logger.debug(f"Loading page: {url}")

        response = await page.goto(url, wait_until='domcontentloaded')
        if response and response.status >= 400:
            logger.warning(f"Page loaded with status {response.status}: {url}")

        await page.wait_for_selector(ready_selector, state='visible')

        # Allow late scripts to fill in the tables
        if self.settle_delay:
            await page.wait_for_timeout(self.settle_delay * 1000)

        return await page.content()

    async def fetch_page(self, symbol: str, url: str, ready_selector: str) -> str:
        """
        Load a page and return its rendered HTML

        The whole load is bounded by self.timeout seconds.

        Raises:
            FetchTimeoutError: if the page or ready selector did not appear in time
            FetchError: for any other navigation failure
        """
        page = await self.new_page()
        try:
            return await asyncio.wait_for(self._load(page, url, ready_selector), timeout=self.timeout)
        except (asyncio.TimeoutError, PlaywrightTimeoutError) as e:
            raise FetchTimeoutError(symbol, f"timed out after {self.timeout:.0f}s loading {url}") from e
        except PlaywrightError as e:
            raise FetchError(symbol, str(e)) from e
        finally:
            await page.close()

    async def close(self):
        """Close the browser"""
        try:
            if self.context:
                await self.context.close()
            if self.browser:
                await self.browser.close()
            if self.playwright:
                await self.playwright.stop()

            logger.info("Browser closed successfully")

        except Exception as e:
            logger.error(f"Error closing browser: {e}")

    async def __aenter__(self):
        await self.start()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()
