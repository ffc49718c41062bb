"""
Shared fixtures for the screener scraper tests
"""
import logging

import pytest

from screener_scraper.config.loader import load_config
from screener_scraper.core.exceptions import FetchError, FetchTimeoutError

COMPANY_HTML = """
<html><body>
<div class="company-ratios">
  <ul id="top-ratios">
    <li class="flex flex-space-between">
      <span class="name">Market Cap</span>
      <span class="nowrap value">&#8377; <span class="number">17,45,678</span> Cr.</span>
    </li>
    <li class="flex flex-space-between">
      <span class="name">Current Price</span>
      <span class="nowrap value">&#8377; <span class="number">2,580</span></span>
    </li>
    <li class="flex flex-space-between">
      <span class="name">High / Low</span>
      <span class="nowrap value">&#8377; <span class="number">3,218</span> / <span class="number">2,221</span></span>
    </li>
    <li class="flex flex-space-between">
      <span class="name">
        Stock P/E
      </span>
      <span class="nowrap value"><span class="number">25.4</span></span>
    </li>
    <li class="flex flex-space-between">
      <span class="name">Book Value</span>
      <span class="nowrap value">&#8377; <span class="number">1,189</span></span>
    </li>
    <li class="flex flex-space-between">
      <span class="name">Dividend Yield</span>
      <span class="nowrap value"><span class="number">0.39</span> %</span>
    </li>
    <li class="flex flex-space-between">
      <span class="name">ROCE</span>
      <span class="nowrap value"><span class="number">9.69</span> %</span>
    </li>
    <li class="flex flex-space-between">
      <span class="name">ROE</span>
      <span class="nowrap value"><span class="number">8.51</span> %</span>
    </li>
    <li class="flex flex-space-between">
      <span class="name">Face Value</span>
      <span class="nowrap value">&#8377; <span class="number">10.0</span></span>
    </li>
    <li class="flex flex-space-between">
      <span class="name">Debt to equity</span>
      <span class="nowrap value"><span class="number">0.44</span></span>
    </li>
  </ul>
</div>
<section id="quarterly-shp">
  <table class="data-table">
    <thead><tr><th></th><th>Mar 2022</th><th>Jun 2022</th></tr></thead>
    <tbody>
      <tr><td>Promoters</td><td>50.66%</td><td>50.56%</td><td>50.49%</td><td>50.49%</td><td>50.41%</td><td>50.39%</td><td>50.27%</td><td>50.30%</td><td>50.33%</td><td>50.31%</td><td>50.24%</td><td>50.11%</td></tr>
      <tr><td>FIIs</td><td>24.23%</td><td>23.58%</td><td>23.48%</td><td>23.43%</td><td>22.55%</td><td>22.49%</td><td>22.60%</td><td>22.13%</td><td>22.06%</td><td>22.20%</td><td>21.75%</td><td>21.30%</td></tr>
      <tr><td>DIIs</td><td>13.66%</td><td>14.09%</td><td>14.36%</td><td>14.66%</td><td>15.22%</td><td>15.70%</td><td>15.98%</td><td>16.59%</td><td>16.80%</td><td>16.81%</td><td>17.30%</td><td>17.87%</td></tr>
      <tr><td>Public</td><td>11.44%</td><td>11.76%</td><td>11.66%</td><td>11.42%</td><td>11.83%</td><td>11.42%</td><td>11.16%</td><td>10.98%</td><td>10.81%</td><td>10.68%</td><td>10.71%</td><td>10.72%</td></tr>
      <tr><td>No. of Shareholders</td><td>33,58,451</td><td>33,99,018</td></tr>
    </tbody>
  </table>
</section>
</body></html>
"""

@pytest.fixture
def config():
    return load_config()

@pytest.fixture
def company_html():
    return COMPANY_HTML

class FakeFetcher:
    """Stands in for BrowserManager: serves canned HTML or raises per symbol"""

    def __init__(self, pages=None, timeouts=(), failures=()):
        self.pages = pages or {}
        self.timeouts = set(timeouts)
        self.failures = set(failures)
        self.requested = []

    async def fetch_page(self, symbol, url, ready_selector):
        self.requested.append(url)
        if symbol in self.timeouts:
            raise FetchTimeoutError(symbol, "timed out after 15s")
        if symbol in self.failures:
            raise FetchError(symbol, "net::ERR_NAME_NOT_RESOLVED")
        return self.pages.get(symbol, COMPANY_HTML)

    async def start(self):
        pass

    async def close(self):
        pass

@pytest.fixture
def fake_fetcher_factory():
    return FakeFetcher

@pytest.fixture(autouse=True)
def reset_app_logger():
    """Drop handlers installed by setup_logger so each test starts clean"""
    yield
    app_logger = logging.getLogger("screener_scraper")
    for handler in list(app_logger.handlers):
        app_logger.removeHandler(handler)
        handler.close()
    app_logger.setLevel(logging.NOTSET)
