"""
Data schema definitions for record extraction, normalization and output
"""
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Optional, List, Mapping, Tuple
from .enums import Status, FetcherType, SuffixMode

@dataclass
class RawField:
    """A labeled field pulled from the source page"""
    label: str
    values: List[str] = field(default_factory=list)

    @property
    def value(self) -> str:
        return " / ".join(v.strip() for v in self.values).strip()

    @classmethod
    def from_text(cls, text: str) -> Optional["RawField"]:
        """
        Parse a "Label: v1 / v2" line

        Returns None when the line has no ':' separator.
        """
        if not text or ":" not in text:
            return None

        label, rest = text.split(":", 1)
        values = [v.replace(",", "").strip() for v in rest.split(" / ")]
        return cls(label=label, values=[v for v in values if v])

@dataclass
class CompanyData:
    """Scraped and normalized data for one stock symbol"""
    stock_symbol: str
    company_ratios: str = ""
    shareholding: List[str] = field(default_factory=list)
    shareholding_details: str = ""
    status: Status = Status.OK
    error: Optional[str] = None

    def to_row(self) -> List[str]:
        """Convert to an output CSV row"""
        return [self.stock_symbol, self.shareholding_details, self.company_ratios]

@dataclass
class IndexEntry:
    """One output stanza of the index builder"""
    sequence: int
    symbol: str
    fields: Tuple[str, ...]
    lookup: Tuple[str, str]

    def render(self, template: str) -> str:
        values = ", ".join(list(self.fields) + list(self.lookup))
        return template.format(seq=self.sequence, symbol=self.symbol, values=values)

# Configuration structures. Built once at startup by config.loader and
# never mutated afterwards.

DEFAULT_KEY_MAP = MappingProxyType({
    "Market Cap": "MktCap",
    "Current Price": "CP",
    "High / Low": "HL",
    "Stock P/E": "P/E",
    "Book Value": "BV",
    "Dividend Yield": "DY",
    "ROCE": "ROCE",
    "ROE": "ROE",
    "Face Value": "FV",
})

@dataclass(frozen=True)
class SiteConfig:
    """Where and how to read a company page"""
    url_template: str = "https://www.screener.in/company/{symbol}/consolidated/"
    ready_selector: str = "div.company-ratios"
    ratios_selector: str = "div.company-ratios li"
    name_selector: str = "span.name"
    number_selector: str = "span.number"
    shareholding_selector: str = "#quarterly-shp table.data-table tbody tr"
    shareholding_column: int = 12
    shareholding_fallback_column: int = 1

    def url_for(self, symbol: str) -> str:
        return self.url_template.format(symbol=symbol)

@dataclass(frozen=True)
class ScraperSettings:
    """Runtime settings for fetching"""
    fetcher: FetcherType = FetcherType.BROWSER
    headless: bool = True
    timeout: float = 15.0
    settle_delay: float = 2.0
    request_delay: float = 0.0
    log_level: str = "INFO"

@dataclass(frozen=True)
class RatioConfig:
    """Rename table, denylist and separators for the company ratio string"""
    key_map: Mapping[str, str] = field(default_factory=lambda: DEFAULT_KEY_MAP)
    denylist: frozenset = frozenset({"CP", "HL", "DY"})
    default_separator: str = "; "
    separators: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({"MktCap": ", "}))
    trim_chars: str = ",; "

@dataclass(frozen=True)
class ShareholdingConfig:
    """Labels and sentinel handling for the shareholding sub-fields"""
    labels: Tuple[str, ...] = ("P", "FIIs", "DIIs", "O")
    min_count: int = 4
    default: str = "0.0%"
    joiner: str = "; "
    anomaly_char: str = ","
    anomaly_labels: frozenset = frozenset({"O"})

@dataclass(frozen=True)
class IndexConfig:
    """Symbol sanitization and output layout for the index builder"""
    suffixes: Tuple[str, ...] = ("-BE", "-EQ", "-BZ")
    suffix_mode: SuffixMode = SuffixMode.END
    prefix: str = "NSE:"
    placeholder: str = "_"
    strip_tokens: Tuple[str, ...] = ("_BE",)
    modulus: int = 19
    sentinel: str = "NA"
    skip_header: bool = True
    min_columns: int = 3
    line_template: str = "    index_{seq:02d} := '{symbol}', index_{seq:02d}_mc := '{values}'"

@dataclass(frozen=True)
class AppConfig:
    """Complete application configuration"""
    site: SiteConfig = field(default_factory=SiteConfig)
    settings: ScraperSettings = field(default_factory=ScraperSettings)
    ratios: RatioConfig = field(default_factory=RatioConfig)
    shareholding: ShareholdingConfig = field(default_factory=ShareholdingConfig)
    index: IndexConfig = field(default_factory=IndexConfig)
