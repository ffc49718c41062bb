"""
Key normalization, filtering and serialization of extracted fields
"""
import logging
from typing import Dict, Iterable, List

from ..config.schema import RawField, RatioConfig, ShareholdingConfig
from .utils import trim_trailing, pad_values

logger = logging.getLogger(__name__)

class KeyNormalizer:
    """Rename, filter and serialize company ratio fields"""

    def __init__(self, config: RatioConfig):
        self.config = config

    def canonical_key(self, label: str) -> str:
        """Map a page label to its canonical key, or return it trimmed"""
        trimmed = label.strip()
        return self.config.key_map.get(trimmed, trimmed)

    def is_denied(self, key: str) -> bool:
        return key in self.config.denylist

    def separator_for(self, key: str) -> str:
        return self.config.separators.get(key, self.config.default_separator)

    def normalize(self, fields: Iterable[RawField], symbol: str = "") -> Dict[str, str]:
        """
        Build the normalized record for a sequence of raw fields

        Denylisted keys are dropped. When a key appears more than once the
        first occurrence is kept.
        """
        record: Dict[str, str] = {}

        for raw in fields:
            key = self.canonical_key(raw.label)
            if not key:
                logger.warning(f"[{symbol}] Skipping field with empty label: {raw.values}")
                continue

            if self.is_denied(key):
                continue

            if key in record:
                logger.debug(f"[{symbol}] Duplicate key {key}, keeping first value")
                continue

            record[key] = raw.value

        return record

    def serialize(self, record: Dict[str, str]) -> str:
        """Join a normalized record into the company ratio string"""
        parts = [f"{key}:{value}{self.separator_for(key)}" for key, value in record.items()]
        return trim_trailing("".join(parts), self.config.trim_chars)

    def transform(self, fields: Iterable[RawField], symbol: str = "") -> str:
        return self.serialize(self.normalize(fields, symbol))

def format_shareholding(values: List[str], config: ShareholdingConfig) -> str:
    """
    Format shareholding percentages as labeled sub-fields

    Examples:
    - ["50.3%", "20.1%", "15.2%", "14.4%"] -> "P:50.3%; FIIs:20.1%; DIIs:15.2%; O:14.4%"

    A sub-field listed in anomaly_labels that contains the anomaly character
    is replaced with the default sentinel.
    """
    padded = pad_values(values, len(config.labels), config.default)

    parts = []
    for label, value in zip(config.labels, padded):
        value = value.strip()
        if label in config.anomaly_labels and config.anomaly_char in value:
            value = config.default
        parts.append(f"{label}:{value}")

    return config.joiner.join(parts)
