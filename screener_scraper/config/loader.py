"""
Load the YAML configuration into immutable config structures
"""
import logging
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Optional, Union

import yaml

from .enums import FetcherType, SuffixMode
from .schema import (
    AppConfig, SiteConfig, ScraperSettings, RatioConfig,
    ShareholdingConfig, IndexConfig,
)
from ..core.exceptions import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).parent / "settings.yaml"

def _section(config: Dict[str, Any], name: str) -> Dict[str, Any]:
    section = config.get(name) or {}
    if not isinstance(section, dict):
        raise ConfigError(f"Section '{name}' must be a mapping, got {type(section).__name__}")
    return section

def _build_site(section: Dict[str, Any]) -> SiteConfig:
    return SiteConfig(**section)

def _build_settings(section: Dict[str, Any]) -> ScraperSettings:
    values = dict(section)
    if 'fetcher' in values:
        values['fetcher'] = FetcherType(values['fetcher'])
    for key in ('timeout', 'settle_delay', 'request_delay'):
        if key in values:
            values[key] = float(values[key])
    return ScraperSettings(**values)

def _build_ratios(section: Dict[str, Any]) -> RatioConfig:
    values = dict(section)
    if 'key_map' in values:
        values['key_map'] = MappingProxyType(
            {str(k).strip(): str(v) for k, v in values['key_map'].items()}
        )
    if 'denylist' in values:
        values['denylist'] = frozenset(str(k) for k in values['denylist'])
    if 'separators' in values:
        values['separators'] = MappingProxyType(
            {str(k): str(v) for k, v in values['separators'].items()}
        )
    return RatioConfig(**values)

def _build_shareholding(section: Dict[str, Any]) -> ShareholdingConfig:
    values = dict(section)
    if 'labels' in values:
        values['labels'] = tuple(str(label) for label in values['labels'])
    if 'anomaly_labels' in values:
        values['anomaly_labels'] = frozenset(str(label) for label in values['anomaly_labels'])
    return ShareholdingConfig(**values)

def _build_index(section: Dict[str, Any]) -> IndexConfig:
    values = dict(section)
    if 'suffixes' in values:
        values['suffixes'] = tuple(values['suffixes'])
    if 'strip_tokens' in values:
        values['strip_tokens'] = tuple(values['strip_tokens'])
    if 'suffix_mode' in values:
        values['suffix_mode'] = SuffixMode(values['suffix_mode'])
    if 'sentinel' in values:
        values['sentinel'] = str(values['sentinel'])
    return IndexConfig(**values)

def load_config(config_path: Optional[Union[str, Path]] = None) -> AppConfig:
    """
    Load configuration from a YAML file

    Args:
        config_path: Path to the YAML file. The packaged settings.yaml is
            used when omitted.

    Returns:
        AppConfig with every section filled in (missing keys keep defaults)

    Raises:
        ConfigError: if the file cannot be read or holds invalid values
    """
    path = Path(config_path) if config_path else DEFAULT_CONFIG_PATH

    try:
        with open(path, 'r', encoding='utf-8') as f:
            config = yaml.safe_load(f) or {}
    except OSError as e:
        raise ConfigError(f"Failed to read configuration {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if not isinstance(config, dict):
        raise ConfigError(f"Configuration root in {path} must be a mapping")

    try:
        app_config = AppConfig(
            site=_build_site(_section(config, 'site')),
            settings=_build_settings(_section(config, 'settings')),
            ratios=_build_ratios(_section(config, 'ratios')),
            shareholding=_build_shareholding(_section(config, 'shareholding')),
            index=_build_index(_section(config, 'index')),
        )
    except (TypeError, ValueError) as e:
        raise ConfigError(f"Invalid configuration in {path}: {e}") from e

    logger.debug(f"Loaded configuration from {path}")
    return app_config
