"""Report settings loaded from ``config.ini``.

The file is optional. When it is absent every setting keeps the default
used by the built-in strategies, so ``analyze_sales_data`` works without
any configuration on disk.
"""

import configparser
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Optional

from sales_report import log

CONFIG_FILE_NAME = "config.ini"


@dataclass(frozen=True)
class ReportSettings:
    """Typed representation of the ``config.ini`` settings we care about."""

    top_products_limit: int = 10
    first_place_rate: Decimal = Decimal("0.15")
    podium_rate: Decimal = Decimal("0.10")
    default_rate: Decimal = Decimal("0.05")
    last_place_rate: Decimal = Decimal("0")


def find_config_file(explicit_path: Optional[Path] = None) -> Optional[Path]:
    """Locate ``config.ini``.

    An explicit path is returned as-is. Otherwise the search walks up from
    the current working directory and returns the first match, or ``None``
    when no directory holds one.
    """
    if explicit_path:
        return explicit_path

    current = Path.cwd()
    for p in (current, *current.parents):
        candidate = p / CONFIG_FILE_NAME
        if candidate.exists():
            return candidate
    return None


def read_config(config_path: Path) -> configparser.ConfigParser:
    config_path = config_path.expanduser().resolve()
    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    parser = configparser.ConfigParser()
    parser.read(config_path, encoding="utf-8")
    return parser


def _get_decimal(parser: configparser.ConfigParser, section: str, option: str, default: Decimal) -> Decimal:
    raw = parser.get(section, option, fallback=None)
    if raw is None:
        return default
    try:
        return Decimal(raw.strip())
    except InvalidOperation as exc:
        raise ValueError(f"[{section}] {option} is not a number: {raw!r}") from exc


def parse_settings(parser: configparser.ConfigParser) -> ReportSettings:
    """Convert a ``ConfigParser`` into :class:`ReportSettings`.

    Missing sections or options fall back to the defaults. Values that are
    present but malformed raise ``ValueError``.
    """
    defaults = ReportSettings()

    try:
        limit = parser.getint("Report", "TopProductsLimit", fallback=defaults.top_products_limit)
    except ValueError as exc:
        raise ValueError(f"[Report] TopProductsLimit is not an integer: {exc}") from exc
    if limit < 0:
        raise ValueError(f"[Report] TopProductsLimit must be >= 0, got {limit}")

    return ReportSettings(
        top_products_limit=limit,
        first_place_rate=_get_decimal(parser, "Bonus", "FirstPlaceRate", defaults.first_place_rate),
        podium_rate=_get_decimal(parser, "Bonus", "PodiumRate", defaults.podium_rate),
        default_rate=_get_decimal(parser, "Bonus", "DefaultRate", defaults.default_rate),
        last_place_rate=_get_decimal(parser, "Bonus", "LastPlaceRate", defaults.last_place_rate),
    )


def load_settings(config_path: Optional[Path] = None) -> ReportSettings:
    path = find_config_file(config_path)
    if path is None:
        log.debug("No %s found, using default report settings", CONFIG_FILE_NAME)
        return ReportSettings()

    log.info("Loading report settings from %s", path)
    return parse_settings(read_config(path))
