"""Fixed region/kingdom lists used by the aggregate dashboards."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Region:
    """A country tracked by a dashboard."""

    code: str
    name: str
    flag: str


# eBird regional daily stats (ISO country codes)
EBIRD_REGIONS: tuple[Region, ...] = (
    Region("US", "United States", "🇺🇸"),
    Region("CA", "Canada", "🇨🇦"),
    Region("GB", "United Kingdom", "🇬🇧"),
    Region("AU", "Australia", "🇦🇺"),
    Region("IN", "India", "🇮🇳"),
    Region("BR", "Brazil", "🇧🇷"),
    Region("MX", "Mexico", "🇲🇽"),
    Region("CO", "Colombia", "🇨🇴"),
    Region("CR", "Costa Rica", "🇨🇷"),
    Region("ZA", "South Africa", "🇿🇦"),
    Region("ES", "Spain", "🇪🇸"),
    Region("DE", "Germany", "🇩🇪"),
)


@dataclass(frozen=True)
class INatPlace:
    """A country and its iNaturalist place id."""

    place_id: int
    name: str
    flag: str


# iNaturalist top-countries panel
INAT_COUNTRIES: tuple[INatPlace, ...] = (
    INatPlace(1, "United States", "🇺🇸"),
    INatPlace(6712, "Canada", "🇨🇦"),
    INatPlace(6793, "Mexico", "🇲🇽"),
    INatPlace(6744, "Australia", "🇦🇺"),
    INatPlace(6803, "New Zealand", "🇳🇿"),
    INatPlace(6857, "United Kingdom", "🇬🇧"),
    INatPlace(6753, "France", "🇫🇷"),
    INatPlace(7207, "Germany", "🇩🇪"),
    INatPlace(6774, "Spain", "🇪🇸"),
    INatPlace(6681, "India", "🇮🇳"),
    INatPlace(6878, "Brazil", "🇧🇷"),
    INatPlace(6986, "South Africa", "🇿🇦"),
)


@dataclass(frozen=True)
class Kingdom:
    """A GBIF backbone kingdom."""

    key: int
    name: str
    emoji: str


GBIF_KINGDOMS: tuple[Kingdom, ...] = (
    Kingdom(1, "Animalia", "🐾"),
    Kingdom(6, "Plantae", "🌿"),
    Kingdom(3, "Bacteria", "🦠"),
    Kingdom(5, "Fungi", "🍄"),
    Kingdom(4, "Chromista", "🔬"),
)

# GBIF /occurrence/counts/countries keys → display name
GBIF_COUNTRY_NAMES: dict[str, str] = {
    "UNITED_STATES": "United States",
    "AUSTRALIA": "Australia",
    "CANADA": "Canada",
    "FRANCE": "France",
    "UNITED_KINGDOM": "United Kingdom",
    "SWEDEN": "Sweden",
    "NETHERLANDS": "Netherlands",
    "SPAIN": "Spain",
    "NORWAY": "Norway",
    "GERMANY": "Germany",
    "DENMARK": "Denmark",
    "INDIA": "India",
    "FINLAND": "Finland",
    "SOUTH_AFRICA": "South Africa",
    "BELGIUM": "Belgium",
    "BRAZIL": "Brazil",
    "COLOMBIA": "Colombia",
    "MEXICO": "Mexico",
    "COSTA_RICA": "Costa Rica",
    "SWITZERLAND": "Switzerland",
    "TAIWAN": "Taiwan",
    "PORTUGAL": "Portugal",
    "CHILE": "Chile",
    "RUSSIAN_FEDERATION": "Russia",
    "NEW_ZEALAND": "New Zealand",
    "ARGENTINA": "Argentina",
    "POLAND": "Poland",
    "AUSTRIA": "Austria",
    "JAPAN": "Japan",
    "ITALY": "Italy",
}

GBIF_COUNTRY_FLAGS: dict[str, str] = {
    "UNITED_STATES": "🇺🇸",
    "AUSTRALIA": "🇦🇺",
    "CANADA": "🇨🇦",
    "FRANCE": "🇫🇷",
    "UNITED_KINGDOM": "🇬🇧",
    "SWEDEN": "🇸🇪",
    "NETHERLANDS": "🇳🇱",
    "SPAIN": "🇪🇸",
    "NORWAY": "🇳🇴",
    "GERMANY": "🇩🇪",
    "DENMARK": "🇩🇰",
    "INDIA": "🇮🇳",
    "FINLAND": "🇫🇮",
    "SOUTH_AFRICA": "🇿🇦",
    "BELGIUM": "🇧🇪",
    "BRAZIL": "🇧🇷",
    "COLOMBIA": "🇨🇴",
    "MEXICO": "🇲🇽",
    "COSTA_RICA": "🇨🇷",
    "SWITZERLAND": "🇨🇭",
    "TAIWAN": "🇹🇼",
    "PORTUGAL": "🇵🇹",
    "CHILE": "🇨🇱",
    "RUSSIAN_FEDERATION": "🇷🇺",
    "NEW_ZEALAND": "🇳🇿",
    "ARGENTINA": "🇦🇷",
    "POLAND": "🇵🇱",
    "AUSTRIA": "🇦🇹",
    "JAPAN": "🇯🇵",
    "ITALY": "🇮🇹",
}

DEFAULT_FLAG = "🌍"


def gbif_country_name(code: str) -> str:
    """Display name for a GBIF country key, title-casing unknown keys."""
    if code in GBIF_COUNTRY_NAMES:
        return GBIF_COUNTRY_NAMES[code]
    return code.replace("_", " ").title()
