"""Continent enumeration helpers."""

from typing import Optional

from world_explorer_app.models.geography import CONTINENTS

# Subregions of the REST Countries "Americas" region that belong to North America
_NORTH_AMERICAN_SUBREGIONS = ('Caribbean', 'Central America')


def is_valid_continent(name: Optional[str]) -> bool:
    return name in CONTINENTS


def normalize_continent(region: Optional[str], subregion: Optional[str] = None) -> Optional[str]:
    """
    Map a raw region/subregion pair onto the six-value continent enumeration.

    "Americas" is split into North and South America by subregion. Regions
    outside the enumeration (e.g. "Antarctic") map to ``None``.
    """
    if not region:
        return None

    region = region.strip()
    if region in CONTINENTS:
        return region

    if region == 'Americas':
        subregion = (subregion or '').strip()
        if 'South' in subregion:
            return 'South America'
        if 'North' in subregion or subregion in _NORTH_AMERICAN_SUBREGIONS:
            return 'North America'
        return None

    return None
