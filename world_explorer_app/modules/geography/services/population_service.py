"""
Upserts for the reference tables.

Countries are keyed on ``iso2`` and points of interest on ``(iso2, name)``,
so re-running a population job updates rows in place instead of creating
duplicates. Records are validated before the session is touched, so a bad
record never leaves a half-built row behind.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, Tuple

from world_explorer_app.models import CONTINENTS, POI_TYPES, Country, PointOfInterest, db

from ..logics.continents import normalize_continent

logger = logging.getLogger(__name__)

_COUNTRY_FIELDS = (
    'country_name', 'iso3', 'continent', 'subregion', 'capital',
    'capital_lat', 'capital_lon', 'center_lat', 'center_lon',
    'population_millions', 'area_km2', 'currency', 'primary_language',
    'flag_image_url', 'un_member',
)
_POI_FIELDS = ('poi_type', 'description', 'lat', 'lon', 'image_url', 'extra')


def upsert_country(data: Dict[str, Any]) -> Country:
    """Insert or update a country keyed on its iso2 code. Does not commit."""
    iso2 = (data.get('iso2') or '').strip().upper()
    if len(iso2) != 2:
        raise ValueError(f"Country record has an invalid iso2 code {data.get('iso2')!r}")

    values = dict(data)
    if values.get('continent') is None and values.get('region'):
        values['continent'] = normalize_continent(values.get('region'), values.get('subregion'))

    continent = values.get('continent')
    if continent is not None and continent not in CONTINENTS:
        raise ValueError(f"Country {iso2} has unknown continent {continent!r}")

    country = Country.query.filter_by(iso2=iso2).first()
    if country is None:
        if continent is None or not values.get('country_name'):
            raise ValueError(f"New country {iso2} needs 'country_name' and 'continent'")
        country = Country(iso2=iso2)
        db.session.add(country)

    for field in _COUNTRY_FIELDS:
        if field in values and values[field] is not None:
            setattr(country, field, values[field])
    return country


def upsert_poi(data: Dict[str, Any]) -> PointOfInterest:
    """Insert or update a point of interest keyed on ``(iso2, name)``. Does not commit."""
    iso2 = (data.get('iso2') or '').strip().upper()
    name = (data.get('name') or '').strip()
    if not iso2 or not name:
        raise ValueError("Point of interest record needs both 'iso2' and 'name'")

    poi_type = data.get('poi_type')
    if poi_type is not None and poi_type not in POI_TYPES:
        raise ValueError(f"Point of interest {name!r} has unknown type {poi_type!r}")

    poi = PointOfInterest.query.filter_by(iso2=iso2, name=name).first()
    if poi is None:
        if poi_type is None:
            raise ValueError(f"New point of interest {name!r} needs a 'poi_type'")
        poi = PointOfInterest(iso2=iso2, name=name, poi_type=poi_type)
        db.session.add(poi)

    for field in _POI_FIELDS:
        if field in data and data[field] is not None:
            setattr(poi, field, data[field])
    return poi


def import_records(
    countries: Iterable[Dict[str, Any]],
    pois: Iterable[Dict[str, Any]] = (),
) -> Tuple[int, int]:
    """
    Upsert a batch of country and POI records and commit once.

    Invalid records (unknown continent, missing keys) are logged and skipped.
    POIs whose country is unknown are skipped as well.

    Returns:
        (countries_upserted, pois_upserted)
    """
    country_count = 0
    for record in countries:
        try:
            upsert_country(record)
        except ValueError as exc:
            logger.warning("Skipping country record: %s", exc)
            continue
        country_count += 1

    db.session.flush()
    known = {iso2 for (iso2,) in db.session.query(Country.iso2).all()}

    poi_count = 0
    for record in pois:
        if (record.get('iso2') or '').strip().upper() not in known:
            logger.warning("Skipping point of interest %r: unknown country %s",
                           record.get('name'), record.get('iso2'))
            continue
        try:
            upsert_poi(record)
        except ValueError as exc:
            logger.warning("Skipping point of interest record: %s", exc)
            continue
        # Flush so a repeated (iso2, name) in the same batch updates instead of inserting twice
        db.session.flush()
        poi_count += 1

    db.session.commit()
    return country_count, poi_count
