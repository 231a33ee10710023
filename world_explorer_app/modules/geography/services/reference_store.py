"""
Reference Data Store.

Read-only access to countries and points of interest, as consumed by the quiz
engine and the continent tour. Two implementations share one interface:

- ``SqlAlchemyReferenceStore`` reads the Flask-SQLAlchemy tables.
- ``InMemoryReferenceStore`` serves plain records, for scripts and tests.

Both return ``CountryDTO`` / ``PointOfInterestDTO`` values so callers never
hold ORM instances outside the request that loaded them.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable, List, Optional

from world_explorer_app.models import Country, PointOfInterest

from ..schemas import CountryDTO, PointOfInterestDTO


class ReferenceDataStore(ABC):
    """Abstract read interface over the geography reference data."""

    @abstractmethod
    def get_country(self, iso2: str) -> Optional[CountryDTO]:
        """Return the country with this code, or ``None``."""

    @abstractmethod
    def list_countries(
        self,
        continent: Optional[str] = None,
        exclude_iso2: Optional[str] = None,
        exclude_continent: Optional[str] = None,
        limit: Optional[int] = None,
        order_by_name: bool = False,
    ) -> List[CountryDTO]:
        """Return countries matching every given filter."""

    @abstractmethod
    def list_pois(self, iso2: str) -> List[PointOfInterestDTO]:
        """Return all points of interest of a country (possibly empty)."""


class SqlAlchemyReferenceStore(ReferenceDataStore):
    """Store backed by the ``countries`` and ``points_of_interest`` tables."""

    def get_country(self, iso2: str) -> Optional[CountryDTO]:
        if not iso2:
            return None
        country = Country.query.filter_by(iso2=iso2.strip().upper()).first()
        return CountryDTO.from_model(country) if country else None

    def list_countries(
        self,
        continent: Optional[str] = None,
        exclude_iso2: Optional[str] = None,
        exclude_continent: Optional[str] = None,
        limit: Optional[int] = None,
        order_by_name: bool = False,
    ) -> List[CountryDTO]:
        query = Country.query
        if continent is not None:
            query = query.filter(Country.continent == continent)
        if exclude_iso2 is not None:
            query = query.filter(Country.iso2 != exclude_iso2)
        if exclude_continent is not None:
            query = query.filter(Country.continent != exclude_continent)
        if order_by_name:
            query = query.order_by(Country.country_name)
        if limit is not None:
            query = query.limit(limit)
        return [CountryDTO.from_model(country) for country in query.all()]

    def list_pois(self, iso2: str) -> List[PointOfInterestDTO]:
        pois = (
            PointOfInterest.query
            .filter_by(iso2=iso2)
            .order_by(PointOfInterest.poi_id)
            .all()
        )
        return [PointOfInterestDTO.from_model(poi) for poi in pois]


class InMemoryReferenceStore(ReferenceDataStore):
    """Store over plain lists of records, preserving insertion order."""

    def __init__(
        self,
        countries: Iterable[CountryDTO] = (),
        pois: Iterable[PointOfInterestDTO] = (),
    ):
        self._countries: List[CountryDTO] = list(countries)
        self._pois: List[PointOfInterestDTO] = list(pois)

    @classmethod
    def from_dicts(cls, countries: Iterable[dict], pois: Iterable[dict] = ()) -> "InMemoryReferenceStore":
        return cls(
            [CountryDTO.from_dict(c) for c in countries],
            [PointOfInterestDTO.from_dict(p) for p in pois],
        )

    def get_country(self, iso2: str) -> Optional[CountryDTO]:
        if not iso2:
            return None
        code = iso2.strip().upper()
        return next((c for c in self._countries if c.iso2 == code), None)

    def list_countries(
        self,
        continent: Optional[str] = None,
        exclude_iso2: Optional[str] = None,
        exclude_continent: Optional[str] = None,
        limit: Optional[int] = None,
        order_by_name: bool = False,
    ) -> List[CountryDTO]:
        result = [
            c for c in self._countries
            if (continent is None or c.continent == continent)
            and (exclude_iso2 is None or c.iso2 != exclude_iso2)
            and (exclude_continent is None or c.continent != exclude_continent)
        ]
        if order_by_name:
            result.sort(key=lambda c: c.country_name)
        if limit is not None:
            result = result[:limit]
        return result

    def list_pois(self, iso2: str) -> List[PointOfInterestDTO]:
        return [p for p in self._pois if p.iso2 == iso2]
