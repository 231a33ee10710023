# File: world_explorer_app/modules/geography/interface.py
from typing import List, Optional

from .schemas import CountryDTO, PointOfInterestDTO
from .services.reference_store import ReferenceDataStore, SqlAlchemyReferenceStore


class GeographyInterface:
    """Public entry points other modules use to read the reference data."""

    @staticmethod
    def get_store() -> ReferenceDataStore:
        return SqlAlchemyReferenceStore()

    @staticmethod
    def get_country(iso2: str) -> Optional[CountryDTO]:
        return SqlAlchemyReferenceStore().get_country(iso2)

    @staticmethod
    def list_countries(continent: Optional[str] = None) -> List[CountryDTO]:
        return SqlAlchemyReferenceStore().list_countries(continent=continent, order_by_name=True)

    @staticmethod
    def list_pois(iso2: str) -> List[PointOfInterestDTO]:
        return SqlAlchemyReferenceStore().list_pois(iso2)
