"""Database models package for World Explorer."""

from ..db_instance import db

from .geography import (
    CONTINENTS,
    POI_TYPES,
    Country,
    PointOfInterest,
)

__all__ = [
    'db',
    'CONTINENTS',
    'POI_TYPES',
    'Country',
    'PointOfInterest',
]
