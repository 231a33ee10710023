# File: world_explorer_app/modules/geography/schemas.py
from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from typing import Any, Dict, Optional

from marshmallow import Schema, fields as ma_fields


@dataclass(frozen=True)
class CountryDTO:
    """Read-only view of a country used by the quiz and tour engines."""
    iso2: str
    country_name: str
    continent: str
    capital: Optional[str] = None
    population_millions: Optional[float] = None
    area_km2: Optional[float] = None
    currency: Optional[str] = None
    primary_language: Optional[str] = None
    capital_lat: Optional[float] = None
    capital_lon: Optional[float] = None
    flag_image_url: Optional[str] = None
    iso3: Optional[str] = None
    subregion: Optional[str] = None
    un_member: bool = False

    @classmethod
    def from_model(cls, country) -> "CountryDTO":
        return cls(**{f.name: getattr(country, f.name) for f in fields(cls)})

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CountryDTO":
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in known})

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class PointOfInterestDTO:
    iso2: str
    name: str
    poi_type: str
    description: Optional[str] = None
    lat: Optional[float] = None
    lon: Optional[float] = None
    image_url: Optional[str] = None
    extra: Optional[str] = None

    @classmethod
    def from_model(cls, poi) -> "PointOfInterestDTO":
        return cls(**{f.name: getattr(poi, f.name) for f in fields(cls)})

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PointOfInterestDTO":
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in known})


class PointOfInterestSchema(Schema):
    iso2 = ma_fields.String()
    name = ma_fields.String()
    poi_type = ma_fields.String()
    description = ma_fields.String(allow_none=True)
    lat = ma_fields.Float(allow_none=True)
    lon = ma_fields.Float(allow_none=True)
    image_url = ma_fields.String(allow_none=True)


class CountrySchema(Schema):
    iso2 = ma_fields.String()
    country_name = ma_fields.String()
    continent = ma_fields.String()
    capital = ma_fields.String(allow_none=True)
    population_millions = ma_fields.Float(allow_none=True)
    area_km2 = ma_fields.Float(allow_none=True)
    currency = ma_fields.String(allow_none=True)
    primary_language = ma_fields.String(allow_none=True)
    capital_lat = ma_fields.Float(allow_none=True)
    capital_lon = ma_fields.Float(allow_none=True)
    flag_image_url = ma_fields.String(allow_none=True)


class CountryDetailSchema(CountrySchema):
    points_of_interest = ma_fields.List(ma_fields.Nested(PointOfInterestSchema))
    info = ma_fields.String()
    fun_facts = ma_fields.List(ma_fields.String())
