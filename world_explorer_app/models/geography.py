"""Reference geography models: countries and their points of interest."""

from __future__ import annotations

from typing import Any, Dict

from sqlalchemy.orm import validates
from sqlalchemy.sql import func

from ..db_instance import db

CONTINENTS = ('Africa', 'Asia', 'Europe', 'North America', 'South America', 'Oceania')
POI_TYPES = ('landmark', 'mountain', 'forest')


def _sql_in(column: str, values) -> str:
    quoted = ", ".join("'%s'" % value for value in values)
    return f"{column} IN ({quoted})"


class Country(db.Model):
    """A country, identified by its two-letter ISO code."""

    __tablename__ = 'countries'
    __table_args__ = (
        db.CheckConstraint(_sql_in('continent', CONTINENTS), name='ck_countries_continent'),
    )

    country_id = db.Column(db.Integer, primary_key=True)
    iso2 = db.Column(db.String(2), unique=True, nullable=False, index=True)
    iso3 = db.Column(db.String(3), nullable=True)
    country_name = db.Column(db.String(255), nullable=False, index=True)
    continent = db.Column(db.String(32), nullable=False, index=True)
    subregion = db.Column(db.String(100), nullable=True)

    capital = db.Column(db.String(255), nullable=True)
    capital_lat = db.Column(db.Float, nullable=True)
    capital_lon = db.Column(db.Float, nullable=True)
    center_lat = db.Column(db.Float, nullable=True)
    center_lon = db.Column(db.Float, nullable=True)

    population_millions = db.Column(db.Float, nullable=True)
    area_km2 = db.Column(db.Float, nullable=True)
    currency = db.Column(db.String(16), nullable=True)
    primary_language = db.Column(db.String(100), nullable=True)
    flag_image_url = db.Column(db.String(512), nullable=True)
    un_member = db.Column(db.Boolean, default=False, nullable=False)

    created_at = db.Column(db.DateTime(timezone=True), server_default=func.now())

    points_of_interest = db.relationship(
        'PointOfInterest',
        backref='country',
        lazy=True,
        cascade='all, delete-orphan',
        passive_deletes=True,
        order_by='PointOfInterest.poi_id',
    )

    @validates('iso2')
    def _validate_iso2(self, _key, value):
        if not value or len(value.strip()) != 2:
            raise ValueError(f"iso2 must be a two-letter code, got {value!r}")
        return value.strip().upper()

    @validates('continent')
    def _validate_continent(self, _key, value):
        if value not in CONTINENTS:
            raise ValueError(f"Unknown continent {value!r}")
        return value

    def to_dict(self) -> Dict[str, Any]:
        return {
            'iso2': self.iso2,
            'iso3': self.iso3,
            'country_name': self.country_name,
            'continent': self.continent,
            'subregion': self.subregion,
            'capital': self.capital,
            'capital_lat': self.capital_lat,
            'capital_lon': self.capital_lon,
            'center_lat': self.center_lat,
            'center_lon': self.center_lon,
            'population_millions': self.population_millions,
            'area_km2': self.area_km2,
            'currency': self.currency,
            'primary_language': self.primary_language,
            'flag_image_url': self.flag_image_url,
            'un_member': bool(self.un_member),
        }

    def __repr__(self):
        return f"<Country {self.iso2}: {self.country_name}>"


class PointOfInterest(db.Model):
    """A landmark, mountain or forest that belongs to a country."""

    __tablename__ = 'points_of_interest'
    __table_args__ = (
        db.UniqueConstraint('iso2', 'name', name='uq_points_of_interest_iso2_name'),
        db.CheckConstraint(_sql_in('poi_type', POI_TYPES), name='ck_points_of_interest_type'),
    )

    poi_id = db.Column(db.Integer, primary_key=True)
    iso2 = db.Column(
        db.String(2),
        db.ForeignKey('countries.iso2', ondelete='CASCADE'),
        nullable=False,
        index=True,
    )
    poi_type = db.Column(db.String(16), nullable=False, index=True)
    name = db.Column(db.String(255), nullable=False)
    description = db.Column(db.Text, nullable=True)
    lat = db.Column(db.Float, nullable=True)
    lon = db.Column(db.Float, nullable=True)
    image_url = db.Column(db.String(512), nullable=True)
    extra = db.Column(db.Text, nullable=True)

    created_at = db.Column(db.DateTime(timezone=True), server_default=func.now())

    @validates('poi_type')
    def _validate_poi_type(self, _key, value):
        if value not in POI_TYPES:
            raise ValueError(f"Unknown point of interest type {value!r}")
        return value

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.poi_id,
            'iso2': self.iso2,
            'poi_type': self.poi_type,
            'name': self.name,
            'description': self.description,
            'lat': self.lat,
            'lon': self.lon,
            'image_url': self.image_url,
            'extra': self.extra,
        }

    def __repr__(self):
        return f"<PointOfInterest {self.iso2}: {self.name}>"
