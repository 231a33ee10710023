"""Tests for the reference data: models, upserts, seed data and stores."""

import logging

import pytest

from world_explorer_app import db
from world_explorer_app.models import Country, PointOfInterest
from world_explorer_app.modules.geography.logics.continents import normalize_continent
from world_explorer_app.modules.geography.logics.seed_data import seed_demo_data
from world_explorer_app.modules.geography.services.population_service import (
    import_records,
    upsert_country,
    upsert_poi,
)
from world_explorer_app.modules.geography.services.reference_store import SqlAlchemyReferenceStore


class TestNormalizeContinent:

    @pytest.mark.parametrize('region,subregion,expected', [
        ('Europe', 'Western Europe', 'Europe'),
        ('Americas', 'South America', 'South America'),
        ('Americas', 'Northern America', 'North America'),
        ('Americas', 'Caribbean', 'North America'),
        ('Americas', 'Central America', 'North America'),
        ('Antarctic', None, None),
        (None, None, None),
    ])
    def test_regions(self, region, subregion, expected):
        assert normalize_continent(region, subregion) == expected


def test_upsert_country_updates_in_place(app):
    upsert_country({'iso2': 'jp', 'country_name': 'Japan', 'continent': 'Asia', 'capital': 'Kyoto'})
    db.session.commit()
    upsert_country({'iso2': 'JP', 'capital': 'Tokyo'})
    db.session.commit()

    countries = Country.query.all()
    assert len(countries) == 1
    assert countries[0].iso2 == 'JP'
    assert countries[0].capital == 'Tokyo'
    assert countries[0].country_name == 'Japan'


def test_upsert_country_derives_continent_from_region(app):
    country = upsert_country({'iso2': 'BR', 'country_name': 'Brazil', 'region': 'Americas',
                              'subregion': 'South America'})
    assert country.continent == 'South America'


def test_invalid_records_are_rejected(app):
    with pytest.raises(ValueError):
        upsert_country({'iso2': 'AQ', 'country_name': 'Antarctica', 'region': 'Antarctic'})
    with pytest.raises(ValueError):
        upsert_country({'iso2': 'XX', 'country_name': 'Atlantis', 'continent': 'Atlantis'})
    with pytest.raises(ValueError):
        upsert_poi({'iso2': 'XX', 'name': 'Somewhere', 'poi_type': 'volcano'})


def test_model_validates_continent(app):
    with pytest.raises(ValueError):
        Country(iso2='ZZ', country_name='Nowhere', continent='The Moon')


def test_import_records_skips_bad_rows(app, caplog):
    countries = [
        {'iso2': 'FR', 'country_name': 'France', 'continent': 'Europe'},
        {'iso2': 'AQ', 'country_name': 'Antarctica', 'region': 'Antarctic'},
    ]
    pois = [
        {'iso2': 'FR', 'name': 'Eiffel Tower', 'poi_type': 'landmark'},
        {'iso2': 'FR', 'name': 'Eiffel Tower', 'poi_type': 'landmark', 'description': 'Iron lady.'},
        {'iso2': 'AQ', 'name': 'South Pole', 'poi_type': 'landmark'},
    ]
    with caplog.at_level(logging.WARNING):
        assert import_records(countries, pois) == (1, 2)

    towers = PointOfInterest.query.filter_by(iso2='FR').all()
    assert len(towers) == 1
    assert towers[0].description == 'Iron lady.'
    assert 'unknown country AQ' in caplog.text


def test_deleting_country_removes_pois(seeded_app):
    japan = Country.query.filter_by(iso2='JP').one()
    db.session.delete(japan)
    db.session.commit()

    assert PointOfInterest.query.filter_by(iso2='JP').count() == 0


def test_seed_is_idempotent(app):
    assert seed_demo_data() == (10, 30)
    assert seed_demo_data() == (0, 0)
    assert seed_demo_data(force=True) == (10, 30)
    assert Country.query.count() == 10
    assert PointOfInterest.query.count() == 30


class TestReferenceStores:

    def test_filters(self, seeded_app):
        store = SqlAlchemyReferenceStore()

        asia = store.list_countries(continent='Asia', order_by_name=True)
        assert [c.iso2 for c in asia] == ['IN', 'JP']
        assert [c.iso2 for c in store.list_countries(continent='Asia', exclude_iso2='JP')] == ['IN']
        assert all(c.continent != 'Europe' for c in store.list_countries(exclude_continent='Europe'))
        assert len(store.list_countries(limit=4)) == 4

    def test_lookup(self, seeded_app):
        store = SqlAlchemyReferenceStore()

        assert store.get_country('jp').capital == 'Tokyo'
        assert store.get_country('ZZ') is None
        assert [p.name for p in store.list_pois('JP')] == ['Mount Fuji', 'Mount Kita', 'Aokigahara Forest']
        assert store.list_pois('ZZ') == []

    def test_memory_store_matches_database(self, seeded_app, memory_store):
        store = SqlAlchemyReferenceStore()
        for continent in ('Europe', 'North America', 'Oceania'):
            from_db = store.list_countries(continent=continent, order_by_name=True)
            in_memory = memory_store.list_countries(continent=continent, order_by_name=True)
            assert from_db == in_memory
