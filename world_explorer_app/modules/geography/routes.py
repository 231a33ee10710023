# File: world_explorer_app/modules/geography/routes.py
"""Read-only JSON API over countries, points of interest and tour scripts."""

from flask import Blueprint, current_app, jsonify, request

from world_explorer_app.core.error_handlers import NotFoundError, ValidationError, success_response
from world_explorer_app.models.geography import CONTINENTS

from .interface import GeographyInterface
from .logics.continents import is_valid_continent
from .schemas import CountryDetailSchema, CountrySchema, PointOfInterestSchema

geography_bp = Blueprint('geography', __name__)

_country_schema = CountrySchema()
_country_detail_schema = CountryDetailSchema()
_poi_schema = PointOfInterestSchema()


def _require_continent(continent: str) -> None:
    if not is_valid_continent(continent):
        raise ValidationError(
            f"Unknown continent '{continent}'",
            errors={'continent': list(CONTINENTS)},
        )


@geography_bp.route('/continents', methods=['GET'])
def list_continents():
    from world_explorer_app.modules.tour.logics.narration_script import CONTINENT_INFO

    data = [
        {
            'name': name,
            'emoji': CONTINENT_INFO[name]['emoji'],
            'description': CONTINENT_INFO[name]['description'],
        }
        for name in CONTINENTS
    ]
    return jsonify(success_response(data))


@geography_bp.route('/countries', methods=['GET'])
def list_countries():
    continent = request.args.get('continent')
    if continent:
        _require_continent(continent)

    countries = GeographyInterface.list_countries(continent or None)
    return jsonify(success_response(_country_schema.dump(
        [c.to_dict() for c in countries], many=True
    )))


@geography_bp.route('/countries/<iso2>', methods=['GET'])
def get_country(iso2):
    country = GeographyInterface.get_country(iso2)
    if country is None:
        raise NotFoundError(f"Country '{iso2.upper()}' not found", resource='country')

    from world_explorer_app.modules.tour.logics.narration_script import build_country_info, build_fun_facts

    data = country.to_dict()
    data['points_of_interest'] = [
        _poi_schema.dump(poi) for poi in GeographyInterface.list_pois(country.iso2)
    ]
    data['info'] = build_country_info(country)
    data['fun_facts'] = build_fun_facts(country)
    return jsonify(success_response(_country_detail_schema.dump(data)))


@geography_bp.route('/tours/<continent>', methods=['GET'])
def get_tour(continent):
    """Return the intro and one narration slide per country of a continent."""
    from world_explorer_app.modules.tour.services.tour_service import build_tour_slides

    _require_continent(continent)
    slides = build_tour_slides(GeographyInterface.get_store(), continent)
    current_app.logger.debug("Built %d tour slides for %s", len(slides['slides']), continent)
    return jsonify(success_response(slides))
