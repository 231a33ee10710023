# File: world_explorer_app/modules/tour/logics/narration_script.py
"""Narration text for tour slides."""

from typing import List, Optional, Sequence

from world_explorer_app.modules.geography.schemas import CountryDTO, PointOfInterestDTO

MAX_POIS_PER_SLIDE = 3

CONTINENT_INFO = {
    'Africa': {'emoji': '🦁', 'description': 'the cradle of humanity'},
    'Asia': {'emoji': '🐼', 'description': 'the largest and most populous continent'},
    'Europe': {'emoji': '🦊', 'description': 'the birthplace of Western civilization'},
    'North America': {'emoji': '🐻', 'description': 'land of vast wilderness and innovation'},
    'South America': {'emoji': '🦜', 'description': 'home to the Amazon and ancient civilizations'},
    'Oceania': {'emoji': '🦘', 'description': 'the island continent of unique wildlife'},
}


def format_number(num: Optional[float]) -> str:
    """125_800_000 -> '125.8 million', 377_975 -> '378 thousand'."""
    if num is None:
        return 'an unknown number of'
    if num >= 1_000_000:
        return f"{num / 1_000_000:.1f} million"
    if num >= 1_000:
        return f"{num / 1_000:.0f} thousand"
    if float(num).is_integer():
        return str(int(num))
    return str(num)


def _poi_sentence(poi: PointOfInterestDTO) -> str:
    description = (poi.description or '').strip().rstrip('.!')
    if not description:
        return f"{poi.name} is waiting for you to discover it. "
    return f"{poi.name} is {description[0].lower()}{description[1:]}. "


def build_country_narration(
    country: CountryDTO,
    continent: str,
    pois: Sequence[PointOfInterestDTO] = (),
) -> str:
    population = None
    if country.population_millions is not None:
        population = country.population_millions * 1_000_000

    narration = f"Welcome to {country.country_name}, a beautiful country in {continent}. "
    narration += (
        f"The capital city is {country.capital or 'a secret'}, "
        f"and it has a population of {format_number(population)} people. "
    )
    narration += f"This country covers an area of {format_number(country.area_km2)} square kilometers. "

    top_pois = list(pois)[:MAX_POIS_PER_SLIDE]
    if top_pois:
        narration += "Let's explore some amazing landmarks. "
        for poi in top_pois:
            narration += _poi_sentence(poi)

    narration += f"Thank you for visiting {country.country_name}."
    return narration


def build_continent_intro(continent: str) -> str:
    info = CONTINENT_INFO.get(continent)
    if info is None:
        return f"Welcome to {continent}! Let's explore its amazing countries."
    return f"Welcome to {continent}, {info['description']}! Let's explore its amazing countries."


def build_country_info(country: CountryDTO) -> str:
    """Short read-aloud summary for a country page."""
    sentences = [
        f"{country.country_name} is a country in {country.continent}.",
        f"The capital city is {country.capital or 'a secret'}.",
    ]
    if country.population_millions:
        # Half-up, like the rounding shown on the country page
        sentences.append(f"It has about {int(country.population_millions + 0.5)} million people.")
    if country.primary_language:
        sentences.append(f"The main language is {country.primary_language}.")
    return ' '.join(sentences)


def build_fun_facts(country: CountryDTO) -> List[str]:
    facts = [
        f"{country.country_name} is located in {country.continent}!",
        f"The capital city {country.capital or 'a secret'} is where the government works.",
    ]
    if country.currency:
        facts.append(f"People use {country.currency} as money here.")
    if country.primary_language:
        facts.append(f"Most people speak {country.primary_language}.")
    return facts
