# File: world_explorer_app/modules/quiz/engine/templates.py
"""
Question templates.

A template turns a focal entity (a country, or a continent name with its
member countries) plus a list of distractor countries into a Question whose
correct option sits at index 0. Shuffling happens later, in the selection step.

Missing data never breaks a template: absent distractor values are replaced by
playful placeholders and an absent focal value renders as "Unknown", so every
template always yields exactly four options.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence, Tuple

from world_explorer_app.modules.geography.schemas import CountryDTO, PointOfInterestDTO

from ..schemas import DIFFICULTIES, Question

# (prompt, options with the true answer first, explanation)
Draft = Tuple[str, List[str], str]

UNKNOWN = 'Unknown'
OPTION_COUNT = 4

CAPITAL_FALLBACKS = ('Ice Cream City', 'Candy Kingdom', 'Robot City')
LANGUAGE_FALLBACKS = ('Dragon Language', 'Robot Beeps', 'Animal Sounds')
CURRENCY_FALLBACKS = ('Magic Coins', 'Chocolate Money', 'Seashells')
FAKE_CONTINENTS = ('Antarctica', 'The Moon', 'Atlantis')
FAKE_COUNTRIES = ('Candy Kingdom', 'Robot City', 'Dragon Land')
FAKE_LANDMARKS = ('Candy Castle', 'Dragon Cave', 'Magic School')
LOST_CONTINENTS = ('Antarctica', 'The Lost Continent', 'Dinosaur Island')


def _text(value) -> Optional[str]:
    if value is None:
        return None
    value = str(value).strip()
    return value or None


def _focal(value) -> str:
    return _text(value) or UNKNOWN


def _attr(entities: Sequence, index: int, name: str, fallback: str) -> str:
    """Attribute ``name`` of ``entities[index]``, or ``fallback`` when absent."""
    if index < len(entities):
        value = _text(getattr(entities[index], name, None))
        if value:
            return value
    return fallback


@dataclass(frozen=True)
class QuestionTemplate:
    name: str
    weight: int
    category: str
    difficulty: str

    def __post_init__(self):
        if not isinstance(self.weight, int) or self.weight < 1:
            raise ValueError(f"Template '{self.name}' needs an integer weight >= 1, got {self.weight!r}")
        if self.difficulty not in DIFFICULTIES:
            raise ValueError(f"Template '{self.name}' has unknown difficulty {self.difficulty!r}")

    def _finish(self, draft: Draft) -> Question:
        prompt, options, explanation = draft
        if len(options) != OPTION_COUNT:
            raise ValueError(f"Template '{self.name}' produced {len(options)} options")
        return Question(
            question=prompt,
            options=list(options),
            correct=0,
            explanation=explanation,
            category=self.category,
            difficulty=self.difficulty,
        )


@dataclass(frozen=True)
class CountryTemplate(QuestionTemplate):
    build: Callable[[CountryDTO, Sequence[CountryDTO]], Draft]

    def render(self, country: CountryDTO, others: Sequence[CountryDTO]) -> Question:
        return self._finish(self.build(country, others))


@dataclass(frozen=True)
class ContinentTemplate(QuestionTemplate):
    build: Callable[[str, Sequence[CountryDTO]], Draft]

    def render(self, continent: str, countries: Sequence[CountryDTO]) -> Question:
        return self._finish(self.build(continent, countries))


# === Country-scoped builders ===

def _capital_question(country: CountryDTO, others: Sequence[CountryDTO]) -> Draft:
    name = _focal(country.country_name)
    capital = _focal(country.capital)
    options = [capital] + [_attr(others, i, 'capital', fb) for i, fb in enumerate(CAPITAL_FALLBACKS)]
    return (
        f"What is the capital of {name}?",
        options,
        f"{capital} is the capital city where the government of {name} operates!",
    )


def _continent_question(country: CountryDTO, others: Sequence[CountryDTO]) -> Draft:
    name = _focal(country.country_name)
    continent = _focal(country.continent)
    return (
        f"Which continent is {name} located in?",
        [continent, *FAKE_CONTINENTS],
        f"{name} is part of the beautiful continent of {continent}!",
    )


def _compare(country: CountryDTO, others: Sequence[CountryDTO], attribute: str, rival_fallback: str):
    """
    Pick the winner of a head-to-head comparison against the first distractor.

    Missing values count as zero and ties go to the rival. Without any rival
    the focal country wins against a placeholder.
    """
    name = _focal(country.country_name)
    own_value = getattr(country, attribute) or 0
    if not others:
        return name, rival_fallback, own_value

    rival = others[0]
    rival_name = _focal(rival.country_name)
    rival_value = getattr(rival, attribute) or 0
    if own_value > rival_value:
        return name, rival_name, own_value
    return rival_name, name, rival_value


def _larger_area_question(country: CountryDTO, others: Sequence[CountryDTO]) -> Draft:
    winner, loser, area = _compare(country, others, 'area_km2', 'Lilliput')
    return (
        "Which country is larger by area?",
        [winner, loser, _attr(others, 1, 'country_name', 'Narnia'), _attr(others, 2, 'country_name', 'Wonderland')],
        f"{winner} covers more land with {round(area):,} square kilometers!",
    )


def _language_question(country: CountryDTO, others: Sequence[CountryDTO]) -> Draft:
    name = _focal(country.country_name)
    language = _focal(country.primary_language)
    options = [language] + [_attr(others, i, 'primary_language', fb) for i, fb in enumerate(LANGUAGE_FALLBACKS)]
    return (
        f"What language do most people speak in {name}?",
        options,
        f"Most people in {name} speak {language}! "
        "Learning different languages helps us talk to friends around the world!",
    )


def _currency_question(country: CountryDTO, others: Sequence[CountryDTO]) -> Draft:
    name = _focal(country.country_name)
    currency = _focal(country.currency)
    options = [currency] + [_attr(others, i, 'currency', fb) for i, fb in enumerate(CURRENCY_FALLBACKS)]
    return (
        f"What currency (money) is used in {name}?",
        options,
        f"People in {name} use {currency} to buy things like toys and ice cream!",
    )


def _more_people_question(country: CountryDTO, others: Sequence[CountryDTO]) -> Draft:
    winner, loser, population = _compare(country, others, 'population_millions', 'Ghost Town')
    return (
        "Which country has more people living in it?",
        [winner, loser, _attr(others, 1, 'country_name', 'Toy Land'), _attr(others, 2, 'country_name', 'Pet Planet')],
        f"{winner} has about {round(population):,} million people living there!",
    )


def _true_false_question(country: CountryDTO, others: Sequence[CountryDTO]) -> Draft:
    name = _focal(country.country_name)
    continent = _focal(country.continent)
    return (
        f"True or False: {name} is in {continent}",
        ['True', 'False', 'Maybe', 'Only on weekends'],
        f"That's absolutely true! {name} is proudly part of {continent}!",
    )


def landmark_template(landmark: PointOfInterestDTO) -> CountryTemplate:
    """Famous-landmark question bound to one point of interest."""
    landmark_name = _focal(landmark.name)
    description = _text(landmark.description)

    def build(country: CountryDTO, others: Sequence[CountryDTO]) -> Draft:
        name = _focal(country.country_name)
        explanation = f"{landmark_name} is an amazing landmark in {name}!"
        if description:
            explanation = f"{explanation} {description}"
        return (
            f"What famous landmark can you visit in {name}?",
            [landmark_name, *FAKE_LANDMARKS],
            explanation,
        )

    return CountryTemplate(name='landmark', weight=2, category='Landmarks', difficulty='medium', build=build)


COUNTRY_TEMPLATES: Tuple[CountryTemplate, ...] = (
    CountryTemplate(name='capital', weight=3, category='Geography', difficulty='easy', build=_capital_question),
    CountryTemplate(name='continent', weight=3, category='Geography', difficulty='easy', build=_continent_question),
    CountryTemplate(name='larger_area', weight=2, category='Geography', difficulty='medium',
                    build=_larger_area_question),
    CountryTemplate(name='language', weight=2, category='Culture', difficulty='easy', build=_language_question),
    CountryTemplate(name='currency', weight=2, category='Culture', difficulty='medium', build=_currency_question),
    CountryTemplate(name='more_people', weight=2, category='Demographics', difficulty='medium',
                    build=_more_people_question),
    CountryTemplate(name='true_false', weight=1, category='Trivia', difficulty='easy', build=_true_false_question),
)


def build_country_catalog(pois: Sequence[PointOfInterestDTO] = ()) -> Tuple[CountryTemplate, ...]:
    """
    Country catalog for one generation call.

    The first ``landmark`` point of interest, if any, adds a landmark template
    to the returned tuple only; the shared base catalog is never modified.
    """
    landmark = next((poi for poi in pois if poi.poi_type == 'landmark'), None)
    if landmark is None:
        return COUNTRY_TEMPLATES
    return COUNTRY_TEMPLATES + (landmark_template(landmark),)


# === Continent-scoped builders ===

def _member_question(continent: str, countries: Sequence[CountryDTO]) -> Draft:
    member = _attr(countries, 0, 'country_name', UNKNOWN)
    return (
        f"Which of these countries is located in {continent}?",
        [member, *FAKE_COUNTRIES],
        f"{member} is indeed located in the amazing continent of {continent}!",
    )


def _member_capital_question(continent: str, countries: Sequence[CountryDTO]) -> Draft:
    member = _attr(countries, 0, 'country_name', UNKNOWN)
    capital = _attr(countries, 0, 'capital', UNKNOWN)
    return (
        f"What is the capital of {member}?",
        [
            capital,
            _attr(countries, 1, 'capital', 'Cookie Town'),
            _attr(countries, 2, 'capital', 'Rainbow Village'),
            'Ice Cream City',
        ],
        f"{capital} is the capital city of {member} in {continent}!",
    )


def _continent_by_example_question(continent: str, countries: Sequence[CountryDTO]) -> Draft:
    first = _attr(countries, 0, 'country_name', UNKNOWN)
    second = _attr(countries, 1, 'country_name', '')
    if second:
        prompt = f"Which continent has countries like {first} and {second}?"
        explanation = f"Both {first} and {second} are wonderful countries in {continent}!"
    else:
        prompt = f"Which continent has countries like {first}?"
        explanation = f"{first} is a wonderful country in {continent}!"
    return prompt, [continent, *LOST_CONTINENTS], explanation


def _member_count_question(continent: str, countries: Sequence[CountryDTO]) -> Draft:
    total = len(countries)
    return (
        f"How many countries are shown from {continent} in our explorer?",
        [str(total), str(total + 5), str(max(total - 2, 0)), 'A million!'],
        f"We have {total} amazing countries from {continent} to explore in our world adventure!",
    )


CONTINENT_TEMPLATES: Tuple[ContinentTemplate, ...] = (
    ContinentTemplate(name='member', weight=3, category='Geography', difficulty='easy', build=_member_question),
    ContinentTemplate(name='member_capital', weight=2, category='Geography', difficulty='medium',
                      build=_member_capital_question),
    ContinentTemplate(name='continent_by_example', weight=2, category='Geography', difficulty='easy',
                      build=_continent_by_example_question),
    ContinentTemplate(name='member_count', weight=1, category='Trivia', difficulty='hard',
                      build=_member_count_question),
)


def build_continent_catalog() -> Tuple[ContinentTemplate, ...]:
    return CONTINENT_TEMPLATES
