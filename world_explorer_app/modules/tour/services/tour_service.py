# File: world_explorer_app/modules/tour/services/tour_service.py
import logging
from typing import Any, Callable, Dict, List, Optional

from world_explorer_app.modules.audio.narration.queue import NarrationQueue
from world_explorer_app.modules.geography.schemas import CountryDTO, PointOfInterestDTO
from world_explorer_app.modules.geography.services.reference_store import ReferenceDataStore

from ..logics.narration_script import CONTINENT_INFO, build_continent_intro, build_country_narration

logger = logging.getLogger(__name__)


def build_tour_slides(store: ReferenceDataStore, continent: str) -> Dict[str, Any]:
    """Intro plus one narration slide per country, ordered by country name."""
    countries = store.list_countries(continent=continent, order_by_name=True)
    slides = []
    for country in countries:
        pois = store.list_pois(country.iso2)
        slides.append({
            'iso2': country.iso2,
            'country_name': country.country_name,
            'capital': country.capital,
            'flag_image_url': country.flag_image_url,
            'narration': build_country_narration(country, continent, pois),
            'points_of_interest': [
                {'name': poi.name, 'poi_type': poi.poi_type, 'description': poi.description,
                 'image_url': poi.image_url}
                for poi in pois
            ],
        })

    return {
        'continent': continent,
        'emoji': CONTINENT_INFO.get(continent, {}).get('emoji'),
        'intro': build_continent_intro(continent),
        'slides': slides,
    }


class ContinentTour:
    """
    Narrated walk through the countries of one continent.

    While playing, each finished narration advances to the next country; the
    last one ends the tour and fires ``on_finished(country_count)``. Manual
    ``next``/``previous`` supersede whatever is being narrated.

    Methods that narrate must be called from inside the event loop that runs
    the queue.
    """

    def __init__(
        self,
        store: ReferenceDataStore,
        queue: NarrationQueue,
        continent: str,
        on_finished: Optional[Callable[[int], Any]] = None,
    ):
        self.store = store
        self.queue = queue
        self.continent = continent
        self.on_finished = on_finished

        self.countries: List[CountryDTO] = []
        self.pois: Dict[str, List[PointOfInterestDTO]] = {}
        self.index = 0
        self.is_playing = False
        self.is_finished = False
        self._loaded = False
        self._token = 0

    def load(self) -> int:
        """Fetch the tour's countries; a store error leaves an empty, finished tour."""
        try:
            countries = self.store.list_countries(continent=self.continent, order_by_name=True)
            pois = {country.iso2: self.store.list_pois(country.iso2) for country in countries}
        except Exception:
            logger.exception("Error loading the %s tour", self.continent)
            countries, pois = [], {}

        self.countries = countries
        self.pois = pois
        self.index = 0
        self.is_finished = not self.countries
        self._loaded = True
        logger.debug("Loaded %d countries for the %s tour", len(self.countries), self.continent)
        return len(self.countries)

    @property
    def current_country(self) -> Optional[CountryDTO]:
        if 0 <= self.index < len(self.countries):
            return self.countries[self.index]
        return None

    def current_narration(self) -> Optional[str]:
        country = self.current_country
        if country is None:
            return None
        return build_country_narration(country, self.continent, self.pois.get(country.iso2, []))

    # === Controls ===

    def play(self) -> bool:
        if not self._loaded:
            self.load()
        if not self.countries:
            self.is_finished = True
            return False

        self.is_playing = True
        self.is_finished = False
        self._narrate(supersede=True)
        return True

    def stop(self) -> None:
        self.is_playing = False
        self._token += 1
        self.queue.stop_narration()

    def next(self) -> bool:
        if self.index + 1 >= len(self.countries):
            return False
        self.index += 1
        if self.is_playing:
            self._narrate(supersede=True)
        return True

    def previous(self) -> bool:
        if self.index <= 0:
            return False
        self.index -= 1
        if self.is_playing:
            self._narrate(supersede=True)
        return True

    # === Narration ===

    def _narrate(self, supersede: bool) -> None:
        self._token += 1
        token = self._token
        text = self.current_narration()
        callback = lambda: self._on_narrated(token)  # noqa: E731
        if supersede:
            self.queue.start_narration(text, callback)
        else:
            self.queue.queue_narration(text, callback)

    def _on_narrated(self, token: int) -> None:
        if token != self._token or not self.is_playing:
            return

        if self.index + 1 < len(self.countries):
            self.index += 1
            # Queued behind the pause that follows the finished item
            self._narrate(supersede=False)
            return

        self.is_playing = False
        self.is_finished = True
        logger.info("Finished the %s tour (%d countries)", self.continent, len(self.countries))
        if self.on_finished is not None:
            self.on_finished(len(self.countries))
