# File: world_explorer_app/modules/geography/logics/seed_data.py
"""Demo reference data: ten countries with one landmark, mountain and forest each."""

from typing import Tuple

DEMO_COUNTRIES = [
    {'country_name': 'United States', 'iso2': 'US', 'continent': 'North America', 'capital': 'Washington D.C.',
     'population_millions': 331.9, 'area_km2': 9833517, 'currency': 'USD', 'primary_language': 'English',
     'capital_lat': 38.9072, 'capital_lon': -77.0369},
    {'country_name': 'Canada', 'iso2': 'CA', 'continent': 'North America', 'capital': 'Ottawa',
     'population_millions': 38.2, 'area_km2': 9984670, 'currency': 'CAD', 'primary_language': 'English',
     'capital_lat': 45.4215, 'capital_lon': -75.6972},
    {'country_name': 'France', 'iso2': 'FR', 'continent': 'Europe', 'capital': 'Paris',
     'population_millions': 67.4, 'area_km2': 643801, 'currency': 'EUR', 'primary_language': 'French',
     'capital_lat': 48.8566, 'capital_lon': 2.3522},
    {'country_name': 'Germany', 'iso2': 'DE', 'continent': 'Europe', 'capital': 'Berlin',
     'population_millions': 83.2, 'area_km2': 357114, 'currency': 'EUR', 'primary_language': 'German',
     'capital_lat': 52.5200, 'capital_lon': 13.4050},
    {'country_name': 'Japan', 'iso2': 'JP', 'continent': 'Asia', 'capital': 'Tokyo',
     'population_millions': 125.8, 'area_km2': 377975, 'currency': 'JPY', 'primary_language': 'Japanese',
     'capital_lat': 35.6762, 'capital_lon': 139.6503},
    {'country_name': 'Australia', 'iso2': 'AU', 'continent': 'Oceania', 'capital': 'Canberra',
     'population_millions': 25.7, 'area_km2': 7692024, 'currency': 'AUD', 'primary_language': 'English',
     'capital_lat': -35.2809, 'capital_lon': 149.1300},
    {'country_name': 'Brazil', 'iso2': 'BR', 'continent': 'South America', 'capital': 'Brasília',
     'population_millions': 215.3, 'area_km2': 8515767, 'currency': 'BRL', 'primary_language': 'Portuguese',
     'capital_lat': -15.8267, 'capital_lon': -47.9218},
    {'country_name': 'Egypt', 'iso2': 'EG', 'continent': 'Africa', 'capital': 'Cairo',
     'population_millions': 104.3, 'area_km2': 1001449, 'currency': 'EGP', 'primary_language': 'Arabic',
     'capital_lat': 30.0444, 'capital_lon': 31.2357},
    {'country_name': 'India', 'iso2': 'IN', 'continent': 'Asia', 'capital': 'New Delhi',
     'population_millions': 1380.0, 'area_km2': 3287263, 'currency': 'INR', 'primary_language': 'Hindi',
     'capital_lat': 28.6139, 'capital_lon': 77.2090},
    {'country_name': 'United Kingdom', 'iso2': 'GB', 'continent': 'Europe', 'capital': 'London',
     'population_millions': 67.9, 'area_km2': 243610, 'currency': 'GBP', 'primary_language': 'English',
     'capital_lat': 51.5074, 'capital_lon': -0.1278},
]

DEMO_POIS = [
    {'iso2': 'US', 'poi_type': 'landmark', 'name': 'Statue of Liberty',
     'description': 'A giant statue welcoming people to New York City!', 'lat': 40.6892, 'lon': -74.0445},
    {'iso2': 'US', 'poi_type': 'mountain', 'name': 'Mount Denali',
     'description': 'The tallest mountain in North America.', 'lat': 63.0692, 'lon': -151.0070},
    {'iso2': 'US', 'poi_type': 'forest', 'name': 'Yellowstone National Park',
     'description': 'Home to amazing geysers and wildlife.', 'lat': 44.4280, 'lon': -110.5885},
    {'iso2': 'CA', 'poi_type': 'landmark', 'name': 'CN Tower',
     'description': 'A super tall tower you can see from far away!', 'lat': 43.6426, 'lon': -79.3871},
    {'iso2': 'CA', 'poi_type': 'mountain', 'name': 'Mount Logan',
     'description': 'The highest peak in Canada.', 'lat': 60.5672, 'lon': -140.4055},
    {'iso2': 'CA', 'poi_type': 'forest', 'name': 'Boreal Forest',
     'description': 'A magical forest full of pine trees.', 'lat': 60.0000, 'lon': -95.0000},
    {'iso2': 'FR', 'poi_type': 'landmark', 'name': 'Eiffel Tower',
     'description': 'The most famous tower in the world!', 'lat': 48.8584, 'lon': 2.2945},
    {'iso2': 'FR', 'poi_type': 'mountain', 'name': 'Mont Blanc',
     'description': 'A snowy mountain on the border with Italy.', 'lat': 45.8326, 'lon': 6.8652},
    {'iso2': 'FR', 'poi_type': 'forest', 'name': 'Forest of Fontainebleau',
     'description': 'A beautiful forest near Paris.', 'lat': 48.4000, 'lon': 2.7000},
    {'iso2': 'DE', 'poi_type': 'landmark', 'name': 'Brandenburg Gate',
     'description': 'A historic gate in the heart of Berlin.', 'lat': 52.5163, 'lon': 13.3777},
    {'iso2': 'DE', 'poi_type': 'mountain', 'name': 'Zugspitze',
     'description': "Germany's highest mountain.", 'lat': 47.4211, 'lon': 10.9853},
    {'iso2': 'DE', 'poi_type': 'forest', 'name': 'Black Forest',
     'description': 'A dark, mysterious forest famous for fairy tales.', 'lat': 48.0000, 'lon': 8.0000},
    {'iso2': 'JP', 'poi_type': 'landmark', 'name': 'Mount Fuji',
     'description': "A beautiful volcano and Japan's sacred mountain.", 'lat': 35.3606, 'lon': 138.7274},
    {'iso2': 'JP', 'poi_type': 'mountain', 'name': 'Mount Kita',
     'description': "Japan's second highest mountain.", 'lat': 35.6744, 'lon': 138.2388},
    {'iso2': 'JP', 'poi_type': 'forest', 'name': 'Aokigahara Forest',
     'description': 'A dense, green forest at the base of Mount Fuji.', 'lat': 35.4731, 'lon': 138.6200},
    {'iso2': 'AU', 'poi_type': 'landmark', 'name': 'Sydney Opera House',
     'description': 'A building that looks like giant white shells!', 'lat': -33.8568, 'lon': 151.2153},
    {'iso2': 'AU', 'poi_type': 'mountain', 'name': 'Mount Kosciuszko',
     'description': "Australia's highest mountain.", 'lat': -36.4560, 'lon': 148.2634},
    {'iso2': 'AU', 'poi_type': 'forest', 'name': 'Daintree Rainforest',
     'description': "One of the world's oldest rainforests.", 'lat': -16.1700, 'lon': 145.4000},
    {'iso2': 'BR', 'poi_type': 'landmark', 'name': 'Christ the Redeemer',
     'description': 'A giant statue watching over Rio de Janeiro.', 'lat': -22.9519, 'lon': -43.2105},
    {'iso2': 'BR', 'poi_type': 'mountain', 'name': 'Pico da Neblina',
     'description': "Brazil's highest mountain.", 'lat': 0.8037, 'lon': -66.0097},
    {'iso2': 'BR', 'poi_type': 'forest', 'name': 'Amazon Rainforest',
     'description': 'The biggest rainforest in the world!', 'lat': -3.4653, 'lon': -62.2159},
    {'iso2': 'EG', 'poi_type': 'landmark', 'name': 'Great Pyramid of Giza',
     'description': 'Ancient pyramids built by the pharaohs!', 'lat': 29.9792, 'lon': 31.1342},
    {'iso2': 'EG', 'poi_type': 'mountain', 'name': 'Mount Catherine',
     'description': "Egypt's highest mountain in the Sinai.", 'lat': 28.5094, 'lon': 33.9492},
    {'iso2': 'EG', 'poi_type': 'forest', 'name': 'Wadi El Gemal',
     'description': 'A protected area with rare plants.', 'lat': 24.0000, 'lon': 35.0000},
    {'iso2': 'IN', 'poi_type': 'landmark', 'name': 'Taj Mahal',
     'description': 'A beautiful white palace built for love.', 'lat': 27.1751, 'lon': 78.0421},
    {'iso2': 'IN', 'poi_type': 'mountain', 'name': 'Kangchenjunga',
     'description': 'The third highest mountain in the world.', 'lat': 27.7025, 'lon': 88.1475},
    {'iso2': 'IN', 'poi_type': 'forest', 'name': 'Western Ghats',
     'description': 'Mountains covered in lush green forests.', 'lat': 15.0000, 'lon': 75.0000},
    {'iso2': 'GB', 'poi_type': 'landmark', 'name': 'Big Ben',
     'description': 'A famous clock tower in London.', 'lat': 51.4994, 'lon': -0.1245},
    {'iso2': 'GB', 'poi_type': 'mountain', 'name': 'Ben Nevis',
     'description': 'The highest mountain in Scotland.', 'lat': 56.7969, 'lon': -5.0037},
    {'iso2': 'GB', 'poi_type': 'forest', 'name': 'Sherwood Forest',
     'description': 'The legendary home of Robin Hood.', 'lat': 53.2000, 'lon': -1.0667},
]


def seed_demo_data(force: bool = False) -> Tuple[int, int]:
    """
    Load the demo countries and points of interest.

    Skips entirely when any country already exists, unless ``force`` is set,
    in which case the records are upserted.
    """
    from world_explorer_app.models import Country
    from ..services.population_service import import_records

    if not force and Country.query.first() is not None:
        return 0, 0

    return import_records(DEMO_COUNTRIES, DEMO_POIS)
