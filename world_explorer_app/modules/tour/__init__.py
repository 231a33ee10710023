"""Continent tour: narrated slide shows over the countries of one continent."""

module_metadata = {
    'name': 'Continent Tour',
    'icon': 'route',
    'category': 'Learning',
    'enabled': True
}
