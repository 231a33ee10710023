"""Geography module: reference countries, points of interest and their read API."""

module_metadata = {
    'name': 'Geography',
    'icon': 'earth-americas',
    'category': 'Reference',
    'url_prefix': '/api/geography',
    'enabled': True
}
