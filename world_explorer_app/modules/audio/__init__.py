# File: world_explorer_app/modules/audio/__init__.py
"""Audio module: text-to-speech engines, the audio cache and the narration queue."""

module_metadata = {
    'name': 'Audio',
    'icon': 'microphone-lines',
    'category': 'System',
    'url_prefix': '/api/audio',
    'enabled': True
}
